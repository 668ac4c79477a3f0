from enum import Enum
from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode, ZERO, ONE, make_binary_node, make_unary_node
from ..core.operators import apply_binary_op, apply_unary_op
from ...logging_system import LogLevel, get_logger


class RuleSet(Enum):
  """Which rewrite rules the simplifier applies"""
  MINIMAL = 'minimal'     # identity/annihilator rules only
  EXTENDED = 'extended'   # plus constant folding

  @classmethod
  def from_name(cls, name: str) -> 'RuleSet':
    try:
      return cls(name.lower())
    except ValueError:
      raise ValueError(f"Unknown rule set: {name!r}") from None


class ExpressionSimplifier:
  """Single bottom-up pass of algebraic identity rewrites.

  Children are simplified before the rule for their parent is chosen, and
  each node is rewritten at most once. The result is not iterated to a
  fixed point: ``(x + 0) * 1`` reduces fully, but patterns that only appear
  after a parent has been rebuilt are left alone.
  """

  def __init__(self, rule_set: RuleSet = RuleSet.MINIMAL):
    self.rule_set = rule_set

  @property
  def folds_constants(self) -> bool:
    return self.rule_set is RuleSet.EXTENDED

  def simplify(self, node: Node) -> Node:
    return self._apply_simplification_rules(node)

  def _apply_simplification_rules(self, node: Node) -> Node:
    if isinstance(node, BinaryOpNode):
      left = self._apply_simplification_rules(node.left)
      right = self._apply_simplification_rules(node.right)
      result = self._rewrite_binary(node, left, right)
    elif isinstance(node, UnaryOpNode):
      operand = self._apply_simplification_rules(node.operand)
      result = self._rewrite_unary(node, operand)
    else:
      return node

    if result is not node:
      logger = get_logger()
      if logger.should_log(LogLevel.VERBOSE):
        logger.debug(f"simplify {node.to_string()} -> {result.to_string()}")
    return result

  def _rewrite_binary(self, node: BinaryOpNode, left: Node, right: Node) -> Node:
    operator = node.operator

    if operator == '+':
      if left == ZERO and right == ZERO:
        return ZERO
      if left == ZERO:
        return right  # 0 + x = x
      if right == ZERO:
        return left  # x + 0 = x

    elif operator == '-':
      if right == ZERO:
        return left  # x - 0 = x

    elif operator == '*':
      if left == ZERO or right == ZERO:
        return ZERO  # x * 0 = 0
      if left == ONE:
        return right  # 1 * x = x
      if right == ONE:
        return left  # x * 1 = x

    elif operator == '/':
      if left == ZERO:
        return ZERO  # 0 / x = 0
      if right == ONE:
        return left  # x / 1 = x

    if self.folds_constants and isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return ConstantNode(apply_binary_op(left.value, right.value, operator))

    if left is node.left and right is node.right:
      return node
    return make_binary_node(operator, left, right)

  def _rewrite_unary(self, node: UnaryOpNode, operand: Node) -> Node:
    if self.folds_constants and isinstance(operand, ConstantNode):
      return ConstantNode(apply_unary_op(operand.value, node.operator))

    if operand is node.operand:
      return node
    return make_unary_node(node.operator, operand)


_SIMPLIFIERS = {rule_set: ExpressionSimplifier(rule_set) for rule_set in RuleSet}


def simplify(node: Node, rule_set: RuleSet = RuleSet.MINIMAL) -> Node:
  """Simplify ``node`` with one bottom-up pass of the chosen rule set"""
  return _SIMPLIFIERS[rule_set].simplify(node)
