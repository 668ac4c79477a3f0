"""
Symbolic differentiation with respect to a single variable.

Every rule builds its result from the derivatives of the children and runs
it through the simplifier before returning, so zero and one terms produced
along the way are pruned as soon as they appear.

Two rule families deliberately differ from textbook calculus and must not
be "corrected" without telling callers:

* ``sin(e) -> cos(e)``, ``cos(e) -> -1 * sin(e)`` and ``log(e) -> 1 / e``
  leave out the factor ``de/dx`` of the chain rule.
* ``exp(e) -> de/dx * exp(e)`` keeps it.

Products and quotients reference their operands twice. Operands are shared
rather than copied, but repeated differentiation of nested products still
grows the tree quickly.
"""

from typing import Union

from .core.node import (
  Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode,
  Add, Sub, Mul, Div, Sin, Cos, ZERO, ONE
)
from .utils.simplifier import RuleSet, ExpressionSimplifier
from ..logging_system import LogLevel, get_logger

MINUS_ONE = ConstantNode(-1.0)


def differentiate(node: Node, variable: Union[str, VariableNode],
                  rule_set: RuleSet = RuleSet.MINIMAL) -> Node:
  """Derivative of ``node`` with respect to ``variable`` as a new, simplified tree"""
  name = variable.name if isinstance(variable, VariableNode) else variable
  if not isinstance(name, str):
    raise TypeError(f"Differentiation variable must be a name or Variable, got {type(variable).__name__}")

  logger = get_logger()
  result = _Differentiator(name, ExpressionSimplifier(rule_set), logger.should_log(LogLevel.VERBOSE)).derive(node)
  if logger.should_log(LogLevel.DETAILED):
    logger.info(
      f"d/d{name} of {node.size()} nodes -> {result.size()} nodes ({rule_set.value} rules)",
      LogLevel.DETAILED
    )
  return result


class _Differentiator:

  def __init__(self, name: str, simplifier: ExpressionSimplifier, trace: bool):
    self.name = name
    self.simplifier = simplifier
    self.trace = trace

  def derive(self, node: Node) -> Node:
    result = self._derive(node)
    if self.trace:
      get_logger().debug(f"d/d{self.name} {node.to_string()} = {result.to_string()}")
    return result

  def _derive(self, node: Node) -> Node:
    if isinstance(node, ConstantNode):
      return ZERO
    if isinstance(node, VariableNode):
      return ONE if node.name == self.name else ZERO
    if isinstance(node, UnaryOpNode):
      return self._derive_unary(node)
    if isinstance(node, BinaryOpNode):
      return self._derive_binary(node)
    raise TypeError(f"Cannot differentiate {type(node).__name__}")

  def _derive_unary(self, node: UnaryOpNode) -> Node:
    simplify = self.simplifier.simplify
    operand = node.operand

    if node.operator == 'sin':
      return simplify(Cos(operand))
    elif node.operator == 'cos':
      return simplify(Mul(MINUS_ONE, Sin(operand)))
    elif node.operator == 'exp':
      return simplify(Mul(self.derive(operand), node))
    # log
    return simplify(Div(ONE, operand))

  def _derive_binary(self, node: BinaryOpNode) -> Node:
    simplify = self.simplifier.simplify
    x, y = node.left, node.right
    dx = self.derive(x)
    dy = self.derive(y)

    if node.operator == '+':
      return simplify(Add(dx, dy))
    elif node.operator == '-':
      return simplify(Sub(dx, dy))
    elif node.operator == '*':
      # product rule
      return simplify(Add(Mul(dx, y), Mul(dy, x)))
    # quotient rule
    return simplify(Div(Sub(Mul(dx, y), Mul(dy, x)), Mul(y, y)))
