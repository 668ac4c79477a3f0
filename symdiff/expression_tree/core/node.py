import math
import numbers
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .operators import NodeType, BINARY_OP_MAP, UNARY_OP_MAP

# sympy constructors for each operator symbol
_SYMPY_UNARY = {'sin': sp.sin, 'cos': sp.cos, 'exp': sp.exp, 'log': sp.log}


def _promote(value) -> Optional['Node']:
  """Turn plain numbers into constants for the construction operators"""
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Real) and not isinstance(value, bool):
    return ConstantNode(value)
  return None


class Node(ABC):
  """Immutable expression tree node with structural equality.

  Subtrees may be shared freely between parents; nothing below a node can
  change after construction, so equality and hashing are computed once.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} nodes are immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} nodes are immutable")

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_sympy(self, rational: bool = False) -> sp.Expr:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _same_payload(self, other: 'Node') -> bool:
    """Compare everything except the children"""
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      object.__setattr__(self, '_size_cache', 1 + sum(child.size() for child in self.children()))
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    if self.node_type != other.node_type or hash(self) != hash(other):
      return False
    if not self._same_payload(other):
      return False
    return all(a == b for a, b in zip(self.children(), other.children()))

  def __str__(self) -> str:
    return self.to_string()

  # Construction helpers: they build nodes, they never simplify.
  def __add__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Add(self, other)

  def __radd__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Add(other, self)

  def __sub__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Sub(self, other)

  def __rsub__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Sub(other, self)

  def __mul__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Mul(self, other)

  def __rmul__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Mul(other, self)

  def __truediv__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Div(self, other)

  def __rtruediv__(self, other):
    other = _promote(other)
    return NotImplemented if other is None else Div(other, self)

  def __neg__(self):
    return Mul(ConstantNode(-1.0), self)


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    super().__init__()
    object.__setattr__(self, 'name', name)

  def to_string(self) -> str:
    return self.name

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_payload(self, other) -> bool:
    return self.name == other.name

  def to_sympy(self, rational: bool = False):
    return sp.Symbol(self.name)

  def __repr__(self) -> str:
    return f"Variable({self.name!r})"


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    object.__setattr__(self, 'value', float(value))

  def to_string(self) -> str:
    return repr(self.value)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    # nan hashes by identity in recent Pythons
    if math.isnan(self.value):
      return hash((NodeType.CONSTANT, 'nan'))
    return hash((NodeType.CONSTANT, self.value, math.copysign(1.0, self.value)))

  def _same_payload(self, other) -> bool:
    if math.isnan(self.value) and math.isnan(other.value):
      return True
    # -0.0 is a distinct constant, so it is never treated as ZERO
    return (self.value == other.value
            and math.copysign(1.0, self.value) == math.copysign(1.0, other.value))

  def to_sympy(self, rational: bool = False):
    if rational and math.isfinite(self.value):
      return sp.nsimplify(self.value, rational=True)
    return sp.Float(self.value)

  def __repr__(self) -> str:
    return f"Constant({self.value!r})"


class BinaryOpNode(Node):
  """Binary node; concrete subclasses fix the operator symbol"""

  __slots__ = ('left', 'right')

  node_type = NodeType.BINARY_OP
  operator: str = ''

  def __init__(self, left: Node, right: Node):
    if type(self) is BinaryOpNode or self.operator not in BINARY_OP_MAP:
      raise TypeError("Use a concrete binary node such as Add or Mul")
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError(f"{type(self).__name__} operands must be nodes")
    super().__init__()
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def _same_payload(self, other) -> bool:
    return self.operator == other.operator

  def to_sympy(self, rational: bool = False):
    left = self.left.to_sympy(rational)
    right = self.right.to_sympy(rational)
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    return sp.Mul(left, sp.Pow(right, -1))

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.left!r}, {self.right!r})"


class UnaryOpNode(Node):
  """Function application; concrete subclasses fix the function name"""

  __slots__ = ('operand',)

  node_type = NodeType.UNARY_OP
  operator: str = ''

  def __init__(self, operand: Node):
    if type(self) is UnaryOpNode or self.operator not in UNARY_OP_MAP:
      raise TypeError("Use a concrete unary node such as Sin or Cos")
    if not isinstance(operand, Node):
      raise TypeError(f"{type(self).__name__} operand must be a node")
    super().__init__()
    object.__setattr__(self, 'operand', operand)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, hash(self.operand)))

  def _same_payload(self, other) -> bool:
    return self.operator == other.operator

  def to_sympy(self, rational: bool = False):
    return _SYMPY_UNARY[self.operator](self.operand.to_sympy(rational))

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.operand!r})"


class Add(BinaryOpNode):
  __slots__ = ()
  operator = '+'


class Sub(BinaryOpNode):
  __slots__ = ()
  operator = '-'


class Mul(BinaryOpNode):
  __slots__ = ()
  operator = '*'


class Div(BinaryOpNode):
  __slots__ = ()
  operator = '/'


class Sin(UnaryOpNode):
  __slots__ = ()
  operator = 'sin'


class Cos(UnaryOpNode):
  __slots__ = ()
  operator = 'cos'


class Exp(UnaryOpNode):
  __slots__ = ()
  operator = 'exp'


class Log(UnaryOpNode):
  """Natural logarithm"""
  __slots__ = ()
  operator = 'log'


BINARY_NODE_TYPES = {cls.operator: cls for cls in (Add, Sub, Mul, Div)}
UNARY_NODE_TYPES = {cls.operator: cls for cls in (Sin, Cos, Exp, Log)}


def make_binary_node(operator: str, left: Node, right: Node) -> BinaryOpNode:
  try:
    return BINARY_NODE_TYPES[operator](left, right)
  except KeyError:
    raise ValueError(f"Unknown binary operator: {operator!r}") from None


def make_unary_node(operator: str, operand: Node) -> UnaryOpNode:
  try:
    return UNARY_NODE_TYPES[operator](operand)
  except KeyError:
    raise ValueError(f"Unknown unary operator: {operator!r}") from None


# Spelled the way expressions are usually written out
Constant = ConstantNode
Variable = VariableNode

# Identity elements checked by the simplifier
ZERO = ConstantNode(0.0)
ONE = ConstantNode(1.0)


def to_text(node: Node) -> str:
  """Fully parenthesised rendering, e.g. ``(x + sin(y))``"""
  return node.to_string()
