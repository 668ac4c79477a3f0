import numpy as np
import sympy as sp
from typing import Any, List, Mapping, Optional, Union
from .core.node import Node, VariableNode
from .evaluator import evaluate, evaluate_batch
from .differentiator import differentiate
from .utils.simplifier import RuleSet, simplify
from .utils.sympy_utils import to_sympy, latex_representation
from .utils.tree_utils import calculate_tree_depth, get_variables


class Expression:
  """Expression wrapper around a root node with a cached rendering"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, env: Mapping[Any, Any]) -> float:
    return evaluate(self.root, env)

  def evaluate_batch(self, env: Mapping[Any, Any]) -> np.ndarray:
    return evaluate_batch(self.root, env)

  def simplify(self, rule_set: RuleSet = RuleSet.MINIMAL) -> 'Expression':
    return Expression(simplify(self.root, rule_set))

  def differentiate(self, variable: Union[str, VariableNode],
                    rule_set: RuleSet = RuleSet.MINIMAL) -> 'Expression':
    return Expression(differentiate(self.root, variable, rule_set))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return get_variables(self.root)

  def to_sympy(self, rational: bool = False) -> sp.Expr:
    return to_sympy(self.root, rational)

  def latex(self) -> str:
    return latex_representation(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
