import sympy as sp
from typing import Union
from ..core.node import Node, VariableNode, UnaryOpNode
from .tree_utils import get_all_nodes


def to_sympy(node: Node, rational: bool = False) -> sp.Expr:
  """Equivalent SymPy expression; ``rational`` turns finite constants into Rationals"""
  return node.to_sympy(rational)


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(to_sympy(node))


def _symbol(variable: Union[str, VariableNode]) -> sp.Symbol:
  name = variable.name if isinstance(variable, VariableNode) else variable
  return sp.Symbol(name)


def reference_derivative(node: Node, variable: Union[str, VariableNode]) -> sp.Expr:
  """SymPy's own derivative of the tree, with constants kept exact"""
  return sp.diff(to_sympy(node, rational=True), _symbol(variable))


def has_chain_rule_gaps(node: Node) -> bool:
  """True when the tree holds a function whose derivative rule skips the chain rule"""
  return any(
    isinstance(n, UnaryOpNode) and n.operator in ('sin', 'cos', 'log')
    for n in get_all_nodes(node)
  )


def derivative_agrees(node: Node, variable: Union[str, VariableNode], derivative: Node) -> bool:
  """
  Check a computed derivative against SymPy.

  Only meaningful for trees without sin, cos or log, whose derivative rules
  intentionally omit the inner factor; those raise ValueError.
  """
  if has_chain_rule_gaps(node):
    raise ValueError(f"No SymPy reference for {node.to_string()}: sin/cos/log rules omit the chain rule")
  difference = to_sympy(derivative, rational=True) - reference_derivative(node, variable)
  return sp.simplify(difference) == 0
