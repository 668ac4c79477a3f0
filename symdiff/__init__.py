"""symdiff

A small symbolic algebra engine: expression trees, a single-pass rewrite
simplifier, numeric evaluation and symbolic differentiation.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  Add, Sub, Mul, Div, Sin, Cos, Exp, Log,
  Constant, Variable, ZERO, ONE, to_text,
  RuleSet, ExpressionSimplifier, simplify,
  UnboundVariableError, evaluate, evaluate_batch,
  differentiate
)
from .config import EngineConfig
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "Add", "Sub", "Mul", "Div", "Sin", "Cos", "Exp", "Log",
  "Constant", "Variable", "ZERO", "ONE", "to_text",
  "RuleSet", "ExpressionSimplifier", "simplify",
  "UnboundVariableError", "evaluate", "evaluate_batch",
  "differentiate",
  "EngineConfig",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
