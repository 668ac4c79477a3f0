"""Expression Tree Module

Expression representation, simplification, evaluation and differentiation.
"""

from .core.node import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    Add, Sub, Mul, Div, Sin, Cos, Exp, Log,
    Constant, Variable, ZERO, ONE, to_text
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP
from .utils import RuleSet, ExpressionSimplifier, simplify
from .evaluator import UnboundVariableError, evaluate, evaluate_batch
from .differentiator import differentiate
from .expression import Expression

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "Add", "Sub", "Mul", "Div", "Sin", "Cos", "Exp", "Log",
    "Constant", "Variable", "ZERO", "ONE", "to_text",
    "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP",
    "RuleSet", "ExpressionSimplifier", "simplify",
    "UnboundVariableError", "evaluate", "evaluate_batch",
    "differentiate"
]
