"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    Add, Sub, Mul, Div, Sin, Cos, Exp, Log,
    Constant, Variable, ZERO, ONE,
    make_binary_node, make_unary_node, to_text
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
    apply_binary_op, apply_unary_op,
    evaluate_constant, evaluate_binary_op_fast, evaluate_unary_op_fast
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'Add', 'Sub', 'Mul', 'Div', 'Sin', 'Cos', 'Exp', 'Log',
    'Constant', 'Variable', 'ZERO', 'ONE',
    'make_binary_node', 'make_unary_node', 'to_text',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'apply_binary_op', 'apply_unary_op',
    'evaluate_constant', 'evaluate_binary_op_fast', 'evaluate_unary_op_fast'
]
