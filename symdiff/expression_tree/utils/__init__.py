"""Utilities for expression trees."""

from .simplifier import RuleSet, ExpressionSimplifier, simplify
from .sympy_utils import (
    to_sympy, latex_representation, reference_derivative,
    has_chain_rule_gaps, derivative_agrees
)
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables, get_constants,
    get_operator_counts, find_unbound_variables
)

__all__ = [
    'RuleSet', 'ExpressionSimplifier', 'simplify',
    'to_sympy', 'latex_representation', 'reference_derivative',
    'has_chain_rule_gaps', 'derivative_agrees',
    'get_all_nodes', 'calculate_tree_depth', 'get_variables', 'get_constants',
    'get_operator_counts', 'find_unbound_variables'
]
