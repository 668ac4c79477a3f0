"""
Tree Utility Functions

Traversal and analysis helpers shared by the evaluator, the differentiator
and the Expression facade.
"""

from typing import List, Dict, Mapping, Any
from collections import Counter

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree. Shared subtrees are listed once
        per parent that references them.
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order depth-first traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        # reversed so the left child is visited first
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, (ConstantNode, VariableNode)):
        return 1
    elif isinstance(node, UnaryOpNode):
        return 1 + calculate_tree_depth(node.operand)
    elif isinstance(node, BinaryOpNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    else:
        return 1


def get_variables(node: Node) -> List[str]:
    """Variable names in order of first appearance (left to right)"""
    seen: Dict[str, None] = {}
    for current in _depth_first_traversal(node):
        if isinstance(current, VariableNode):
            seen.setdefault(current.name, None)
    return list(seen)


def get_constants(node: Node) -> List[float]:
    """Constant values in left-to-right order"""
    return [n.value for n in _depth_first_traversal(node) if isinstance(n, ConstantNode)]


def get_operator_counts(node: Node) -> Counter:
    """How often each operator symbol occurs in the tree"""
    return Counter(
        n.operator for n in _depth_first_traversal(node)
        if isinstance(n, (BinaryOpNode, UnaryOpNode))
    )


def _binding_name(key: Any) -> Any:
    return key.name if isinstance(key, VariableNode) else key


def find_unbound_variables(node: Node, env: Mapping[Any, Any]) -> List[str]:
    """
    Names used by the tree that the environment does not bind.

    Environment keys may be names or VariableNode instances. Nothing is
    evaluated, so this is a cheap pre-check before evaluation.
    """
    bound = {_binding_name(key) for key in env}
    return [name for name in get_variables(node) if name not in bound]
