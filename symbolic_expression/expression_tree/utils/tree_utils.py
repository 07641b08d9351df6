"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. All of them walk the
tree with an explicit stack or queue, so arbitrarily long operator chains are
safe to inspect.
"""

from collections import Counter, deque
from typing import List, Set, Tuple

from ..core.node import Expression, BinaryExpression
from ..core.operators import NodeType, SYMBOL_TO_NODE_TYPE
from ..core.traversal import iter_postorder, fold_tree


def get_all_nodes(node: Expression, traversal_order: str = 'breadth_first') -> List[Expression]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default), 'depth_first' (pre-order)
            or 'postorder'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    elif traversal_order == 'postorder':
        return list(iter_postorder(node))
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Expression) -> List[Expression]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Expression) -> List[Expression]:
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Expression) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return fold_tree(node, lambda current, depths: 1 + max(depths, default=0))


def count_nodes(node: Expression) -> int:
    """Total node count, counting shared subtrees once per occurrence"""
    return node.size()


def get_variables(node: Expression) -> Set[str]:
    """Names of all variables appearing in the tree"""
    return {n.name for n in iter_postorder(node) if n.node_type == NodeType.VARIABLE}


def get_constants(node: Expression) -> Tuple[float, ...]:
    """Constant values in left-to-right order"""
    return tuple(n.value for n in _depth_first_traversal(node) if n.node_type == NodeType.CONSTANT)


def get_variable_usage_counts(node: Expression) -> Counter:
    """How many times each variable name occurs"""
    return Counter(n.name for n in iter_postorder(node) if n.node_type == NodeType.VARIABLE)


def find_nodes_by_type(node: Expression, node_type: NodeType) -> List[Expression]:
    """All nodes of one variant, in breadth-first order"""
    return [n for n in _breadth_first_traversal(node) if n.node_type == node_type]


def find_nodes_by_operator(node: Expression, operator: str) -> List[BinaryExpression]:
    """All Sum ('+') or Product ('*') nodes, in breadth-first order"""
    if operator not in SYMBOL_TO_NODE_TYPE:
        raise ValueError(f"Unknown operator: {operator!r}")
    return find_nodes_by_type(node, SYMBOL_TO_NODE_TYPE[operator])


def is_constant_expression(node: Expression) -> bool:
    """True if the tree contains no variables"""
    return not any(n.node_type == NodeType.VARIABLE for n in iter_postorder(node))
