"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, count_nodes,
    get_variables, get_constants, get_variable_usage_counts,
    find_nodes_by_type, find_nodes_by_operator, is_constant_expression
)
from .sympy_utils import to_sympy, from_sympy, is_equivalent

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'count_nodes',
    'get_variables', 'get_constants', 'get_variable_usage_counts',
    'find_nodes_by_type', 'find_nodes_by_operator', 'is_constant_expression',
    'to_sympy', 'from_sympy', 'is_equivalent'
]
