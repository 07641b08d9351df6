"""Core expression tree components."""

from .node import Expression, Constant, Variable, BinaryExpression, Sum, Product, NODE_CLASSES
from .operators import (
    NodeType, OPERATOR_SYMBOLS, SYMBOL_TO_NODE_TYPE, PRECEDENCE,
    apply_binary_op, format_number, evaluate_constant, evaluate_binary_op
)
from .traversal import iter_postorder, fold_tree

__all__ = [
    'Expression', 'Constant', 'Variable', 'BinaryExpression', 'Sum', 'Product', 'NODE_CLASSES',
    'NodeType', 'OPERATOR_SYMBOLS', 'SYMBOL_TO_NODE_TYPE', 'PRECEDENCE',
    'apply_binary_op', 'format_number', 'evaluate_constant', 'evaluate_binary_op',
    'iter_postorder', 'fold_tree'
]
