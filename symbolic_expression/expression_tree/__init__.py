"""Expression Tree Module

Expression trees over numbers, variables, sums and products: the node types,
the parser, and the differentiate/simplify/evaluate transformations.
"""

from .core.node import Expression, Constant, Variable, BinaryExpression, Sum, Product
from .core.operators import NodeType, OPERATOR_SYMBOLS, PRECEDENCE, format_number
from .core.traversal import iter_postorder, fold_tree
from .config import ParserConfig, DEFAULT_PARSER_CONFIG
from .errors import ParseError, MissingVariableError
from .parser import Token, TokenKind, tokenize, ExpressionParser, parse
from .operations import differentiate, simplify, evaluate, evaluate_batch
from .utils import (
    calculate_tree_depth, count_nodes, get_variables, get_constants,
    to_sympy, from_sympy, is_equivalent
)

__all__ = [
    "Expression", "Constant", "Variable", "BinaryExpression", "Sum", "Product",
    "NodeType", "OPERATOR_SYMBOLS", "PRECEDENCE", "format_number",
    "iter_postorder", "fold_tree",
    "ParserConfig", "DEFAULT_PARSER_CONFIG",
    "ParseError", "MissingVariableError",
    "Token", "TokenKind", "tokenize", "ExpressionParser", "parse",
    "differentiate", "simplify", "evaluate", "evaluate_batch",
    "calculate_tree_depth", "count_nodes", "get_variables", "get_constants",
    "to_sympy", "from_sympy", "is_equivalent"
]
