# Python

"""Symbolic Expression Package

Parse sums and products of numbers and variables, differentiate them
symbolically, substitute and fold constants, and evaluate them.
"""

from .expression_tree import (
  Expression, Constant, Variable, Sum, Product, NodeType,
  ParserConfig, ParseError, MissingVariableError,
  parse, differentiate, simplify, evaluate, evaluate_batch,
  to_sympy, from_sympy, is_equivalent
)
from . import commands
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Constant", "Variable", "Sum", "Product", "NodeType",
  "ParserConfig", "ParseError", "MissingVariableError",
  "parse", "differentiate", "simplify", "evaluate", "evaluate_batch",
  "to_sympy", "from_sympy", "is_equivalent",
  "commands",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
