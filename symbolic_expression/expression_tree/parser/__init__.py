"""Text to expression tree."""

from .tokenizer import Token, TokenKind, tokenize
from .parser import ExpressionParser, parse

__all__ = ['Token', 'TokenKind', 'tokenize', 'ExpressionParser', 'parse']
