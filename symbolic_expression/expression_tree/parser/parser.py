"""Recursive-descent parser for sums and products of numbers and variables.

Grammar, lowest precedence first::

    expr    := term ('+' term)*
    term    := factor ('*' factor)*
    factor  := number | variable | '(' expr ')'

Both operators are left-associative, so ``a + b + c`` parses as
``Sum(Sum(a, b), c)``.
"""

import math
from typing import List, Optional

from ..config import ParserConfig, DEFAULT_PARSER_CONFIG
from ..core.node import Expression, Constant, Variable, NODE_CLASSES
from ..core.operators import SYMBOL_TO_NODE_TYPE
from ..errors import ParseError
from .tokenizer import Token, TokenKind, tokenize
from ...logging_system import LogLevel, get_logger, log_debug


class ExpressionParser:
  """Parses one expression string; create a new instance per input"""

  def __init__(self, source: str, config: Optional[ParserConfig] = None):
    if not isinstance(source, str):
      raise TypeError(f"Expression source must be a string, got {type(source).__name__}")
    self.source = source
    self.config = config or DEFAULT_PARSER_CONFIG
    self.tokens: List[Token] = []
    self.token_pos = 0
    self.nesting = 0

  # Token operations

  def current_token(self) -> Token:
    return self.tokens[self.token_pos]

  def consume(self) -> Token:
    token = self.tokens[self.token_pos]
    if token.kind is not TokenKind.EOF:
      self.token_pos += 1
    return token

  def expect(self, kind: TokenKind) -> Token:
    token = self.current_token()
    if token.kind is not kind:
      if token.kind is TokenKind.EOF:
        raise ParseError(f"Expected '{kind.value}' but reached end of input", position=token.position)
      raise ParseError(f"Expected '{kind.value}'", position=token.position, token=token.text)
    return self.consume()

  # Grammar rules

  def parse(self) -> Expression:
    if not self.source.strip():
      raise ParseError("Empty expression", position=0)
    self.tokens = tokenize(self.source)
    self.token_pos = 0
    self.nesting = 0

    expression = self.parse_expression()

    trailing = self.current_token()
    if trailing.kind is TokenKind.RPAREN:
      raise ParseError("Unbalanced parentheses: unexpected ')'", position=trailing.position, token=trailing.text)
    if trailing.kind is not TokenKind.EOF:
      raise ParseError("Unexpected trailing input", position=trailing.position, token=trailing.text)
    return expression

  def parse_expression(self) -> Expression:
    return self.parse_chain(TokenKind.PLUS, self.parse_term)

  def parse_term(self) -> Expression:
    return self.parse_chain(TokenKind.TIMES, self.parse_factor)

  def parse_chain(self, operator_kind: TokenKind, parse_operand) -> Expression:
    """Left-associative run of operands joined by one operator"""
    result = parse_operand()
    while self.current_token().kind is operator_kind:
      node_class = NODE_CLASSES[SYMBOL_TO_NODE_TYPE[self.consume().text]]
      result = node_class(result, parse_operand())
    return result

  def parse_factor(self) -> Expression:
    token = self.current_token()

    if token.kind is TokenKind.NUMBER:
      self.consume()
      value = float(token.text)
      if not math.isfinite(value):
        raise ParseError("Numeric literal out of range", position=token.position, token=token.text)
      return Constant(value)

    if token.kind is TokenKind.VARIABLE:
      self.consume()
      return Variable(token.text)

    if token.kind is TokenKind.LPAREN:
      self.consume()
      self.nesting += 1
      if self.nesting > self.config.max_nesting_depth:
        raise ParseError(
          f"Parentheses nested deeper than {self.config.max_nesting_depth} levels",
          position=token.position
        )
      if self.current_token().kind is TokenKind.RPAREN:
        raise ParseError("Empty parentheses", position=token.position, token='()')
      inner = self.parse_expression()
      if self.current_token().kind is TokenKind.EOF:
        raise ParseError("Unbalanced parentheses: missing ')'", position=token.position, token='(')
      self.expect(TokenKind.RPAREN)
      self.nesting -= 1
      return inner

    if token.kind is TokenKind.EOF:
      raise ParseError("Unexpected end of input", position=token.position)
    if token.kind is TokenKind.RPAREN:
      raise ParseError("Unbalanced parentheses: unexpected ')'", position=token.position, token=token.text)
    raise ParseError("Expected a number, variable or '('", position=token.position, token=token.text)


def parse(source: str, config: Optional[ParserConfig] = None) -> Expression:
  """Parse source text into an expression tree.

  Raises:
      ParseError: if the text is empty, contains characters outside the
          grammar, has malformed numbers or variables, unbalanced or empty
          parentheses, or input left over after a complete expression.
  """
  parser = ExpressionParser(source, config)
  tracing = get_logger().is_enabled_for(LogLevel.VERBOSE)
  try:
    expression = parser.parse()
  except ParseError as e:
    if tracing:
      log_debug(f"Rejected expression {source!r}: {e}")
    raise
  if tracing:
    log_debug(f"Parsed {source!r} into {len(parser.tokens) - 1} tokens")
  return expression
