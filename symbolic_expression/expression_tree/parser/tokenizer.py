"""Tokenization for the expression grammar."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from ..errors import ParseError


class TokenKind(Enum):
  NUMBER = 'number'
  VARIABLE = 'variable'
  PLUS = '+'
  TIMES = '*'
  LPAREN = '('
  RPAREN = ')'
  EOF = 'end of input'


@dataclass(frozen=True)
class Token:
  kind: TokenKind
  text: str
  position: int


_TOKEN_PATTERN = re.compile(
  r'(?P<space>\s+)'
  r'|(?P<number>[0-9]+(?:\.[0-9]+)?)'
  r'|(?P<variable>[A-Za-z]+)'
  r'|(?P<symbol>[+*()])'
)

_SYMBOL_KINDS = {
  '+': TokenKind.PLUS,
  '*': TokenKind.TIMES,
  '(': TokenKind.LPAREN,
  ')': TokenKind.RPAREN,
}

# Characters allowed to follow a number or variable directly
_DELIMITERS = frozenset('+*()')


def _is_delimited(source: str, end: int) -> bool:
  return end >= len(source) or source[end].isspace() or source[end] in _DELIMITERS


def tokenize(source: str) -> List[Token]:
  """Split source into tokens, always ending with an EOF token.

  Raises ParseError for characters outside the grammar and for numbers or
  variables glued to such characters (``1.2.3``, ``3x``, ``x1``).
  """
  tokens: List[Token] = []
  pos = 0
  while pos < len(source):
    match = _TOKEN_PATTERN.match(source, pos)
    if match is None:
      raise ParseError("Invalid character", position=pos, token=source[pos])

    kind_name = match.lastgroup
    text = match.group(0)
    end = match.end()

    if kind_name == 'number':
      if not _is_delimited(source, end):
        raise ParseError("Malformed number", position=pos, token=_run(source, pos))
      tokens.append(Token(TokenKind.NUMBER, text, pos))
    elif kind_name == 'variable':
      if not _is_delimited(source, end):
        raise ParseError("Malformed variable", position=pos, token=_run(source, pos))
      tokens.append(Token(TokenKind.VARIABLE, text, pos))
    elif kind_name == 'symbol':
      tokens.append(Token(_SYMBOL_KINDS[text], text, pos))

    pos = end

  tokens.append(Token(TokenKind.EOF, '', len(source)))
  return tokens


def _run(source: str, start: int) -> str:
  """The undelimited character run starting at start, for error messages"""
  end = start
  while end < len(source) and not source[end].isspace() and source[end] not in _DELIMITERS:
    end += 1
  return source[start:end]
