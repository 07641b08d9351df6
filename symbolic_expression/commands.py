"""Command-level entry points that take expression text instead of trees."""

from typing import Mapping, Union

from .expression_tree import Expression, parse
from .expression_tree import differentiate as _differentiate
from .expression_tree import simplify as _simplify

Number = Union[int, float]


def differentiate(expression: str, variable: str) -> Expression:
  """Parse expression and differentiate it with respect to variable.

  Raises:
      ParseError: if expression is not valid expression text
  """
  return _differentiate(parse(expression), variable)


def simplify(expression: str, environment: Mapping[str, Number]) -> Expression:
  """Parse expression and simplify it under environment.

  Raises:
      ParseError: if expression is not valid expression text
  """
  return _simplify(parse(expression), environment)
