import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_expression import (
  parse, differentiate, simplify, evaluate, evaluate_batch,
  ParseError, MissingVariableError, LogLevel, configure_logging
)


def show_parsing():
  print("Parsing")
  for text in ["5", "x", "3 + x", "x * 2", "(x + 3) * 2"]:
    expression = parse(text)
    print(f"  {text!r:16} -> {expression!r}")

  for bad in ["", "x +", "3x", "(x", "()"]:
    try:
      parse(bad)
    except ParseError as e:
      print(f"  {bad!r:16} -> ParseError: {e}")


def show_calculus():
  print("\nDifferentiation and simplification")
  expression = parse("x * x * y + 3 * x")
  derivative = differentiate(expression, "x")
  print(f"  f        = {expression}")
  print(f"  df/dx    = {derivative}")
  print(f"  y = 2    : {simplify(derivative, {'y': 2.0})}")
  print(f"  x=1, y=2 : {simplify(derivative, {'x': 1.0, 'y': 2.0})}")

  try:
    evaluate(derivative, {"x": 1.0})
  except MissingVariableError as e:
    print(f"  evaluate without y -> {e}")


def show_round_trip():
  print("\nSerialization")
  expression = parse("(x + 3) * 2")
  print(f"  str()                   : {expression}")
  print(f"  reparsed equal?         : {parse(str(expression)) == expression}")
  print(f"  to_string(grouped=True) : {expression.to_string(grouped=True)}")
  print(f"  reparsed equal?         : {parse(expression.to_string(grouped=True)) == expression}")


def show_batch():
  print("\nBatch evaluation")
  X = np.linspace(0, 1, 5)
  expression = parse("x * x + 2 * x + 1")
  print(f"  x     = {X}")
  print(f"  f(x)  = {evaluate_batch(expression, {'x': X})}")


if __name__ == "__main__":
  configure_logging(LogLevel.MINIMAL)
  show_parsing()
  show_calculus()
  show_round_trip()
  show_batch()
