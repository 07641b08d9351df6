from typing import Mapping, Tuple, Union

import numpy as np

from ..core.node import Expression
from ..core.operators import NodeType, evaluate_constant, evaluate_binary_op
from ..core.traversal import fold_tree
from ..errors import MissingVariableError
from ...logging_system import log_warning

Number = Union[int, float]


def evaluate(expression: Expression, environment: Mapping[str, Number]) -> float:
  """Numeric value of expression under environment.

  Raises:
      MissingVariableError: for the first variable (left to right) that the
          environment does not bind.
  """

  def visit(node: Expression, values: Tuple[float, ...]) -> float:
    node_type = node.node_type
    if node_type == NodeType.CONSTANT:
      return node.value
    if node_type == NodeType.VARIABLE:
      if node.name not in environment:
        raise MissingVariableError(node.name)
      return float(environment[node.name])
    return node.combine(values[0], values[1])

  return fold_tree(expression, visit)


def _prepare_columns(data: Mapping[str, object]) -> Tuple[dict, int]:
  columns = {}
  for name, values in data.items():
    column = np.atleast_1d(np.asarray(values, dtype=np.float64))
    if column.ndim != 1:
      raise ValueError(f"Column {name!r} must be one-dimensional, got shape {column.shape}")
    columns[name] = column

  lengths = {len(column) for column in columns.values() if len(column) != 1}
  if len(lengths) > 1:
    raise ValueError(f"Columns have inconsistent lengths: {sorted(lengths)}")
  n_samples = lengths.pop() if lengths else 1

  for name, column in columns.items():
    if len(column) != n_samples:
      columns[name] = np.full(n_samples, column[0], dtype=np.float64)
  return columns, n_samples


def evaluate_batch(expression: Expression, data: Mapping[str, object]) -> np.ndarray:
  """Evaluate expression once per row of column data.

  ``data`` maps variable names to scalars or one-dimensional array-likes;
  scalars and length-1 columns broadcast to the common length. Returns a
  float64 array of that length.
  """
  columns, n_samples = _prepare_columns(data)

  def visit(node: Expression, values: Tuple[np.ndarray, ...]) -> np.ndarray:
    node_type = node.node_type
    if node_type == NodeType.CONSTANT:
      return evaluate_constant(n_samples, node.value)
    if node_type == NodeType.VARIABLE:
      if node.name not in columns:
        raise MissingVariableError(node.name)
      return columns[node.name]
    return evaluate_binary_op(values[0], values[1], int(node_type))

  result = fold_tree(expression, visit)
  if not np.all(np.isfinite(result)) and all(np.all(np.isfinite(c)) for c in columns.values()):
    log_warning(f"Batch evaluation of {expression} produced non-finite values")
  return np.array(result, dtype=np.float64)
