import numpy as np
import numba
from enum import IntEnum


class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  SUM = 2
  PRODUCT = 3

# Mapping dictionaries
OPERATOR_SYMBOLS = {NodeType.SUM: '+', NodeType.PRODUCT: '*'}
SYMBOL_TO_NODE_TYPE = {symbol: node_type for node_type, symbol in OPERATOR_SYMBOLS.items()}

# Higher binds tighter; leaves never need grouping
PRECEDENCE = {
  NodeType.SUM: 1,
  NodeType.PRODUCT: 2,
  NodeType.CONSTANT: 3,
  NodeType.VARIABLE: 3,
}


def apply_binary_op(left_val: float, right_val: float, node_type: NodeType) -> float:
  if node_type == NodeType.SUM:
    return left_val + right_val
  elif node_type == NodeType.PRODUCT:
    return left_val * right_val
  raise ValueError(f"Not a binary node type: {node_type!r}")


def format_number(value: float) -> str:
  """Shortest decimal text for value that the grammar reads back unchanged.

  Integral values drop the fractional part and exponent notation is never
  produced, since the grammar has no exponent syntax.
  """
  return np.format_float_positional(value, trim='-')


# Plain ints so the compiled kernels see compile-time constants
_SUM = int(NodeType.SUM)
_PRODUCT = int(NodeType.PRODUCT)


@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == _SUM:
    return left_val + right_val
  elif op_type == _PRODUCT:
    return left_val * right_val
  raise ValueError("evaluate_binary_op only handles SUM and PRODUCT node types")
