import math
from typing import Mapping, Tuple, Union

from ..core.node import Expression, Constant
from ..core.operators import NodeType
from ..core.traversal import fold_tree
from ...logging_system import log_warning

Number = Union[int, float]


def simplify(expression: Expression, environment: Mapping[str, Number]) -> Expression:
  """Substitute bound variables and fold constant-only subtrees.

  No identity rewriting happens: ``x * 0`` and ``x + 0`` stay as they are when
  x is unbound. A fully bound expression collapses to a single Constant equal
  to its evaluation; unbound variable subtrees come back unchanged, and any
  subtree with nothing to substitute is returned as the same object.
  """

  def visit(node: Expression, simplified: Tuple[Expression, ...]) -> Expression:
    node_type = node.node_type
    if node_type == NodeType.CONSTANT:
      return node
    if node_type == NodeType.VARIABLE:
      if node.name in environment:
        return Constant(float(environment[node.name]))
      return node

    left, right = simplified
    if left.node_type == NodeType.CONSTANT and right.node_type == NodeType.CONSTANT:
      value = node.combine(left.value, right.value)
      if not math.isfinite(value) and math.isfinite(left.value) and math.isfinite(right.value):
        log_warning(f"Folding {node.operator} of {left.value!r} and {right.value!r} overflowed to {value!r}")
      return Constant(value)
    if left is node.left and right is node.right:
      return node
    return type(node)(left, right)

  return fold_tree(expression, visit)
