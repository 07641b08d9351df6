from typing import Tuple

from ..core.node import Expression, Constant, Sum, Product
from ..core.operators import NodeType
from ..core.traversal import fold_tree


def differentiate(expression: Expression, variable: str) -> Expression:
  """Symbolic derivative of expression with respect to variable.

  Applies the sum and product rules without any cleanup, so the result keeps
  every ``Constant(0)`` and ``Constant(1)`` the rules introduce. Pass it
  through ``simplify`` to fold what can be folded.
  """

  def visit(node: Expression, derivatives: Tuple[Expression, ...]) -> Expression:
    node_type = node.node_type
    if node_type == NodeType.CONSTANT:
      return Constant(0)
    if node_type == NodeType.VARIABLE:
      return Constant(1) if node.name == variable else Constant(0)
    d_left, d_right = derivatives
    if node_type == NodeType.SUM:
      return Sum(d_left, d_right)
    # (u * v)' = u' * v + u * v'
    return Sum(Product(d_left, node.right), Product(node.left, d_right))

  return fold_tree(expression, visit)
