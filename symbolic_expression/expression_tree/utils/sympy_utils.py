import sympy as sp

from ..core.node import Expression, Constant, Variable, Sum, Product
from ..core.operators import NodeType
from ..core.traversal import fold_tree


def to_sympy(expression: Expression) -> sp.Expr:
  """Convert an expression tree to the equivalent SymPy expression.

  SymPy canonicalizes as it builds (``x + 0`` becomes ``x``), so the result
  is equal in value, not in shape.
  """

  def visit(node, args):
    node_type = node.node_type
    if node_type == NodeType.CONSTANT:
      if node.value.is_integer():
        return sp.Integer(int(node.value))
      return sp.Float(node.value)
    if node_type == NodeType.VARIABLE:
      return sp.Symbol(node.name)
    if node_type == NodeType.SUM:
      return sp.Add(args[0], args[1])
    return sp.Mul(args[0], args[1])

  return fold_tree(expression, visit)


def from_sympy(sympy_expr: sp.Expr) -> Expression:
  """Convert a SymPy expression built from numbers, symbols, Add, Mul and
  positive integer powers back into an expression tree.

  n-ary Add and Mul become left-associative chains and ``x**k`` becomes k-1
  nested products of x.
  """
  if sympy_expr.is_Symbol:
    return Variable(sympy_expr.name)

  if sympy_expr.is_Number:
    if not sympy_expr.is_real or not sympy_expr.is_finite:
      raise ValueError(f"Unsupported number: {sympy_expr}")
    return Constant(float(sympy_expr))

  if isinstance(sympy_expr, (sp.Add, sp.Mul)):
    node_class = Sum if isinstance(sympy_expr, sp.Add) else Product
    args = sympy_expr.args
    result = from_sympy(args[0])
    for arg in args[1:]:
      result = node_class(result, from_sympy(arg))
    return result

  if isinstance(sympy_expr, sp.Pow):
    base, exponent = sympy_expr.args
    if exponent.is_Integer and exponent > 0:
      base_node = from_sympy(base)
      result = base_node
      for _ in range(int(exponent) - 1):
        result = Product(result, base_node)
      return result
    raise ValueError(f"Only positive integer powers are supported, got {sympy_expr}")

  raise ValueError(f"Unsupported SymPy expression: {sympy_expr} ({type(sympy_expr).__name__})")


def is_equivalent(first: Expression, second: Expression) -> bool:
  """True if both expressions are algebraically equal for all variable values"""
  difference = sp.simplify(to_sympy(first) - to_sympy(second))
  return difference == 0
