import math
import re
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Set, Tuple, Union

from .operators import NodeType, OPERATOR_SYMBOLS, PRECEDENCE, apply_binary_op, format_number
from .traversal import fold_tree, iter_postorder

Number = Union[int, float]

_VARIABLE_NAME = re.compile(r'[A-Za-z]+\Z')
_NAN_HASH = hash((NodeType.CONSTANT, 'nan'))


def _same_value(a: float, b: float) -> bool:
  """Total-order equality on doubles: NaN matches NaN, 0.0 does not match -0.0"""
  if math.isnan(a) or math.isnan(b):
    return math.isnan(a) and math.isnan(b)
  return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


def _as_expression(value) -> 'Expression':
  if isinstance(value, Expression):
    return value
  if isinstance(value, (int, float)) and not isinstance(value, bool):
    return Constant(value)
  return NotImplemented


class Expression(ABC):
  """Immutable expression tree node.

  Exactly four concrete variants exist: Constant, Variable, Sum and Product.
  Equality is structural and order-sensitive, hashing is consistent with it,
  and every transformation returns a new tree (unchanged subtrees may be
  shared, which immutability makes safe).
  """

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  # Copying and pickling rebuild through the constructor, since slot
  # restoration would go through __setattr__

  def __reduce__(self):
    return (type(self), self._constructor_args())

  def __copy__(self):
    return self

  def __deepcopy__(self, memo):
    return self

  @abstractmethod
  def _constructor_args(self) -> tuple:
    pass

  @staticmethod
  def parse(text: str) -> 'Expression':
    from ..parser.parser import parse
    return parse(text)

  @abstractmethod
  def children(self) -> Tuple['Expression', ...]:
    pass

  @abstractmethod
  def _payload_hash(self, child_hashes: Tuple[int, ...]) -> int:
    pass

  @abstractmethod
  def _same_payload(self, other: 'Expression') -> bool:
    pass

  @abstractmethod
  def _render(self, child_texts: Tuple[str, ...]) -> str:
    pass

  # Structural equality and hashing

  def __hash__(self) -> int:
    if self._hash_cache is None:
      for node in iter_postorder(self):
        if node._hash_cache is None:
          child_hashes = tuple(child._hash_cache for child in node.children())
          object.__setattr__(node, '_hash_cache', node._payload_hash(child_hashes))
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    pending = [(self, other)]
    while pending:
      a, b = pending.pop()
      if a is b:
        continue
      if a.node_type != b.node_type or hash(a) != hash(b):
        return False
      if not a._same_payload(b):
        return False
      pending.extend(zip(a.children(), b.children()))
    return True

  # Serialization

  def to_string(self, grouped: bool = False) -> str:
    """Render the expression as text the parser accepts.

    The default rendering joins operands without parentheses, so a Sum nested
    directly under a Product (or any right-nested chain) reads back with
    different grouping. Pass ``grouped=True`` to parenthesize exactly those
    operands; for trees whose constants are finite and nonnegative that form
    always parses back to an equal tree.
    """
    if not grouped:
      return fold_tree(self, lambda node, texts: node._render(texts))

    def visit(node, rendered):
      own = PRECEDENCE[node.node_type]
      texts = []
      for position, (text, precedence) in enumerate(rendered):
        # Operators are left-associative: a right operand of equal precedence needs grouping
        if precedence < own or (position == 1 and precedence == own):
          text = f"({text})"
        texts.append(text)
      return node._render(tuple(texts)), own

    return fold_tree(self, visit)[0]

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return fold_tree(self, lambda node, reprs: node._repr(reprs))

  @abstractmethod
  def _repr(self, child_reprs: Tuple[str, ...]) -> str:
    pass

  # Tree metrics

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      for node in iter_postorder(self):
        if node._size_cache is None:
          size = 1 + sum(child._size_cache for child in node.children())
          object.__setattr__(node, '_size_cache', size)
    return self._size_cache

  def depth(self) -> int:
    from ..utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self)

  def variables(self) -> Set[str]:
    from ..utils.tree_utils import get_variables
    return get_variables(self)

  # Operations

  def differentiate(self, variable: str) -> 'Expression':
    from ..operations.differentiator import differentiate
    return differentiate(self, variable)

  def simplify(self, environment: Optional[Mapping[str, Number]] = None) -> 'Expression':
    from ..operations.simplifier import simplify
    return simplify(self, environment if environment is not None else {})

  def evaluate(self, environment: Optional[Mapping[str, Number]] = None) -> float:
    from ..operations.evaluator import evaluate
    return evaluate(self, environment if environment is not None else {})

  # Construction sugar: no simplification is performed

  def __add__(self, other):
    other = _as_expression(other)
    if other is NotImplemented:
      return other
    return Sum(self, other)

  def __radd__(self, other):
    other = _as_expression(other)
    if other is NotImplemented:
      return other
    return Sum(other, self)

  def __mul__(self, other):
    other = _as_expression(other)
    if other is NotImplemented:
      return other
    return Product(self, other)

  def __rmul__(self, other):
    other = _as_expression(other)
    if other is NotImplemented:
      return other
    return Product(other, self)


class Constant(Expression):
  __slots__ = ('_value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: Number):
    super().__init__()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
      raise TypeError(f"Constant value must be a number, got {type(value).__name__}")
    object.__setattr__(self, '_value', float(value))

  @property
  def value(self) -> float:
    return self._value

  def children(self) -> Tuple[Expression, ...]:
    return ()

  def _constructor_args(self):
    return (self._value,)

  def _payload_hash(self, child_hashes):
    if math.isnan(self._value):
      return _NAN_HASH
    return hash((NodeType.CONSTANT, self._value))

  def _same_payload(self, other):
    return _same_value(self._value, other._value)

  def _render(self, child_texts):
    return format_number(self._value)

  def _repr(self, child_reprs):
    return f"Constant({self._value!r})"


class Variable(Expression):
  __slots__ = ('_name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str) or not _VARIABLE_NAME.match(name):
      raise ValueError(f"Variable name must be a nonempty string of letters, got {name!r}")
    object.__setattr__(self, '_name', name)

  @property
  def name(self) -> str:
    return self._name

  def children(self) -> Tuple[Expression, ...]:
    return ()

  def _constructor_args(self):
    return (self._name,)

  def _payload_hash(self, child_hashes):
    return hash((NodeType.VARIABLE, self._name))

  def _same_payload(self, other):
    return self._name == other._name

  def _render(self, child_texts):
    return self._name

  def _repr(self, child_reprs):
    return f"Variable({self._name!r})"


class BinaryExpression(Expression):
  """Shared shape of Sum and Product: an ordered pair of owned operands"""

  __slots__ = ('_left', '_right')

  def __init__(self, left: Expression, right: Expression):
    super().__init__()
    if not isinstance(left, Expression) or not isinstance(right, Expression):
      raise TypeError(f"{type(self).__name__} operands must be Expression instances")
    object.__setattr__(self, '_left', left)
    object.__setattr__(self, '_right', right)

  @property
  def left(self) -> Expression:
    return self._left

  @property
  def right(self) -> Expression:
    return self._right

  @property
  def operator(self) -> str:
    return OPERATOR_SYMBOLS[self.node_type]

  def children(self) -> Tuple[Expression, ...]:
    return (self._left, self._right)

  def _constructor_args(self):
    return (self._left, self._right)

  def combine(self, left_value: float, right_value: float) -> float:
    """Apply this node's arithmetic to already-evaluated operands"""
    return apply_binary_op(left_value, right_value, self.node_type)

  def _payload_hash(self, child_hashes):
    return hash((self.node_type, child_hashes[0], child_hashes[1]))

  def _same_payload(self, other):
    return True

  def _render(self, child_texts):
    return f"{child_texts[0]} {self.operator} {child_texts[1]}"

  def _repr(self, child_reprs):
    return f"{type(self).__name__}({child_reprs[0]}, {child_reprs[1]})"


class Sum(BinaryExpression):
  __slots__ = ()

  node_type = NodeType.SUM


class Product(BinaryExpression):
  __slots__ = ()

  node_type = NodeType.PRODUCT


NODE_CLASSES: Dict[NodeType, type] = {
  NodeType.CONSTANT: Constant,
  NodeType.VARIABLE: Variable,
  NodeType.SUM: Sum,
  NodeType.PRODUCT: Product,
}
