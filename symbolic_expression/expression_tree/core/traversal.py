"""
Explicit-stack tree walks.

Long ``+`` and ``*`` chains produce trees as deep as they are long, so every
whole-tree operation goes through these helpers instead of Python recursion.
"""

from typing import Callable, Iterator, List, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
  from .node import Expression

R = TypeVar('R')


def iter_postorder(root: 'Expression') -> Iterator['Expression']:
  """Yield every node after all of its children, left subtree first."""
  stack: List[Tuple['Expression', bool]] = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    children = node.children()
    if expanded or not children:
      yield node
    else:
      stack.append((node, True))
      for child in reversed(children):
        stack.append((child, False))


def fold_tree(root: 'Expression', visit: Callable[['Expression', Tuple[R, ...]], R]) -> R:
  """Bottom-up fold.

  ``visit(node, child_results)`` is called once per node occurrence with the
  results already computed for its children, in declared order.
  """
  results: List[R] = []
  for node in iter_postorder(root):
    arity = len(node.children())
    if arity:
      child_results = tuple(results[-arity:])
      del results[-arity:]
    else:
      child_results = ()
    results.append(visit(node, child_results))
  return results[0]
