from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Term:
    """Leaf node: a single word or a multi-word phrase.

    A phrase containing whitespace must match contiguously.
    """

    phrase: str


@dataclass(frozen=True, slots=True)
class And:
    """Both children must match."""

    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class Or:
    """Either child must match."""

    left: Node
    right: Node


Node = Union[Term, And, Or]


def fold_tree(
    node: Node,
    on_term: Callable[[str], T],
    on_and: Callable[[T, T], T],
    on_or: Callable[[T, T], T],
) -> T:
    """Reduce a query tree bottom-up.

    Walks with an explicit stack in post-order, so the depth of the tree
    (implicit AND chains are left-deep) is not limited by the interpreter
    recursion limit.

    Args:
        node: Root of the tree.
        on_term: Value of a leaf, given its phrase.
        on_and: Combines the values of an `And` node's children.
        on_or: Combines the values of an `Or` node's children.

    Returns:
        Value of the root.
    """
    results: list[T] = []
    pending: list[tuple[Node, bool]] = [(node, False)]
    while pending:
        current, children_done = pending.pop()
        if isinstance(current, Term):
            results.append(on_term(current.phrase))
        elif not isinstance(current, (And, Or)):
            raise TypeError(f"Unsupported query node: {type(current).__name__}")
        elif children_done:
            right = results.pop()
            left = results.pop()
            combine = on_and if isinstance(current, And) else on_or
            results.append(combine(left, right))
        else:
            pending.append((current, True))
            pending.append((current.right, False))
            pending.append((current.left, False))
    return results[0]
