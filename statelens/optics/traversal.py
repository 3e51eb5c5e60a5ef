"""Traversal: total accessor over zero or more occurrences inside a value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from .lens import Lens

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Traversal(Generic[S, A]):
    """
    Read and update every occurrence of ``A`` inside ``S``.

    ``get_all`` returns occurrences in index order. ``modify`` applies the
    function pointwise and never changes the count or order of occurrences.
    Callers constructing a Traversal by hand are responsible for that
    invariant; nothing here can verify it.
    """

    get_all_fn: Callable[[S], list[A]] = field(repr=False)
    modify_fn: Callable[[Callable[[A], A], S], S] = field(repr=False)
    label: str = "traversal"

    def get_all(self, s: S) -> list[A]:
        return list(self.get_all_fn(s))

    def modify(self, f: Callable[[A], A], s: S) -> S:
        return self.modify_fn(f, s)

    def set(self, a: A, s: S) -> S:
        """Replace every occurrence with ``a``."""
        return self.modify(lambda _: a, s)

    def length(self, s: S) -> int:
        return len(self.get_all(s))

    def as_traversal(self) -> Traversal[S, A]:
        return self

    def compose(self, inner: "Lens[A, B] | Traversal[A, B]") -> Traversal[S, B]:
        from .compose import compose

        return compose(self, inner)  # type: ignore[return-value]

    def __rshift__(self, inner: Any) -> Traversal[S, Any]:
        return self.compose(inner)


def each(label: str = "each") -> Traversal[Any, Any]:
    """
    Traverse every item of a tuple (or list) in index order.

    The container type is preserved on modify.
    """

    def get_all(items: Any) -> list[Any]:
        return list(items)

    def modify(f: Callable[[Any], Any], items: Any) -> Any:
        return type(items)(f(item) for item in items)

    return Traversal(get_all, modify, label=label)
