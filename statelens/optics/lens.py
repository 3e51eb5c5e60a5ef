"""Lens: total, lawful accessor for exactly one field."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from .traversal import Traversal

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Lens(Generic[S, A]):
    """
    Get/set pair focused on a single field of ``S``.

    The pair must satisfy the lens laws:

    - ``get(set(a, s)) == a``
    - ``set(get(s), s) == s``
    - ``set(a2, set(a1, s)) == set(a2, s)``

    This is a construction-site obligation. ``statelens.optics.laws`` checks
    it against samples; the constructor does not.
    """

    getter: Callable[[S], A] = field(repr=False)
    setter: Callable[[A, S], S] = field(repr=False)
    label: str = "lens"

    def get(self, s: S) -> A:
        return self.getter(s)

    def set(self, a: A, s: S) -> S:
        return self.setter(a, s)

    def modify(self, f: Callable[[A], A], s: S) -> S:
        return self.setter(f(self.getter(s)), s)

    def get_all(self, s: S) -> list[A]:
        """Single-element view, so a Lens reads like a Traversal."""
        return [self.getter(s)]

    def as_traversal(self) -> Traversal[S, A]:
        return Traversal(self.get_all, self.modify, label=self.label)

    def compose(self, inner: "Lens[A, B] | Traversal[A, B]") -> "Lens[S, B] | Traversal[S, B]":
        from .compose import compose

        return compose(self, inner)

    def __rshift__(self, inner: Any) -> Any:
        return self.compose(inner)


def field_lens(name: str) -> Lens[Any, Any]:
    """
    Lens onto attribute ``name`` of an immutable record.

    Dataclasses are rebuilt with ``dataclasses.replace``; namedtuples with
    ``_replace``.
    """

    def getter(s: Any) -> Any:
        return getattr(s, name)

    def setter(a: Any, s: Any) -> Any:
        if dataclasses.is_dataclass(s) and not isinstance(s, type):
            return dataclasses.replace(s, **{name: a})
        if hasattr(s, "_replace"):
            return s._replace(**{name: a})
        raise TypeError(f"field_lens({name!r}) cannot rebuild {type(s).__name__}")

    return Lens(getter, setter, label=name)


def index_lens(i: int) -> Lens[Any, Any]:
    """Lens onto position ``i`` of a tuple or list."""
    if i < 0:
        raise ValueError("index_lens requires a non-negative index")

    def getter(items: Any) -> Any:
        return items[i]

    def setter(a: Any, items: Any) -> Any:
        if i >= len(items):
            raise IndexError(f"index {i} out of range for {len(items)} items")
        rebuilt = list(items)
        rebuilt[i] = a
        return type(items)(rebuilt)

    return Lens(getter, setter, label=f"[{i}]")
