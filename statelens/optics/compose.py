"""Composition algebra for lenses and traversals.

Lens after Lens stays a Lens; any pairing that involves a Traversal gives a
Traversal. Composition is associative in observable get/modify behaviour.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Union

from .lens import Lens
from .traversal import Traversal

Accessor = Union[Lens[Any, Any], Traversal[Any, Any]]


def _require_accessor(value: Any, role: str) -> None:
    if not isinstance(value, (Lens, Traversal)):
        raise TypeError(f"{role} accessor must be a Lens or Traversal, got {type(value).__name__}")


def compose(outer: Accessor, inner: Accessor) -> Accessor:
    """Focus ``inner`` through ``outer``: ``Accessor[S, B]`` then ``Accessor[B, A]``."""
    _require_accessor(outer, "outer")
    _require_accessor(inner, "inner")
    label = f"{outer.label}.{inner.label}"

    if isinstance(outer, Lens) and isinstance(inner, Lens):

        def get(s: Any) -> Any:
            return inner.get(outer.get(s))

        def set_(a: Any, s: Any) -> Any:
            return outer.modify(lambda b: inner.set(a, b), s)

        return Lens(get, set_, label=label)

    def get_all(s: Any) -> list[Any]:
        found: list[Any] = []
        for b in outer.get_all(s):
            found.extend(inner.get_all(b))
        return found

    def modify(f: Callable[[Any], Any], s: Any) -> Any:
        return outer.modify(lambda b: inner.modify(f, b), s)

    return Traversal(get_all, modify, label=label)


def compose_all(*accessors: Accessor) -> Accessor:
    """Left fold of :func:`compose` over a chain of accessors."""
    if not accessors:
        raise TypeError("compose_all() requires at least one accessor")
    for acc in accessors:
        _require_accessor(acc, "chained")
    return reduce(compose, accessors)
