"""
Dynamic nexus: derive, from a whole value, one lens per sub-record.

Instead of a structural Traversal, the nexus is a function ``S -> list of
Department[S]``. Each derived lens closes over a position ``i`` and re-derives
the positional mapping from whatever value it is applied to, so it stays valid
across modifications that keep the item count (the rebuild preserves
positions). A lens applied to a value of a different shape is stale; in strict
mode it raises ``StaleAccessorError`` instead of reading or writing the wrong
item.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence, TypeVar

from .capability.schema import Department
from .errors import StaleAccessorError
from .optics import Lens

logger = logging.getLogger(__name__)

S = TypeVar("S")
D = TypeVar("D")


def index_items(items: Sequence[D]) -> dict[int, D]:
    """Positional mapping index -> item for the current value."""
    return dict(enumerate(items))


def rebuild_items(mapping: Mapping[int, D]) -> tuple[D, ...]:
    """Inverse of :func:`index_items`: items ordered by index."""
    return tuple(mapping[i] for i in sorted(mapping))


def _indexed_lens(
    items: Lens[Any, Sequence[Any]],
    focus: Lens[Any, Any],
    index: int,
    expected: int,
    strict: bool,
) -> Lens[Any, Any]:
    def current(s: Any) -> tuple[Any, dict[int, Any]]:
        raw = items.get(s)
        mapping = index_items(raw)
        if strict and len(mapping) != expected:
            logger.warning(
                "rejected stale accessor %s[%d]: derived from %d items, applied to %d",
                items.label,
                index,
                expected,
                len(mapping),
            )
            raise StaleAccessorError(index, expected, len(mapping))
        if index not in mapping:
            raise IndexError(f"{items.label}[{index}] is not present in a value with {len(mapping)} items")
        return raw, mapping

    def get(s: Any) -> Any:
        _, mapping = current(s)
        return focus.get(mapping[index])

    def set_(a: Any, s: Any) -> Any:
        raw, mapping = current(s)
        mapping[index] = focus.set(a, mapping[index])
        return items.set(type(raw)(rebuild_items(mapping)), s)

    return Lens(get, set_, label=f"{items.label}[{index}].{focus.label}")


def dynamic_nexus(
    items: Lens[S, Sequence[D]],
    focus: Lens[D, int],
    *,
    strict: bool = True,
) -> Callable[[S], list[Department[S]]]:
    """
    Build a nexus function from a lens onto the item sequence and a lens
    into each item.

    Args:
        items: Lens from the whole value to its sequence of sub-records
        focus: Lens from a sub-record to the field each derived lens exposes
        strict: Reject derived lenses applied to a value whose item count
            differs from the value they were derived from

    Returns:
        Function from a whole value to one Department descriptor per item,
        in index order
    """

    def derive(s: S) -> list[Department[S]]:
        source = index_items(items.get(s))
        expected = len(source)
        derived = [Department(_indexed_lens(items, focus, i, expected, strict)) for i in source]
        logger.debug("derived %d accessors through %s.%s", len(derived), items.label, focus.label)
        return derived

    return derive
