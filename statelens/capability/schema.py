"""
Capability descriptors: data-valued bundles of accessors.

A descriptor exposes a concrete record type's structure to generic logic.
Every field is required, so a descriptor missing an accessor cannot be
constructed, and the ``Generic`` parameters let a type checker reject a
mismatched descriptor before anything runs. ``__post_init__`` rejects fields
of the wrong kind.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Generic, TypeVar

from ..errors import DescriptorError
from ..optics import Lens, Traversal

Univ = TypeVar("Univ")
Dep = TypeVar("Dep")


def _expect(descriptor: Any, name: str, kind: type | tuple[type, ...]) -> None:
    value = getattr(descriptor, name)
    if not isinstance(value, kind):
        expected = kind.__name__ if isinstance(kind, type) else " or ".join(k.__name__ for k in kind)
        raise DescriptorError(
            f"{type(descriptor).__name__}.{name} must be a {expected}, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Department(Generic[Dep]):
    budg: Lens[Dep, int]

    def __post_init__(self) -> None:
        _expect(self, "budg", Lens)


@dataclass(frozen=True)
class University(Generic[Univ, Dep]):
    """Structural nexus: departments are reached through a Traversal."""

    name: Lens[Univ, str]
    comm: Lens[Univ, int]
    deps: Traversal[Univ, Dep]
    dep: Department[Dep]

    def __post_init__(self) -> None:
        _expect(self, "name", Lens)
        _expect(self, "comm", Lens)
        _expect(self, "deps", Traversal)
        _expect(self, "dep", Department)


@dataclass(frozen=True)
class University2(Generic[Univ]):
    """
    Dynamic nexus: ``deps`` derives, from a whole value, one ``Department``
    descriptor per sub-record, each already focused from ``Univ``.
    """

    name: Lens[Univ, str]
    comm: Lens[Univ, int]
    deps: Callable[[Univ], list[Department[Univ]]]

    def __post_init__(self) -> None:
        _expect(self, "name", Lens)
        _expect(self, "comm", Lens)
        if not callable(self.deps) or isinstance(self.deps, (Lens, Traversal)):
            raise DescriptorError(
                f"University2.deps must be a function returning Department descriptors, "
                f"got {type(self.deps).__name__}"
            )


def accessor_names(descriptor: Any) -> list[str]:
    """Field names a descriptor supplies, in declaration order."""
    return [f.name for f in fields(descriptor)]
