"""Lenses, traversals and their composition."""

from .compose import Accessor, compose, compose_all
from .lens import Lens, field_lens, index_lens
from .traversal import Traversal, each

__all__ = [
    "Accessor",
    "Lens",
    "Traversal",
    "compose",
    "compose_all",
    "each",
    "field_lens",
    "index_lens",
]
