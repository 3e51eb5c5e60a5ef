"""
Capability descriptors and their registry.

A concrete record type becomes usable by generic logic by supplying a
descriptor with exactly the accessors that logic requires.
"""

from __future__ import annotations

from .registry import (
    clear_universities,
    get_university,
    get_university2,
    list_universities,
    register_university,
    register_university2,
    require_university,
    require_university2,
)
from .schema import Department, University, University2, accessor_names

__all__ = [
    # Descriptors
    "Department",
    "University",
    "University2",
    "accessor_names",
    # Registry
    "clear_universities",
    "get_university",
    "get_university2",
    "list_universities",
    "register_university",
    "register_university2",
    "require_university",
    "require_university2",
]
