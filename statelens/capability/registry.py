"""
Descriptor registry for record type -> capability descriptor lookup.

Concrete record types register their descriptors once at setup. Generic
logic obtains a descriptor by explicit lookup and receives it through its
constructor; nothing is resolved implicitly.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import DescriptorNotFoundError
from .schema import University, University2

logger = logging.getLogger(__name__)

# Global registries: record type -> descriptor
_UNIVERSITIES: dict[type, University[Any, Any]] = {}
_UNIVERSITIES2: dict[type, University2[Any]] = {}


def register_university(univ_type: type, descriptor: University[Any, Any]) -> None:
    """Register the structural-nexus descriptor for ``univ_type``."""
    if not isinstance(descriptor, University):
        raise TypeError(f"expected a University descriptor, got {type(descriptor).__name__}")
    _UNIVERSITIES[univ_type] = descriptor
    logger.debug("registered University descriptor for %s", univ_type.__name__)


def get_university(univ_type: type) -> University[Any, Any] | None:
    return _UNIVERSITIES.get(univ_type)


def require_university(univ_type: type) -> University[Any, Any]:
    descriptor = _UNIVERSITIES.get(univ_type)
    if descriptor is None:
        raise DescriptorNotFoundError(f"no University descriptor registered for {univ_type.__name__}")
    return descriptor


def register_university2(univ_type: type, descriptor: University2[Any]) -> None:
    """Register the dynamic-nexus descriptor for ``univ_type``."""
    if not isinstance(descriptor, University2):
        raise TypeError(f"expected a University2 descriptor, got {type(descriptor).__name__}")
    _UNIVERSITIES2[univ_type] = descriptor
    logger.debug("registered University2 descriptor for %s", univ_type.__name__)


def get_university2(univ_type: type) -> University2[Any] | None:
    return _UNIVERSITIES2.get(univ_type)


def require_university2(univ_type: type) -> University2[Any]:
    descriptor = _UNIVERSITIES2.get(univ_type)
    if descriptor is None:
        raise DescriptorNotFoundError(f"no University2 descriptor registered for {univ_type.__name__}")
    return descriptor


def list_universities() -> list[str]:
    """Names of record types with any registered descriptor."""
    names = {t.__name__ for t in _UNIVERSITIES} | {t.__name__ for t in _UNIVERSITIES2}
    return sorted(names)


def clear_universities() -> None:
    """Clear all registered descriptors (for testing)."""
    _UNIVERSITIES.clear()
    _UNIVERSITIES2.clear()
