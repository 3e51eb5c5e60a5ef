"""Exception taxonomy for statelens.

Accessor operations are total over well-formed inputs; everything raised here
signals a broken caller obligation (ill-formed descriptor, stale accessor,
unlawful optic), not a recoverable runtime condition.
"""

from __future__ import annotations


class StatelensError(Exception):
    """Base class for all statelens errors."""


class StaleAccessorError(StatelensError):
    """A dynamic-nexus lens was applied to a value of a different shape."""

    def __init__(self, index: int, expected: int, actual: int):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"accessor for index {index} was derived from a value with {expected} items, "
            f"applied to a value with {actual} items"
        )


class DescriptorError(StatelensError, TypeError):
    """A capability descriptor holds a field that is not an accessor of the right kind."""


class DescriptorNotFoundError(StatelensError, KeyError):
    """No descriptor registered for the requested record type."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "descriptor not found"


class LawViolationError(StatelensError):
    """An accessor failed one or more law checks."""

    def __init__(self, violations: list):
        self.violations = list(violations)
        lines = "; ".join(str(v) for v in self.violations[:3])
        more = f" (+{len(self.violations) - 3} more)" if len(self.violations) > 3 else ""
        super().__init__(f"{len(self.violations)} law violation(s): {lines}{more}")
