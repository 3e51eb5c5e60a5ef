"""Law checks for accessors (predicates as code, samples as data).

Checks never raise on a violation; they return ``LawViolation`` findings the
same way a lint predicate returns results. ``assert_lawful`` turns findings
into an exception for callers that want to fail fast.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from ..errors import LawViolationError
from .compose import Accessor, compose
from .lens import Lens


@dataclass(frozen=True)
class LawViolation:
    """A single failed law instance."""

    law: str
    accessor: str
    message: str
    sample: Any = None

    def __str__(self) -> str:
        return f"[{self.law}] {self.accessor} - {self.message}"


def _read(acc: Accessor, s: Any) -> list[Any]:
    return acc.get_all(s)


def check_lens_laws(lens: Lens[Any, Any], samples: Iterable[Any], values: Sequence[Any]) -> list[LawViolation]:
    """Check get-set, set-get and set-set for every sample against every value."""
    violations: list[LawViolation] = []
    for s in samples:
        if lens.set(lens.get(s), s) != s:
            violations.append(
                LawViolation("get-set", lens.label, "set(get(s), s) != s", sample=s)
            )
        for a in values:
            if lens.get(lens.set(a, s)) != a:
                violations.append(
                    LawViolation("set-get", lens.label, f"get(set({a!r}, s)) != {a!r}", sample=s)
                )
        for a1, a2 in zip(values, reversed(values)):
            if lens.set(a2, lens.set(a1, s)) != lens.set(a2, s):
                violations.append(
                    LawViolation("set-set", lens.label, f"set({a2!r}, set({a1!r}, s)) != set({a2!r}, s)", sample=s)
                )
    return violations


def check_traversal_shape(
    acc: Accessor,
    samples: Iterable[Any],
    functions: Sequence[Callable[[Any], Any]],
) -> list[LawViolation]:
    """``modify`` keeps count and order: ``get_all(modify(f, s)) == map(f, get_all(s))``."""
    violations: list[LawViolation] = []
    for s in samples:
        before = _read(acc, s)
        for f in functions:
            after = _read(acc, acc.modify(f, s))
            if len(after) != len(before):
                violations.append(
                    LawViolation(
                        "traversal-count",
                        acc.label,
                        f"modify changed occurrence count {len(before)} -> {len(after)}",
                        sample=s,
                    )
                )
            elif after != [f(x) for x in before]:
                violations.append(
                    LawViolation("traversal-order", acc.label, "occurrences do not correspond positionally", sample=s)
                )
    return violations


def check_associativity(
    x: Accessor,
    y: Accessor,
    z: Accessor,
    samples: Iterable[Any],
    functions: Sequence[Callable[[Any], Any]],
) -> list[LawViolation]:
    """``(x . y) . z`` and ``x . (y . z)`` read and modify identically."""
    left = compose(compose(x, y), z)
    right = compose(x, compose(y, z))
    name = f"{x.label}.{y.label}.{z.label}"
    violations: list[LawViolation] = []
    if type(left) is not type(right):
        violations.append(
            LawViolation("associativity", name, f"kind differs: {type(left).__name__} vs {type(right).__name__}")
        )
    for s in samples:
        if _read(left, s) != _read(right, s):
            violations.append(LawViolation("associativity", name, "get_all differs between groupings", sample=s))
        for f in functions:
            if left.modify(f, s) != right.modify(f, s):
                violations.append(LawViolation("associativity", name, "modify differs between groupings", sample=s))
    return violations


def assert_lawful(violations: list[LawViolation]) -> None:
    if violations:
        raise LawViolationError(violations)


LAW_CHECKS: dict[str, Callable[..., list[LawViolation]]] = {
    "lens": check_lens_laws,
    "traversal-shape": check_traversal_shape,
    "associativity": check_associativity,
}
