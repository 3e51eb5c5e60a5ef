"""Worked-example records (a university and its departments) and their descriptors."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from typing import Any

from .capability import Department, University, University2, register_university, register_university2
from .nexus import dynamic_nexus
from .optics import each, field_lens


@dataclass(frozen=True)
class SDepartment:
    budget: int

    def to_dict(self) -> dict[str, Any]:
        return {"budget": self.budget}


@dataclass(frozen=True)
class SUniversity:
    name: str
    community: int
    departments: tuple[SDepartment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Sequences are stored as tuples so records stay immutable.
        if not isinstance(self.departments, tuple):
            object.__setattr__(self, "departments", tuple(self.departments))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "name": self.name,
            "community": self.community,
            "departments": [d.to_dict() for d in self.departments],
        }


DEPARTMENT: Department[SDepartment] = Department(budg=field_lens("budget"))

UNIVERSITY: University[SUniversity, SDepartment] = University(
    name=field_lens("name"),
    comm=field_lens("community"),
    deps=field_lens("departments") >> each(),
    dep=DEPARTMENT,
)


def deps2(*, strict: bool = True):
    """Dynamic nexus from a university to one budget lens per department."""
    return dynamic_nexus(field_lens("departments"), field_lens("budget"), strict=strict)


def university2(*, strict: bool = True) -> University2[SUniversity]:
    return University2(
        name=field_lens("name"),
        comm=field_lens("community"),
        deps=deps2(strict=strict),
    )


UNIVERSITY2: University2[SUniversity] = university2()


def register_defaults() -> None:
    """Register both descriptors for ``SUniversity``."""
    register_university(SUniversity, UNIVERSITY)
    register_university2(SUniversity, UNIVERSITY2)


def sample_university() -> SUniversity:
    math = SDepartment(80000)
    cs = SDepartment(100000)
    return SUniversity("urjc", 7500, (math, cs))


def random_university(rng: random.Random, max_departments: int = 6) -> SUniversity:
    """Arbitrary well-formed university for law and equivalence checks."""
    name = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(0, 8)))
    departments = tuple(SDepartment(rng.randint(-10_000, 1_000_000)) for _ in range(rng.randint(0, max_departments)))
    return SUniversity(name, rng.randint(0, 100_000), departments)
