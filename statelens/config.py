"""
Load university records and run settings from TOML or YAML.

The schema is intentionally small: one ``[university]`` table and an
optional ``[run]`` table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import SDepartment, SUniversity

logger = logging.getLogger(__name__)

VARIANT_CHOICES = ("structural", "dynamic", "both")


@dataclass(frozen=True)
class RunConfig:
    university: SUniversity
    variant: str = "both"
    strict_nexus: bool = True
    factor: int = 2


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _require_int(value: Any, key: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return value


def _read_data(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        import yaml

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML: {e}") from e
    elif suffix == ".toml":
        import tomllib

        data = tomllib.loads(text)
    else:
        raise ValueError(f"unsupported file type {path.suffix!r} (expected .toml, .yaml or .yml)")
    return _coerce_dict(data)


def parse_university(data: dict[str, Any]) -> SUniversity:
    name = data.get("name")
    if not isinstance(name, str):
        raise ValueError("university.name is required")

    community = _require_int(data.get("community", 0), "university.community")

    raw_departments = data.get("departments", [])
    if not isinstance(raw_departments, list):
        raise ValueError("university.departments must be a list")

    departments: list[SDepartment] = []
    for i, raw in enumerate(raw_departments):
        raw = _coerce_dict(raw)
        if "budget" not in raw:
            raise ValueError(f"university.departments[{i}].budget is required")
        departments.append(SDepartment(_require_int(raw["budget"], f"university.departments[{i}].budget")))

    return SUniversity(name=name, community=community, departments=tuple(departments))


def load_university_file(path: Path) -> RunConfig:
    """Load a university file; raises ValueError on a malformed document."""
    data = _read_data(path)

    university = parse_university(_coerce_dict(data.get("university")))

    run = _coerce_dict(data.get("run"))
    variant = str(run.get("variant", "both")).strip().lower() or "both"
    if variant not in VARIANT_CHOICES:
        raise ValueError(f"run.variant must be one of {', '.join(VARIANT_CHOICES)}")

    strict_nexus = run.get("strict_nexus", True)
    if not isinstance(strict_nexus, bool):
        raise ValueError("run.strict_nexus must be a boolean")

    factor = _require_int(run.get("factor", 2), "run.factor")

    logger.debug("loaded %s with %d departments from %s", university.name, len(university.departments), path)
    return RunConfig(university=university, variant=variant, strict_nexus=strict_nexus, factor=factor)
