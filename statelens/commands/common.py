"""Helpers shared by command implementations."""

from __future__ import annotations

import json
from typing import Any

from ..logic import BaseLogic, Logic, Logic2
from ..models import SUniversity, register_defaults, university2


def build_logic(variant: str, strict: bool = True) -> BaseLogic[Any]:
    """Logic for one nexus style, wired from the registered descriptors."""
    register_defaults()
    if variant == "structural":
        return Logic.for_type(SUniversity)
    if variant == "dynamic":
        if strict:
            return Logic2.for_type(SUniversity)
        return Logic2(university2(strict=False))
    raise ValueError(f"unknown variant: {variant!r}")


def to_plain(value: Any) -> Any:
    """Records become dicts; everything else passes through."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def format_value(value: Any) -> str:
    plain = to_plain(value)
    if isinstance(plain, (dict, list)):
        return json.dumps(plain, sort_keys=False)
    return str(plain)
