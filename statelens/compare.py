"""Cross-variant equivalence: structural and dynamic nexus must agree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .logic import BaseLogic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantOutcome:
    """Results of the worked-example operations under one nexus style."""

    variant: str
    name: str
    upper_named: Any
    total_budget: int
    doubled: Any
    doubled_total: int
    doubled_twice: Any
    scaled: Any
    factor: int

    def fields_for_comparison(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "upper_named": self.upper_named,
            "total_budget": self.total_budget,
            "doubled": self.doubled,
            "doubled_total": self.doubled_total,
            "doubled_twice": self.doubled_twice,
            "scaled": self.scaled,
        }


@dataclass
class VariantReport:
    outcomes: dict[str, VariantOutcome] = field(default_factory=dict)
    mismatches: list[str] = field(default_factory=list)

    @property
    def agree(self) -> bool:
        return not self.mismatches


def run_variant(variant: str, logic: BaseLogic[Any], s: Any, factor: int = 2) -> VariantOutcome:
    """Run every operation against ``s``; each operation starts from ``s``."""
    doubled = logic.double_budgets(s)
    # Sequencing: double, then read the total from the doubled value.
    doubled_total = (logic.double_univ_budg() >> logic.get_univ_budg()).eval(s)
    return VariantOutcome(
        variant=variant,
        name=logic.read_name(s),
        upper_named=logic.upper_name(s),
        total_budget=logic.total_budget(s),
        doubled=doubled,
        doubled_total=doubled_total,
        doubled_twice=logic.double_budgets(doubled),
        scaled=logic.scale_budgets(s, factor),
        factor=factor,
    )


def compare_variants(structural: BaseLogic[Any], dynamic: BaseLogic[Any], s: Any, factor: int = 2) -> VariantReport:
    """Run both variants against ``s`` and list every operation where they differ."""
    report = VariantReport()
    left = run_variant("structural", structural, s, factor)
    right = run_variant("dynamic", dynamic, s, factor)
    report.outcomes = {"structural": left, "dynamic": right}

    expected = left.fields_for_comparison()
    actual = right.fields_for_comparison()
    for key, value in expected.items():
        if actual[key] != value:
            report.mismatches.append(key)

    if report.mismatches:
        logger.warning("variants disagree on: %s", ", ".join(report.mismatches))
    else:
        logger.debug("variants agree on %d operations", len(expected))
    return report
