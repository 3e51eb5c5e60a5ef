"""Cross-variant equivalence: structural and dynamic nexus agree."""

from __future__ import annotations

import random

import pytest

from statelens.compare import compare_variants, run_variant
from statelens.logic import Logic, Logic2
from statelens.models import SDepartment, SUniversity, random_university


@pytest.mark.parametrize("seed", range(10))
def test_variants_agree_on_random_records(seed: int, logic: Logic, logic2: Logic2) -> None:
    rng = random.Random(seed)
    for _ in range(10):
        s = random_university(rng)
        assert logic.total_budget(s) == logic2.total_budget(s)
        assert logic.double_budgets(s) == logic2.double_budgets(s)

        report = compare_variants(logic, logic2, s, factor=rng.randint(-3, 5))
        assert report.agree, report.mismatches


def test_report_for_urjc(logic: Logic, logic2: Logic2, urjc: SUniversity) -> None:
    report = compare_variants(logic, logic2, urjc)

    assert report.agree
    assert report.mismatches == []
    structural = report.outcomes["structural"]
    assert structural.name == "urjc"
    assert structural.upper_named.name == "URJC"
    assert structural.total_budget == 180000
    assert structural.doubled_total == 360000
    assert structural.doubled_twice.departments == (SDepartment(320000), SDepartment(400000))
    assert report.outcomes["dynamic"].fields_for_comparison() == structural.fields_for_comparison()


def test_mismatch_is_reported(logic: Logic, urjc: SUniversity) -> None:
    class Skewed(Logic):
        def get_univ_budg(self):
            return super().get_univ_budg().map(lambda total: total + 1)

    report = compare_variants(logic, Skewed(logic.univ), urjc)

    assert not report.agree
    assert report.mismatches == ["total_budget", "doubled_total"]


def test_run_variant_uses_factor(logic2: Logic2, urjc: SUniversity) -> None:
    outcome = run_variant("dynamic", logic2, urjc, factor=3)

    assert outcome.variant == "dynamic"
    assert outcome.factor == 3
    assert outcome.scaled.departments == (SDepartment(240000), SDepartment(300000))
