"""Property checks for lens laws, traversal shape and associativity.

Samples come from seeded ``random.Random`` instances so every run checks the
same records.
"""

from __future__ import annotations

import random

import pytest

from statelens.errors import LawViolationError
from statelens.models import DEPARTMENT, UNIVERSITY, SDepartment, SUniversity, deps2, random_university
from statelens.optics import Lens, Traversal, compose, each, field_lens, index_lens
from statelens.optics.laws import (
    LAW_CHECKS,
    assert_lawful,
    check_associativity,
    check_lens_laws,
    check_traversal_shape,
)

SEEDS = list(range(8))
FUNCTIONS = [lambda x: x * 2, lambda x: x - 7, lambda x: 0]


def _samples(seed: int, count: int = 12) -> list[SUniversity]:
    rng = random.Random(seed)
    return [random_university(rng) for _ in range(count)]


@pytest.mark.parametrize("seed", SEEDS)
def test_descriptor_lenses_are_lawful(seed: int) -> None:
    samples = _samples(seed)
    rng = random.Random(seed + 100)
    ints = [rng.randint(-1000, 1000) for _ in range(4)]

    assert check_lens_laws(UNIVERSITY.name, samples, ["", "a", "Zz"]) == []
    assert check_lens_laws(UNIVERSITY.comm, samples, ints) == []
    departments = [d for s in samples for d in s.departments]
    assert check_lens_laws(DEPARTMENT.budg, departments, ints) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_composed_lens_is_lawful(seed: int) -> None:
    samples = [s for s in _samples(seed) if s.departments]
    first_budget = compose(compose(field_lens("departments"), index_lens(0)), field_lens("budget"))

    assert check_lens_laws(first_budget, samples, [0, 1, -1]) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_derived_nexus_lenses_are_lawful_on_their_source(seed: int) -> None:
    nexus = deps2()
    for s in _samples(seed):
        for dep in nexus(s):
            assert check_lens_laws(dep.budg, [s], [0, 5, 99]) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_traversal_keeps_count_and_order(seed: int) -> None:
    samples = _samples(seed)
    budgets = compose(UNIVERSITY.deps, DEPARTMENT.budg)

    assert check_traversal_shape(budgets, samples, FUNCTIONS) == []
    assert check_traversal_shape(UNIVERSITY.deps, samples, [lambda d: SDepartment(d.budget + 1)]) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_composition_is_associative(seed: int) -> None:
    samples = _samples(seed)
    non_empty = [s for s in samples if s.departments]
    departments = field_lens("departments")
    budget = field_lens("budget")

    assert check_associativity(departments, each(), budget, samples, FUNCTIONS) == []
    assert check_associativity(departments, index_lens(0), budget, non_empty, FUNCTIONS) == []
    assert check_associativity(departments, each(), budget.as_traversal(), samples, FUNCTIONS) == []


def test_associativity_over_nested_traversals() -> None:
    samples = [((1, 2), (3,)), (), ((),), ((4, 5, 6),)]
    wrapped = [(s,) for s in samples]

    violations = check_associativity(each(), each(), each(), wrapped, [lambda x: x + 1])
    assert violations == []


def test_unlawful_lens_is_reported(math_dep: SDepartment) -> None:
    off_by_one = Lens(lambda d: d.budget, lambda a, d: SDepartment(a + 1), label="off_by_one")

    violations = check_lens_laws(off_by_one, [math_dep], [0, 10])
    laws = {v.law for v in violations}
    assert "get-set" in laws
    assert "set-get" in laws
    assert all(v.accessor == "off_by_one" for v in violations)


def test_shape_changing_traversal_is_reported() -> None:
    drops_tail = Traversal(lambda s: list(s), lambda f, s: tuple(f(x) for x in s[:1]), label="drops_tail")

    violations = check_traversal_shape(drops_tail, [(1, 2, 3)], [lambda x: x])
    assert [v.law for v in violations] == ["traversal-count"]


def test_reordering_traversal_is_reported() -> None:
    reverses = Traversal(lambda s: list(s), lambda f, s: tuple(f(x) for x in reversed(s)), label="reverses")

    violations = check_traversal_shape(reverses, [(1, 2, 3)], [lambda x: x])
    assert [v.law for v in violations] == ["traversal-order"]


def test_assert_lawful_raises_with_findings(math_dep: SDepartment) -> None:
    assert_lawful([])

    broken = Lens(lambda d: d.budget, lambda a, d: d, label="ignores_set")
    with pytest.raises(LawViolationError) as excinfo:
        assert_lawful(check_lens_laws(broken, [math_dep], [1, 2]))
    assert excinfo.value.violations
    assert "set-get" in str(excinfo.value)


def test_law_registry_names() -> None:
    assert set(LAW_CHECKS) == {"lens", "traversal-shape", "associativity"}
