from __future__ import annotations

from dataclasses import dataclass

import pytest

from statelens.errors import StaleAccessorError
from statelens.models import SDepartment, SUniversity, deps2
from statelens.nexus import dynamic_nexus, index_items, rebuild_items
from statelens.optics import field_lens


@dataclass(frozen=True)
class Holder:
    items: list


def test_index_and_rebuild_are_inverse() -> None:
    items = ("a", "b", "c")

    mapping = index_items(items)
    assert mapping == {0: "a", 1: "b", 2: "c"}
    assert rebuild_items(mapping) == items
    assert rebuild_items({2: "c", 0: "a", 1: "b"}) == items
    assert index_items(()) == {}


def test_derives_one_lens_per_department(urjc: SUniversity) -> None:
    derived = deps2()(urjc)

    assert [d.budg.get(urjc) for d in derived] == [80000, 100000]
    assert [d.budg.label for d in derived] == ["departments[0].budget", "departments[1].budget"]
    assert deps2()(SUniversity("none", 0, ())) == []


def test_derived_lens_targets_only_its_index(urjc: SUniversity) -> None:
    second = deps2()(urjc)[1]

    updated = second.budg.set(5, urjc)
    assert updated.departments == (SDepartment(80000), SDepartment(5))
    assert updated.name == "urjc"


def test_derived_lenses_survive_sequential_modification(urjc: SUniversity) -> None:
    first, second = deps2()(urjc)

    step1 = first.budg.modify(lambda b: b * 2, urjc)
    # The second accessor was derived from urjc but stays valid on step1:
    # the rebuild keeps positions.
    assert second.budg.get(step1) == 100000
    step2 = second.budg.modify(lambda b: b * 2, step1)
    assert step2.departments == (SDepartment(160000), SDepartment(200000))


def test_derived_lens_reads_current_value_not_source(urjc: SUniversity) -> None:
    first = deps2()(urjc)[0]
    later = field_lens("community").set(1, first.budg.set(42, urjc))

    assert first.budg.get(later) == 42


def test_stale_accessor_is_rejected(urjc: SUniversity) -> None:
    first = deps2()(urjc)[0]
    grown = field_lens("departments").modify(lambda ds: ds + (SDepartment(1),), urjc)

    with pytest.raises(StaleAccessorError) as excinfo:
        first.budg.get(grown)
    assert (excinfo.value.index, excinfo.value.expected, excinfo.value.actual) == (0, 2, 3)

    with pytest.raises(StaleAccessorError):
        first.budg.set(0, grown)


def test_lenient_nexus_follows_indices(urjc: SUniversity) -> None:
    first, second = deps2(strict=False)(urjc)
    shrunk = SUniversity("urjc", 7500, (SDepartment(7),))

    assert first.budg.get(shrunk) == 7
    with pytest.raises(IndexError):
        second.budg.get(shrunk)
    with pytest.raises(IndexError):
        second.budg.set(1, shrunk)


def test_nexus_over_list_keeps_list() -> None:
    items = field_lens("items")
    nexus = dynamic_nexus(items, field_lens("budget"))
    holder = Holder([SDepartment(1), SDepartment(2)])
    updated = nexus(holder)[0].budg.set(9, holder)
    assert updated.items == [SDepartment(9), SDepartment(2)]
