"""Pytest configuration and fixtures."""

import pytest

from statelens.capability import clear_universities
from statelens.logic import Logic, Logic2
from statelens.models import SDepartment, SUniversity, register_defaults, sample_university


@pytest.fixture(autouse=True)
def clean_registry():
    """Each test starts and ends with an empty descriptor registry."""
    clear_universities()
    yield
    clear_universities()


@pytest.fixture
def urjc() -> SUniversity:
    """The urjc sample: math (80000) and cs (100000)."""
    return sample_university()


@pytest.fixture
def math_dep() -> SDepartment:
    return SDepartment(80000)


@pytest.fixture
def logic() -> Logic:
    """Structural-nexus logic, wired through the registry."""
    register_defaults()
    return Logic.for_type(SUniversity)


@pytest.fixture
def logic2() -> Logic2:
    """Dynamic-nexus logic, wired through the registry."""
    register_defaults()
    return Logic2.for_type(SUniversity)
