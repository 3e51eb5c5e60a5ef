"""
Generic logic over any record type that supplies a capability descriptor.

Both logic classes receive their descriptor through the constructor and
only ever touch the record through its accessors. Operations are exposed
twice: as State programs (composable with ``>>``) and as plain functions
that run those programs against a value.

``Logic`` composes the structural nexus with the department budget lens.
``Logic2`` asks the dynamic nexus for fresh accessors from the current value
and runs them one after another on the running value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .capability import University, University2, require_university, require_university2
from .optics import compose
from .state import State, extract, gets, mod_, traverse

Univ = TypeVar("Univ")
Dep = TypeVar("Dep")


class BaseLogic(ABC, Generic[Univ]):
    """Operations shared by both nexus styles, plus the plain-function forms."""

    def __init__(self, univ: University[Univ, Any] | University2[Univ]):
        self.univ = univ

    # -------------------------------------------------------------------------
    # Programs
    # -------------------------------------------------------------------------

    def get_univ_name(self) -> State[Univ, str]:
        return extract(self.univ.name)

    def upc_univ_name(self) -> State[Univ, None]:
        return mod_(self.univ.name, str.upper)

    def get_univ_comm(self) -> State[Univ, int]:
        return extract(self.univ.comm)

    @abstractmethod
    def get_univ_budg(self) -> State[Univ, int]:
        """Sum of every department budget."""
        ...

    @abstractmethod
    def scale_univ_budg(self, factor: int) -> State[Univ, None]:
        """Multiply every department budget by ``factor``."""
        ...

    def double_univ_budg(self) -> State[Univ, None]:
        return self.scale_univ_budg(2)

    # -------------------------------------------------------------------------
    # Plain functions
    # -------------------------------------------------------------------------

    def read_name(self, s: Univ) -> str:
        return self.get_univ_name().eval(s)

    def upper_name(self, s: Univ) -> Univ:
        return self.upc_univ_name().exec(s)

    def read_community(self, s: Univ) -> int:
        return self.get_univ_comm().eval(s)

    def total_budget(self, s: Univ) -> int:
        return self.get_univ_budg().eval(s)

    def double_budgets(self, s: Univ) -> Univ:
        return self.double_univ_budg().exec(s)

    def scale_budgets(self, s: Univ, factor: int) -> Univ:
        return self.scale_univ_budg(factor).exec(s)


class Logic(BaseLogic[Univ], Generic[Univ, Dep]):
    """Generic logic over a structural nexus (Traversal composed with a Lens)."""

    univ: University[Univ, Dep]

    def __init__(self, univ: University[Univ, Dep]):
        super().__init__(univ)
        self.budgets = compose(univ.deps, univ.dep.budg)

    @classmethod
    def for_type(cls, univ_type: type) -> Logic[Any, Any]:
        """Look up the registered descriptor for ``univ_type`` and inject it."""
        return cls(require_university(univ_type))

    def get_univ_budg(self) -> State[Univ, int]:
        return gets(lambda s: sum(self.budgets.get_all(s)))

    def scale_univ_budg(self, factor: int) -> State[Univ, None]:
        return mod_(self.budgets, lambda x: x * factor)


class Logic2(BaseLogic[Univ]):
    """
    Generic logic over a dynamic nexus.

    Accessors are derived from the value at the start of the program; each
    modification runs against the value left by the previous one.
    """

    univ: University2[Univ]

    def __init__(self, univ: University2[Univ]):
        super().__init__(univ)

    @classmethod
    def for_type(cls, univ_type: type) -> Logic2[Any]:
        return cls(require_university2(univ_type))

    def get_univ_budg(self) -> State[Univ, int]:
        return gets(self.univ.deps).bind(
            lambda deps: traverse(deps, lambda d: extract(d.budg)).map(sum)
        )

    def scale_univ_budg(self, factor: int) -> State[Univ, None]:
        return gets(self.univ.deps).bind(
            lambda deps: traverse(deps, lambda d: mod_(d.budg, lambda x: x * factor)).void()
        )
