"""
State programs: pure state-threading over an immutable value.

A ``State[S, A]`` wraps ``S -> (S, A)``. Running a program never mutates its
input; sequencing feeds each step's output value into the next step, strictly
in program order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, TypeVar

from .optics import Accessor, Lens

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class State(Generic[S, A]):
    run_fn: Callable[[S], tuple[S, A]] = field(repr=False)

    def run(self, s: S) -> tuple[S, A]:
        return self.run_fn(s)

    def exec(self, s: S) -> S:
        """Run and keep the final value."""
        return self.run_fn(s)[0]

    def eval(self, s: S) -> A:
        """Run and keep the result."""
        return self.run_fn(s)[1]

    def __call__(self, s: S) -> tuple[S, A]:
        return self.run_fn(s)

    def map(self, f: Callable[[A], B]) -> State[S, B]:
        def run(s: S) -> tuple[S, B]:
            s2, a = self.run_fn(s)
            return s2, f(a)

        return State(run)

    def bind(self, f: Callable[[A], State[S, B]]) -> State[S, B]:
        def run(s: S) -> tuple[S, B]:
            s2, a = self.run_fn(s)
            return f(a).run(s2)

        return State(run)

    def then(self, other: State[S, B]) -> State[S, B]:
        """Run ``self``, discard its result, then run ``other`` on the new value."""
        return self.bind(lambda _: other)

    def void(self) -> State[S, None]:
        return self.map(lambda _: None)

    def __rshift__(self, other: State[S, B]) -> State[S, B]:
        return self.then(other)


def pure(a: A) -> State[Any, A]:
    return State(lambda s: (s, a))


def gets(f: Callable[[S], A]) -> State[S, A]:
    return State(lambda s: (s, f(s)))


def modify(f: Callable[[S], S]) -> State[S, None]:
    return State(lambda s: (f(s), None))


def extract(lens: Lens[S, A]) -> State[S, A]:
    """Read the lens focus from the current value."""
    return gets(lens.get)


def mod_(acc: Accessor, f: Callable[[Any], Any]) -> State[Any, None]:
    """Update the focus (or every focus, for a traversal) in the current value."""
    return modify(lambda s: acc.modify(f, s))


def sequence(states: Iterable[State[S, A]]) -> State[S, list[A]]:
    """Run each program on the running value, collecting results in order."""
    programs = list(states)

    def run(s: S) -> tuple[S, list[A]]:
        results: list[A] = []
        for program in programs:
            s, a = program.run(s)
            results.append(a)
        return s, results

    return State(run)


def traverse(items: Iterable[B], f: Callable[[B], State[S, A]]) -> State[S, list[A]]:
    return sequence(f(item) for item in items)
