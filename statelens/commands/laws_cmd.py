"""Laws command implementation - check accessor laws against sample records."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..config import load_university_file
from ..models import DEPARTMENT, UNIVERSITY, SUniversity, deps2, random_university, sample_university
from ..optics import compose, each, field_lens
from ..optics.laws import LAW_CHECKS, LawViolation

FUNCTIONS = [lambda x: x * 2, lambda x: -x, lambda x: x + 1]


@dataclass
class LawRow:
    law: str
    accessor: str
    samples: int
    violations: list[LawViolation] = field(default_factory=list)


def build_samples(base: SUniversity, count: int, seed: int) -> list[SUniversity]:
    rng = random.Random(seed)
    return [base] + [random_university(rng) for _ in range(count)]


def run_law_suite(samples: list[SUniversity]) -> list[LawRow]:
    """Evaluate every law check over ``samples``."""
    lens_laws = LAW_CHECKS["lens"]
    shape = LAW_CHECKS["traversal-shape"]
    assoc = LAW_CHECKS["associativity"]

    rows: list[LawRow] = []
    names = ["", "x", "URJC"] + [s.name for s in samples[:3]]
    rows.append(LawRow("lens", UNIVERSITY.name.label, len(samples), lens_laws(UNIVERSITY.name, samples, names)))
    rows.append(LawRow("lens", UNIVERSITY.comm.label, len(samples), lens_laws(UNIVERSITY.comm, samples, [0, 1, 7500])))

    departments = [d for s in samples for d in s.departments]
    rows.append(
        LawRow("lens", DEPARTMENT.budg.label, len(departments), lens_laws(DEPARTMENT.budg, departments, [0, 80000, -1]))
    )

    # Derived lenses are only valid against the value they were derived from.
    nexus = deps2()
    derived: list[LawViolation] = []
    checked = 0
    for s in samples:
        for dep in nexus(s):
            checked += 1
            derived.extend(lens_laws(dep.budg, [s], [0, 123, 1_000_000]))
    rows.append(LawRow("lens", "departments[i].budget", checked, derived))

    budgets = compose(UNIVERSITY.deps, DEPARTMENT.budg)
    rows.append(LawRow("traversal-shape", budgets.label, len(samples), shape(budgets, samples, FUNCTIONS)))
    rows.append(
        LawRow(
            "associativity",
            "departments.each.budget",
            len(samples),
            assoc(field_lens("departments"), each(), field_lens("budget"), samples, FUNCTIONS),
        )
    )
    return rows


def run_laws(
    path: Path | None,
    samples: int = 50,
    seed: int = 0,
    output_json: bool = False,
) -> int:
    """Run law checks for the loaded record plus ``samples`` random records.

    Returns:
        Exit code (0 = all laws hold, 1 = violations or invalid input)
    """
    console = Console(stderr=True)

    if path is None:
        base = sample_university()
    else:
        try:
            base = load_university_file(path).university
        except ValueError as e:
            console.print(f"Invalid university file {path}: {e}", style="bold red")
            return 1

    rows = run_law_suite(build_samples(base, samples, seed))
    total = sum(len(r.violations) for r in rows)

    if output_json:
        payload = [
            {
                "law": r.law,
                "accessor": r.accessor,
                "samples": r.samples,
                "violations": [str(v) for v in r.violations],
            }
            for r in rows
        ]
        print(json.dumps(payload, indent=2))
        return 1 if total else 0

    table = Table(title="Law checks")
    table.add_column("Law", style="cyan")
    table.add_column("Accessor")
    table.add_column("Samples", justify="right")
    table.add_column("Violations", justify="right")
    for r in rows:
        style = "red" if r.violations else "green"
        table.add_row(r.law, r.accessor, str(r.samples), f"[{style}]{len(r.violations)}[/]")
    Console().print(table)

    for r in rows:
        for v in r.violations[:5]:
            console.print(f"  {v}", style="red")

    if total:
        console.print(f"[red]✗[/] {total} law violation(s)", style="bold")
        return 1
    console.print("[green]✓[/] all laws hold")
    return 0
