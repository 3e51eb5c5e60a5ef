"""Run command implementation - evaluate the worked-example operations."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..compare import VariantOutcome, run_variant
from ..config import RunConfig, load_university_file
from ..models import sample_university
from .common import build_logic, format_value, to_plain

OPERATIONS = [
    ("read_name", "name"),
    ("upper_name", "upper_named"),
    ("total_budget", "total_budget"),
    ("double_budgets", "doubled"),
    ("double then total", "doubled_total"),
    ("double_budgets twice", "doubled_twice"),
    ("scale_budgets", "scaled"),
]


def outcome_to_dict(outcome: VariantOutcome) -> dict:
    data = {label: to_plain(getattr(outcome, attr)) for label, attr in OPERATIONS}
    data["factor"] = outcome.factor
    return data


def render_outcomes(outcomes: list[VariantOutcome], console: Console) -> None:
    table = Table(title="statelens run")
    table.add_column("Operation", style="cyan")
    for outcome in outcomes:
        table.add_column(outcome.variant)
    for label, attr in OPERATIONS:
        table.add_row(label, *(format_value(getattr(o, attr)) for o in outcomes))
    console.print(table)


def execute_run(config: RunConfig, variant: str | None = None) -> list[VariantOutcome]:
    chosen = variant or config.variant
    names = ["structural", "dynamic"] if chosen == "both" else [chosen]
    return [
        run_variant(name, build_logic(name, strict=config.strict_nexus), config.university, config.factor)
        for name in names
    ]


def run_run(
    path: Path | None,
    variant: str | None = None,
    output_json: bool = False,
) -> int:
    """Run the operations for a university file (or the built-in sample).

    Returns:
        Exit code (0 = success, 1 = invalid input)
    """
    console = Console(stderr=True)

    if path is None:
        config = RunConfig(university=sample_university())
    else:
        try:
            config = load_university_file(path)
        except ValueError as e:
            console.print(f"Invalid university file {path}: {e}", style="bold red")
            return 1

    outcomes = execute_run(config, variant)

    if output_json:
        print(json.dumps({o.variant: outcome_to_dict(o) for o in outcomes}, indent=2))
        return 0

    render_outcomes(outcomes, Console())
    return 0
