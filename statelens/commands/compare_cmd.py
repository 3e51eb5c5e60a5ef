"""Compare command implementation - structural vs dynamic nexus."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from ..compare import compare_variants
from ..config import RunConfig, load_university_file
from ..models import sample_university
from .common import build_logic
from .run_cmd import outcome_to_dict, render_outcomes


def run_compare(path: Path | None, output_json: bool = False) -> int:
    """Check that both nexus styles agree on every operation.

    Returns:
        Exit code (0 = variants agree, 1 = disagreement or invalid input)
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

    report = compare_variants(
        build_logic("structural"),
        build_logic("dynamic", strict=config.strict_nexus),
        config.university,
        config.factor,
    )

    if output_json:
        payload = {
            "agree": report.agree,
            "mismatches": report.mismatches,
            "outcomes": {k: outcome_to_dict(v) for k, v in report.outcomes.items()},
        }
        print(json.dumps(payload, indent=2))
    else:
        render_outcomes(list(report.outcomes.values()), Console())
        if report.agree:
            console.print("[green]✓[/] structural and dynamic nexus agree")
        else:
            console.print(f"[red]✗[/] variants disagree on: {', '.join(report.mismatches)}", style="bold")

    return 0 if report.agree else 1
