"""CLI entrypoint for statelens."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import VARIANT_CHOICES

_FILE = click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path)


@click.group()
@click.version_option(__version__, prog_name="statelens")
@click.option("--verbose", is_flag=True, help="Log accessor derivation and comparison details")
def cli(verbose: bool) -> None:
    """statelens - generic logic over immutable records through lenses.

    Runs the university example through a structural nexus (traversal) and a
    dynamic nexus (derived lenses), and checks the accessor laws.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("file", type=_FILE)
@click.option(
    "--variant",
    type=click.Choice(VARIANT_CHOICES),
    default=None,
    help="Nexus style to run (defaults to the file's run.variant)",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def run(file: Path, variant: str | None, output_json: bool) -> None:
    """Run name, budget and doubling operations on a university file.

    Examples:

        statelens run urjc.toml

        statelens run urjc.yaml --variant dynamic --json
    """
    from .commands.run_cmd import run_run

    sys.exit(run_run(file, variant, output_json))


@cli.command()
@click.argument("file", type=_FILE)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def compare(file: Path, output_json: bool) -> None:
    """Check that structural and dynamic nexus agree.

    Exits with status 1 if any operation differs between the two.
    """
    from .commands.compare_cmd import run_compare

    sys.exit(run_compare(file, output_json))


@cli.command()
@click.argument("file", type=_FILE, required=False)
@click.option("--samples", type=click.IntRange(min=0), default=50, show_default=True, help="Random records to add")
@click.option("--seed", type=int, default=0, show_default=True, help="Seed for random records")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def laws(file: Path | None, samples: int, seed: int, output_json: bool) -> None:
    """Check lens laws, traversal shape and composition associativity.

    Without FILE, the built-in urjc sample is the base record.
    """
    from .commands.laws_cmd import run_laws

    sys.exit(run_laws(file, samples, seed, output_json))


@cli.command()
def demo() -> None:
    """Run and compare both variants on the built-in urjc sample."""
    from .commands.compare_cmd import run_compare

    sys.exit(run_compare(None))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
