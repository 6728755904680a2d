from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from households.cli.utils import console, load_households
from households.reporting import household_summary


def stats_command(
    input_file: Path = typer.Argument(..., help="Quoted CSV file with one person per line"),
    skip_header: bool = typer.Option(
        False,
        "--skip-header",
        help="Ignore the first line of the input",
    ),
):
    """
    Show summary statistics for an input file.
    """
    index, ctx = load_households(input_file, skip_header=skip_header)
    summary = household_summary(index)

    table = Table(title="Household Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Households", str(summary["households"]))
    table.add_row("Occupants", str(summary["occupants"]))
    table.add_row("Adults", str(summary["adults"]))
    table.add_row("Minors", str(summary["minors"]))
    table.add_row("Rejected lines", str(ctx.stats["records_rejected"]))

    console.print(table)
