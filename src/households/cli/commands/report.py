from __future__ import annotations

from pathlib import Path

import typer

from households.cli.utils import console, load_households
from households.reporting import print_report


def report_command(
    input_file: Path = typer.Argument(..., help="Quoted CSV file with one person per line"),
    skip_header: bool = typer.Option(
        False,
        "--skip-header",
        help="Ignore the first line of the input",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print every household with its occupant count and adult occupants.
    """
    index, _ = load_households(input_file, skip_header=skip_header, verbose=verbose)
    print_report(index, console)
