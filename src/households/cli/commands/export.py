from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from households.cli.utils import err_console, load_households
from households.exporter import index_to_dict, write_json


def export_command(
    input_file: Path = typer.Argument(..., help="Quoted CSV file with one person per line"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
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
    Export households to JSON (stdout by default).
    """
    index, _ = load_households(input_file, skip_header=skip_header, verbose=verbose)

    data = index_to_dict(index)

    write_json(data, out=out, pretty=pretty)

    if verbose:
        err_console.log("Export complete")
