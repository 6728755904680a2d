
from __future__ import annotations

import time
from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console
from rich.markup import escape

from households.core.context import ImportContext
from households.core.exceptions import UnreadableInput
from households.core.pipeline import Pipeline, build_context
from households.registry import HouseholdIndex

console = Console()
err_console = Console(stderr=True)


def load_households(
    path: Path,
    *,
    skip_header: bool = False,
    verbose: bool = False,
) -> Tuple[HouseholdIndex, ImportContext]:
    """
    Run a full import; exit with status 1 if the input cannot be read.
    """
    t0 = time.perf_counter()

    ctx = build_context(path, skip_header=skip_header)
    try:
        index = Pipeline(ctx).run()
    except UnreadableInput as exc:
        err_console.print(f"[red]Error:[/red] {exc} ({escape(str(path))})")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(f"Imported {ctx.stats['records_imported']} record(s) in {elapsed:.2f}s")
        for error in ctx.errors:
            err_console.log(f"Rejected: {error}", markup=False)

    return index, ctx
