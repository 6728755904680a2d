
from __future__ import annotations

import typer

from households.cli.commands.export import export_command
from households.cli.commands.report import report_command
from households.cli.commands.stats import stats_command

app = typer.Typer(
    name="households",
    help="Group person records into households and report occupant demographics",
    add_completion=False,
)

app.command("report")(report_command)
app.command("stats")(stats_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
