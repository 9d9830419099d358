"""Summary CLI command -- repository-wide commit totals."""

import json
from pathlib import Path

import typer
from rich.table import Table

from . import app
from ._common import console, input_argument, run_analysis


@app.command()
def summary(
    input_path: Path = input_argument(),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Show repository-wide totals for a set of commit records.

    [bold cyan]Examples:[/bold cyan]

      churn-forensics summary commits.json

      churn-forensics summary commits.json --json
    """
    result = run_analysis(input_path)
    stats = result.commit_statistics

    if json_output:
        payload = {
            "commits": stats.commit_count,
            "authors": stats.author_count,
            "files": len(result.repository),
            "added_lines": stats.added_lines,
            "deleted_lines": stats.deleted_lines,
            "lines_of_code": stats.lines_of_code,
            "absolute_churn": stats.absolute_churn,
            "modify": stats.modify_count,
            "rename": stats.rename_count,
            "delete": stats.delete_count,
            "add": stats.add_count,
            "report": result.report.info_messages,
        }
        print(json.dumps(payload, indent=2))
        return

    console.print()
    for line in result.report.info_messages:
        console.print(f"  {line}", highlight=False)
    console.print()

    table = Table(title="Repository Totals", show_header=False, pad_edge=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Commits", str(stats.commit_count))
    table.add_row("Authors", str(stats.author_count))
    table.add_row("Files", str(len(result.repository)))
    table.add_row("Added lines", f"[green]+{stats.added_lines}[/green]")
    table.add_row("Deleted lines", f"[red]-{stats.deleted_lines}[/red]")
    table.add_row("Net lines of code", str(stats.lines_of_code))
    table.add_row("Absolute churn", str(stats.absolute_churn))
    table.add_row("Added / Modified", f"{stats.add_count} / {stats.modify_count}")
    table.add_row("Renamed / Deleted", f"{stats.rename_count} / {stats.delete_count}")

    console.print(table)
    console.print()
