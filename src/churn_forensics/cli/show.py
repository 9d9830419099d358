"""Show CLI command -- commit table of a single file."""

import json
from pathlib import Path

import typer
from rich.table import Table

from ..exceptions import ChurnForensicsError
from ..miner import FILE_LINK_PREFIX, FileDetails
from . import app
from ._common import console, input_argument, run_analysis


@app.command()
def show(
    input_path: Path = input_argument(),
    file: str = typer.Argument(
        ...,
        help="File name or 'fileName.<hash>' link",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Show added and deleted lines per commit for one file.

    [bold cyan]Examples:[/bold cyan]

      churn-forensics show commits.json src/app.py

      churn-forensics show commits.json fileName.-1523436528
    """
    result = run_analysis(input_path)
    repository = result.repository

    try:
        if file.startswith(FILE_LINK_PREFIX) and file not in repository:
            details = FileDetails(file, repository)
        else:
            details = FileDetails.for_file(repository.get(file))
    except ChurnForensicsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    rows = details.rows()
    fs = details.file_statistics

    if json_output:
        payload = {
            "file": fs.file_name,
            "link": fs.link,
            "commits": [
                {
                    "commit_id": row.commit_id,
                    "author": row.author,
                    "added_lines": row.added_lines,
                    "deleted_lines": row.deleted_lines,
                }
                for row in rows
            ],
        }
        print(json.dumps(payload, indent=2))
        return

    table = Table(title=details.display_name, pad_edge=True)
    table.add_column("Commit", style="cyan")
    table.add_column("Author")
    table.add_column("Added", justify="right", style="green")
    table.add_column("Deleted", justify="right", style="red")

    for row in rows:
        table.add_row(row.commit_id, row.author, f"+{row.added_lines}", f"-{row.deleted_lines}")

    console.print()
    console.print(table)
    if fs.previous_names:
        console.print(f"  [dim]previously: {', '.join(fs.previous_names)}[/dim]")
    if fs.is_deleted:
        console.print("  [yellow]deleted in its last change[/yellow]")
    console.print()
