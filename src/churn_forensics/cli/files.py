"""Files CLI command -- per-file churn ranking."""

import json
from pathlib import Path
from typing import Optional

import click
import typer
from rich.table import Table

from ..miner import FileStatistics
from . import app
from ._common import console, format_time, get_config, input_argument, run_analysis

_SORT_KEYS = {
    "churn": lambda fs: (-fs.absolute_churn, fs.file_name),
    "commits": lambda fs: (-fs.number_of_commits, fs.file_name),
    "authors": lambda fs: (-fs.number_of_authors, fs.file_name),
    "name": lambda fs: fs.file_name,
}


def rank_files(
    files: list[FileStatistics], sort_by: str, limit: int, show_deleted: bool = True
) -> list[FileStatistics]:
    """Order files by the given key and keep the first ``limit``."""
    if not show_deleted:
        files = [fs for fs in files if not fs.is_deleted]
    return sorted(files, key=_SORT_KEYS[sort_by])[:limit]


@app.command()
def files(
    ctx: typer.Context,
    input_path: Path = input_argument(),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        help="Number of files to list (default from config: 20)",
        min=1,
    ),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        "-s",
        help="Sort order: churn | commits | authors | name",
        click_type=click.Choice(list(_SORT_KEYS), case_sensitive=False),
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    List files ranked by churn, commit count or number of authors.

    [bold cyan]Examples:[/bold cyan]

      churn-forensics files commits.json

      churn-forensics files commits.json --sort authors --top 5
    """
    settings = get_config(ctx)
    limit = top if top is not None else settings.top_files
    sort_by = sort.lower() if sort else settings.sort_by

    result = run_analysis(input_path)
    ranked = rank_files(result.repository.all(), sort_by, limit, settings.show_deleted)

    if json_output:
        _output_json(ranked)
    else:
        _output_rich(ranked, len(result.repository))


def _output_json(ranked: list[FileStatistics]) -> None:
    payload = [
        {
            "file": fs.file_name,
            "link": fs.link,
            "commits": fs.number_of_commits,
            "authors": fs.number_of_authors,
            "added_lines": fs.total_added_lines,
            "deleted_lines": fs.total_deleted_lines,
            "absolute_churn": fs.absolute_churn,
            "created": fs.creation_time,
            "last_modified": fs.last_modification_time,
            "deleted": fs.is_deleted,
            "previous_names": fs.previous_names,
        }
        for fs in ranked
    ]
    print(json.dumps(payload, indent=2))


def _output_rich(ranked: list[FileStatistics], total: int) -> None:
    table = Table(title=f"Files ({len(ranked)} of {total})", pad_edge=True)
    table.add_column("File", style="bold")
    table.add_column("Link", style="dim")
    table.add_column("Commits", justify="right")
    table.add_column("Authors", justify="right")
    table.add_column("Added", justify="right", style="green")
    table.add_column("Deleted", justify="right", style="red")
    table.add_column("Churn", justify="right", style="yellow")
    table.add_column("Last change", style="cyan")
    table.add_column("", style="dim")

    for fs in ranked:
        status = "deleted" if fs.is_deleted else ""
        if fs.previous_names:
            status = (status + " renamed").strip()
        table.add_row(
            fs.file_name,
            fs.link,
            str(fs.number_of_commits),
            str(fs.number_of_authors),
            f"+{fs.total_added_lines}",
            f"-{fs.total_deleted_lines}",
            str(fs.absolute_churn),
            format_time(fs.last_modification_time),
            status,
        )

    console.print()
    console.print(table)
    console.print()
