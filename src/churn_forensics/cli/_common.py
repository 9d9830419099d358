"""Shared CLI helpers."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..api import MinerResult, analyze
from ..config import ForensicsConfig, load_config
from ..exceptions import InputError
from ..logging_config import get_logger
from ..miner import ReportLog, load_commits

console = Console()


def input_argument():
    return typer.Argument(
        ...,
        help="JSON file with the miner's commit records",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> ForensicsConfig:
    """Build settings from CLI options."""
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def get_config(ctx: typer.Context) -> ForensicsConfig:
    if ctx.obj and "config" in ctx.obj:
        return ctx.obj["config"]
    return ForensicsConfig()


def run_analysis(input_path: Path) -> MinerResult:
    """Load commit records and fold them, exiting with code 1 on bad input."""
    try:
        commits = load_commits(input_path)
    except InputError as e:
        console.print(f"[red]Error reading commits:[/red] {e}")
        raise typer.Exit(1)

    return analyze(commits, ReportLog(get_logger("cli")))


def format_time(timestamp: Optional[int]) -> str:
    if timestamp is None:
        return "-"
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
