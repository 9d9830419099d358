"""CLI entry point -- registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..exceptions import ChurnForensicsError
from ..logging_config import setup_logging
from ._common import console, resolve_config

app = typer.Typer(
    name="churn-forensics",
    help="Churn Forensics - code churn and change-risk statistics from commit history",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        is_eager=True,
    ),
):
    """
    Aggregate commit records into churn statistics.

    Input is a JSON array of per-file commit records as written by a
    version-control miner.
    """
    if version:
        console.print(
            f"[bold cyan]Churn Forensics[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
    except ChurnForensicsError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    setup_logging(settings)

    ctx.ensure_object(dict)
    ctx.obj["config"] = settings


def main() -> None:
    app()


# Import subcommands to register them
from .summary import summary as _summary  # noqa: F401, E402
from .files import files as _files  # noqa: F401, E402
from .show import show as _show  # noqa: F401, E402
