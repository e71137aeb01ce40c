"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..exceptions import ClassInsightError

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def fail(error: ClassInsightError) -> None:
    """Print *error* and exit with status 1."""
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)


PATH_ARGUMENT = typer.Argument(
    ...,
    help="Path to the source directory",
    exists=True,
    file_okay=False,
    dir_okay=True,
)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)
