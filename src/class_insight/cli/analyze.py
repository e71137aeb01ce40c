"""Analysis command: metrics tables or JSON."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..api import analyze as run_analysis
from ..exceptions import ClassInsightError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..sources import DirectoryLoader
from . import app
from ._common import CONFIG_OPTION, PATH_ARGUMENT, fail, resolve_config

logger = get_logger(__name__)


@app.command()
def analyze(
    path: Path = PATH_ARGUMENT,
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (tables) or json",
        click_type=click.Choice(["rich", "json"], case_sensitive=False),
    ),
    config: Optional[Path] = CONFIG_OPTION,
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers for the body reference pass",
        min=1,
        max=32,
    ),
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
        help="Suppress logging",
    ),
):
    """
    Analyze types, relationships and coupling metrics.

    [bold cyan]Examples:[/bold cyan]

      class-insight analyze path/to/project

      class-insight analyze . --format json > metrics.json
    """
    try:
        settings = resolve_config(config=config, workers=workers, verbose=verbose, quiet=quiet)
    except ClassInsightError as e:
        fail(e)
        return
    setup_logging(settings.verbosity)

    try:
        formatter = get_formatter(fmt.lower())
        loader = DirectoryLoader(path, settings)
        result = run_analysis(loader.list_files(), loader, settings)
        formatter.render(result)

    except typer.Exit:
        raise
    except ClassInsightError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        fail(e)
