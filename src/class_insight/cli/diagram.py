"""Diagram command: PlantUML class diagram text."""

from pathlib import Path
from typing import Optional

import typer

from ..api import analyze as run_analysis
from ..api import render
from ..exceptions import ClassInsightError
from ..logging_config import get_logger, setup_logging
from ..sources import DirectoryLoader
from . import app
from ._common import CONFIG_OPTION, PATH_ARGUMENT, console, fail, resolve_config

logger = get_logger(__name__)


@app.command()
def diagram(
    path: Path = PATH_ARGUMENT,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the diagram to this file instead of stdout",
        dir_okay=False,
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Render a PlantUML class diagram.

    [bold cyan]Examples:[/bold cyan]

      class-insight diagram path/to/project

      class-insight diagram . -o classes.puml
    """
    try:
        settings = resolve_config(config=config, verbose=verbose)
    except ClassInsightError as e:
        fail(e)
        return
    setup_logging(settings.verbosity)

    try:
        loader = DirectoryLoader(path, settings)
        text = render(run_analysis(loader.list_files(), loader, settings), settings)
    except ClassInsightError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        fail(e)
        return

    if output is None:
        typer.echo(text, nl=False)
        return

    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot write {output}: {e}")
        raise typer.Exit(1)
    console.print(f"Wrote [green]{output}[/green]")
