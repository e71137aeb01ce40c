"""CLI entry point; registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="class-insight",
    help="Class Insight - Structural analysis and class diagrams for Java sources",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        is_eager=True,
    ),
):
    """
    Reconstruct types and relationships from source files, compute
    coupling metrics and render PlantUML class diagrams.

    [bold cyan]Examples:[/bold cyan]

      class-insight analyze path/to/project

      class-insight analyze . --format json

      class-insight diagram . --output classes.puml
    """
    if version:
        console.print(f"[bold cyan]Class Insight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .diagram import diagram as _diagram  # noqa: F401, E402
