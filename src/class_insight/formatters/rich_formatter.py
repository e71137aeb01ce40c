"""Rich terminal formatter for Class Insight."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..architecture.metrics import ZONE_PAIN, ZONE_USELESSNESS
from ..models import AnalysisResult, TypeReport
from .base import BaseFormatter


def _zone_label(zone: str) -> str:
    if zone == ZONE_PAIN:
        return "[red]pain[/red]"
    elif zone == ZONE_USELESSNESS:
        return "[yellow]uselessness[/yellow]"
    else:
        return "[green]main sequence[/green]"


def _distance_label(distance: float) -> str:
    if distance >= 0.7:
        return f"[red]{distance:.2f}[/red]"
    elif distance >= 0.4:
        return f"[yellow]{distance:.2f}[/yellow]"
    else:
        return f"{distance:.2f}"


def _kind_label(report: TypeReport) -> str:
    label = report.kind.value
    if report.singleton:
        label += " [magenta](singleton)[/magenta]"
    return label


class RichFormatter(BaseFormatter):
    """File table, type table and global abstractness."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        self._print_files(result)
        self._print_types(result)
        self._print_summary(result)

    def format(self, result: AnalysisResult) -> str:
        with self.console.capture() as capture:
            self.render(result)
        return capture.get()

    def _print_files(self, result: AnalysisResult) -> None:
        table = Table(title="Files", show_lines=False)
        table.add_column("File", style="cyan")
        table.add_column("Size", justify="right")
        table.add_column("Complexity", justify="right")
        for name, metrics in sorted(result.files.items()):
            table.add_row(name, str(metrics.size), str(metrics.complexity))
        self.console.print(table)

        if result.failed_files:
            self.console.print(
                f"[yellow]Skipped {len(result.failed_files)} unreadable file(s):[/yellow] "
                + ", ".join(result.failed_files)
            )

    def _print_types(self, result: AnalysisResult) -> None:
        if not result.has_types:
            self.console.print("[yellow]No types found[/yellow]")
            return

        table = Table(title="Types")
        table.add_column("Type", style="bold")
        table.add_column("Kind")
        table.add_column("Ca", justify="right")
        table.add_column("Ce", justify="right")
        table.add_column("A", justify="right")
        table.add_column("I", justify="right")
        table.add_column("D", justify="right")
        table.add_column("Zone")
        for name, report in sorted(result.types.items()):
            m = report.metrics
            table.add_row(
                name,
                _kind_label(report),
                str(m.ca),
                str(m.ce),
                f"{m.abstractness:.0f}",
                f"{m.instability:.2f}",
                _distance_label(m.distance),
                _zone_label(m.zone),
            )
        self.console.print(table)

    def _print_summary(self, result: AnalysisResult) -> None:
        self.console.print(
            f"[bold]Abstractness (A):[/bold] {result.abstractness:.2f}  "
            f"[dim]{len(result.types)} types in {len(result.files)} files[/dim]"
        )
        if result.skipped_declarations:
            self.console.print(
                f"[dim]{result.skipped_declarations} malformed declaration(s) skipped[/dim]"
            )
