"""Console reporter for design metrics and smells."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from ..smells import SmellType

if TYPE_CHECKING:
    from ...core.reports import MetricsReport
    from ..smells import SmellFlags

console = Console()


class ConsoleReporter:
    """Console reporter for displaying analysis results in terminal."""

    def print_header(self, file_path: str) -> None:
        console.print(f"\n[bold blue]📐 Design Metrics[/bold blue] [dim]{file_path}[/dim]")
        console.print("━" * 60)

    def print_metrics(
        self, report: MetricsReport, highlighted: dict[str, float] | None = None
    ) -> None:
        """Print the metric values of one report.

        Args:
            report: Metrics report to display
            highlighted: Metrics to emphasise (past a highlight threshold)
        """
        highlighted = highlighted or {}

        if not report.metrics:
            console.print("  No metrics computed")
            console.print()
            return

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Metric", style="bold", width=10)
        table.add_column("Value", justify="right", width=10)

        for metric in report.metrics:
            value = _format_value(metric.value)
            if metric.name in highlighted:
                table.add_row(f"[red]{metric.name}[/red]", f"[red]{value}[/red]")
            else:
                table.add_row(metric.name, value)

        console.print(table)
        console.print()

    def print_smells(self, flags: SmellFlags, title: str = "Design Smells") -> None:
        """Print the flag of every smell.

        Args:
            flags: Smell flags to display
            title: Section title (local thresholds or prediction service)
        """
        console.print(f"[bold]{title}[/bold]")

        detected = set(flags.detected)
        for smell in SmellType:
            if smell in detected:
                console.print(f"  [red]●[/red] {smell.value}")
            else:
                console.print(f"  [dim]○ {smell.value}[/dim]")

        if not detected:
            console.print("  [green]✓ No design smells detected[/green]")
        console.print()

    def print_prediction(self, flags: SmellFlags | None) -> None:
        if flags is None:
            console.print("[yellow]No prediction available; treating as no smells[/yellow]")
            console.print()
            return
        self.print_smells(flags, title="Predicted Smells")


def _format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"
