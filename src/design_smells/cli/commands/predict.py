"""Predict command: send saved metrics reports to the prediction service."""

import asyncio
from pathlib import Path

import typer
from rich.table import Table

from ...analysis.reporters import ConsoleReporter
from ...analysis.smells import SmellType
from ...config.defaults import API_KEY_ENV, PREDICTION_URL_ENV
from ...core.exceptions import ConfigError
from ...services.prediction import PredictionClient
from ..context import load_settings
from ..output import console, print_error, print_json, print_warning


def main(
    ctx: typer.Context,
    report_file: Path | None = typer.Argument(
        None, help="Metrics report to send (default: most recent in the results directory)"
    ),
    send_all: bool = typer.Option(
        False, "--all", "-a", help="Send every report in the results directory"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results in JSON format"),
) -> None:
    """🌐 Send metrics reports to the prediction service.

    [bold cyan]Examples:[/bold cyan]

    [green]Send the most recent report:[/green]
        $ design-smells predict

    [green]Send every report:[/green]
        $ design-smells predict --all
    """
    try:
        settings = load_settings(ctx)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    client = PredictionClient.from_settings(settings)
    if not client.is_configured:
        print_error(f"Prediction service not configured: set {PREDICTION_URL_ENV} and {API_KEY_ENV}")
        raise typer.Exit(1)

    if send_all:
        answers = asyncio.run(client.send_all(settings.results_dir))
        if json_output:
            print_json({name: flags.to_dict() for name, flags in answers.items()})
            return

        if not answers:
            print_warning("No predictions received")
            raise typer.Exit(1)

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Report", style="bold")
        for smell in SmellType:
            table.add_column(smell.value, justify="center")
        for name, flags in answers.items():
            detected = set(flags.detected)
            table.add_row(
                name, *["[red]●[/red]" if smell in detected else "[dim]○[/dim]" for smell in SmellType]
            )
        console.print(table)
        return

    if report_file is not None and not report_file.exists():
        print_error(f"Metrics report not found: {report_file}")
        raise typer.Exit(1)

    flags = asyncio.run(client.send_report_file(report_file, settings.results_dir))
    if json_output:
        print_json(flags.to_dict() if flags is not None else None)
    else:
        ConsoleReporter().print_prediction(flags)

    if flags is None:
        raise typer.Exit(1)
