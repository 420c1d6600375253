"""Status command: data directories and prediction service reachability."""

import asyncio

import typer
from rich.table import Table

from ...core.exceptions import ConfigError
from ...services.prediction import PredictionClient
from ..context import load_settings
from ..output import console, print_error, print_success, print_warning


def main(ctx: typer.Context) -> None:
    """📊 Show data directories and check the prediction service."""
    try:
        settings = load_settings(ctx)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    components = (
        len(list(settings.components_dir.glob("*.json")))
        if settings.components_dir.exists()
        else 0
    )
    reports = (
        len(list(settings.results_dir.glob("*.json"))) if settings.results_dir.exists() else 0
    )

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Components", f"{settings.components_dir} ({components} files)")
    table.add_row("Reports", f"{settings.results_dir} ({reports} files)")
    table.add_row("Thresholds", str(settings.thresholds_path))
    table.add_row("Prediction URL", settings.prediction_url or "[dim]not configured[/dim]")
    table.add_row("API key", "set" if settings.api_key else "[dim]not set[/dim]")
    console.print(table)
    console.print()

    if not settings.prediction_url:
        print_warning("Prediction service URL is not configured")
        raise typer.Exit(1)

    reachable = asyncio.run(PredictionClient.from_settings(settings).check_status())
    if reachable:
        print_success("Prediction service is reachable")
    else:
        print_error("Prediction service is not responding")
        raise typer.Exit(1)
