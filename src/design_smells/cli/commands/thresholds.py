"""CLI commands for smell threshold configuration."""

import typer
import yaml

from ...config.thresholds import ThresholdConfig
from ...core.exceptions import ConfigError
from ..context import load_settings
from ..output import console, print_error, print_json, print_success, print_warning

thresholds_app = typer.Typer(
    help="📏 Show or initialize smell thresholds",
    no_args_is_help=True,
)


@thresholds_app.command()
def show(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Print the thresholds in effect (file values over defaults)."""
    try:
        settings = load_settings(ctx)
        config = settings.load_thresholds()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if json_output:
        print_json(config.to_dict())
        return

    source = settings.thresholds_path if settings.thresholds_path.exists() else "defaults"
    console.print(f"[bold]Thresholds[/bold] [dim]({source})[/dim]")
    console.print(
        yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False),
        markup=False,
        highlight=False,
    )


@thresholds_app.command()
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default thresholds to the project's threshold file."""
    try:
        settings = load_settings(ctx)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    path = settings.thresholds_path
    if path.exists() and not force:
        print_warning(f"Threshold file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(1)

    ThresholdConfig().save(path)
    print_success(f"Wrote default thresholds to {path}")
