"""Main CLI entry point for design-smells."""

import sys
from pathlib import Path

import typer
from loguru import logger

from .. import __version__
from .commands import analyze, classify, predict, status
from .commands.thresholds import thresholds_app

app = typer.Typer(
    name="design-smells",
    help="📐 Object-oriented design metrics and smell detection",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command("analyze")(analyze.main)
app.command("classify")(classify.main)
app.command("predict")(predict.main)
app.command("status")(status.main)
app.add_typer(thresholds_app, name="thresholds")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route loguru output to stderr at the requested level."""
    logger.remove()
    if quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        level = "WARNING"
    logger.add(sys.stderr, level=level)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"design-smells {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging, including metric traces"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    project_root: Path | None = typer.Option(
        None,
        "--project-root",
        "-p",
        help="Project root holding .design-smells/ (default: current directory)",
        file_okay=False,
        dir_okay=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """📐 Compute OO design metrics from extracted components and flag smells."""
    configure_logging(verbose=verbose, quiet=quiet)
    ctx.obj = {"project_root": project_root or Path.cwd()}


if __name__ == "__main__":
    app()
