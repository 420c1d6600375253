"""Shared rich output helpers for CLI commands."""

from typing import Any

import orjson
from rich.console import Console

console = Console()


def print_error(message: str) -> None:
    console.print(f"[red]✗ {message}[/red]")


def print_warning(message: str) -> None:
    console.print(f"[yellow]⚠ {message}[/yellow]")


def print_success(message: str) -> None:
    console.print(f"[green]✓ {message}[/green]")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ {message}[/blue]")


def print_json(data: Any) -> None:
    """Print data as indented JSON without rich markup."""
    console.print(
        orjson.dumps(data, option=orjson.OPT_INDENT_2).decode(),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
