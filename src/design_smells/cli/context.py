"""Settings resolution shared by CLI commands."""

from pathlib import Path

import typer

from ..config.defaults import get_default_settings_path
from ..config.settings import Settings


def get_project_root(ctx: typer.Context) -> Path:
    if ctx.obj and ctx.obj.get("project_root"):
        return Path(ctx.obj["project_root"])
    return Path.cwd()


def load_settings(ctx: typer.Context) -> Settings:
    """Project settings from ``.design-smells/settings.yaml`` plus environment."""
    root = get_project_root(ctx)
    return Settings.load(get_default_settings_path(root), project_root=root)
