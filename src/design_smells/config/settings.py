"""Runtime settings for design-smells."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import ConfigError
from .defaults import (
    API_KEY_ENV,
    COMPONENTS_DIR_ENV,
    DEFAULT_PREDICTION_TIMEOUT,
    PREDICTION_URL_ENV,
    RESULTS_DIR_ENV,
    get_default_components_dir,
    get_default_results_dir,
    get_default_thresholds_path,
)
from .thresholds import ThresholdConfig


@dataclass
class Settings:
    """Where components and reports live, and how to reach the classifier.

    Attributes:
        components_dir: Directory of extracted component JSON files
        results_dir: Directory metrics reports are written to
        thresholds_path: YAML file with smell thresholds
        prediction_url: Base URL of the prediction service (None disables it)
        api_key: Key sent as ``x-api-key`` to the prediction service
        timeout: Prediction request timeout in seconds
    """

    components_dir: Path
    results_dir: Path
    thresholds_path: Path
    prediction_url: str | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_PREDICTION_TIMEOUT

    @classmethod
    def for_project(cls, project_root: Path) -> Settings:
        """Default settings for a project, with environment overrides."""
        settings = cls(
            components_dir=get_default_components_dir(project_root),
            results_dir=get_default_results_dir(project_root),
            thresholds_path=get_default_thresholds_path(project_root),
        )
        return settings.with_environment()

    @classmethod
    def load(cls, path: Path, project_root: Path | None = None) -> Settings:
        """Load settings from YAML, filling gaps with project defaults.

        Raises:
            ConfigError: If the file cannot be read, is not valid YAML,
                holds unknown keys or has a non-numeric timeout
        """
        root = project_root or Path.cwd()
        if not path.exists():
            return cls.for_project(root)

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid settings file {path}: {e}") from e

        return cls.from_dict(data, root).with_environment()

    @classmethod
    def from_dict(cls, data: dict[str, Any], project_root: Path) -> Settings:
        if not isinstance(data, dict):
            raise ConfigError("Settings must be a mapping")

        known = {
            "components_dir",
            "results_dir",
            "thresholds_path",
            "prediction_url",
            "api_key",
            "timeout",
        }
        unknown = set(data) - known
        if unknown:
            raise ConfigError(
                f"Unknown settings: {', '.join(sorted(unknown))}",
                context={"unknown": sorted(unknown)},
            )

        def _path(key: str, default: Path) -> Path:
            value = data.get(key)
            if not value:
                return default
            path = Path(value)
            return path if path.is_absolute() else project_root / path

        timeout = data.get("timeout", DEFAULT_PREDICTION_TIMEOUT)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Invalid timeout {timeout!r}: expected a number of seconds",
                context={"timeout": timeout},
            ) from e

        return cls(
            components_dir=_path("components_dir", get_default_components_dir(project_root)),
            results_dir=_path("results_dir", get_default_results_dir(project_root)),
            thresholds_path=_path("thresholds_path", get_default_thresholds_path(project_root)),
            prediction_url=data.get("prediction_url"),
            api_key=data.get("api_key"),
            timeout=timeout,
        )

    def with_environment(self) -> Settings:
        """Apply ``DESIGN_SMELLS_*`` environment overrides."""
        if url := os.environ.get(PREDICTION_URL_ENV):
            self.prediction_url = url
        if key := os.environ.get(API_KEY_ENV):
            self.api_key = key
        if results := os.environ.get(RESULTS_DIR_ENV):
            self.results_dir = Path(results)
        if components := os.environ.get(COMPONENTS_DIR_ENV):
            self.components_dir = Path(components)
        return self

    def load_thresholds(self) -> ThresholdConfig:
        return ThresholdConfig.load(self.thresholds_path)
