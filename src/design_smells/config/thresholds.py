"""Threshold configuration for design smell detection."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import ConfigError


@dataclass
class SmellThresholds:
    """Thresholds for the local smell predicates."""

    # Brain class: long and complex
    brain_class_loc: int = 50  # LOC > 50
    brain_class_wmc: int = 15  # WMC > 15

    # God class: very complex, non-cohesive, uses foreign data
    god_class_wmc: int = 47  # WMC >= 47
    god_class_tcc: float = 0.33  # TCC < 1/3
    god_class_atfd: int = 5  # ATFD > FEW

    # Data class: mostly accessors, little behaviour
    data_class_woc: float = 0.33  # WOC < 1/3
    data_class_public_low: int = 2  # NOPA + NOAM > 2 ...
    data_class_wmc_low: int = 31  # ... and WMC < 31
    data_class_public_high: int = 4  # or NOPA + NOAM > 4 ...
    data_class_wmc_high: int = 47  # ... and WMC < 47

    # Schizophrenic class: many methods in disjoint groups
    schizophrenic_nom: int = 7  # NOM >= 7
    schizophrenic_tcc: float = 0.33  # TCC < 1/3
    schizophrenic_woc: float = 0.5  # WOC >= 0.5


@dataclass
class HighlightThresholds:
    """Thresholds for highlighting metrics that contribute to a smell."""

    god_class_wmc: int = 19  # WMC >= 19
    brain_class_loc: int = 50  # LOC > 50
    brain_class_wmc: int = 15  # WMC > 15


@dataclass
class ThresholdConfig:
    """Complete threshold configuration."""

    smells: SmellThresholds = field(default_factory=SmellThresholds)
    highlight: HighlightThresholds = field(default_factory=HighlightThresholds)

    @classmethod
    def load(cls, path: Path) -> ThresholdConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ThresholdConfig instance (defaults when the file is absent)

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read threshold file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid threshold file {path}: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThresholdConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            ThresholdConfig instance

        Raises:
            ConfigError: If a section is not a mapping, holds unknown keys
                or has a non-numeric value
        """
        if not isinstance(data, dict):
            raise ConfigError("Threshold configuration must be a mapping")

        smells_data = data.get("smells") or {}
        highlight_data = data.get("highlight") or {}

        for section, values in (("smells", smells_data), ("highlight", highlight_data)):
            if not isinstance(values, dict):
                raise ConfigError(f"Threshold section '{section}' must be a mapping")
            for key, value in values.items():
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigError(
                        f"Threshold {section}.{key} must be a number, got {value!r}",
                        context={"key": f"{section}.{key}"},
                    )

        try:
            return cls(
                smells=SmellThresholds(**smells_data),
                highlight=HighlightThresholds(**highlight_data),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid threshold configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "smells": asdict(self.smells),
            "highlight": asdict(self.highlight),
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            path: Path to save configuration
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
