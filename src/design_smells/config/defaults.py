"""Default configurations for design-smells."""

from pathlib import Path

# Project-local data directory
DEFAULT_DATA_DIR = Path(".design-smells")
COMPONENTS_DIR_NAME = "components"
RESULTS_DIR_NAME = "results"
THRESHOLDS_FILE_NAME = "thresholds.yaml"
SETTINGS_FILE_NAME = "settings.yaml"

# Language mappings for calculators
LANGUAGE_MAPPINGS: dict[str, str] = {
    ".java": "java",
    ".py": "python",
    ".pyw": "python",
}

DEFAULT_LANGUAGE = "java"

# Prediction service
DEFAULT_PREDICTION_TIMEOUT = 30.0
PREDICTION_URL_ENV = "DESIGN_SMELLS_PREDICTION_URL"
API_KEY_ENV = "DESIGN_SMELLS_API_KEY"
RESULTS_DIR_ENV = "DESIGN_SMELLS_RESULTS_DIR"
COMPONENTS_DIR_ENV = "DESIGN_SMELLS_COMPONENTS_DIR"


def get_language_from_extension(extension: str) -> str:
    """Get language name from a file extension, defaulting to Java."""
    return LANGUAGE_MAPPINGS.get(extension.lower(), DEFAULT_LANGUAGE)


def get_default_components_dir(project_root: Path) -> Path:
    return project_root / DEFAULT_DATA_DIR / COMPONENTS_DIR_NAME


def get_default_results_dir(project_root: Path) -> Path:
    return project_root / DEFAULT_DATA_DIR / RESULTS_DIR_NAME


def get_default_thresholds_path(project_root: Path) -> Path:
    return project_root / DEFAULT_DATA_DIR / THRESHOLDS_FILE_NAME


def get_default_settings_path(project_root: Path) -> Path:
    return project_root / DEFAULT_DATA_DIR / SETTINGS_FILE_NAME
