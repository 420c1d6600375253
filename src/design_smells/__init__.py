"""design-smells - object-oriented design metrics and smell detection."""

__version__ = "0.3.0"

from .core.exceptions import (
    AnalysisError,
    AnalysisInProgressError,
    ConfigError,
    DesignSmellsError,
    PredictionServiceError,
    StoreError,
    UnknownMetricError,
)

__all__ = [
    "AnalysisError",
    "AnalysisInProgressError",
    "ConfigError",
    "DesignSmellsError",
    "PredictionServiceError",
    "StoreError",
    "UnknownMetricError",
    "__version__",
]
