"""Typed exception hierarchy for design-smells.

Hierarchy
---------
DesignSmellsError (base)
├── ConfigError              – configuration / threshold loading errors
├── StoreError               – component store persistence errors
├── UnknownMetricError       – metric or language not in the registry
├── AnalysisError            – analysis orchestration failures
│   └── AnalysisInProgressError
└── PredictionServiceError   – external prediction service failures

Calculators never raise for empty evidence; these exceptions cover
initialisation problems and the orchestration boundary only.
"""

from typing import Any


class DesignSmellsError(Exception):
    """Base exception for design-smells."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(DesignSmellsError):
    """Configuration / validation errors."""

    pass


# ── Storage layer ───────────────────────────────────────────────────────


class StoreError(DesignSmellsError):
    """Component store could not be read or written."""

    pass


# ── Metrics layer ───────────────────────────────────────────────────────


class UnknownMetricError(DesignSmellsError):
    """Metric name or language is not known to the registry."""

    pass


# ── Analysis layer ──────────────────────────────────────────────────────


class AnalysisError(DesignSmellsError):
    """Analysis operation failed."""

    pass


class AnalysisInProgressError(AnalysisError):
    """Another analysis already holds the analysis slot.

    Raised immediately instead of queueing the request.
    """

    pass


# ── Prediction service ──────────────────────────────────────────────────


class PredictionServiceError(DesignSmellsError):
    """External prediction service request failed."""

    pass
