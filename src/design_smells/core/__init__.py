"""Core data model, component store and metrics reports."""

from .exceptions import (
    AnalysisError,
    AnalysisInProgressError,
    ConfigError,
    DesignSmellsError,
    PredictionServiceError,
    StoreError,
    UnknownMetricError,
)
from .models import ClassGroup, ClassInfo, FieldInfo, FileParsedComponents, MethodInfo, Position
from .reports import MetricsReport, MetricValue
from .store import ComponentStore

__all__ = [
    "AnalysisError",
    "AnalysisInProgressError",
    "ConfigError",
    "DesignSmellsError",
    "PredictionServiceError",
    "StoreError",
    "UnknownMetricError",
    "ClassGroup",
    "ClassInfo",
    "FieldInfo",
    "FileParsedComponents",
    "MethodInfo",
    "Position",
    "MetricsReport",
    "MetricValue",
    "ComponentStore",
]
