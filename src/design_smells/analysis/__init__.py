"""Design metric analysis.

Key Components:
    - metrics: one calculator per object-oriented design metric
    - smells: threshold classifier for Brain/God/Data/Schizophrenic classes
    - reporters: rich console output
"""

from .metrics import (
    ClassComponents,
    Language,
    MetricCalculator,
    MetricName,
    create_metric,
    get_calculator,
    metrics_for_language,
)
from .smells import Classification, SmellClassifier, SmellFlags, SmellType

__all__ = [
    "ClassComponents",
    "Language",
    "MetricCalculator",
    "MetricName",
    "create_metric",
    "get_calculator",
    "metrics_for_language",
    "Classification",
    "SmellClassifier",
    "SmellFlags",
    "SmellType",
]
