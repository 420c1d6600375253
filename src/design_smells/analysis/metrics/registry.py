"""Metric registry: maps (language, metric) to a calculator class.

The mapping is a static table over the closed ``Language`` and
``MetricName`` enums. String input is parsed into the enums once, at the
edge, by ``create_metric``.
"""

from __future__ import annotations

from loguru import logger

from .base import Language, MetricCalculator, MetricName
from .cohesion import TightClassCohesion
from .complexity import AverageMethodWeight, WeightedMethodCount
from .coupling import (
    AccessToForeignData,
    CouplingBetweenObjects,
    DataAbstractionCoupling,
    ForeignDataProviders,
)
from .inheritance import (
    DepthOfInheritanceTree,
    NumberOfAddedServices,
    ProportionOfNewAddedServices,
)
from .interface import WeightOfAClass
from .python import (
    PythonCyclomaticComplexity,
    PythonLinesOfCode,
    PythonNumberOfAccessorMethods,
    PythonNumberOfAttributes,
    PythonNumberOfMethods,
)
from .size import (
    LinesOfCode,
    NumberOfAbstractMethods,
    NumberOfAccessorMethods,
    NumberOfAttributes,
    NumberOfMethods,
    NumberOfProtectedMethods,
    NumberOfPublicAttributes,
)

# Insertion order is the default calculation order
CALCULATORS: dict[Language, dict[MetricName, type[MetricCalculator]]] = {
    Language.JAVA: {
        MetricName.LOC: LinesOfCode,
        MetricName.AMW: AverageMethodWeight,
        MetricName.CBO: CouplingBetweenObjects,
        MetricName.FDP: ForeignDataProviders,
        MetricName.DAC: DataAbstractionCoupling,
        MetricName.WMC: WeightedMethodCount,
        MetricName.WOC: WeightOfAClass,
        MetricName.NOA: NumberOfAttributes,
        MetricName.NOM: NumberOfMethods,
        MetricName.NOAM: NumberOfAccessorMethods,
        MetricName.NOPA: NumberOfPublicAttributes,
        MetricName.NABSM: NumberOfAbstractMethods,
        MetricName.NPROTM: NumberOfProtectedMethods,
        MetricName.NAS: NumberOfAddedServices,
        MetricName.PNAS: ProportionOfNewAddedServices,
        MetricName.TCC: TightClassCohesion,
        MetricName.DIT: DepthOfInheritanceTree,
        MetricName.ATFD: AccessToForeignData,
    },
    Language.PYTHON: {
        MetricName.LOC: PythonLinesOfCode,
        MetricName.CC: PythonCyclomaticComplexity,
        MetricName.NOA: PythonNumberOfAttributes,
        MetricName.NOM: PythonNumberOfMethods,
        MetricName.NOAM: PythonNumberOfAccessorMethods,
    },
}


def metrics_for_language(language: Language) -> list[MetricName]:
    """Supported metrics for a language, in default calculation order."""
    return list(CALCULATORS.get(language, {}))


def get_calculator(metric: MetricName, language: Language) -> MetricCalculator | None:
    """Instantiate the calculator for a metric, or None if unsupported."""
    calculator_cls = CALCULATORS.get(language, {}).get(metric)
    if calculator_cls is None:
        return None
    return calculator_cls()


def parse_language(language: str) -> Language | None:
    try:
        return Language(language.lower())
    except ValueError:
        return None


def parse_metric(metric_name: str) -> MetricName | None:
    """Parse a metric name, accepting any letter case (``nabsm`` -> NAbsm)."""
    for metric in MetricName:
        if metric.value.lower() == metric_name.lower():
            return metric
    return None


def create_metric(metric_name: str, language: str) -> MetricCalculator | None:
    """Create a calculator from string identifiers.

    Args:
        metric_name: Metric identifier, e.g. ``"WMC"``
        language: Language identifier, e.g. ``"java"``

    Returns:
        Calculator instance, or None for an unknown metric or language
    """
    parsed_language = parse_language(language)
    if parsed_language is None:
        logger.warning(f"No calculators for language: {language}")
        return None

    metric = parse_metric(metric_name)
    if metric is None:
        logger.warning(f"Unknown metric: {metric_name}")
        return None

    calculator = get_calculator(metric, parsed_language)
    if calculator is None:
        logger.debug(f"Metric {metric.value} is not available for {parsed_language.value}")
    return calculator
