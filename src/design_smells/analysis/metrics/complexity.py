"""Weighted method complexity: WMC and AMW.

A method weighs 1 plus one per decision construct recorded in its
flattened body tags. When the primary class is abstract, methods that
carry no body and are neither constructors nor accessors (or that are
marked abstract) are treated as abstract and skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from ...core.models import ClassInfo, MethodInfo
from .base import ClassComponents, MetricCalculator, MetricName

DECISION_TYPES = frozenset(
    {
        "if_statement",
        "for_statement",
        "while_statement",
        "do_statement",
        "switch_statement",
        "case",
        "catch_clause",
        "condition",
        "ternary_expression",
        "logical_expression",
    }
)


def method_weight(method: MethodInfo, decision_types: Iterable[str] = DECISION_TYPES) -> int:
    """Return 1 + the number of decision tags in the method body."""
    decisions = frozenset(decision_types)
    return 1 + sum(1 for tag in method.method_body if tag in decisions)


def abstract_method_names(
    methods: Sequence[MethodInfo], class_info: ClassInfo | None
) -> set[str]:
    """Names of methods treated as abstract in an abstract class."""
    if class_info is None or not class_info.is_abstract:
        return set()

    names: set[str] = set()
    for method in methods:
        declared_abstract = method.is_abstract or "abstract" in method.modifiers
        bodiless = (
            not method.method_body
            and not method.is_constructor
            and not method.is_accessor
        )
        if declared_abstract or bodiless:
            names.add(method.name)
            logger.debug(f"[WMC] Identified abstract method: {method.name}")
    return names


def concrete_methods(components: ClassComponents) -> list[MethodInfo]:
    skipped = abstract_method_names(components.methods, components.primary_class)
    return [m for m in components.methods if m.name not in skipped]


class WeightedMethodCount(MetricCalculator):
    """Sum of method weights over concrete methods."""

    metric = MetricName.WMC

    def compute(self, components, root=None, store=None) -> float:
        primary = components.primary_class
        logger.debug(
            f"[{self.name}] Class is abstract: {primary.is_abstract if primary else None}"
        )

        total = 0
        for method in concrete_methods(components):
            weight = method_weight(method)
            total += weight
            logger.debug(
                f"[{self.name}] Complexity for {method.name}: {weight}, running total: {total}"
            )
        return total


class AverageMethodWeight(MetricCalculator):
    """WMC divided by the number of concrete methods, rounded to 2 places."""

    metric = MetricName.AMW

    def compute(self, components, root=None, store=None) -> float:
        methods = concrete_methods(components)
        if not methods:
            return 0
        total = sum(method_weight(m) for m in methods)
        return round(total / len(methods), 2)
