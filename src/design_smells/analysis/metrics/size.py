"""Size and membership counts: LOC, NOA, NOM, NOPA, NAbsm, NProtM, NOAM."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ...core.models import MethodInfo
from ...core.store import ComponentStore
from .base import ClassComponents, MetricCalculator, MetricName, node_span


class LinesOfCode(MetricCalculator):
    """Lines spanned by the class body: ``end_row - start_row + 1``.

    The syntax node passed as ``root`` wins; otherwise the primary
    class's recorded span is used. Returns 0 when neither resolves.
    """

    metric = MetricName.LOC

    def compute(
        self,
        components: ClassComponents,
        root: Any = None,
        store: ComponentStore | None = None,
    ) -> float:
        span = node_span(root) or node_span(components.primary_class)
        if span is None:
            logger.debug(f"[{self.name}] No node or class span available")
            return 0
        start_row, end_row = span
        return end_row - start_row + 1


class NumberOfAttributes(MetricCalculator):
    """Number of declared fields."""

    metric = MetricName.NOA

    def compute(self, components, root=None, store=None) -> float:
        return len(components.fields)


class NumberOfMethods(MetricCalculator):
    """Number of methods, constructors excluded."""

    metric = MetricName.NOM

    def compute(self, components, root=None, store=None) -> float:
        return sum(1 for m in components.methods if not m.is_constructor)


class NumberOfPublicAttributes(MetricCalculator):
    """Public fields that are not encapsulated behind an accessor."""

    metric = MetricName.NOPA

    def compute(self, components, root=None, store=None) -> float:
        count = 0
        for f in components.fields:
            if f.is_public and not f.is_encapsulated:
                count += 1
                logger.debug(f"[{self.name}] Public attribute: {f.name}")
        return count


def is_abstract_method(method: MethodInfo) -> bool:
    return (
        method.is_abstract
        or "abstract" in method.modifiers
        or any("abstract" in a for a in method.annotations)
    )


class NumberOfAbstractMethods(MetricCalculator):
    """Methods declared abstract."""

    metric = MetricName.NABSM

    def compute(self, components, root=None, store=None) -> float:
        return sum(1 for m in components.methods if is_abstract_method(m))


class NumberOfProtectedMethods(MetricCalculator):
    """Methods with protected visibility."""

    metric = MetricName.NPROTM

    def compute(self, components, root=None, store=None) -> float:
        return sum(1 for m in components.methods if m.is_protected)


class NumberOfAccessorMethods(MetricCalculator):
    """Methods recognised as trivial getters or setters."""

    metric = MetricName.NOAM

    def compute(self, components, root=None, store=None) -> float:
        return sum(1 for m in components.methods if m.is_accessor)
