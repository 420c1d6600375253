"""Weight Of a Class (WOC).

The share of a class's public interface that provides behaviour rather
than data access::

    WOC = 1 - accessor_interface / total_public_interface

Public non-constructor methods form the denominator and the accessors
among them the numerator. Public fields that are not encapsulated count
in both.
"""

from __future__ import annotations

from loguru import logger

from .base import MetricCalculator, MetricName


class WeightOfAClass(MetricCalculator):
    """Functional share of the public interface; 0 when it is empty."""

    metric = MetricName.WOC

    def compute(self, components, root=None, store=None) -> float:
        total_public = 0
        accessor_interface = 0

        for method in components.methods:
            if method.is_constructor or not method.is_public:
                continue
            total_public += 1
            if method.is_accessor:
                accessor_interface += 1

        for f in components.fields:
            if f.is_public and not f.is_encapsulated:
                total_public += 1
                accessor_interface += 1
                logger.debug(f"[{self.name}] Public non-encapsulated field: {f.name}")

        logger.debug(
            f"[{self.name}] totalPublicInterface: {total_public}, "
            f"accessorInterface: {accessor_interface}"
        )
        if total_public == 0:
            return 0
        return 1 - accessor_interface / total_public
