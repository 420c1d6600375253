"""Tight Class Cohesion (TCC).

Two methods are cohesive when their ``fields_used`` sets share at least
one name. TCC is the fraction of cohesive unordered pairs among all
``n * (n - 1) / 2`` pairs of non-constructor methods.

``fields_used`` is the set of variable-declarator identifiers recorded by
the extractor, so shared local names count as shared fields. Thresholds
downstream were tuned against this approximation.
"""

from __future__ import annotations

from itertools import combinations

from loguru import logger

from .base import MetricCalculator, MetricName


class TightClassCohesion(MetricCalculator):
    """Ratio of cohesive method pairs, rounded to 2 decimal places.

    With zero or one non-constructor method the count itself (0 or 1) is
    returned rather than a ratio.
    """

    metric = MetricName.TCC

    def compute(self, components, root=None, store=None) -> float:
        methods = [m for m in components.methods if not m.is_constructor]
        n = len(methods)
        logger.debug(
            f"[{self.name}] Relevant methods: {n} "
            f"({', '.join(m.name for m in methods) or 'none'})"
        )

        if n <= 1:
            logger.debug(f"[{self.name}] Not enough methods ({n}). Returning {n}")
            return n

        used = [set(m.fields_used) for m in methods]
        cohesive_pairs = 0
        for (i, a), (j, b) in combinations(enumerate(used), 2):
            shared = a & b
            if shared:
                cohesive_pairs += 1
                logger.debug(
                    f"[{self.name}] {methods[i].name} and {methods[j].name} "
                    f"share {sorted(shared)}"
                )

        max_pairs = n * (n - 1) / 2
        tcc = cohesive_pairs / max_pairs
        logger.debug(f"[{self.name}] Raw TCC: {tcc} = {cohesive_pairs} / {max_pairs}")
        return round(tcc, 2)
