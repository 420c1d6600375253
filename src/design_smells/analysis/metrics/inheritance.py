"""Inheritance metrics: DIT, NAS and PNAS.

Parent links are names only. Ancestors are resolved by name against the
classes currently held in the component store; a name that does not
resolve ends the chain without error.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ...core.models import ClassInfo, MethodInfo
from .base import ClassComponents, MetricCalculator, MetricName


def ancestor_chain(class_info: ClassInfo, known: Sequence[ClassInfo]) -> list[str]:
    """Return ancestor names from the direct parent upwards.

    The declared parent is always included. Each further ancestor must
    resolve by name among ``known``; cycles are cut.
    """
    by_name: dict[str, ClassInfo] = {}
    for cls in known:
        by_name.setdefault(cls.name, cls)

    chain: list[str] = []
    seen = {class_info.name}
    parent = class_info.parent
    while parent and parent not in seen:
        chain.append(parent)
        seen.add(parent)
        ancestor = by_name.get(parent)
        if ancestor is None:
            break
        parent = ancestor.parent
    return chain


class DepthOfInheritanceTree(MetricCalculator):
    """Number of ancestors of the primary class (0 without a parent)."""

    metric = MetricName.DIT

    def compute(self, components, root=None, store=None) -> float:
        primary = components.primary_class
        if primary is None or not primary.has_parent:
            return 0

        known = list(components.classes)
        if store is not None:
            known.extend(store.all_classes())

        chain = ancestor_chain(primary, known)
        logger.debug(f"[{self.name}] Ancestors of {primary.name}: {chain}")
        return len(chain)


def added_services(components: ClassComponents, tag: str = "NAS") -> list[MethodInfo]:
    """Public methods that are not constructors, overrides or accessors.

    Empty when the primary class declares no parent.
    """
    primary = components.primary_class
    if primary is None or not primary.has_parent:
        logger.debug(f"[{tag}] No ancestors found. {tag} = 0")
        return []

    methods = [m for m in components.methods if m.is_public]
    logger.debug(f"[{tag}] Public methods: {len(methods)}")

    methods = [m for m in methods if not m.is_constructor]
    logger.debug(f"[{tag}] Public non-constructor methods: {len(methods)}")

    methods = [m for m in methods if not m.is_overridden]
    logger.debug(f"[{tag}] Public non-constructor non-overridden methods: {len(methods)}")

    return [m for m in methods if not m.is_accessor]


class NumberOfAddedServices(MetricCalculator):
    """Public services a subclass adds on top of its parent."""

    metric = MetricName.NAS

    def compute(self, components, root=None, store=None) -> float:
        return len(added_services(components, tag=self.name))


class ProportionOfNewAddedServices(MetricCalculator):
    """NAS over the public non-constructor methods, rounded to 2 places."""

    metric = MetricName.PNAS

    def compute(self, components, root=None, store=None) -> float:
        added = added_services(components, tag=self.name)
        public = [
            m for m in components.methods if m.is_public and not m.is_constructor
        ]
        if not added or not public:
            return 0
        return round(len(added) / len(public), 2)
