"""Coupling metrics: DAC, FDP, CBO and ATFD.

DAC counts the distinct class types a class aggregates through its
fields. FDP and ATFD count the foreign classes whose data the class
reaches through its fields. CBO counts every foreign type a class
mentions in its signatures and locals.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from ...core.models import FieldInfo, MethodInfo, is_accessor_name
from .base import ClassComponents, MetricCalculator, MetricName
from .types import (
    is_foreign_type,
    is_library_type,
    param_type,
    referenced_type_names,
    split_generic,
)


def foreign_field_types(
    fields: Sequence[FieldInfo], current_class: str | None
) -> dict[str, str]:
    """Map field name -> declared type for fields of a foreign type."""
    mapping: dict[str, str] = {}
    for f in fields:
        if f.type and is_foreign_type(f.type, current_class):
            mapping[f.name] = f.type
            logger.debug(f"[COUPLING] Field of foreign type: {f.name} ({f.type})")
    return mapping


def split_access(entry: str) -> tuple[str, str]:
    """Split ``"object.member"`` into its object and member parts."""
    obj, _, member = entry.partition(".")
    return obj, member


class DataAbstractionCoupling(MetricCalculator):
    """Distinct non-library field types.

    Generic field types such as ``List<Book>`` are recognised and skipped
    without being counted. The scan stops at the first field that has no
    type and returns the count gathered so far.
    """

    metric = MetricName.DAC

    def compute(self, components, root=None, store=None) -> float:
        used_types: set[str] = set()

        for f in components.fields:
            if not f.type:
                logger.debug(
                    f"[{self.name}] Field {f.name} has no type, "
                    f"returning current DAC: {len(used_types)}"
                )
                return len(used_types)

            generic = split_generic(f.type)
            if generic is not None:
                container, element = generic
                logger.debug(
                    f"[{self.name}] Skipping generic type {f.type} "
                    f"(container: {container}, element: {element})"
                )
                continue

            if is_library_type(f.type):
                logger.debug(f"[{self.name}] Skipped {f.type} (primitive/library type)")
            elif f.type not in used_types:
                used_types.add(f.type)
                logger.debug(f"[{self.name}] Counted {f.type}")

        logger.debug(f"[{self.name}] Types counted: {sorted(used_types)}")
        return len(used_types)


class ForeignDataProviders(MetricCalculator):
    """Distinct foreign classes whose fields are accessed directly."""

    metric = MetricName.FDP

    def compute(self, components, root=None, store=None) -> float:
        class_name = components.class_name
        if not class_name:
            logger.debug(f"[{self.name}] No class found in current file")
            return 0

        field_types = foreign_field_types(components.fields, class_name)
        providers: set[str] = set()
        for method in components.methods:
            for entry in method.field_access:
                obj, _ = split_access(entry)
                if obj in field_types:
                    providers.add(field_types[obj])
                    logger.debug(
                        f"[{self.name}] Field access to foreign class "
                        f"{field_types[obj]} through {entry}"
                    )

        logger.debug(f"[{self.name}] Foreign data providers: {sorted(providers)}")
        return len(providers)


class AccessToForeignData(MetricCalculator):
    """Distinct foreign classes whose data is used by the class's methods.

    Counts direct field access (``owner.name``) and accessor calls
    (``owner.getName``) on foreign-typed fields, from methods that are
    neither constructors nor accessors themselves.
    """

    metric = MetricName.ATFD

    def compute(self, components, root=None, store=None) -> float:
        class_name = components.class_name
        if not class_name:
            return 0

        field_types = foreign_field_types(components.fields, class_name)
        if not field_types:
            return 0

        accessed: set[str] = set()
        for method in components.methods:
            if method.is_constructor or method.is_accessor:
                logger.debug(f"[{self.name}] Skipping {method.name}: constructor or accessor")
                continue

            for entry in method.field_access:
                obj, _ = split_access(entry)
                if obj in field_types:
                    accessed.add(field_types[obj])

            for call in method.method_calls:
                obj, member = split_access(call)
                if member and obj in field_types and is_accessor_name(member):
                    accessed.add(field_types[obj])

        logger.debug(f"[{self.name}] Foreign classes accessed: {sorted(accessed)}")
        return len(accessed)


def _signature_types(methods: Iterable[MethodInfo]) -> Iterable[str]:
    for method in methods:
        yield from method.local_variables
        yield from (param_type(p) for p in method.params)
        if method.return_type and method.return_type != "void":
            yield method.return_type


class CouplingBetweenObjects(MetricCalculator):
    """Distinct foreign types referenced by fields, locals, params and returns.

    Generic arguments are decomposed, so ``List<Book>`` couples to
    ``Book``. Library types and the class itself are excluded.
    """

    metric = MetricName.CBO

    def compute(self, components: ClassComponents, root=None, store=None) -> float:
        class_name = components.class_name
        texts = [f.type for f in components.fields if f.type]
        texts.extend(_signature_types(components.methods))

        coupled: set[str] = set()
        for text in texts:
            for name in referenced_type_names(text):
                if name == class_name or is_library_type(name):
                    continue
                coupled.add(name)

        logger.debug(f"[{self.name}] Coupled classes: {sorted(coupled)}")
        return len(coupled)
