"""Base interface for metric calculators.

Every calculator resolves the file's ``ClassGroup``s from the component
store, flattens their classes, methods and fields into one
``ClassComponents`` view and derives its value from that view alone.
Calculators hold no state between calls, so one instance may be reused
across files and metrics may be computed in any order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from loguru import logger

from ...core.models import ClassInfo, FieldInfo, MethodInfo
from ...core.store import ComponentStore


class Language(str, Enum):
    """Source languages with a calculator set."""

    JAVA = "java"
    PYTHON = "python"


class MetricName(str, Enum):
    """Closed set of metric identifiers."""

    LOC = "LOC"
    WMC = "WMC"
    WOC = "WOC"
    TCC = "TCC"
    DAC = "DAC"
    FDP = "FDP"
    NAS = "NAS"
    NOAM = "NOAM"
    DIT = "DIT"
    NOA = "NOA"
    NOM = "NOM"
    NOPA = "NOPA"
    NABSM = "NAbsm"
    NPROTM = "NProtM"
    AMW = "AMW"
    CBO = "CBO"
    PNAS = "PNAS"
    ATFD = "ATFD"
    CC = "CC"


@dataclass(frozen=True)
class ClassComponents:
    """Flattened classes, methods and fields of one file."""

    classes: tuple[ClassInfo, ...] = field(default_factory=tuple)
    methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    fields: tuple[FieldInfo, ...] = field(default_factory=tuple)

    @property
    def primary_class(self) -> ClassInfo | None:
        """The first declared class (or interface) of the file."""
        return self.classes[0] if self.classes else None

    @property
    def class_name(self) -> str | None:
        primary = self.primary_class
        return primary.name if primary else None

    @property
    def is_empty(self) -> bool:
        return not (self.classes or self.methods or self.fields)


def collect_components(
    store: ComponentStore | None, file_name: str, tag: str = "METRIC"
) -> ClassComponents:
    """Flatten every class group stored for a file.

    Args:
        store: Component store to query (None counts as empty)
        file_name: Path or name of the analysed source file
        tag: Metric name used to prefix log lines

    Returns:
        ClassComponents, empty when the store has no entry for the file
    """
    parsed = store.get_by_file_name(file_name) if store is not None else None
    if parsed is None:
        logger.debug(f"[{tag}] No parsed components found for {file_name}")
        return ClassComponents()

    classes: list[ClassInfo] = []
    methods: list[MethodInfo] = []
    fields: list[FieldInfo] = []
    for group in parsed.classes:
        classes.extend(group.classes)
        methods.extend(group.methods)
        fields.extend(group.fields)

    logger.debug(
        f"[{tag}] Found {len(parsed.classes)} class groups in {file_name}: "
        f"{len(classes)} classes, {len(methods)} methods, {len(fields)} fields"
    )
    return ClassComponents(tuple(classes), tuple(methods), tuple(fields))


def _row(point: Any) -> int | None:
    if point is None:
        return None
    if isinstance(point, tuple):
        return point[0]
    if isinstance(point, Mapping):
        return point.get("row")
    return getattr(point, "row", None)


def node_span(node: Any) -> tuple[int, int] | None:
    """Return the (start_row, end_row) of a syntax node, if it has one.

    Accepts model records (``start_position``), tree-sitter nodes
    (``start_point``) and plain mappings with camelCase keys.
    """
    if node is None:
        return None

    for start_key, end_key in (
        ("start_position", "end_position"),
        ("start_point", "end_point"),
        ("startPosition", "endPosition"),
    ):
        if isinstance(node, Mapping):
            start, end = node.get(start_key), node.get(end_key)
        else:
            start, end = getattr(node, start_key, None), getattr(node, end_key, None)
        start_row, end_row = _row(start), _row(end)
        if start_row is not None and end_row is not None:
            return start_row, end_row
    return None


class MetricCalculator(ABC):
    """Computes one metric for one file.

    Subclasses set ``metric`` (and ``language`` when not Java) and
    implement ``compute``.
    """

    metric: ClassVar[MetricName]
    language: ClassVar[Language] = Language.JAVA

    @property
    def name(self) -> str:
        return self.metric.value

    def calculate(
        self, root: Any, store: ComponentStore | None, file_name: str
    ) -> float:
        """Compute the metric for a file.

        Args:
            root: Optional syntax node spanning the class (used by LOC only)
            store: Component store holding the file's extracted components
            file_name: Path or name of the analysed source file

        Returns:
            Metric value; 0 when the store holds no evidence
        """
        logger.debug(f"[{self.name}] Starting calculation for {file_name}")
        components = collect_components(store, file_name, tag=self.name)
        value = self.compute(components, root=root, store=store)
        logger.debug(f"[{self.name}] Final {self.name} value for {file_name}: {value}")
        return value

    @abstractmethod
    def compute(
        self,
        components: ClassComponents,
        root: Any = None,
        store: ComponentStore | None = None,
    ) -> float:
        """Derive the metric from flattened components."""
        ...
