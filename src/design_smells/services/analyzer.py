"""Analysis orchestration.

One analysis pass computes every metric of a file in order, writes the
metrics report and classifies it. Passes are serialised by a single
``AnalysisSlot``: a request made while another pass is running is
rejected at once with ``AnalysisInProgressError``.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from ..analysis.metrics import (
    Language,
    MetricName,
    get_calculator,
    metrics_for_language,
    parse_language,
    parse_metric,
)
from ..analysis.smells import SmellClassifier, SmellFlags
from ..config.defaults import get_language_from_extension
from ..config.settings import Settings
from ..core.exceptions import AnalysisInProgressError, UnknownMetricError
from ..core.reports import MetricsReport, save_report
from ..core.store import ComponentStore
from .prediction import PredictionClient


class AnalysisSlot:
    """Single-slot, non-blocking analysis lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._target: str | None = None

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @property
    def current(self) -> str | None:
        return self._target

    def acquire(self, target: str) -> None:
        """Take the slot or fail immediately.

        Raises:
            AnalysisInProgressError: If another analysis holds the slot
        """
        if not self._lock.acquire(blocking=False):
            raise AnalysisInProgressError(
                "Analysis is already running. Please wait...",
                context={"running": self._target, "requested": target},
            )
        self._target = target

    def release(self) -> None:
        self._target = None
        self._lock.release()

    @contextmanager
    def hold(self, target: str) -> Iterator[None]:
        self.acquire(target)
        try:
            yield
        finally:
            self.release()


@dataclass
class FileAnalysis:
    """Outcome of one analysis pass."""

    file_path: str
    language: Language
    report: MetricsReport
    local_smells: SmellFlags
    highlighted: dict[str, float] = field(default_factory=dict)
    predicted_smells: SmellFlags | None = None
    report_path: Path | None = None

    @property
    def metrics(self) -> dict[str, float]:
        return self.report.to_mapping()

    @property
    def remote_smells(self) -> SmellFlags:
        """Service verdict; no prediction counts as no smells."""
        return self.predicted_smells or SmellFlags()

    @property
    def smells(self) -> SmellFlags:
        """Service verdict when available, local thresholds otherwise."""
        if self.predicted_smells is not None:
            return self.predicted_smells
        return self.local_smells


def resolve_language(file_path: str, language: str | Language | None = None) -> Language:
    """Pick the calculator language from an explicit value or the extension.

    Raises:
        UnknownMetricError: If an explicit language has no calculators
    """
    if isinstance(language, Language):
        return language
    if language is None:
        language = get_language_from_extension(Path(file_path.replace("\\", "/")).suffix)

    parsed = parse_language(language)
    if parsed is None:
        raise UnknownMetricError(f"No calculators for language: {language}")
    return parsed


def resolve_metrics(
    language: Language, metrics: Sequence[str | MetricName] | None = None
) -> list[MetricName]:
    """Validate requested metric names, defaulting to the full list.

    Raises:
        UnknownMetricError: If a requested name is not a known metric
    """
    if not metrics:
        return metrics_for_language(language)

    resolved: list[MetricName] = []
    for metric in metrics:
        parsed = metric if isinstance(metric, MetricName) else parse_metric(metric)
        if parsed is None:
            raise UnknownMetricError(f"Unknown metric: {metric}")
        resolved.append(parsed)
    return resolved


class AnalysisService:
    """Computes, saves and classifies metrics for analysed files."""

    def __init__(
        self,
        store: ComponentStore,
        classifier: SmellClassifier | None = None,
        results_dir: Path | None = None,
        prediction_client: PredictionClient | None = None,
        slot: AnalysisSlot | None = None,
    ) -> None:
        self.store = store
        self.classifier = classifier or SmellClassifier()
        self.results_dir = results_dir
        self.prediction_client = prediction_client
        self.slot = slot or AnalysisSlot()

    @classmethod
    def from_settings(cls, settings: Settings) -> AnalysisService:
        client = PredictionClient.from_settings(settings) if settings.prediction_url else None
        return cls(
            store=ComponentStore.from_directory(settings.components_dir),
            classifier=SmellClassifier(settings.load_thresholds()),
            results_dir=settings.results_dir,
            prediction_client=client,
        )

    def reload_components(self, directory: Path) -> int:
        """Replace the store with a fresh read of a components directory."""
        with self.slot.hold(str(directory)):
            fresh = ComponentStore.from_directory(directory)
            self.store.replace_all(fresh)
            return len(fresh)

    def compute_metrics(
        self,
        file_path: str,
        language: Language,
        metrics: Sequence[MetricName] | None = None,
        root: Any = None,
    ) -> dict[str, float]:
        """Compute metrics one after another, in the given order.

        Calculators read a snapshot of the store taken when the pass starts.
        """
        store = self.store.snapshot()
        values: dict[str, float] = {}
        for metric in metrics or metrics_for_language(language):
            calculator = get_calculator(metric, language)
            if calculator is None:
                logger.debug(f"Skipping {metric.value}: not available for {language.value}")
                continue
            values[metric.value] = calculator.calculate(root, store, file_path)
        return values

    def _analyze(
        self,
        file_path: str,
        language: str | Language | None,
        metrics: Sequence[str | MetricName] | None,
        root: Any,
        save: bool,
    ) -> FileAnalysis:
        resolved_language = resolve_language(file_path, language)
        resolved_metrics = resolve_metrics(resolved_language, metrics)

        logger.info(f"Analyzing {resolved_language.value} file: {file_path}")
        values = self.compute_metrics(file_path, resolved_language, resolved_metrics, root)
        report = MetricsReport.from_values(file_path, values)

        path = None
        if save and self.results_dir is not None:
            path = save_report(report, self.results_dir)

        classification = self.classifier.classify_with_highlights(values)
        return FileAnalysis(
            file_path=file_path,
            language=resolved_language,
            report=report,
            local_smells=classification.flags,
            highlighted=classification.highlighted,
            report_path=path,
        )

    def analyze_file(
        self,
        file_path: str,
        language: str | Language | None = None,
        metrics: Sequence[str | MetricName] | None = None,
        root: Any = None,
        save: bool = True,
    ) -> FileAnalysis:
        """Run one analysis pass for a file.

        Args:
            file_path: Path of the source file (matched against the store by name)
            language: Calculator language (default: from the file extension)
            metrics: Metrics to compute (default: all for the language)
            root: Optional syntax node spanning the class, for LOC
            save: Write the report to ``results_dir``

        Returns:
            FileAnalysis with the report and local smell flags

        Raises:
            AnalysisInProgressError: If another analysis is running
            UnknownMetricError: If a language or metric name is unknown
        """
        with self.slot.hold(file_path):
            return self._analyze(file_path, language, metrics, root, save)

    async def analyze_and_predict(
        self,
        file_path: str,
        language: str | Language | None = None,
        metrics: Sequence[str | MetricName] | None = None,
        root: Any = None,
        save: bool = True,
    ) -> FileAnalysis:
        """Analyse a file and ask the prediction service for its verdict.

        The slot is held until the prediction has returned.
        """
        with self.slot.hold(file_path):
            analysis = self._analyze(file_path, language, metrics, root, save)
            if self.prediction_client is not None:
                analysis.predicted_smells = await self.prediction_client.predict(
                    [analysis.report]
                )
                if analysis.predicted_smells is None:
                    logger.warning(f"No prediction for {file_path}; treating as no smells")
            return analysis
