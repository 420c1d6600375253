"""Design smell classification from a metric vector.

The local classifier evaluates fixed threshold predicates over
``{metric_name: value}``. A predicate that needs a metric missing from
the vector evaluates to False. The prediction service answers with the
same four labels; ``SmellFlags.from_response`` reads its answer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from loguru import logger

from ..config.thresholds import ThresholdConfig
from .metrics.base import MetricName


class SmellType(str, Enum):
    """Design smells reported to consumers."""

    BRAIN_CLASS = "Brain Class"
    GOD_CLASS = "God Class"
    DATA_CLASS = "Data Class"
    SCHIZOPHRENIC_CLASS = "Schizophrenic Class"


# Labels used by the prediction service (note its spelling of Schizophrenic)
PREDICTION_LABELS: dict[str, SmellType] = {
    "Brain Class": SmellType.BRAIN_CLASS,
    "God Class": SmellType.GOD_CLASS,
    "Data Class": SmellType.DATA_CLASS,
    "Schizofrenic Class": SmellType.SCHIZOPHRENIC_CLASS,
    "Schizophrenic Class": SmellType.SCHIZOPHRENIC_CLASS,
}


@dataclass(frozen=True)
class SmellFlags:
    """One boolean flag per design smell."""

    brain_class: bool = False
    god_class: bool = False
    data_class: bool = False
    schizophrenic_class: bool = False

    @property
    def detected(self) -> list[SmellType]:
        flags = {
            SmellType.BRAIN_CLASS: self.brain_class,
            SmellType.GOD_CLASS: self.god_class,
            SmellType.DATA_CLASS: self.data_class,
            SmellType.SCHIZOPHRENIC_CLASS: self.schizophrenic_class,
        }
        return [smell for smell, flagged in flags.items() if flagged]

    @property
    def has_smells(self) -> bool:
        return bool(self.detected)

    def to_dict(self) -> dict[str, bool]:
        return {smell.value: smell in self.detected for smell in SmellType}

    @classmethod
    def from_prediction(cls, prediction: Mapping[str, Any]) -> SmellFlags:
        """Build flags from one prediction object (``{"God Class": 1, ...}``).

        Unknown keys such as ``fileName`` are ignored.
        """
        values: dict[SmellType, bool] = {}
        for label, smell in PREDICTION_LABELS.items():
            if label in prediction:
                values[smell] = bool(prediction[label])
        return cls(
            brain_class=values.get(SmellType.BRAIN_CLASS, False),
            god_class=values.get(SmellType.GOD_CLASS, False),
            data_class=values.get(SmellType.DATA_CLASS, False),
            schizophrenic_class=values.get(SmellType.SCHIZOPHRENIC_CLASS, False),
        )

    @classmethod
    def from_response(cls, response: Mapping[str, Any] | None) -> SmellFlags | None:
        """Read the last element of a response's ``predictions`` array.

        Returns:
            Flags for the current file, or None when the response holds no
            usable prediction
        """
        if not isinstance(response, Mapping):
            return None
        predictions = response.get("predictions")
        if not isinstance(predictions, list) or not predictions:
            return None
        last = predictions[-1]
        if not isinstance(last, Mapping):
            logger.warning(f"Unexpected prediction entry: {last!r}")
            return None
        return cls.from_prediction(last)


@dataclass
class Classification:
    """Local classification result with the metrics that drove it."""

    flags: SmellFlags
    highlighted: dict[str, float] = field(default_factory=dict)


def _value(metrics: Mapping[str, float], metric: MetricName) -> float | None:
    value = metrics.get(metric.value)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class SmellClassifier:
    """Threshold-based smell classifier.

    Example:
        classifier = SmellClassifier()
        flags = classifier.classify({"LOC": 120, "WMC": 22})
        assert flags.brain_class
    """

    def __init__(self, thresholds: ThresholdConfig | None = None) -> None:
        self.thresholds = thresholds or ThresholdConfig()

    def classify(self, metrics: Mapping[str, float]) -> SmellFlags:
        flags = SmellFlags(
            brain_class=self.is_brain_class(metrics),
            god_class=self.is_god_class(metrics),
            data_class=self.is_data_class(metrics),
            schizophrenic_class=self.is_schizophrenic_class(metrics),
        )
        logger.debug(f"Local smell flags: {[s.value for s in flags.detected]}")
        return flags

    def classify_with_highlights(self, metrics: Mapping[str, float]) -> Classification:
        return Classification(
            flags=self.classify(metrics),
            highlighted=self.highlighted_metrics(metrics),
        )

    def is_brain_class(self, metrics: Mapping[str, float]) -> bool:
        t = self.thresholds.smells
        loc = _value(metrics, MetricName.LOC)
        wmc = _value(metrics, MetricName.WMC)
        if loc is None or wmc is None:
            return False
        return loc > t.brain_class_loc and wmc > t.brain_class_wmc

    def is_god_class(self, metrics: Mapping[str, float]) -> bool:
        t = self.thresholds.smells
        wmc = _value(metrics, MetricName.WMC)
        tcc = _value(metrics, MetricName.TCC)
        atfd = _value(metrics, MetricName.ATFD)
        if wmc is None or tcc is None or atfd is None:
            return False
        return wmc >= t.god_class_wmc and tcc < t.god_class_tcc and atfd > t.god_class_atfd

    def is_data_class(self, metrics: Mapping[str, float]) -> bool:
        t = self.thresholds.smells
        woc = _value(metrics, MetricName.WOC)
        nopa = _value(metrics, MetricName.NOPA)
        noam = _value(metrics, MetricName.NOAM)
        wmc = _value(metrics, MetricName.WMC)
        if woc is None or nopa is None or noam is None or wmc is None:
            return False

        public_data = nopa + noam
        few_and_simple = public_data > t.data_class_public_low and wmc < t.data_class_wmc_low
        many_and_not_complex = (
            public_data > t.data_class_public_high and wmc < t.data_class_wmc_high
        )
        return woc < t.data_class_woc and (few_and_simple or many_and_not_complex)

    def is_schizophrenic_class(self, metrics: Mapping[str, float]) -> bool:
        t = self.thresholds.smells
        nom = _value(metrics, MetricName.NOM)
        tcc = _value(metrics, MetricName.TCC)
        woc = _value(metrics, MetricName.WOC)
        if nom is None or tcc is None or woc is None:
            return False
        return nom >= t.schizophrenic_nom and tcc < t.schizophrenic_tcc and woc >= t.schizophrenic_woc

    def highlighted_metrics(self, metrics: Mapping[str, float]) -> dict[str, float]:
        """Metrics past their highlight threshold, for pointing at a smell."""
        h = self.thresholds.highlight
        highlighted: dict[str, float] = {}

        wmc = _value(metrics, MetricName.WMC)
        loc = _value(metrics, MetricName.LOC)

        if wmc is not None and wmc >= h.god_class_wmc:
            highlighted[MetricName.WMC.value] = wmc
        if loc is not None and wmc is not None:
            if loc > h.brain_class_loc and wmc > h.brain_class_wmc:
                highlighted[MetricName.LOC.value] = loc
                highlighted[MetricName.WMC.value] = wmc
        return highlighted
