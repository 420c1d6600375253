"""Metrics reports and their per-file JSON persistence.

One report is written per analysed source file, named after the source
file's base name::

    {"fullPath": "...", "folderName": "Account.java", "metrics": [{"name": "WMC", "value": 12}]}

``folderName`` is the per-file key consumers list and look reports up by,
so it holds the source file's base name rather than its directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import orjson
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .exceptions import StoreError
from .store import base_name


class MetricValue(BaseModel):
    """A single named metric value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int | float


class MetricsReport(BaseModel):
    """Metrics computed for one source file."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel, extra="ignore"
    )

    full_path: str
    folder_name: str = ""
    metrics: list[MetricValue] = Field(default_factory=list)

    @classmethod
    def from_values(
        cls, full_path: str, values: Mapping[str, float]
    ) -> MetricsReport:
        """Build a report from an ordered name -> value mapping."""
        return cls(
            full_path=full_path,
            folder_name=Path(full_path.replace("\\", "/")).name,
            metrics=[MetricValue(name=name, value=value) for name, value in values.items()],
        )

    @property
    def file_name(self) -> str:
        """Base name of the source file including its extension."""
        return Path(self.full_path.replace("\\", "/")).name

    def to_mapping(self) -> dict[str, float]:
        return {metric.name: metric.value for metric in self.metrics}

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_wire(), option=orjson.OPT_INDENT_2)


def report_path(results_dir: Path, full_path: str) -> Path:
    return results_dir / f"{base_name(full_path)}.json"


def save_report(report: MetricsReport, results_dir: Path) -> Path:
    """Write a report to ``<results_dir>/<basename>.json``.

    Raises:
        StoreError: If the report cannot be written
    """
    target = report_path(results_dir, report.full_path)
    try:
        results_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(report.to_json())
    except OSError as e:
        raise StoreError(
            f"Failed to save metrics report to {target}: {e}",
            context={"path": str(target)},
        ) from e
    logger.debug(f"Saved metrics report: {target}")
    return target


def load_report(path: Path) -> MetricsReport | None:
    """Read a report file, returning None if it is missing, empty or malformed.

    A JSON array is accepted as well; its first element is used.
    """
    if not path.exists():
        logger.error(f"Metrics file not found: {path}")
        return None

    try:
        content = path.read_bytes().strip()
    except OSError as e:
        logger.warning(f"Cannot read metrics file {path}: {e}")
        return None
    if not content:
        logger.warning(f"The metrics file is empty: {path}")
        return None

    try:
        data = orjson.loads(content)
        if isinstance(data, list):
            if not data:
                logger.warning(f"The metrics file holds no reports: {path}")
                return None
            data = data[0]
        return MetricsReport.model_validate(data)
    except orjson.JSONDecodeError as e:
        logger.warning(f"Error parsing metrics file {path}: {e}")
    except ValidationError as e:
        logger.warning(f"Invalid metrics report in {path}: {e.error_count()} errors")
    return None


def load_reports(results_dir: Path) -> dict[Path, MetricsReport]:
    """Load every readable report in a directory, skipping bad files."""
    reports: dict[Path, MetricsReport] = {}
    if not results_dir.exists():
        logger.error(f"Results directory not found: {results_dir}")
        return reports

    for path in sorted(results_dir.glob("*.json")):
        report = load_report(path)
        if report is not None:
            reports[path] = report
    return reports


def latest_report_path(results_dir: Path) -> Path | None:
    """Return the most recently modified report file, if any."""
    if not results_dir.exists():
        return None

    files = list(results_dir.glob("*.json"))
    if not files:
        logger.info("No metrics files found in the results directory.")
        return None
    return max(files, key=lambda p: p.stat().st_mtime)
