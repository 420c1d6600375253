"""Client for the external smell prediction service.

The service receives a JSON array of metrics reports and answers with
``{"predictions": [{"Brain Class": 0, "God Class": 1, ...}]}``. The last
prediction is taken as the answer for the file just analysed.

Failures are logged and surfaced as ``None``; callers treat a missing
prediction as "no smells detected". No request is retried.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from ..analysis.smells import SmellFlags
from ..config.defaults import API_KEY_ENV, PREDICTION_URL_ENV
from ..config.settings import Settings
from ..core.exceptions import PredictionServiceError
from ..core.reports import MetricsReport, latest_report_path, load_report, load_reports


class PredictionClient:
    """Sends metrics reports to the prediction service."""

    TIMEOUT_SECONDS = 30.0
    METRICS_ENDPOINT = "/metrics"

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = TIMEOUT_SECONDS,
    ) -> None:
        """Initialize prediction client.

        Args:
            base_url: Service base URL (or DESIGN_SMELLS_PREDICTION_URL env var)
            api_key: API key (or DESIGN_SMELLS_API_KEY env var)
            timeout: Request timeout in seconds
        """
        self.base_url = (base_url or os.environ.get(PREDICTION_URL_ENV) or "").rstrip("/")
        self.api_key = api_key or os.environ.get(API_KEY_ENV)
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> PredictionClient:
        return cls(
            base_url=settings.prediction_url,
            api_key=settings.api_key,
            timeout=settings.timeout,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def check_status(self) -> bool:
        """Return True if the service answers its root endpoint."""
        if not self.base_url:
            logger.error("Prediction service URL is not configured")
            return False

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.base_url}/", headers=self._headers())
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Prediction service is not responding: {e}")
            return False

        logger.info("Connected to prediction service")
        return True

    async def _post_metrics(self, payload: list[dict[str, Any]]) -> dict[str, Any]:
        """POST a payload to the metrics endpoint.

        Raises:
            PredictionServiceError: If the request fails or the body is not JSON
        """
        url = f"{self.base_url}{self.METRICS_ENDPOINT}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, headers=self._headers(), json=payload)
                response.raise_for_status()
                return response.json()

        except httpx.TimeoutException as e:
            logger.error(f"Prediction service timeout after {self.timeout}s")
            raise PredictionServiceError(
                f"Prediction request timed out after {self.timeout} seconds"
            ) from e

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            error_msg = f"Prediction service error (HTTP {status_code})"
            if status_code in (401, 403):
                error_msg = f"Prediction service rejected the API key. Please check {API_KEY_ENV}."
            elif status_code == 429:
                error_msg = "Prediction service rate limit exceeded."
            logger.error(error_msg)
            raise PredictionServiceError(error_msg, context={"status": status_code}) from e

        except httpx.HTTPError as e:
            logger.error(f"Error connecting to prediction service: {e}")
            raise PredictionServiceError(f"Prediction request failed: {e}") from e

        except ValueError as e:
            logger.error(f"Prediction service returned invalid JSON: {e}")
            raise PredictionServiceError("Prediction response is not valid JSON") from e

    @staticmethod
    def build_payload(reports: list[MetricsReport]) -> list[dict[str, Any]]:
        """Wire form of the reports, each tagged with its source file name."""
        payload = []
        for report in reports:
            data = report.to_wire()
            data["fileName"] = report.file_name
            payload.append(data)
        return payload

    async def predict_raw(self, reports: list[MetricsReport]) -> dict[str, Any] | None:
        """Send reports and return the raw response, or None on failure."""
        if not self.is_configured:
            logger.error(
                f"Cannot send metrics: set {PREDICTION_URL_ENV} and {API_KEY_ENV}"
            )
            return None
        if not reports:
            return None

        try:
            data = await self._post_metrics(self.build_payload(reports))
        except PredictionServiceError:
            return None

        logger.debug(f"Prediction response: {data}")
        return data

    async def predict(self, reports: list[MetricsReport]) -> SmellFlags | None:
        """Send reports and return the flags of the last prediction."""
        return SmellFlags.from_response(await self.predict_raw(reports))

    async def send_report_file(
        self, path: Path | None = None, results_dir: Path | None = None
    ) -> SmellFlags | None:
        """Send one saved report (default: the most recent in ``results_dir``)."""
        if path is None:
            if results_dir is None:
                return None
            path = latest_report_path(results_dir)
            if path is None:
                return None
            logger.info(f"Using most recent metrics file: {path}")

        report = load_report(path)
        if report is None:
            return None
        return await self.predict([report])

    async def send_all(
        self, results_dir: Path, delay: float = 0.1
    ) -> dict[str, SmellFlags]:
        """Send every readable report in a directory, one request per file.

        Returns:
            Mapping of report file name to flags, for files that got an answer
        """
        reports = load_reports(results_dir)
        answers: dict[str, SmellFlags] = {}
        for path, report in reports.items():
            flags = await self.predict([report])
            if flags is not None:
                answers[path.name] = flags
            if delay:
                await asyncio.sleep(delay)

        logger.info(f"Sent {len(answers)} out of {len(reports)} metrics files")
        return answers
