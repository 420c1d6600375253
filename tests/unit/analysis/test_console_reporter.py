"""Unit tests for the console reporter."""

import pytest
from rich.console import Console

from design_smells.analysis.reporters import ConsoleReporter, console as console_module
from design_smells.analysis.smells import SmellFlags
from design_smells.core.reports import MetricsReport


@pytest.fixture
def recording_console(monkeypatch) -> Console:
    recorder = Console(record=True, width=100)
    monkeypatch.setattr(console_module, "console", recorder)
    return recorder


class TestConsoleReporter:
    def test_print_metrics(self, recording_console):
        report = MetricsReport.from_values("/src/Account.java", {"LOC": 40, "TCC": 0.33})
        ConsoleReporter().print_metrics(report, {"LOC": 40})

        text = recording_console.export_text()
        assert "LOC" in text
        assert "40" in text
        assert "0.33" in text

    def test_print_smells(self, recording_console):
        ConsoleReporter().print_smells(SmellFlags(god_class=True))
        text = recording_console.export_text()
        assert "God Class" in text
        assert "No design smells" not in text

    def test_print_missing_prediction(self, recording_console):
        ConsoleReporter().print_prediction(None)
        assert "No prediction available" in recording_console.export_text()
