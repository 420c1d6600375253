"""Classify command: local smell flags for a saved metrics report."""

from pathlib import Path

import typer

from ...analysis.reporters import ConsoleReporter
from ...analysis.smells import SmellClassifier
from ...core.exceptions import ConfigError
from ...core.reports import load_report
from ..context import load_settings
from ..output import print_error, print_json


def main(
    ctx: typer.Context,
    report_file: Path = typer.Argument(..., help="Metrics report JSON file"),
    json_output: bool = typer.Option(False, "--json", help="Output results in JSON format"),
) -> None:
    """🧪 Classify a saved metrics report with the local thresholds."""
    report = load_report(report_file)
    if report is None:
        print_error(f"Could not read metrics report: {report_file}")
        raise typer.Exit(1)

    try:
        thresholds = load_settings(ctx).load_thresholds()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    classification = SmellClassifier(thresholds).classify_with_highlights(report.to_mapping())

    if json_output:
        print_json(
            {
                "file": report.full_path,
                "smells": classification.flags.to_dict(),
                "highlighted": classification.highlighted,
            }
        )
        return

    reporter = ConsoleReporter()
    reporter.print_header(report.full_path)
    reporter.print_metrics(report, classification.highlighted)
    reporter.print_smells(classification.flags)
