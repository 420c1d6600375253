"""Analyze command for design-smells CLI."""

import asyncio

import typer
from loguru import logger

from ...analysis.reporters import ConsoleReporter
from ...core.exceptions import DesignSmellsError
from ...services.analyzer import AnalysisService, FileAnalysis
from ..context import load_settings
from ..output import print_error, print_info, print_json, print_warning


def main(
    ctx: typer.Context,
    files: list[str] = typer.Argument(
        ...,
        help="Source files to analyze (matched to extracted components by file name)",
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Calculator language (java, python); default from file extension",
        rich_help_panel="🔍 Filters",
    ),
    metrics: str | None = typer.Option(
        None,
        "--metrics",
        "-m",
        help="Comma-separated metrics to compute (default: all for the language)",
        rich_help_panel="🔍 Filters",
    ),
    predict: bool = typer.Option(
        False,
        "--predict",
        help="Also ask the prediction service for a verdict",
        rich_help_panel="🌐 Prediction",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results in JSON format",
        rich_help_panel="📊 Display Options",
    ),
) -> None:
    """📐 Compute design metrics and flag smells for source files.

    Components are read from [cyan].design-smells/components/[/cyan]; one
    metrics report per file is written to [cyan].design-smells/results/[/cyan].

    [bold cyan]Examples:[/bold cyan]

    [green]Analyze a Java file:[/green]
        $ design-smells analyze src/main/java/Account.java

    [green]Only a few metrics:[/green]
        $ design-smells analyze Account.java --metrics WMC,TCC,ATFD

    [green]Ask the prediction service too:[/green]
        $ design-smells analyze Account.java --predict
    """
    try:
        settings = load_settings(ctx)
        if not settings.components_dir.exists():
            print_warning(f"Components directory not found: {settings.components_dir}")

        service = AnalysisService.from_settings(settings)
        if predict and service.prediction_client is None:
            print_warning("Prediction service URL is not configured; using local thresholds")

        requested = [m.strip() for m in metrics.split(",") if m.strip()] if metrics else None

        results: list[FileAnalysis] = []
        for file_path in files:
            if predict:
                analysis = asyncio.run(
                    service.analyze_and_predict(file_path, language=language, metrics=requested)
                )
            else:
                analysis = service.analyze_file(file_path, language=language, metrics=requested)
            results.append(analysis)

    except DesignSmellsError as e:
        logger.error(f"Analysis failed: {e}")
        print_error(f"Analysis failed: {e}")
        raise typer.Exit(1)

    if json_output:
        predicted = predict and service.prediction_client is not None
        print_json([_to_json(analysis, predicted) for analysis in results])
        return

    reporter = ConsoleReporter()
    for analysis in results:
        reporter.print_header(analysis.file_path)
        reporter.print_metrics(analysis.report, analysis.highlighted)
        reporter.print_smells(analysis.local_smells, title="Local Thresholds")
        if predict and service.prediction_client is not None:
            reporter.print_prediction(analysis.predicted_smells)
        if analysis.report_path is not None:
            print_info(f"Report saved to {analysis.report_path}")


def _to_json(analysis: FileAnalysis, predicted: bool = False) -> dict:
    data = {
        "file": analysis.file_path,
        "language": analysis.language.value,
        "report": analysis.report.to_wire(),
        "smells": analysis.local_smells.to_dict(),
        "highlighted": analysis.highlighted,
    }
    if predicted:
        data["predicted"] = analysis.remote_smells.to_dict()
        data["verdict"] = analysis.smells.to_dict()
    return data
