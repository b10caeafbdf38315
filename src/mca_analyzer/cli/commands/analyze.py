"""
Analyze command - ratios, risk score, alerts and insights for one company.
"""
import json
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mca_analyzer.analytics.chart_data import liquidity_series, working_capital_series
from mca_analyzer.analytics.formatting import format_number
from mca_analyzer.analytics.models import AlertSeverity, RiskLevel, ScorecardBand
from mca_analyzer.config.schema import AnalysisConfig, AppConfig
from mca_analyzer.ingestion.loader import DataLoadError, load_financial_data
from mca_analyzer.reporting.report import FinancialReport, build_report
from mca_analyzer.reporting.summary_builder import (
    NEGATIVE,
    POSITIVE,
    SummaryRow,
    build_key_metrics_rows,
    build_valuation_rows,
)
from mca_analyzer.utils.log_setup import LogPhases, log_context

console = Console()

# Module-level defaults for typer arguments
DATA_ARGUMENT = typer.Argument(
    ...,
    help="Path to financial data JSON file",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)
COGS_OPTION = typer.Option(
    None,
    "--cogs",
    min=0.0,
    max=100.0,
    help="Estimated COGS as % of revenue (default: from config)",
)
MULTIPLIER_OPTION = typer.Option(
    None,
    "--multiplier",
    help="Health scorecard threshold multiplier (default: from config)",
)
TARGET_OPTION = typer.Option(
    None,
    "--target",
    help="Current ratio target for liquidity insights (default: from config)",
)
BENCHMARK_OPTION = typer.Option(
    None,
    "--benchmark",
    help="Cash conversion cycle benchmark in days (default: from config)",
)
JSON_OUT_OPTION = typer.Option(
    None,
    "--json-out",
    "-o",
    help="Also write the report as JSON to this path",
    dir_okay=False,
)
DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    help="Validate input without performing analysis",
)

_TONE_STYLES = {POSITIVE: "green", NEGATIVE: "red"}
_RISK_STYLES = {RiskLevel.LOW: "green", RiskLevel.MEDIUM: "yellow", RiskLevel.HIGH: "red"}
_ALERT_STYLES = {
    AlertSeverity.CRITICAL: "bold red",
    AlertSeverity.WARNING: "yellow",
    AlertSeverity.INFO: "cyan",
    AlertSeverity.SUCCESS: "green",
}
_BAND_STYLES = {
    ScorecardBand.EXCELLENT: "green",
    ScorecardBand.MODERATE: "yellow",
    ScorecardBand.CONCERNING: "red",
}


def resolve_analysis_config(base: AnalysisConfig, overrides: dict) -> AnalysisConfig:
    """
    Apply CLI overrides on top of the loaded analysis settings.

    Raises:
        typer.BadParameter: If an override fails validation
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return base
    try:
        return AnalysisConfig(**{**base.model_dump(), **overrides})
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors())
        raise typer.BadParameter(problems) from e


def _rows_table(title: str, rows: list[SummaryRow]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")
    for row in rows:
        style = _TONE_STYLES.get(row.tone, "")
        table.add_row(row.label, f"[{style}]{row.value}[/{style}]" if style else row.value)
    return table


def render_report(report: FinancialReport) -> None:
    """Print the report to the console."""
    console.print(_rows_table("Key Metrics", build_key_metrics_rows(report.data, report.metrics)))
    console.print(f"[dim]{report.insights['key_metrics']}[/dim]\n")

    valuation_rows = build_valuation_rows(report.data)
    if valuation_rows:
        console.print(_rows_table("Valuation & Shareholding", valuation_rows))
        console.print()

    risk_style = _RISK_STYLES[report.risk.level]
    console.print(
        Panel(
            f"[bold {risk_style}]{report.risk.score}/100[/bold {risk_style}]  "
            f"{report.risk.level.value.upper()} RISK",
            title="Risk Score",
            expand=False,
        )
    )

    console.print("\n[bold cyan]Alerts:[/bold cyan]")
    if not report.alerts:
        console.print("  [dim]No alerts[/dim]")
    for alert in report.alerts:
        style = _ALERT_STYLES[alert.severity]
        console.print(f"  {alert.icon} [{style}]{alert.message}[/{style}]")
    console.print()

    scorecard_table = Table(title="Financial Health Scorecard", show_header=True, header_style="bold cyan")
    scorecard_table.add_column("Ratio", style="dim")
    scorecard_table.add_column("Value", justify="right")
    scorecard_table.add_column("Low", justify="right")
    scorecard_table.add_column("High", justify="right")
    for row in report.scorecard.rows:
        style = _BAND_STYLES[row.band]
        scorecard_table.add_row(
            row.label,
            f"[{style}]{format_number(row.value, 2)}[/{style}]",
            format_number(row.low, 2),
            format_number(row.high, 2),
        )
    console.print(scorecard_table)
    console.print(f"[dim]{report.insights['health_scorecard']}[/dim]\n")

    liquidity_table = Table(title="Liquidity vs Target", show_header=True, header_style="bold cyan")
    liquidity_table.add_column("Ratio", style="dim")
    liquidity_table.add_column("Value", justify="right")
    liquidity_table.add_column("Target", justify="right")
    for point in liquidity_series(report.metrics, report.parameters["liquidity_target"]):
        mark = "[green]✓[/green]" if point.meets_target else "[red]✗[/red]"
        liquidity_table.add_row(point.label, f"{format_number(point.value, 2)} {mark}", format_number(point.target, 2))
    console.print(liquidity_table)
    console.print(f"[dim]{report.insights['liquidity']}[/dim]\n")

    cycle_table = Table(title="Working Capital Cycle", show_header=True, header_style="bold cyan")
    cycle_table.add_column("Component", style="dim")
    cycle_table.add_column("Days", justify="right")
    for point in working_capital_series(report.metrics):
        cycle_table.add_row(point.label, format_number(point.value, 0))
    console.print(cycle_table)
    console.print(f"[dim]{report.insights['working_capital']}[/dim]\n")

    console.print("[bold cyan]Insights:[/bold cyan]")
    for section in ("profit_loss", "asset_composition", "liability_composition"):
        title = section.replace("_", " ").title()
        console.print(f"  [bold]{title}:[/bold] {report.insights[section]}")
    console.print()


def analyze_cmd(
    ctx: typer.Context,
    data_path: Path = DATA_ARGUMENT,
    cogs: float | None = COGS_OPTION,
    multiplier: float | None = MULTIPLIER_OPTION,
    target: float | None = TARGET_OPTION,
    benchmark: float | None = BENCHMARK_OPTION,
    json_out: Path | None = JSON_OUT_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
):
    """
    Analyze a company's financial statement JSON.

    Prints key metrics, the 0-100 risk score, prioritized alerts, the
    health scorecard and per-section insights.

    Example:
        mca-analyzer analyze data/company.json --cogs 70
    """
    console.print("\n[bold cyan]MCA Analyzer - Analyze Command[/bold cyan]\n")

    app_config: AppConfig = (ctx.obj or {}).get("config") or AppConfig()
    analysis_config = resolve_analysis_config(
        app_config.analysis,
        {
            "cogs_percentage": cogs,
            "threshold_multiplier": multiplier,
            "liquidity_target": target,
            "working_capital_benchmark": benchmark,
        },
    )

    try:
        with log_context(phase=LogPhases.LOADING):
            data = load_financial_data(data_path)
    except DataLoadError as e:
        console.print(f"[bold red]✗[/bold red] {e!s}", style="red")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✓[/green] Loaded data for [bold]{data.company_name}[/bold]")

    if dry_run:
        console.print("[yellow]Dry run:[/yellow] input validation passed, skipping analysis.")
        return

    report = build_report(data, analysis_config)
    console.print()
    render_report(report)

    if json_out:
        with log_context(company=data.company_name, phase=LogPhases.REPORTING):
            json_out.parent.mkdir(parents=True, exist_ok=True)
            json_out.write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
            logger.info("Report written to {}", json_out)
        console.print(f"[green]✓[/green] Report saved to {json_out}")
