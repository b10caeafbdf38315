"""
Config command - Display the resolved configuration.
"""
import typer
from rich.console import Console
from rich.table import Table

from mca_analyzer.config.schema import AppConfig

console = Console()


def _settings_table(title: str, rows: list[tuple[str, str]]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="dim")
    table.add_column("Value", style="green")
    for label, value in rows:
        table.add_row(label, value)
    return table


def config_cmd(ctx: typer.Context):
    """
    Display current configuration settings.

    Shows the merged configuration from all sources:
    - Environment variables (MCA_ prefix)
    - Config file from --config option
    - Default config.yaml
    - Built-in defaults (lowest priority)

    Example:
        mca-analyzer config
        mca-analyzer --config custom-config.yaml config
    """
    console.print("\n[bold cyan]MCA Analyzer - Configuration[/bold cyan]\n")

    obj = ctx.obj or {}
    config_path = obj.get("config_path")
    config: AppConfig = obj.get("config") or AppConfig()

    if config_path:
        console.print(f"[green]✓[/green] Using config file: [bold]{config_path}[/bold]\n")
    else:
        console.print("[green]✓[/green] Using default config: [bold]config.yaml[/bold]\n")

    console.print(
        _settings_table(
            "Analysis Configuration",
            [
                ("COGS Percentage", f"{config.analysis.cogs_percentage}%"),
                ("Threshold Multiplier", f"{config.analysis.threshold_multiplier}x"),
                ("Liquidity Target", str(config.analysis.liquidity_target)),
                ("Working Capital Benchmark", f"{config.analysis.working_capital_benchmark} days"),
                ("Max Alerts", str(config.analysis.max_alerts)),
            ],
        )
    )
    console.print()
    console.print(
        _settings_table(
            "Paths Configuration",
            [
                ("Output Directory", str(config.paths.output_dir)),
                ("Logs Directory", str(config.paths.logs_dir)),
                ("Today's Log File", str(config.get_log_file_path())),
            ],
        )
    )
    console.print()
    console.print(
        _settings_table(
            "Logging Configuration",
            [
                ("Level", config.logging.level),
                ("Console", str(config.logging.console)),
                ("File", str(config.logging.file)),
                ("Retention", f"{config.logging.retention_days} days"),
            ],
        )
    )
    console.print()
