"""
Main CLI application using Typer.
Provides entry point and command routing for MCA Analyzer.
"""
from pathlib import Path

import typer
from rich.console import Console

from mca_analyzer.cli.commands.analyze import analyze_cmd
from mca_analyzer.cli.commands.config import config_cmd
from mca_analyzer.cli.commands.sample import sample_cmd
from mca_analyzer.config.loader import ConfigLoader, ConfigurationError
from mca_analyzer.utils.log_setup import setup_logging

# Initialize Typer app
app = typer.Typer(
    name="mca-analyzer",
    help="MCA Analyzer - financial ratios, risk score and insights from MCA statement data",
    add_completion=False,
    rich_markup_mode="rich",
)

# Initialize Rich console for output
console = Console()


def version_callback(value: bool):
    """Display version information."""
    if value:
        from importlib.metadata import PackageNotFoundError, version

        try:
            app_version = version("mca-analyzer")
        except PackageNotFoundError:
            from mca_analyzer import __version__ as app_version

        console.print(f"[bold cyan]MCA Analyzer[/bold cyan] version [green]{app_version}[/green]")
        raise typer.Exit()


# Module-level typer options
VERSION_OPTION = typer.Option(
    None,
    "--version",
    "-v",
    callback=version_callback,
    is_eager=True,
    help="Show version and exit.",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to configuration file (default: ./config.yaml)",
    exists=True,
    dir_okay=False,
    readable=True,
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    help="Enable verbose output (DEBUG level logging)",
)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = VERSION_OPTION,
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    MCA Analyzer - ratio analysis of company financial statements.

    Use [bold cyan]mca-analyzer COMMAND --help[/bold cyan] for command-specific help.
    """
    loader = ConfigLoader(config_path=str(config)) if config else ConfigLoader()

    try:
        app_config = loader.load_config(validate=False)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration Error:[/bold red] {e!s}", style="red")
        console.print(
            "\n[yellow]Tip:[/yellow] Check your config.yaml file or use --config to specify a different path."
        )
        raise typer.Exit(code=1) from e

    ctx.obj = {
        "config_path": config,
        "config": app_config,
        "verbose": verbose,
    }

    try:
        setup_logging(
            log_level="DEBUG" if verbose else app_config.logging.level,
            log_dir=str(app_config.paths.logs_dir),
            console=app_config.logging.console,
            file=app_config.logging.file,
            retention_days=app_config.logging.retention_days,
        )
    except OSError as e:
        console.print(f"[bold red]Logging Setup Error:[/bold red] {e!s}", style="red")
        raise typer.Exit(code=1) from e


app.command(name="analyze")(analyze_cmd)
app.command(name="sample")(sample_cmd)
app.command(name="config")(config_cmd)


if __name__ == "__main__":
    app()
