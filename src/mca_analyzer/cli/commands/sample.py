"""
Sample command - write the bundled sample dataset as JSON.
"""
from pathlib import Path

import typer
from rich.console import Console

from mca_analyzer.config.schema import AppConfig
from mca_analyzer.ingestion.loader import save_financial_data
from mca_analyzer.ingestion.sample_data import build_sample_data

console = Console()

SAMPLE_FILENAME = "sample_financial_data.json"

OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help=f"Where to write the sample JSON (default: <paths.output_dir>/{SAMPLE_FILENAME})",
    dir_okay=False,
)


def sample_cmd(ctx: typer.Context, output: Path | None = OUTPUT_OPTION):
    """
    Write a sample financial data file to use as a template.

    Example:
        mca-analyzer sample --output data/sample.json
    """
    if output is None:
        app_config: AppConfig = (ctx.obj or {}).get("config") or AppConfig()
        output = app_config.paths.output_dir / SAMPLE_FILENAME

    try:
        path = save_financial_data(build_sample_data(), output)
    except OSError as e:
        console.print(f"[bold red]✗[/bold red] Could not write {output}: {e!s}", style="red")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✓[/green] Sample data written to [bold]{path}[/bold]")
