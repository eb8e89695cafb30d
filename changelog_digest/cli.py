"""
Command-line interface for the changelog digest.

Uses Typer to provide a CLI with options for the input source, the report
destination and logging. Options override values from the YAML config.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import load_config
from .core.errors import ChangelogError
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


@app.command()
def run(
    input: Path | None = typer.Option(
        None, "--in", "-i", help="Changelog file to read (default changelog.md)."
    ),
    output: Path | None = typer.Option(
        None, "--out", "-o", help="Report file to write (default output.txt)."
    ),
    web: bool = typer.Option(
        False, "--web", help="Fetch the changelog from --url unless --in is given."
    ),
    url: str | None = typer.Option(None, "--url", help="Remote changelog URL."),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Regroup the newest changelog release into AIRAC, other and contributor sections.

    Args:
        input: Local changelog path
        output: Report destination
        web: Whether to fetch the changelog over HTTP
        url: Override the remote changelog URL
        config: Optional path to YAML config file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    # Load base configuration
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if input is not None:
        cfg.input.path = str(input)
    if output is not None:
        cfg.output.path = str(output)
    if web:
        cfg.input.use_web = True
    if url:
        cfg.input.url = url
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        stats = run_pipeline(cfg, console=console, explicit_path=input is not None)
    except ChangelogError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"Output to: {stats.output_path}")
    console.print(f"Time taken: {stats.elapsed:.3f}s")


if __name__ == "__main__":
    app()
