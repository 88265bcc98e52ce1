"""
PRSMTECH theme compiler CLI.

Compiles the design token document into base.css, slidev.css,
reveal.css, webslides.css and config.js.

Usage:
    prsm-theme                 # one-shot build, exit 1 on any failure
    prsm-theme --watch         # rebuild whenever the tokens change

Environment:
    PRSM_TOKENS_PATH, PRSM_OUTPUT_DIR, PRSM_WATCH_INTERVAL - see core.config
    PRSM_LOG_LEVEL - logging level (default: WARNING)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from prsm_theme._version import get_version
from prsm_theme.compiler import BuildReport, build
from prsm_theme.core.config import CompilerConfig
from prsm_theme.core.errors import MissingInputError
from prsm_theme.watch import run_watch

LOG_LEVEL_ENV_VAR = "PRSM_LOG_LEVEL"

app = typer.Typer(
    help="Compile PRSMTECH design tokens into framework themes.",
    add_completion=False,
)

console = Console()


def configure_logging(verbose: bool = False, watch: bool = False) -> None:
    """Configure root logging; watch mode logs rebuilds at INFO."""
    if verbose:
        level = logging.DEBUG
    else:
        default = "INFO" if watch else "WARNING"
        level_name = os.getenv(LOG_LEVEL_ENV_VAR, default).upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"prsm-theme {get_version()}")
        raise typer.Exit()


def print_report(report: BuildReport) -> None:
    """Print a per-artifact summary table."""
    table = Table(title="PRSMTECH Theme Compiler")
    table.add_column("Artifact")
    table.add_column("Status")
    table.add_column("Detail", overflow="fold")

    for artifact in report.artifacts:
        if artifact.success:
            detail = str(report.paths.get(artifact.name, artifact.filename))
            table.add_row(artifact.name, "[green]ok[/green]", detail)
        else:
            table.add_row(
                artifact.name,
                "[red]failed[/red]",
                f"{artifact.error_type}: {artifact.error}",
            )

    console.print(table)
    console.print(f"\n[dim]Output directory: {report.output_dir}[/dim]")


@app.command()
def compile_theme(
    tokens: Annotated[
        Path | None,
        typer.Option("--tokens", "-t", help="Token document (JSON or YAML)"),
    ] = None,
    out_dir: Annotated[
        Path | None,
        typer.Option("--out-dir", "-o", help="Directory for generated artifacts"),
    ] = None,
    watch: Annotated[
        bool,
        typer.Option("--watch", "-w", help="Rebuild whenever the token document changes"),
    ] = False,
    interval: Annotated[
        float | None,
        typer.Option("--interval", help="Watch polling interval in seconds"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Compile design tokens into base, Slidev, Reveal.js, WebSlides and Tailwind outputs."""
    configure_logging(verbose=verbose, watch=watch)

    try:
        config = CompilerConfig.from_env(
            tokens_path=tokens, output_dir=out_dir, poll_interval=interval
        )
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    if watch:
        console.print(f"Watching {config.tokens_path} for changes (Ctrl+C to stop)")
        run_watch(config, on_rebuild=lambda report: print_report(report) if report else None)
        return

    try:
        report = build(config)
    except MissingInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    print_report(report)
    if not report.success:
        raise typer.Exit(1)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
