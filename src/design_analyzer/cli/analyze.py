"""Metrics command: load a package directory and print its metrics table."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..api import compute, load_package
from ..config import load_config
from ..exceptions import DesignAnalyzerError
from ..formatters import RenderContext, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import err_console, version_callback


@app.command()
def analyze(
    path: Path = typer.Argument(
        ...,
        help="Directory holding the package's .class files",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: table, rich, json or csv",
    ),
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        "-p",
        help="Decimal places for ratio metrics",
        min=0,
        max=10,
    ),
    classpath: Optional[List[Path]] = typer.Option(
        None,
        "--classpath",
        "--cp",
        help="Directory or jar searched for supertypes (repeatable)",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Fail when a supertype cannot be found on the classpath",
    ),
    symmetric_interfaces: Optional[bool] = typer.Option(
        None,
        "--symmetric-interfaces/--no-symmetric-interfaces",
        help="Count implementors of an interface as its clients",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Report inheritance depth, instability, responsibility and workload
    for every type of a compiled package.

    [bold cyan]Examples:[/bold cyan]

      design-analyzer build/classes/shapes

      design-analyzer build/classes/shapes --format json

      design-analyzer out/shapes --cp lib/base.jar --strict
    """
    logger = setup_logging(
        verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None
    )

    stage = "config"
    try:
        settings = load_config(
            config_file=config,
            output_format=fmt,
            precision=precision,
            classpath=classpath or None,
            strict_resolution=strict,
            symmetric_interfaces=symmetric_interfaces,
            verbose=verbose,
            quiet=quiet,
        )
        formatter = get_formatter(settings.output_format)

        stage = "load"
        types = load_package(path, settings)

        stage = "compute"
        result = compute(types, settings)

    except DesignAnalyzerError as e:
        err_console.print(f"[red]Error ({stage}):[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        err_console.print(f"[red]Unexpected error ({stage}):[/red] {escape(str(e))}")
        raise typer.Exit(1)

    context = RenderContext(
        package=result.package,
        type_count=len(result.types),
        precision=settings.precision,
    )
    formatter.render(result.records, context)
