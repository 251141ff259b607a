"""Shared CLI helpers."""

import typer
from rich.console import Console

from .. import __version__

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"design-analyzer {__version__}")
        raise typer.Exit()
