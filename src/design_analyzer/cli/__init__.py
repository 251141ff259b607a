"""CLI entry point."""

import typer

app = typer.Typer(
    name="design-analyzer",
    help="Design Analyzer - coupling metrics for compiled JVM packages",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402


def main() -> None:
    app()
