"""Rich terminal formatter for Design Analyzer."""

import io
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..models import MetricRecord
from .base import BaseFormatter, RenderContext


def _ratio_style(value: float) -> str:
    if value >= 0.5:
        return "red"
    elif value >= 0.25:
        return "yellow"
    else:
        return "green"


class RichFormatter(BaseFormatter):
    """Rich table on stdout with ratios colored by magnitude."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_table(self, records: List[MetricRecord], context: RenderContext) -> Table:
        title = f"Design metrics: {context.package}" if context.package else "Design metrics"
        table = Table(title=title, caption=f"{context.type_count} types")
        table.add_column("Class", style="cyan", no_wrap=True)
        table.add_column("inDepth", justify="right")
        table.add_column("Instability", justify="right")
        table.add_column("Responsibility", justify="right")
        table.add_column("Workload", justify="right")

        p = context.precision
        for r in records:
            table.add_row(
                r.simple_name,
                str(r.in_depth),
                f"[{_ratio_style(r.instability)}]{r.instability:.{p}f}[/]",
                f"{r.responsibility:.{p}f}",
                f"[{_ratio_style(r.workload)}]{r.workload:.{p}f}[/]",
            )
        return table

    def render(self, records: List[MetricRecord], context: RenderContext) -> None:
        self.console.print(self.build_table(records, context))

    def format(self, records: List[MetricRecord], context: RenderContext) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=100, force_terminal=False)
        console.print(self.build_table(records, context))
        return buffer.getvalue()
