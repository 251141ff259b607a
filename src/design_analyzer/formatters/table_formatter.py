"""Fixed-width plain-text table, one row per type."""

from typing import List

from ..models import MetricRecord
from .base import BaseFormatter, RenderContext

GAP = " " * 10

# (header, column width)
COLUMNS = [
    ("Class(C)", 8),
    ("inDepth(C)", 10),
    ("instability(C)", 14),
    ("responsibility(C)", 17),
    ("workload(C)", 11),
]

HEADER = GAP.join(title for title, _ in COLUMNS)


class TableFormatter(BaseFormatter):
    """Render records as the classic left-aligned metrics table."""

    def render(self, records: List[MetricRecord], context: RenderContext) -> None:
        print(self.format(records, context), end="")

    def format(self, records: List[MetricRecord], context: RenderContext) -> str:
        lines = [HEADER]
        lines.extend(self.format_row(r, context.precision) for r in records)
        return "\n".join(lines) + "\n"

    @staticmethod
    def format_row(record: MetricRecord, precision: int = 2) -> str:
        (_, name_w), (_, depth_w), (_, inst_w), (_, resp_w), (_, work_w) = COLUMNS
        cells = [
            f"{record.simple_name:<{name_w}}",
            f"{record.in_depth:<{depth_w}d}",
            f"{record.instability:<{inst_w}.{precision}f}",
            f"{record.responsibility:<{resp_w}.{precision}f}",
            f"{record.workload:<{work_w}.{precision}f}",
        ]
        return GAP.join(cells)
