"""CSV formatter for Design Analyzer."""

import csv
import io
from typing import List

from ..models import MetricRecord
from .base import BaseFormatter, RenderContext


class CsvFormatter(BaseFormatter):
    """Render records as CSV."""

    def render(self, records: List[MetricRecord], context: RenderContext) -> None:
        print(self.format(records, context), end="")

    def format(self, records: List[MetricRecord], context: RenderContext) -> str:
        p = context.precision
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow([
            "type", "simple_name", "in_depth", "instability", "responsibility", "workload",
        ])
        for r in records:
            writer.writerow([
                r.name, r.simple_name, r.in_depth,
                f"{r.instability:.{p}f}",
                f"{r.responsibility:.{p}f}",
                f"{r.workload:.{p}f}",
            ])
        return output.getvalue()
