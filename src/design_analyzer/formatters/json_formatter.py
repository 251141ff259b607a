"""JSON formatter for Design Analyzer."""

import json
from typing import List

from ..models import MetricRecord
from .base import BaseFormatter, RenderContext


class JsonFormatter(BaseFormatter):
    """Render records as JSON."""

    def render(self, records: List[MetricRecord], context: RenderContext) -> None:
        print(self.format(records, context))

    def format(self, records: List[MetricRecord], context: RenderContext) -> str:
        data = {
            "package": context.package,
            "type_count": context.type_count,
            "types": [r.to_dict() for r in records],
        }
        return json.dumps(data, indent=2)
