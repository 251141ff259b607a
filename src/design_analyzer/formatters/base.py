"""Base formatter interface for Design Analyzer output rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..models import MetricRecord


@dataclass(frozen=True)
class RenderContext:
    """What a formatter knows about the run besides the records."""

    package: str = ""
    type_count: int = 0
    precision: int = 2


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, records: List[MetricRecord], context: RenderContext) -> None:
        """Write formatted records to stdout."""

    @abstractmethod
    def format(self, records: List[MetricRecord], context: RenderContext) -> str:
        """Return formatted string representation of records."""
