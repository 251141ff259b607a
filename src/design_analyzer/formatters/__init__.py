"""Output formatters for Design Analyzer."""

from .base import BaseFormatter, RenderContext
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter
from .table_formatter import TableFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "table", "rich", "json", "csv"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "table": TableFormatter,
        "rich": RichFormatter,
        "json": JsonFormatter,
        "csv": CsvFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "RenderContext",
    "TableFormatter",
    "RichFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "get_formatter",
]
