"""Tests for the formatters package."""

import csv
import io
import json

import pytest

from design_analyzer.formatters import (
    CsvFormatter,
    JsonFormatter,
    RenderContext,
    RichFormatter,
    TableFormatter,
    get_formatter,
)
from design_analyzer.formatters.table_formatter import HEADER
from design_analyzer.models import MetricRecord


def _records():
    return [
        MetricRecord("shapes.Canvas", "Canvas", 0, 0.25, 0.75, 0.375),
        MetricRecord("shapes.Circle", "Circle", 1, 0.5, 0.0, 0.25),
    ]


def _context(precision=2):
    return RenderContext(package="shapes", type_count=2, precision=precision)


class TestGetFormatter:
    def test_known_formatters(self):
        for name in ("table", "rich", "json", "csv"):
            assert get_formatter(name) is not None

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestTableFormatter:
    def test_header(self):
        assert HEADER == (
            "Class(C)          inDepth(C)          instability(C)"
            "          responsibility(C)          workload(C)"
        )

    def test_rows(self):
        lines = TableFormatter().format(_records(), _context()).splitlines()
        assert lines[0] == HEADER
        assert lines[1].split() == ["Canvas", "0", "0.25", "0.75", "0.38"]
        # Fixed-width columns separated by ten spaces
        assert len(lines[1]) == len(HEADER)
        assert lines[1].index("0.25") == HEADER.index("instability(C)")
        assert lines[2].split() == ["Circle", "1", "0.50", "0.00", "0.25"]

    def test_precision(self):
        lines = TableFormatter().format(_records(), _context(precision=3)).splitlines()
        assert lines[1].split() == ["Canvas", "0", "0.250", "0.750", "0.375"]

    def test_long_names_not_truncated(self):
        record = MetricRecord("p.AbstractShapeFactory", "AbstractShapeFactory", 2, 0.0, 0.0, 0.0)
        row = TableFormatter.format_row(record)
        assert row.startswith("AbstractShapeFactory" + " " * 10 + "2")

    def test_header_only_without_records(self):
        assert TableFormatter().format([], _context()) == HEADER + "\n"

    def test_render_writes_stdout(self, capsys):
        TableFormatter().render(_records(), _context())
        out = capsys.readouterr().out
        assert out.startswith(HEADER)
        assert "Circle" in out


class TestJsonFormatter:
    def test_format_returns_valid_json(self):
        data = json.loads(JsonFormatter().format(_records(), _context()))
        assert data["package"] == "shapes"
        assert data["type_count"] == 2
        assert data["types"][0]["name"] == "shapes.Canvas"
        assert data["types"][1]["in_depth"] == 1


class TestCsvFormatter:
    def test_rows(self):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(_records(), _context()))))
        assert rows[0] == [
            "type", "simple_name", "in_depth", "instability", "responsibility", "workload",
        ]
        assert rows[1] == ["shapes.Canvas", "Canvas", "0", "0.25", "0.75", "0.38"]
        assert len(rows) == 3


class TestRichFormatter:
    def test_format_contains_rows(self):
        text = RichFormatter().format(_records(), _context())
        assert "Design metrics: shapes" in text
        assert "Canvas" in text
        assert "0.75" in text

    def test_table_shape(self):
        table = RichFormatter().build_table(_records(), _context())
        assert len(table.columns) == 5
        assert table.row_count == 2
