"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from design_analyzer.exceptions import (
    AnalysisError,
    ConfigurationError,
    DesignAnalyzerError,
    EmptyProjectError,
    FileAccessError,
    HierarchyCycleError,
    InvalidConfigError,
    ResolutionError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            FileAccessError(Path("/x"), "missing"),
            ResolutionError("p.A", "bad magic"),
            EmptyProjectError(),
            HierarchyCycleError("p.A", ["p.A", "p.B", "p.A"]),
        ],
    )
    def test_analysis_errors(self, error):
        assert isinstance(error, AnalysisError)
        assert isinstance(error, DesignAnalyzerError)

    def test_config_errors(self):
        error = InvalidConfigError("precision", 42, "too large")
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, DesignAnalyzerError)


class TestMessages:
    def test_details_in_str(self):
        error = FileAccessError(Path("/tmp/pkg"), "path does not exist")
        assert str(error) == (
            "Cannot access path: /tmp/pkg (filepath=/tmp/pkg, reason=path does not exist)"
        )

    def test_no_details(self):
        assert str(DesignAnalyzerError("plain")) == "plain"
        assert str(EmptyProjectError()) == "No types to analyze"

    def test_resolution_error_with_file(self):
        error = ResolutionError("p.A", "bad magic", Path("/pkg/A.class"))
        assert error.details == {"type": "p.A", "reason": "bad magic", "filepath": "/pkg/A.class"}

    def test_cycle_chain(self):
        error = HierarchyCycleError("p.A", ["p.A", "p.B", "p.A"])
        assert "chain=p.A -> p.B -> p.A" in str(error)
