"""Exception hierarchy for Design Analyzer."""

from .analysis import (
    AnalysisError,
    EmptyProjectError,
    FileAccessError,
    HierarchyCycleError,
    ResolutionError,
)
from .base import DesignAnalyzerError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "DesignAnalyzerError",
    "AnalysisError",
    "FileAccessError",
    "ResolutionError",
    "EmptyProjectError",
    "HierarchyCycleError",
    "ConfigurationError",
    "InvalidConfigError",
]
