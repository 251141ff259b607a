"""Public API for Design Analyzer.

Example:
    >>> from design_analyzer import analyze
    >>>
    >>> result = analyze("/path/to/classes/mypackage")
    >>> for record in result.records:
    ...     print(record.simple_name, record.instability)
    >>>
    >>> # With customization
    >>> result = analyze("/path/to/classes/mypackage", symmetric_interfaces=True)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import AnalysisConfig, load_config
from .loading import load_types
from .logging_config import get_logger
from .metrics import compute_metrics
from .models import AnalysisResult, TypeSet

logger = get_logger(__name__)


def load_package(path: Union[str, Path], config: AnalysisConfig) -> TypeSet:
    """Load stage: resolve the package's class files into a TypeSet."""
    return load_types(path, classpath=config.classpath, strict=config.strict_resolution)


def compute(types: TypeSet, config: AnalysisConfig) -> AnalysisResult:
    """Compute stage: metric records for every type of a loaded package."""
    records = compute_metrics(types, symmetric_interfaces=config.symmetric_interfaces)
    return AnalysisResult(package=types.package, types=types, records=records)


def analyze(
    path: Union[str, Path],
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Load a package directory and compute the metrics of its types.

    Args:
        path: Directory of ``.class`` files; its name is the package name
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., classpath=[...], strict_resolution=True)

    Returns:
        AnalysisResult with the TypeSet and one MetricRecord per type,
        ordered by qualified name

    Raises:
        DesignAnalyzerError: If configuration, loading or computation fails
    """
    config = load_config(config_file=config_file, **overrides)
    types = load_package(path, config)
    logger.debug("Computing metrics for %r", types)
    return compute(types, config)
