"""
Design Analyzer - coupling metrics for compiled JVM packages

Reads the class files of one package and reports, for every type, its
inheritance depth, instability, responsibility and workload.
"""

__version__ = "0.1.0"

from .api import analyze
from .exceptions import DesignAnalyzerError
from .models import AnalysisResult, MetricRecord, TypeDescriptor, TypeSet

__all__ = [
    "analyze",  # Main entry point
    "AnalysisResult",
    "DesignAnalyzerError",
    "MetricRecord",
    "TypeDescriptor",
    "TypeSet",
]
