"""Analysis-related exceptions: package access, class resolution, empty input."""

from pathlib import Path
from typing import List, Optional

from .base import DesignAnalyzerError


class AnalysisError(DesignAnalyzerError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a package directory or class file cannot be accessed."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access path: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ResolutionError(AnalysisError):
    """Raised when a compiled artifact cannot be resolved into a type descriptor."""

    def __init__(self, type_name: str, reason: str, filepath: Optional[Path] = None):
        details = {"type": type_name, "reason": reason}
        if filepath is not None:
            details["filepath"] = str(filepath)

        super().__init__(f"Cannot resolve type: {type_name}", details=details)
        self.type_name = type_name
        self.reason = reason
        self.filepath = filepath


class EmptyProjectError(AnalysisError):
    """Raised when metrics are requested for a package with no types."""

    def __init__(self, package: Optional[str] = None):
        details = {"package": package} if package else None
        super().__init__("No types to analyze", details=details)
        self.package = package


class HierarchyCycleError(AnalysisError):
    """Raised when a supertype chain loops back on itself."""

    def __init__(self, type_name: str, chain: List[str]):
        super().__init__(
            f"Cyclic supertype chain for {type_name}",
            details={"type": type_name, "chain": " -> ".join(chain)},
        )
        self.type_name = type_name
        self.chain = chain
