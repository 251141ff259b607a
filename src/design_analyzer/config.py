"""Configuration loading and management for Design Analyzer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.design-analyzer.toml)
    3. Project config (./design-analyzer.toml)
    4. Explicit config file
    5. Environment variables (DESIGN_ANALYZER_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, precision=3)
    >>> config.verbosity
    'verbose'
    >>> config.precision
    3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import DesignAnalyzerError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

OUTPUT_FORMATS = ("table", "rich", "json", "csv")
ENV_PREFIX = "DESIGN_ANALYZER_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Output:
            output_format: Renderer name (table, rich, json, csv)
            precision: Decimal places for ratio metrics
            verbosity: Logging verbosity level

        Resolution:
            classpath: Extra directories or jars searched for supertypes
            strict_resolution: Fail when a supertype cannot be found

        Metrics:
            symmetric_interfaces: Count implementors of an interface as its
                clients when computing responsibility
    """

    output_format: str = "table"
    precision: int = 2
    verbosity: Verbosity = "normal"

    classpath: list[str] = field(default_factory=list)
    strict_resolution: bool = False

    symmetric_interfaces: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"must be one of {', '.join(OUTPUT_FORMATS)}",
            )
        if not 0 <= self.precision <= 10:
            raise InvalidConfigError("precision", self.precision, "must be between 0 and 10")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be quiet, normal or verbose"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored

    Returns:
        Validated AnalysisConfig instance

    Raises:
        DesignAnalyzerError: If a config file or value is invalid
    """
    merged: dict = {}

    global_config = Path.home() / ".design-analyzer.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise DesignAnalyzerError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "design-analyzer.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise DesignAnalyzerError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise DesignAnalyzerError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise DesignAnalyzerError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    if "classpath" in merged:
        merged["classpath"] = [str(entry) for entry in merged["classpath"]]

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise DesignAnalyzerError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DESIGN_ANALYZER_* environment variables.

    ``DESIGN_ANALYZER_CLASSPATH`` is split on ``os.pathsep``.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        if field_name == "classpath":
            result[field_name] = [e for e in env_value.split(os.pathsep) if e]
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise DesignAnalyzerError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)
