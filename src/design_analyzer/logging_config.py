"""
Logging configuration for Design Analyzer.

Log records go to stderr through a rich handler so that stdout carries only
the rendered report.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Args:
        verbose: Enable DEBUG level logging (per-class load details)
        quiet: Suppress all but ERROR level logging, including warnings
            about supertypes missing from the classpath
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance for design_analyzer
    """
    # Determine log level
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    # stderr only: stdout is reserved for the metrics table, JSON or CSV
    console = Console(stderr=True)

    # Configure handlers
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Messages embed class names such as [Lshapes.Shape; which are not markup
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]

    # Add file handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # Configure root logger; force replaces handlers from an earlier run in the same process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    # Get design_analyzer logger
    logger = logging.getLogger("design_analyzer")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'design_analyzer.loading')
              If None, returns the root design_analyzer logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("design_analyzer")

    # Ensure name starts with design_analyzer
    if not name.startswith("design_analyzer"):
        name = f"design_analyzer.{name}"

    return logging.getLogger(name)
