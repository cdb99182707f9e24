"""
Logging utilities for mazeforge.

Usage:
    >>> from mazeforge.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating maze...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    configure_quiet_logging,
    get_logger,
    log_generation_summary,
    log_performance_metric,
)

__all__ = [
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
    "configure_development_logging",
    "configure_logging",
    "configure_quiet_logging",
    "get_logger",
    "log_generation_summary",
    "log_performance_metric",
]
