"""Utilities: exceptions, logging, verification and array export."""

from __future__ import annotations

from .exceptions import (
    DisconnectedMazeError,
    InvalidOpeningError,
    InvalidParameterError,
    MazeError,
    MazeGenerationError,
    NotEnoughOpeningsError,
    UnsupportedTopologyError,
    validate_parameter_value,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "DisconnectedMazeError",
    "InvalidOpeningError",
    "InvalidParameterError",
    "LoggedOperation",
    "MazeError",
    "MazeGenerationError",
    "NotEnoughOpeningsError",
    "UnsupportedTopologyError",
    "configure_logging",
    "get_logger",
    "validate_parameter_value",
]
