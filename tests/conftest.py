"""
Pytest configuration and shared fixtures for the mazeforge test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

from __future__ import annotations

import logging
import random

import pytest

from mazeforge.core.maze import MazeType
from mazeforge.generators import GENERATORS, MazeAlgorithm
from mazeforge.topology import create_maze

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Maze Fixtures
# =============================================================================

# Sizes keep every topology small but with interior cells
MAZE_SIZES = {
    MazeType.ORTHOGONAL: {"width": 6, "height": 5},
    MazeType.WEAVE: {"width": 6, "height": 6, "max_weave": 2},
    MazeType.SIGMA: {"width": 5, "height": 4},
    MazeType.DELTA: {"width": 5, "height": 4},
    MazeType.UPSILON: {"width": 5, "height": 5},
    MazeType.ZETA: {"width": 5, "height": 4},
    MazeType.THETA: {"radius": 4},
}


def make_maze(maze_type: MazeType, **overrides):
    """Empty maze of the given type with the default test size."""
    return create_maze(maze_type, **{**MAZE_SIZES[maze_type], **overrides})


def supported_pairs() -> list[tuple[MazeAlgorithm, MazeType]]:
    """Every (algorithm, maze type) combination a generator supports."""
    return [
        (algorithm, maze_type)
        for algorithm, generator_class in GENERATORS.items()
        for maze_type in MazeType
        if maze_type in generator_class.supported_types
    ]


def unsupported_pairs() -> list[tuple[MazeAlgorithm, MazeType]]:
    return [
        (algorithm, maze_type)
        for algorithm, generator_class in GENERATORS.items()
        for maze_type in MazeType
        if maze_type not in generator_class.supported_types
    ]


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture(autouse=True)
def reset_random_state():
    """Reset the global random state before each test."""
    random.seed(42)


class RecordingHandler(logging.Handler):
    """Handler keeping every record it receives."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)

    def messages(self, level: int = logging.DEBUG) -> list[str]:
        return [record.getMessage() for record in self.records if record.levelno >= level]


@pytest.fixture
def log_records():
    """
    Attach a recording handler to a mazeforge logger.

    mazeforge loggers do not propagate to the root logger, so ``caplog``
    does not see them.
    """
    attached: list[tuple[logging.Logger, RecordingHandler]] = []

    def attach(name: str) -> RecordingHandler:
        handler = RecordingHandler()
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        attached.append((logger, handler))
        return handler

    yield attach

    for logger, handler in attached:
        logger.removeHandler(handler)
