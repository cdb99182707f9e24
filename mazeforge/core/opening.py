"""
Maze openings.

An opening designates the cell whose boundary wall is removed to create an
entrance or an exit. Each coordinate is either an absolute index or an anchor
resolved against the maze size at the time the opening is created.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mazeforge.utils.exceptions import InvalidParameterError


class OpeningAnchor(Enum):
    """Coordinate relative to the start, center or end of an axis."""

    START = "S"
    CENTER = "C"
    END = "E"

    def resolve(self, size: int) -> int:
        if self is OpeningAnchor.START:
            return 0
        if self is OpeningAnchor.CENTER:
            return size // 2
        return size - 1


def _parse_coordinate(value: int | str | OpeningAnchor) -> int | OpeningAnchor:
    if isinstance(value, OpeningAnchor):
        return value
    if isinstance(value, bool):
        raise InvalidParameterError("opening", value, expected_type=int, component="Opening")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().upper()
        try:
            return OpeningAnchor(text)
        except ValueError:
            pass
        try:
            return int(text)
        except ValueError:
            raise InvalidParameterError(
                "opening",
                value,
                component="Opening",
                reason="expected an integer or one of S, C, E",
            ) from None
    raise InvalidParameterError("opening", value, expected_type=int, component="Opening")


@dataclass(frozen=True)
class Opening:
    """
    Opening coordinates.

    For grid mazes ``x`` is the column and ``y`` the row. For theta mazes ``x``
    is the index in the ring and ``y`` the ring number.
    """

    x: int | OpeningAnchor
    y: int | OpeningAnchor

    @classmethod
    def of(cls, x: int | str | OpeningAnchor, y: int | str | OpeningAnchor) -> Opening:
        """Build an opening from ints, anchors or their one-letter codes."""
        return cls(_parse_coordinate(x), _parse_coordinate(y))

    @staticmethod
    def resolve_axis(value: int | OpeningAnchor, size: int) -> int:
        if isinstance(value, OpeningAnchor):
            return value.resolve(size)
        return value

    def __str__(self) -> str:
        def fmt(value):
            return value.value if isinstance(value, OpeningAnchor) else str(value)

        return f"({fmt(self.x)}, {fmt(self.y)})"
