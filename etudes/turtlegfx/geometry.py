"""Pen colours, points, line segments and recorded turtle actions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto


class PenColor(Enum):
    """Colours a turtle's pen can draw with."""

    BLACK = auto()
    BLUE = auto()
    CYAN = auto()
    DARK_GRAY = auto()
    GRAY = auto()
    GREEN = auto()
    LIGHT_GRAY = auto()
    MAGENTA = auto()
    ORANGE = auto()
    PINK = auto()
    RED = auto()
    WHITE = auto()
    YELLOW = auto()


@dataclass(frozen=True)
class Point:
    """An immutable point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class LineSegment:
    """An immutable coloured line segment between two points."""

    start: Point
    end: Point
    color: PenColor

    @classmethod
    def from_coords(
        cls,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        color: PenColor,
    ) -> LineSegment:
        """Build a segment from the coordinates of its two ends."""
        return cls(Point(start_x, start_y), Point(end_x, end_y), color)

    def length(self) -> float:
        """Return the Euclidean length of the segment."""
        return math.hypot(self.start.x - self.end.x, self.start.y - self.end.y)


class ActionType(Enum):
    """Kinds of action a turtle can perform."""

    FORWARD = auto()
    TURN = auto()
    COLOR = auto()


@dataclass(frozen=True)
class Action:
    """A recorded turtle action with its human-readable description."""

    type: ActionType
    display_string: str

    def __str__(self) -> str:
        return self.display_string