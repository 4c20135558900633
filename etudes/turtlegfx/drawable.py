"""The turtle interface and a turtle that records its lines and actions."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .anglemath import deg_to_radian, double_modulo
from .geometry import Action, ActionType, LineSegment, PenColor, Point

CANVAS_WIDTH = 512
CANVAS_HEIGHT = 512
CIRCLE_DEGREES = 360.0
DEGREES_TO_VERTICAL = 90


class Turtle(ABC):
    """A turtle with Logo semantics: heading 0 is up, positive turns are clockwise."""

    @abstractmethod
    def forward(self, distance: float) -> None:
        """Move forward by distance."""

    @abstractmethod
    def turn(self, angle: float) -> None:
        """Turn clockwise by angle degrees."""

    @abstractmethod
    def color(self, color: PenColor) -> None:
        """Change the pen colour."""


class DrawableTurtle(Turtle):
    """A turtle that records the line segments it draws and the actions it takes."""

    def __init__(self) -> None:
        self._actions: list[Action] = []
        self._lines: list[LineSegment] = []
        self._position = Point(0.0, 0.0)
        self._heading = 0.0
        self._pen_color = PenColor.BLACK

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def lines(self) -> tuple[LineSegment, ...]:
        return tuple(self._lines)

    @property
    def position(self) -> Point:
        return self._position

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def pen_color(self) -> PenColor:
        return self._pen_color

    def forward(self, distance: float) -> None:
        rad = deg_to_radian(self._heading)
        end = Point(
            math.sin(rad) * distance + self._position.x,
            math.cos(rad) * distance + self._position.y,
        )
        self._lines.append(LineSegment(self._position, end, self._pen_color))
        self._actions.append(
            Action(ActionType.FORWARD, f"move forward {distance:f}steps")
        )

    def turn(self, angle: float) -> None:
        self._heading = double_modulo(self._heading + angle, CIRCLE_DEGREES)
        self._actions.append(Action(ActionType.TURN, f"turn{angle:f}degrees"))

    def color(self, color: PenColor) -> None:
        self._pen_color = color
        self._actions.append(Action(ActionType.COLOR, f"change color to {color.name}"))