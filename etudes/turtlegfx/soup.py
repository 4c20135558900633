"""Polygon and heading calculations driven through a turtle."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from itertools import pairwise

from .anglemath import deg_to_radian, double_modulo, double_round, radian_to_deg
from .drawable import DrawableTurtle, Turtle


def draw_square(turtle: Turtle, side_length: int) -> None:
    """Draw a square with the given side length."""
    draw_regular_polygon(turtle, 4, side_length)


def calculate_regular_polygon_angle(sides: int) -> float:
    """Return the interior angle in degrees of a regular polygon."""
    return 180.0 * (sides - 2) / sides


def calculate_polygon_sides_from_angle(angle: float) -> int:
    """Return the number of sides of a regular polygon with the given interior angle."""
    return double_round(360.0 / (180.0 - angle))


def draw_regular_polygon(turtle: Turtle, sides: int, side_length: int) -> None:
    """Draw a regular polygon, turning by the interior angle after each side."""
    angle = calculate_regular_polygon_angle(sides)
    for _ in range(sides):
        turtle.forward(side_length)
        turtle.turn(angle)


def calculate_heading_to_point(
    current_heading: float,
    current_x: int,
    current_y: int,
    target_x: int,
    target_y: int,
) -> float:
    """Return the clockwise turn in [0, 360) that faces the target point.

    Coordinates are integers; fractional values are truncated toward zero.
    If the target equals the current point the result is 0.
    """
    delta_x = int(target_x) - int(current_x)
    delta_y = int(target_y) - int(current_y)
    if delta_x == 0 and delta_y == 0:
        return 0.0
    angle = math.atan2(delta_x, delta_y)
    turn = double_modulo(angle - deg_to_radian(current_heading), 2 * math.pi)
    return radian_to_deg(turn)


def calculate_headings(
    x_coords: Sequence[float], y_coords: Sequence[float]
) -> list[float]:
    """Return the heading adjustment for each step along a path of points.

    The turtle starts at the first point facing up. Raises ValueError if the
    coordinate sequences differ in length.
    """
    if len(x_coords) != len(y_coords):
        raise ValueError("xCoords and yCoords have different length!")
    headings: list[float] = []
    heading = 0.0
    for (x0, y0), (x1, y1) in pairwise(zip(x_coords, y_coords)):
        heading = calculate_heading_to_point(heading, x0, y0, x1, y1)
        headings.append(heading)
    return headings


def main(argv: list[str] | None = None) -> int:
    """Draw a square and print the actions the turtle took."""
    parser = argparse.ArgumentParser(description="Draw a square with a turtle.")
    parser.add_argument("--side", type=int, default=40)
    args = parser.parse_args(argv)

    turtle = DrawableTurtle()
    draw_square(turtle, args.side)
    for action in turtle.actions:
        print(action)
    return 0