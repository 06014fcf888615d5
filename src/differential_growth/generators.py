"""
Starting point generators.

Helpers producing ordered point sequences to seed a simulation. Any
ordered sequence of (x, y) pairs works as a starting curve; these are
just convenient shapes.
"""

from __future__ import annotations

import math

from .types import Point
from .validation import validate_count


def generate_points_on_circle(
    origin_x: float,
    origin_y: float,
    radius: float,
    amount_of_points: int,
) -> list[Point]:
    """
    Evenly spaced points on a circle.

    Points start at angle 0 and advance counter-clockwise in steps of
    2*pi / amount_of_points, stopping before a full revolution.

    Args:
        origin_x: X coordinate of the circle center
        origin_y: Y coordinate of the circle center
        radius: Circle radius
        amount_of_points: Number of points to generate

    Returns:
        List of (x, y) tuples, in order around the circle

    Raises:
        InvalidParameterError: If amount_of_points is negative

    Example:
        points = generate_points_on_circle(0.0, 0.0, 10.0, 10)
    """
    count = validate_count("amount_of_points", amount_of_points)
    if count == 0:
        return []

    step = 2.0 * math.pi / count
    return [
        (
            origin_x + radius * math.cos(k * step),
            origin_y + radius * math.sin(k * step),
        )
        for k in range(count)
    ]


__all__ = ["generate_points_on_circle"]
