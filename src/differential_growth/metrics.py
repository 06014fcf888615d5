"""
Curve metrics.

Quantitative measures of a closed curve:
- Edge lengths: Length of every edge, including the closing edge
- Perimeter: Total curve length
- Edge length variance: Uniformity of edge lengths
- Bounding box: Extent of the curve

All metrics accept the output of ``get_points()`` or a sequence of nodes.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

from .types import Node, PointLike

CurvePoints = Sequence[Union[Node, PointLike]]


def _xy(p: Union[Node, PointLike]) -> Tuple[float, float]:
    """Get (x, y) from a Node or a coordinate pair."""
    if isinstance(p, Node):
        return float(p.position[0]), float(p.position[1])
    return float(p[0]), float(p[1])


def edge_lengths(points: CurvePoints) -> list[float]:
    """
    Compute the length of every edge of the closed curve.

    Edge i connects point i to point i + 1; the last edge connects the
    last point back to the first.

    Args:
        points: Points or nodes in curve order

    Returns:
        List of n edge lengths (empty for fewer than 2 points)
    """
    n = len(points)
    if n < 2:
        return []

    coords = [_xy(p) for p in points]
    lengths = []
    for i in range(n):
        x1, y1 = coords[i]
        x2, y2 = coords[(i + 1) % n]
        lengths.append(math.hypot(x2 - x1, y2 - y1))
    return lengths


def perimeter(points: CurvePoints) -> float:
    """Total length of the closed curve."""
    return math.fsum(edge_lengths(points))


def edge_length_variance(points: CurvePoints) -> float:
    """
    Compute the variance of edge lengths.

    Lower variance indicates more uniform edge lengths.

    Args:
        points: Points or nodes in curve order

    Returns:
        Population variance of edge lengths (0.0 for fewer than 2 points)
    """
    lengths = edge_lengths(points)
    if not lengths:
        return 0.0

    mean = sum(lengths) / len(lengths)
    return sum((x - mean) ** 2 for x in lengths) / len(lengths)


def bounding_box(points: CurvePoints) -> Tuple[float, float, float, float]:
    """
    Axis-aligned bounding box of the curve.

    Returns:
        (min_x, min_y, max_x, max_y)

    Raises:
        ValueError: If points is empty
    """
    if len(points) == 0:
        raise ValueError("Cannot compute bounding box of an empty curve")

    coords = [_xy(p) for p in points]
    xs = [c[0] for c in coords]
    ys = [c[1] for c in coords]
    return min(xs), min(ys), max(xs), max(ys)


__all__ = [
    "edge_lengths",
    "perimeter",
    "edge_length_variance",
    "bounding_box",
]
