"""
2D vector helpers.

All functions take and return numpy float64 arrays of shape (2,) and never
mutate their inputs.
"""

from __future__ import annotations

import math

import numpy as np


def magnitude(v: np.ndarray) -> float:
    """Euclidean length of a vector."""
    return math.hypot(v[0], v[1])


def set_magnitude(v: np.ndarray, length: float) -> np.ndarray:
    """
    Rescale a vector to the given length.

    A zero vector has no direction, so rescaling it yields non-finite
    components. Those components are set to zero instead of propagating.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        result = v / magnitude(v) * length
    result[~np.isfinite(result)] = 0.0
    return result


def cap_magnitude(v: np.ndarray, max_length: float) -> np.ndarray:
    """Return v scaled down to max_length if it is longer, else a copy of v."""
    n = magnitude(v)
    if n > max_length:
        return v / (n / max_length)
    return v.copy()


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def distance_sq(a: np.ndarray, b: np.ndarray) -> float:
    """Squared Euclidean distance between two points."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy


def midpoint(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Point halfway between a and b."""
    return (a + b) / 2.0


__all__ = [
    "magnitude",
    "set_magnitude",
    "cap_magnitude",
    "distance",
    "distance_sq",
    "midpoint",
]
