"""
Input validation utilities for the differential growth simulation.

Provides centralized validation functions for starting points and
simulation parameters. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np


class ValidationError(ValueError):
    """Base exception for simulation validation errors."""

    pass


class InvalidPointsError(ValidationError):
    """Raised when starting points are malformed."""

    pass


class InvalidParameterError(ValidationError):
    """Raised when a scalar parameter is out of range."""

    pass


class CurveStructureWarning(UserWarning):
    """Warning issued when a curve is too small for the growth model."""

    pass


def validate_points(points: Sequence[Any]) -> np.ndarray:
    """
    Validate a sequence of 2D coordinates.

    Args:
        points: Sequence of (x, y) pairs (tuples, lists or arrays)

    Returns:
        (n, 2) float64 array holding a copy of the coordinates

    Raises:
        InvalidPointsError: If points are not finite 2D coordinates
    """
    try:
        arr = np.array(points, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidPointsError(f"Points must be (x, y) number pairs: {exc}") from exc

    if arr.size == 0:
        return np.zeros((0, 2), dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPointsError(
            f"Points must have shape (n, 2), got {arr.shape}"
        )

    bad = ~np.isfinite(arr).all(axis=1)
    if bad.any():
        first = int(np.flatnonzero(bad)[0])
        raise InvalidPointsError(f"Point {first} has a non-finite coordinate: {tuple(arr[first])}")

    return arr


def validate_positive(name: str, value: float) -> float:
    """
    Validate that a parameter is a positive finite number.

    Args:
        name: Parameter name used in the error message
        value: Value to check

    Returns:
        Value converted to float

    Raises:
        InvalidParameterError: If value is not positive and finite
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from exc

    if not math.isfinite(result) or result <= 0:
        raise InvalidParameterError(f"{name} must be positive and finite, got {result}")
    return result


def validate_count(name: str, value: int) -> int:
    """
    Validate a non-negative integer count.

    Raises:
        InvalidParameterError: If value is negative
    """
    count = int(value)
    if count < 0:
        raise InvalidParameterError(f"{name} must be >= 0, got {count}")
    return count


__all__ = [
    "ValidationError",
    "InvalidPointsError",
    "InvalidParameterError",
    "CurveStructureWarning",
    "validate_points",
    "validate_positive",
    "validate_count",
]
