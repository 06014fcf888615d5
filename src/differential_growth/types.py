"""
Common types for the differential growth simulation.

This module provides the fundamental types used across the package:
- Node: Point mass with position, velocity and acceleration
- EventType: Simulation lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional, Sequence, TypedDict, Union

import numpy as np

from .geometry import cap_magnitude, magnitude, set_magnitude


class EventType(IntEnum):
    """
    Simulation lifecycle events.

    - start: A run has begun
    - tick: Fired once per iteration (for animation)
    - end: A run has finished
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    iteration: int
    node_count: int


class Node:
    """
    Point mass steered by forces.

    A node knows nothing about the curve it belongs to; neighbours and
    topology are the simulation's concern.

    Attributes:
        position: Current position, float64 array of shape (2,)
        velocity: Current velocity, magnitude bounded by max_speed
        acceleration: Force accumulator, cleared by update()
        max_force: Upper bound for steering forces produced by seek()
        max_speed: Upper bound for the velocity magnitude
    """

    __slots__ = ("position", "velocity", "acceleration", "max_force", "max_speed")

    def __init__(
        self,
        position: Union[Sequence[float], np.ndarray],
        max_speed: float,
        max_force: float,
    ) -> None:
        """
        Initialize node at rest.

        Args:
            position: (x, y) starting position
            max_speed: Maximum velocity magnitude
            max_force: Maximum steering force magnitude
        """
        self.position: np.ndarray = np.array(position, dtype=np.float64)
        self.velocity: np.ndarray = np.zeros(2, dtype=np.float64)
        self.acceleration: np.ndarray = np.zeros(2, dtype=np.float64)
        self.max_speed: float = float(max_speed)
        self.max_force: float = float(max_force)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def apply_force(self, force: np.ndarray) -> None:
        """Accumulate a force into the acceleration. No limits are applied."""
        self.acceleration += force

    def update(self) -> None:
        """Integrate one step and clear the acceleration."""
        self.velocity += self.acceleration
        self.velocity = cap_magnitude(self.velocity, self.max_speed)
        self.position += self.velocity
        self.acceleration[:] = 0.0

    def seek(self, target: np.ndarray) -> np.ndarray:
        """
        Steering force toward a target point.

        The desired velocity points at the target with length max_speed;
        the force is the difference to the current velocity, capped to
        max_force.

        Args:
            target: (x, y) target point

        Returns:
            Force vector with magnitude <= max_force
        """
        desired = np.asarray(target, dtype=np.float64) - self.position
        if magnitude(desired) != 0.0:
            desired = set_magnitude(desired, self.max_speed)
        steer = desired - self.velocity
        return cap_magnitude(steer, self.max_force)

    def copy(self) -> Node:
        """Independent copy including velocity and acceleration."""
        node = Node(self.position, self.max_speed, self.max_force)
        node.velocity = self.velocity.copy()
        node.acceleration = self.acceleration.copy()
        return node

    def __repr__(self) -> str:
        return (
            f"Node(pos=({self.position[0]:.2f}, {self.position[1]:.2f}), "
            f"vel=({self.velocity[0]:.2f}, {self.velocity[1]:.2f}))"
        )


# Type aliases for Pythonic API
PointLike = Union[Sequence[float], np.ndarray]
"""A 2D coordinate: (x, y) tuple, list or array."""

EventCallback = Callable[[Optional[Event]], None]
"""Listener signature for simulation events."""

Point = tuple[float, float]
"""A 2D coordinate as returned by the simulation."""


__all__ = [
    "EventType",
    "Event",
    "Node",
    "PointLike",
    "EventCallback",
    "Point",
]
