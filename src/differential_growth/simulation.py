"""
Differential growth of a closed curve.

The curve is a cycle of nodes. Every iteration:
- All nodes repel nearby nodes (separation)
- All nodes are pulled toward the midpoint of their curve neighbours (cohesion)
- Nodes integrate the combined force
- Edges longer than ``max_edge_length`` get a new node at their midpoint

Over many iterations the curve folds into an organic, space-filling shape.

Background:
- https://inconvergent.net/generative/differential-line/
"""

from __future__ import annotations

import warnings
from typing import Optional, Sequence

import numpy as np

from .base import IterativeSimulation
from .forces import cohesion_forces, separation_forces
from .geometry import distance, midpoint
from .spatial.quadtree import QuadTree
from .types import EventCallback, EventType, Node, Point, PointLike
from .validation import CurveStructureWarning, validate_points, validate_positive


class DifferentialGrowth(IterativeSimulation):
    """
    Differential growth simulation.

    The order of ``nodes`` is the curve: each node is connected to the
    next one, and the last node is connected back to the first. Nodes
    are only ever inserted, never removed or reordered.

    Parameter choice matters a lot. Values too big, too small, or out of
    proportion with each other can make the curve collapse or stall.
    The defaults in the example below are known to behave well.

    Example:
        points = generate_points_on_circle(0.0, 0.0, 10.0, 10)
        sim = DifferentialGrowth(points, 1.5, 1.0, 14.0, 1.1, 5.0)

        for _ in range(500):
            sim.tick()

        # Draw lines between consecutive points and from last to first
        points_to_draw = sim.get_points()
    """

    def __init__(
        self,
        starting_points: Sequence[PointLike],
        max_force: float,
        max_speed: float,
        desired_separation: float,
        separation_cohesion_ratio: float,
        max_edge_length: float,
        *,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize the simulation from an ordered set of points.

        Args:
            starting_points: (x, y) coordinates of the initial closed curve
            max_force: Maximum force nodes can exert on each other
            max_speed: Maximum magnitude of a node's velocity
            desired_separation: Radius within which nodes repel each other
            separation_cohesion_ratio: Weight of separation relative to cohesion
            max_edge_length: Edges longer than this are subdivided
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event

        Raises:
            InvalidPointsError: If starting_points are not finite 2D coordinates
            InvalidParameterError: If a scalar parameter is not positive and finite
        """
        super().__init__(on_start=on_start, on_tick=on_tick, on_end=on_end)

        self._max_force: float = validate_positive("max_force", max_force)
        self._max_speed: float = validate_positive("max_speed", max_speed)
        self._desired_separation: float = validate_positive(
            "desired_separation", desired_separation
        )
        self._separation_cohesion_ratio: float = validate_positive(
            "separation_cohesion_ratio", separation_cohesion_ratio
        )
        self._max_edge_length: float = validate_positive("max_edge_length", max_edge_length)

        coords = validate_points(starting_points)
        if len(coords) < 2:
            warnings.warn(
                f"Curve has {len(coords)} point(s); at least 2 are needed "
                "for cohesion between neighbours. Results will be degenerate.",
                CurveStructureWarning,
                stacklevel=2,
            )

        self._nodes = [self._make_node(point) for point in coords]

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def max_force(self) -> float:
        """Maximum force nodes can exert on each other."""
        return self._max_force

    @property
    def max_speed(self) -> float:
        """Maximum magnitude of a node's velocity."""
        return self._max_speed

    @property
    def desired_separation(self) -> float:
        """Radius within which nodes repel each other."""
        return self._desired_separation

    @property
    def separation_cohesion_ratio(self) -> float:
        """Weight of separation relative to cohesion."""
        return self._separation_cohesion_ratio

    @property
    def max_edge_length(self) -> float:
        """Edges longer than this are subdivided."""
        return self._max_edge_length

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the simulation by one iteration."""
        self.differentiate()
        self.grow()
        self._iteration += 1

        self.trigger(self._event(EventType.tick))

    def differentiate(self) -> None:
        """
        Move every node by its separation and cohesion forces.

        All forces are computed from the current positions before any
        node moves.
        """
        if not self._nodes:
            return

        tree = QuadTree.from_nodes(self._nodes)
        separation = separation_forces(
            self._nodes,
            self._desired_separation,
            self._max_speed,
            self._max_force,
            tree=tree,
        )
        cohesion = cohesion_forces(self._nodes)

        separation *= self._separation_cohesion_ratio

        for i, node in enumerate(self._nodes):
            node.apply_force(separation[i])
            node.apply_force(cohesion[i])
            node.update()

    def grow(self) -> None:
        """
        Subdivide every edge longer than ``max_edge_length``.

        Each edge gets at most one new node per call, placed at the
        midpoint. Edges are measured on the sequence as it was before
        the call, and the nodes are swapped in only once all insertions
        succeeded.
        """
        n = len(self._nodes)
        if n < 2:
            return

        pending: list[tuple[Node, int]] = []

        for i in range(n):
            n1 = self._nodes[i]
            # Wrap around to the first node on the last edge
            n2 = self._nodes[i + 1] if i < n - 1 else self._nodes[0]

            if distance(n1.position, n2.position) > self._max_edge_length:
                # Earlier insertions shift the index of later ones
                index = i + 1 + len(pending)
                pending.append((self._make_node(midpoint(n1.position, n2.position)), index))

        if not pending:
            return

        grown = list(self._nodes)
        for node, index in pending:
            grown.insert(index, node)
        self._nodes = grown

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def get_points(self) -> list[Point]:
        """
        Get the current node positions in curve order.

        Draw the result by connecting consecutive points and the last
        point back to the first.

        Returns:
            New list of (x, y) tuples
        """
        return [(float(node.position[0]), float(node.position[1])) for node in self._nodes]

    def get_points_array(self) -> np.ndarray:
        """Get the current node positions as a new (n, 2) array."""
        if not self._nodes:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([node.position for node in self._nodes], dtype=np.float64)

    def _make_node(self, position: PointLike) -> Node:
        return Node(position, self._max_speed, self._max_force)

    def __repr__(self) -> str:
        return (
            f"DifferentialGrowth(nodes={len(self._nodes)}, iteration={self._iteration})"
        )


__all__ = ["DifferentialGrowth"]
