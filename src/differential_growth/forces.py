"""
Steering forces acting on the nodes of a growing curve.

Two forces shape the curve:
- Separation: every node is pushed away from all nodes within
  ``desired_separation``, weighted by inverse distance
- Cohesion: every node is pulled toward the midpoint of its two
  neighbours on the curve

Both return one force per node as an (n, 2) array computed from the
current positions only. Callers apply them afterwards, so no node sees
a neighbour that has already moved in the same iteration.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from .geometry import cap_magnitude, midpoint, set_magnitude
from .spatial.quadtree import QuadTree
from .types import Node


def separation_forces(
    nodes: Sequence[Node],
    desired_separation: float,
    max_speed: float,
    max_force: float,
    tree: Optional[QuadTree] = None,
) -> np.ndarray:
    """
    Compute the separation force of every node.

    For each neighbour within ``desired_separation`` the unit vector
    pointing away from it, divided by the distance, is averaged. The
    average is treated as a desired velocity of length ``max_speed``;
    the force is that minus the node's velocity, capped to ``max_force``.
    Coincident neighbours (including the node itself) are skipped.

    Args:
        nodes: Nodes of the curve
        desired_separation: Radius beyond which nodes do not repel
        max_speed: Length of the desired velocity
        max_force: Upper bound for the force magnitude
        tree: Spatial index over the same nodes. Built here if None.

    Returns:
        (n, 2) array of forces, row i belonging to nodes[i]
    """
    n = len(nodes)
    forces = np.zeros((n, 2), dtype=np.float64)
    if n == 0:
        return forces

    if tree is None:
        tree = QuadTree.from_nodes(nodes)

    for i, node in enumerate(nodes):
        px = float(node.position[0])
        py = float(node.position[1])

        sx, sy = 0.0, 0.0
        count = 0
        for body in tree.within_radius(px, py, desired_separation):
            dx = px - body.x
            dy = py - body.y
            dist_sq = dx * dx + dy * dy
            if dist_sq > 0.0:
                dist = math.sqrt(dist_sq)
                # Unit vector away from the neighbour, scaled by 1/d
                sx += dx / dist / dist
                sy += dy / dist / dist
                count += 1

        steer = np.array((sx, sy), dtype=np.float64)
        if count > 0:
            steer /= count

        # Zero vector stays zero: set_magnitude clears non-finite components
        steer = set_magnitude(steer, max_speed)
        steer -= node.velocity
        forces[i] = cap_magnitude(steer, max_force)

    return forces


def cohesion_forces(nodes: Sequence[Node]) -> np.ndarray:
    """
    Compute the cohesion force of every node.

    Each node seeks the midpoint of its previous and next node on the
    closed curve. The first node's previous is the last node and the
    last node's next is the first.

    Args:
        nodes: Nodes of the curve in cyclic order

    Returns:
        (n, 2) array of forces, row i belonging to nodes[i]
    """
    n = len(nodes)
    forces = np.zeros((n, 2), dtype=np.float64)

    for i, node in enumerate(nodes):
        prev_node = nodes[(i - 1) % n]
        next_node = nodes[(i + 1) % n]
        target = midpoint(prev_node.position, next_node.position)
        forces[i] = node.seek(target)

    return forces


__all__ = ["separation_forces", "cohesion_forces"]
