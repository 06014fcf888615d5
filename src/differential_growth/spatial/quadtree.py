"""
Quadtree implementation for fixed-radius neighbour queries.

The quadtree recursively subdivides 2D space into quadrants so that
"all points within radius r" can be answered without comparing every
pair of points. It is built from a snapshot of positions and is meant
to be thrown away once the positions change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..types import Node


@dataclass(frozen=True)
class Body:
    """A point stored in the tree, copied from a node position."""

    x: float
    y: float
    index: int = -1  # Original node index


@dataclass
class QuadTreeNode:
    """
    A node in the quadtree.

    Attributes:
        x, y: Center of this region
        half_size: Half the width/height of this region
        depth: Distance from the root
        bodies: Bodies held while this node is a leaf
        children: Four child quadrants [NW, NE, SW, SE] if internal
    """

    x: float
    y: float
    half_size: float
    depth: int = 0

    bodies: List[Body] = field(default_factory=list)
    children: Optional[List[Optional[QuadTreeNode]]] = None

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.children is None

    def is_empty(self) -> bool:
        """True if this node contains no bodies."""
        return not self.bodies and self.children is None

    def contains(self, x: float, y: float) -> bool:
        """Check if point (x, y) is within this node's region."""
        return abs(x - self.x) <= self.half_size and abs(y - self.y) <= self.half_size

    def get_quadrant(self, x: float, y: float) -> int:
        """
        Get quadrant index for a point.

        Returns:
            0=NW, 1=NE, 2=SW, 3=SE
        """
        east = x >= self.x
        south = y >= self.y
        return (2 if south else 0) + (1 if east else 0)

    def intersects_circle(self, x: float, y: float, radius: float) -> bool:
        """Check if a circle overlaps this node's square region."""
        dx = max(abs(x - self.x) - self.half_size, 0.0)
        dy = max(abs(y - self.y) - self.half_size, 0.0)
        return dx * dx + dy * dy <= radius * radius


class QuadTree:
    """
    Point-region quadtree answering radius queries.

    Leaves hold up to ``capacity`` bodies before they split. Subdivision
    stops at ``max_depth``, so coincident or nearly coincident points end
    up sharing a leaf instead of recursing forever.

    Usage:
        tree = QuadTree.from_nodes(nodes)
        for body in tree.within_radius(x, y, radius=14.0):
            print(body.index)

    Average query cost is O(log n + k) for k results, against O(n) for a
    linear scan.
    """

    def __init__(
        self,
        bounds: Tuple[float, float, float, float],
        capacity: int = 8,
        max_depth: int = 24,
    ):
        """
        Initialize quadtree.

        Args:
            bounds: (min_x, min_y, max_x, max_y) bounding box
            capacity: Bodies per leaf before it subdivides
            max_depth: Depth at which leaves stop subdividing
        """
        min_x, min_y, max_x, max_y = bounds
        center_x = (min_x + max_x) / 2
        center_y = (min_y + max_y) / 2
        # Use max dimension to ensure square region
        half_size = max(max_x - min_x, max_y - min_y) / 2

        self.root = QuadTreeNode(center_x, center_y, half_size)
        self.capacity = max(1, int(capacity))
        self.max_depth = max(0, int(max_depth))
        self.body_count = 0

    def __len__(self) -> int:
        return self.body_count

    def insert(self, body: Body) -> None:
        """Insert a body into the quadtree."""
        self._insert_into(self.root, body)
        self.body_count += 1

    def _insert_into(self, node: QuadTreeNode, body: Body) -> None:
        """Recursively insert body into subtree rooted at node."""
        if node.is_leaf():
            node.bodies.append(body)
            if len(node.bodies) > self.capacity and node.depth < self.max_depth:
                # Overfull leaf - subdivide and push bodies down
                existing = node.bodies
                node.bodies = []
                node.children = [None, None, None, None]
                for b in existing:
                    self._insert_into_child(node, b)
            return

        self._insert_into_child(node, body)

    def _insert_into_child(self, node: QuadTreeNode, body: Body) -> None:
        """Insert body into the appropriate child of node."""
        assert node.children is not None
        quadrant = node.get_quadrant(body.x, body.y)

        child = node.children[quadrant]
        if child is None:
            hs = node.half_size / 2
            cx = node.x + hs * (1 if quadrant & 1 else -1)
            cy = node.y + hs * (1 if quadrant & 2 else -1)
            child = QuadTreeNode(cx, cy, hs, depth=node.depth + 1)
            node.children[quadrant] = child

        self._insert_into(child, body)

    def within_radius(self, x: float, y: float, radius: float) -> List[Body]:
        """
        Find all bodies within a distance of a point.

        The boundary is inclusive, and a body located exactly at (x, y)
        is part of the result.

        Args:
            x, y: Query point
            radius: Search radius

        Returns:
            Bodies with distance <= radius, in tree order
        """
        found: List[Body] = []
        if radius < 0:
            return found
        self._collect(self.root, x, y, radius * radius, radius, found)
        return found

    def _collect(
        self,
        node: QuadTreeNode,
        x: float,
        y: float,
        r_sq: float,
        radius: float,
        found: List[Body],
    ) -> None:
        """Recursively gather bodies from subtrees overlapping the circle."""
        if not node.intersects_circle(x, y, radius):
            return

        if node.is_leaf():
            for body in node.bodies:
                dx = body.x - x
                dy = body.y - y
                if dx * dx + dy * dy <= r_sq:
                    found.append(body)
            return

        if node.children:
            for child in node.children:
                if child is not None:
                    self._collect(child, x, y, r_sq, radius, found)

    @classmethod
    def from_nodes(
        cls,
        nodes: Sequence[Node],
        padding: float = 1.0,
        capacity: int = 8,
        max_depth: int = 24,
    ) -> QuadTree:
        """
        Build quadtree from a list of Node objects.

        Coordinates are copied into bodies, so moving the nodes afterwards
        does not change the answers of this tree.

        Args:
            nodes: List of Node objects with a position
            padding: Padding around bounding box
            capacity: Bodies per leaf before it subdivides
            max_depth: Depth at which leaves stop subdividing

        Returns:
            QuadTree with all nodes inserted, body index = list index
        """
        if not nodes:
            return cls((0, 0, 1, 1), capacity=capacity, max_depth=max_depth)

        xs = [float(n.position[0]) for n in nodes]
        ys = [float(n.position[1]) for n in nodes]

        min_x = min(xs) - padding
        min_y = min(ys) - padding
        max_x = max(xs) + padding
        max_y = max(ys) + padding

        tree = cls((min_x, min_y, max_x, max_y), capacity=capacity, max_depth=max_depth)

        for i, (x, y) in enumerate(zip(xs, ys)):
            tree.insert(Body(x, y, index=i))

        return tree


__all__ = ["Body", "QuadTree", "QuadTreeNode"]
