"""
Spatial data structures for efficient neighbour search.

Provides a quadtree supporting fixed-radius queries, rebuilt every
iteration from the current node positions.
"""

from .quadtree import Body, QuadTree, QuadTreeNode

__all__ = ["Body", "QuadTree", "QuadTreeNode"]
