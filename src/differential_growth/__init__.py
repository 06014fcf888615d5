"""
differential-growth: Differential growth of closed curves in Python.

A closed curve of nodes repels nearby nodes, stays attached to its curve
neighbours and subdivides stretched edges, folding into organic,
space-filling patterns over many iterations.

Quick start:
    from differential_growth import DifferentialGrowth, generate_points_on_circle

    points = generate_points_on_circle(0.0, 0.0, 10.0, 10)
    sim = DifferentialGrowth(points, 1.5, 1.0, 14.0, 1.1, 5.0)
    sim.tick()
    points_to_draw = sim.get_points()
"""

__version__ = "0.3.1"

from .base import IterativeSimulation
from .forces import cohesion_forces, separation_forces
from .generators import generate_points_on_circle
from .metrics import (
    bounding_box,
    edge_length_variance,
    edge_lengths,
    perimeter,
)
from .simulation import DifferentialGrowth
from .spatial import Body, QuadTree, QuadTreeNode
from .types import (
    Event,
    EventCallback,
    EventType,
    Node,
    Point,
    PointLike,
)
from .validation import (
    CurveStructureWarning,
    InvalidParameterError,
    InvalidPointsError,
    ValidationError,
    validate_count,
    validate_points,
    validate_positive,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "EventType",
    "Event",
    "EventCallback",
    "Point",
    "PointLike",
    # Simulation
    "IterativeSimulation",
    "DifferentialGrowth",
    # Forces
    "separation_forces",
    "cohesion_forces",
    # Starting points
    "generate_points_on_circle",
    # Metrics
    "edge_lengths",
    "perimeter",
    "edge_length_variance",
    "bounding_box",
    # Spatial data structures
    "Body",
    "QuadTree",
    "QuadTreeNode",
    # Validation
    "ValidationError",
    "InvalidPointsError",
    "InvalidParameterError",
    "CurveStructureWarning",
    "validate_points",
    "validate_positive",
    "validate_count",
]
