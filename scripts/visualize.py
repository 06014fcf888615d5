#!/usr/bin/env python3
"""
Visualization script for differential growth.

Generates images of a growing curve into ./build/

Usage:
    uv run python scripts/visualize.py
    uv run python scripts/visualize.py --iterations 800 --snapshots 4
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from differential_growth import DifferentialGrowth, generate_points_on_circle

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

NAVY = "#000080"
MINTCREAM = "#f5fffa"


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def draw_curve(points, title, ax):
    """Draw a closed curve on an axis."""
    # Close the loop: last point connects back to the first
    xs = [p[0] for p in points] + [points[0][0]]
    ys = [p[1] for p in points] + [points[0][1]]

    ax.plot(xs, ys, color=NAVY, linewidth=0.8)
    ax.set_facecolor(MINTCREAM)
    ax.set_title(f"{title} ({len(points)} nodes)", fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])


def save_growth(sim, iterations, snapshots, filename):
    """Run the simulation and save evenly spaced snapshots side by side."""
    cols = max(1, snapshots)
    fig, axes = plt.subplots(1, cols, figsize=(5 * cols, 5))
    if cols == 1:
        axes = [axes]

    step = max(1, iterations // cols)
    for i, ax in enumerate(axes):
        sim.run(iterations=step)
        draw_curve(sim.get_points(), f"Iteration {sim.iteration}", ax)
        print(f"  Snapshot {i + 1}/{cols}: {len(sim)} nodes")

    fig.patch.set_facecolor(MINTCREAM)
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def main():
    parser = argparse.ArgumentParser(description="Render a differential growth run")
    parser.add_argument("--points", type=int, default=10, help="Starting points on the circle")
    parser.add_argument("--radius", type=float, default=10.0, help="Starting circle radius")
    parser.add_argument("--iterations", type=int, default=400, help="Total iterations")
    parser.add_argument("--snapshots", type=int, default=4, help="Number of snapshots")
    parser.add_argument("--max-force", type=float, default=1.5)
    parser.add_argument("--max-speed", type=float, default=1.0)
    parser.add_argument("--desired-separation", type=float, default=14.0)
    parser.add_argument("--separation-cohesion-ratio", type=float, default=1.1)
    parser.add_argument("--max-edge-length", type=float, default=5.0)
    parser.add_argument("--output", default="differential_growth.png", help="Image file name")

    args = parser.parse_args()

    ensure_build_dir()

    starting_points = generate_points_on_circle(0.0, 0.0, args.radius, args.points)
    sim = DifferentialGrowth(
        starting_points,
        args.max_force,
        args.max_speed,
        args.desired_separation,
        args.separation_cohesion_ratio,
        args.max_edge_length,
    )

    print(f"Growing {args.points} points for {args.iterations} iterations...")
    save_growth(sim, args.iterations, args.snapshots, args.output)


if __name__ == "__main__":
    main()
