"""Tests for the Node point mass."""

import math

import numpy as np
import pytest

from differential_growth import Node


def make_node(x=0.0, y=0.0, max_speed=1.0, max_force=1.5):
    return Node((x, y), max_speed, max_force)


class TestNodeCreation:
    """Tests for node construction."""

    def test_starts_at_rest(self):
        """New nodes have zero velocity and acceleration."""
        node = make_node(3.0, 4.0)
        assert node.x == 3.0
        assert node.y == 4.0
        assert np.array_equal(node.velocity, [0.0, 0.0])
        assert np.array_equal(node.acceleration, [0.0, 0.0])

    def test_limits_stored(self):
        """Force and speed limits are kept as floats."""
        node = Node((0, 0), 2, 3)
        assert node.max_speed == 2.0
        assert node.max_force == 3.0

    def test_position_is_copied(self):
        """Mutating the source array does not move the node."""
        source = np.array([1.0, 2.0])
        node = Node(source, 1.0, 1.0)
        source[0] = 100.0
        assert node.x == 1.0

    def test_copy_is_independent(self):
        """copy() duplicates all vectors."""
        node = make_node(1.0, 1.0)
        node.velocity[:] = (0.5, 0.0)
        clone = node.copy()
        clone.position[0] = 9.0
        clone.velocity[0] = 0.0
        assert node.x == 1.0
        assert node.velocity[0] == 0.5


class TestApplyForce:
    """Tests for force accumulation."""

    def test_forces_accumulate(self):
        """Several forces add up in the acceleration."""
        node = make_node()
        node.apply_force(np.array([1.0, 0.0]))
        node.apply_force(np.array([0.0, 2.0]))
        assert np.allclose(node.acceleration, [1.0, 2.0])

    def test_no_capping(self):
        """apply_force does not enforce max_force."""
        node = make_node(max_force=1.0)
        node.apply_force(np.array([50.0, 0.0]))
        assert node.acceleration[0] == 50.0


class TestUpdate:
    """Tests for integration."""

    def test_simple_step(self):
        """Velocity and position follow the acceleration."""
        node = make_node(max_speed=10.0)
        node.apply_force(np.array([1.0, 2.0]))
        node.update()
        assert np.allclose(node.velocity, [1.0, 2.0])
        assert np.allclose(node.position, [1.0, 2.0])

    def test_acceleration_reset(self):
        """Acceleration is cleared after update."""
        node = make_node()
        node.apply_force(np.array([0.3, 0.3]))
        node.update()
        assert np.array_equal(node.acceleration, [0.0, 0.0])

    def test_velocity_capped(self):
        """Velocity is limited to max_speed, keeping its direction."""
        node = make_node(max_speed=1.0)
        node.apply_force(np.array([3.0, 4.0]))
        node.update()
        assert math.hypot(*node.velocity) == pytest.approx(1.0)
        assert np.allclose(node.velocity, [0.6, 0.8])
        assert np.allclose(node.position, [0.6, 0.8])

    @pytest.mark.parametrize(
        "force",
        [(1e6, -1e6), (-0.5, 0.25), (0.0, 0.0), (1e-12, 0.0), (-7.0, 3.0)],
    )
    def test_velocity_cap_invariant(self, force):
        """|velocity| <= max_speed for any acceleration."""
        node = make_node(max_speed=2.5)
        for _ in range(3):
            node.apply_force(np.array(force))
            node.update()
            assert math.hypot(*node.velocity) <= 2.5 + 1e-12

    def test_velocity_persists(self):
        """Without forces the node keeps drifting."""
        node = make_node(max_speed=5.0)
        node.apply_force(np.array([1.0, 0.0]))
        node.update()
        node.update()
        assert np.allclose(node.position, [2.0, 0.0])


class TestSeek:
    """Tests for the seek steering behaviour."""

    def test_seek_from_rest(self):
        """At rest, seek returns desired velocity of length max_speed."""
        node = make_node(max_speed=1.0, max_force=1.5)
        force = node.seek(np.array([10.0, 0.0]))
        assert np.allclose(force, [1.0, 0.0])

    def test_seek_capped_to_max_force(self):
        """Steering force never exceeds max_force."""
        node = make_node(max_speed=5.0, max_force=0.5)
        node.velocity[:] = (-5.0, 0.0)
        force = node.seek(np.array([10.0, 0.0]))
        assert math.hypot(*force) == pytest.approx(0.5)
        assert force[0] > 0

    def test_seek_own_position(self):
        """Seeking the current position skips rescaling and brakes."""
        node = make_node(max_speed=1.0, max_force=1.5)
        node.velocity[:] = (0.5, 0.0)
        force = node.seek(node.position.copy())
        assert np.all(np.isfinite(force))
        assert np.allclose(force, [-0.5, 0.0])

    def test_seek_does_not_mutate(self):
        """seek() is a pure computation."""
        node = make_node(1.0, 1.0)
        node.seek(np.array([5.0, 5.0]))
        assert node.x == 1.0
        assert np.array_equal(node.acceleration, [0.0, 0.0])
