"""Tests for the Verlet integration step."""

import numpy as np

from clothsim.geometry import Bounds, Circle, ObstacleSet, Rectangle
from clothsim.integrator import WIND_GUST_COEFF, integrate
from clothsim.mesh import build_mesh


def free_mesh(rows=2, cols=2, spacing=10.0, origin=(100.0, 100.0)):
    return build_mesh(rows, cols, spacing, origin=origin,
                      pin_predicate=lambda row, col: False)


def test_gravity_only(big_bounds, far_obstacles, rng):
    mesh = free_mesh()
    start = mesh.positions.copy()
    integrate(mesh, 0.5, 0.0, 0.99, big_bounds, far_obstacles, rng)
    np.testing.assert_allclose(mesh.positions, start + [0.0, 0.5])
    np.testing.assert_array_equal(mesh.previous_positions, start)


def test_damped_velocity_carried(big_bounds, far_obstacles, rng):
    mesh = free_mesh()
    mesh.previous_positions -= (2.0, 1.0)  # velocity (2, 1)
    start = mesh.positions.copy()
    integrate(mesh, 0.0, 0.0, 0.5, big_bounds, far_obstacles, rng)
    np.testing.assert_allclose(mesh.positions, start + [1.0, 0.5])
    np.testing.assert_array_equal(mesh.previous_positions, start)


def test_wind_only_moves_x_within_gust_range(big_bounds, far_obstacles, rng):
    mesh = free_mesh(4, 4)
    start = mesh.positions.copy()
    wind = 40.0
    integrate(mesh, 0.0, wind, 1.0, big_bounds, far_obstacles, rng)
    dx = mesh.positions[:, 0] - start[:, 0]
    np.testing.assert_array_equal(mesh.positions[:, 1], start[:, 1])
    half_range = 0.5 * wind * WIND_GUST_COEFF
    assert np.all(np.abs(dx) <= half_range + 1e-9)
    # Independent samples per point
    assert len(np.unique(dx)) > 1


def test_same_seed_same_result(big_bounds, far_obstacles):
    a, b = free_mesh(3, 3), free_mesh(3, 3)
    integrate(a, 0.3, 50.0, 0.99, big_bounds, far_obstacles, np.random.default_rng(7))
    integrate(b, 0.3, 50.0, 0.99, big_bounds, far_obstacles, np.random.default_rng(7))
    np.testing.assert_array_equal(a.positions, b.positions)


def test_pinned_points_untouched(big_bounds, far_obstacles, rng):
    mesh = free_mesh()
    mesh.pinned[1] = True
    mesh.previous_positions[1] = (0.0, 0.0)
    before_pos = mesh.positions[1].copy()
    before_prev = mesh.previous_positions[1].copy()
    integrate(mesh, 1.0, 80.0, 0.99, big_bounds, far_obstacles, rng)
    np.testing.assert_array_equal(mesh.positions[1], before_pos)
    np.testing.assert_array_equal(mesh.previous_positions[1], before_prev)


def test_clamped_to_bounds(far_obstacles, rng):
    mesh = free_mesh(origin=(0.0, 0.0))
    mesh.previous_positions += (50.0, -50.0)   # moving left and down fast
    integrate(mesh, 0.0, 0.0, 1.0, Bounds(15.0, 15.0), far_obstacles, rng)
    assert mesh.positions[:, 0].min() >= 0.0
    assert mesh.positions[:, 1].max() <= 15.0


def test_pushed_out_of_circle_after_clamp(big_bounds, rng):
    mesh = free_mesh(1, 1, origin=(100.0, 90.0))
    obstacles = ObstacleSet(Circle(100.0, 100.0, 20.0), Rectangle(-50.0, -50.0, 1.0, 1.0))
    integrate(mesh, 5.0, 0.0, 1.0, big_bounds, obstacles, rng)
    np.testing.assert_allclose(mesh.positions[0], (100.0, 80.0))
    # The collision push does not rewrite the stored previous position
    np.testing.assert_array_equal(mesh.previous_positions[0], (100.0, 90.0))
