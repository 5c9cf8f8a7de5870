"""Verlet integration of the free points under gravity and gusty wind."""

import numpy as np

from .geometry import keep_in_bounds, resolve_collisions

# Scales wind strength into a per-tick horizontal displacement
WIND_GUST_COEFF = 0.06


def integrate(mesh, gravity, wind_strength, damping, bounds, obstacles, rng=None):
    """Advance every unpinned point one tick.

    The damped positional delta is taken before ``previous_positions`` is
    committed, and gravity and wind are added on top of it. Points are then
    clamped to ``bounds`` and pushed out of ``obstacles``.
    """
    if rng is None:
        rng = np.random.default_rng()
    free = np.flatnonzero(~mesh.pinned)
    if free.size == 0:
        return

    pos = mesh.positions
    velocity = (pos[free] - mesh.previous_positions[free]) * damping
    mesh.previous_positions[free] = pos[free]

    # One independent gust sample per point, applied to x only
    gust = (rng.random(free.size) - 0.5) * wind_strength * WIND_GUST_COEFF
    pos[free, 0] += velocity[:, 0] + gust
    pos[free, 1] += velocity[:, 1] + gravity

    movable = ~mesh.pinned
    keep_in_bounds(pos, movable, bounds)
    resolve_collisions(pos, movable, obstacles)
