"""
solver.py
---------
Iterative relaxation of the distance constraints.

* Gauss-Seidel: constraints are visited in creation order and each one
  sees the corrections already made earlier in the same pass
* The correction is shared between the free endpoints; a pinned endpoint
  leaves the whole correction to its partner
* Moved points are clamped to the bounds immediately, obstacles are
  resolved once at the end of every pass
"""

from .geometry import EPSILON, resolve_collisions


def relax(mesh, iterations, bounds, obstacles):
    """Run ``iterations`` relaxation passes over every constraint."""
    c = mesh.constraints
    if len(c) == 0:
        return

    starts = c.idx_start.tolist()
    ends = c.idx_end.tolist()
    rests = c.rest_length.tolist()
    pinned = mesh.pinned.tolist()
    movable = ~mesh.pinned
    width, height = bounds.width, bounds.height

    def clamp(value, upper):
        return 0.0 if value < 0.0 else (upper if value > upper else value)

    for _ in range(iterations):
        # Work on plain floats within a pass; numpy is used again for collisions
        xs = mesh.positions[:, 0].tolist()
        ys = mesh.positions[:, 1].tolist()

        for i, j, rest in zip(starts, ends, rests):
            free_i, free_j = not pinned[i], not pinned[j]
            if not (free_i or free_j):
                continue
            dx = xs[j] - xs[i]
            dy = ys[j] - ys[i]
            dist = (dx * dx + dy * dy) ** 0.5 or EPSILON
            diff = (rest - dist) / dist
            share = 0.5 if (free_i and free_j) else 1.0
            adjust_x = dx * diff * share
            adjust_y = dy * diff * share

            if free_i:
                xs[i] = clamp(xs[i] - adjust_x, width)
                ys[i] = clamp(ys[i] - adjust_y, height)
            if free_j:
                xs[j] = clamp(xs[j] + adjust_x, width)
                ys[j] = clamp(ys[j] + adjust_y, height)

        mesh.positions[:, 0] = xs
        mesh.positions[:, 1] = ys
        resolve_collisions(mesh.positions, movable, obstacles)
