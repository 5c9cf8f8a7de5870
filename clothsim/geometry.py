"""
geometry.py
-----------
Static collision geometry and the bounding box.

* One circle and one axis-aligned rectangle, both immutable
* Points found inside an obstacle are pushed out to its boundary
* All resolvers work in place on an (n, 2) position array, restricted
  to the rows selected by a boolean ``movable`` mask (pinned points are skipped)
"""

from dataclasses import dataclass
import numpy as np

# Floor for distances used as divisors
EPSILON = 1e-4

# Push direction for a point sitting exactly on a circle's centre (screen "up")
CENTRED_NORMAL = np.array([0.0, -1.0])


@dataclass(frozen=True)
class Bounds:
    """Simulation area, ``[0, width] x [0, height]``."""
    width: float
    height: float


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float

    @property
    def center(self):
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ObstacleSet:
    circle: Circle
    rectangle: Rectangle


def _rows(positions, movable):
    if movable is None:
        return np.arange(len(positions))
    return np.flatnonzero(movable)


def keep_in_bounds(positions, movable, bounds):
    """Clamp each coordinate of the movable points into the bounding box."""
    idx = _rows(positions, movable)
    if idx.size == 0:
        return
    positions[idx, 0] = np.clip(positions[idx, 0], 0.0, bounds.width)
    positions[idx, 1] = np.clip(positions[idx, 1], 0.0, bounds.height)


def resolve_circle(positions, movable, circle):
    """Push points strictly inside ``circle`` radially out onto its boundary."""
    idx = _rows(positions, movable)
    if idx.size == 0:
        return
    delta = positions[idx] - circle.center
    dist = np.hypot(delta[:, 0], delta[:, 1])
    inside = dist < circle.radius
    if not inside.any():
        return

    idx, delta, dist = idx[inside], delta[inside], dist[inside]
    centred = dist < EPSILON
    safe_dist = np.where(centred, 1.0, dist)
    normals = delta / safe_dist[:, None]
    normals[centred] = CENTRED_NORMAL

    positions[idx] = circle.center + normals * circle.radius


def resolve_rectangle(positions, movable, rect):
    """Snap points inside ``rect`` (edges included) onto the nearest edge.

    Only one coordinate changes. Ties go to the first of left, right, top, bottom.
    """
    idx = _rows(positions, movable)
    if idx.size == 0:
        return
    x, y = positions[idx, 0], positions[idx, 1]
    right_edge = rect.x + rect.width
    bottom_edge = rect.y + rect.height
    inside = (x >= rect.x) & (x <= right_edge) & (y >= rect.y) & (y <= bottom_edge)
    if not inside.any():
        return

    idx, x, y = idx[inside], x[inside], y[inside]
    gaps = np.column_stack((x - rect.x,       # left
                            right_edge - x,   # right
                            y - rect.y,       # top
                            bottom_edge - y)) # bottom
    nearest = np.argmin(gaps, axis=1)

    positions[idx[nearest == 0], 0] = rect.x
    positions[idx[nearest == 1], 0] = right_edge
    positions[idx[nearest == 2], 1] = rect.y
    positions[idx[nearest == 3], 1] = bottom_edge


def resolve_collisions(positions, movable, obstacles):
    """Resolve the circle first, then the rectangle."""
    resolve_circle(positions, movable, obstacles.circle)
    resolve_rectangle(positions, movable, obstacles.rectangle)


def resolve_point(point, obstacles):
    """Return ``point`` pushed out of both obstacles."""
    positions = np.array([point], dtype=float)
    resolve_collisions(positions, None, obstacles)
    return positions[0]
