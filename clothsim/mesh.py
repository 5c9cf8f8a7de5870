"""
mesh.py
-------
Points and distance constraints of the cloth, stored arena-style.

* Points live in contiguous numpy arrays (row-major, index = row * cols + col)
* Constraints hold integer indices into those arrays
* Pin/unpin transitions and hit-testing on the point arrays
"""

import logging
from dataclasses import dataclass
import numpy as np

from .errors import InvalidConfigurationError, PointIndexError

logger = logging.getLogger("clothsim")


@dataclass
class ConstraintArray:
    """Stores constraint endpoint indices and rest lengths."""
    idx_start: np.ndarray
    idx_end:   np.ndarray
    rest_length: np.ndarray

    def __len__(self):
        return len(self.idx_start)


@dataclass
class Mesh:
    positions: np.ndarray           # (n, 2)
    previous_positions: np.ndarray  # (n, 2), implicit velocity = positions - previous_positions
    pinned: np.ndarray              # (n,) bool
    constraints: ConstraintArray
    rows: int
    cols: int
    spacing: float

    @property
    def num_points(self):
        return len(self.positions)

    def edges(self):
        """Return constraint endpoint index pairs, shape (m, 2)."""
        return np.column_stack((self.constraints.idx_start, self.constraints.idx_end))

    def segments(self):
        """Return constraint endpoint coordinates, shape (m, 2, 2), for drawing."""
        return np.stack((self.positions[self.constraints.idx_start],
                         self.positions[self.constraints.idx_end]), axis=1)

    def grid(self):
        """Return X, Y arrays shaped (rows, cols) for plotting."""
        grid = self.positions.reshape(self.rows, self.cols, 2)
        return grid[:, :, 0], grid[:, :, 1]

    def lengths(self):
        delta = self.positions[self.constraints.idx_end] - self.positions[self.constraints.idx_start]
        return np.hypot(delta[:, 0], delta[:, 1])

    def stretch(self):
        """Relative strain of every constraint, (length - rest) / rest."""
        rest = self.constraints.rest_length
        return (self.lengths() - rest) / rest

    def max_stretch(self):
        if len(self.constraints) == 0:
            return 0.0
        return float(self.stretch().max())

    def check_index(self, index):
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise PointIndexError(index, self.num_points,
                                  f"Point index {index!r} is not an integer.")
        if not 0 <= index < self.num_points:
            raise PointIndexError(index, self.num_points)
        return int(index)


def default_pin_predicate(cols):
    """Pin the even columns of the top row, plus both top corners."""
    def predicate(row, col):
        return row == 0 and (col % 2 == 0 or col == 0 or col == cols - 1)
    return predicate


def build_mesh(rows, cols, spacing, origin=(0.0, 0.0), pin_predicate=None):
    """Lay out a rows x cols grid of points joined to their left and top neighbours."""
    for name, value in (("rows", rows), ("cols", cols), ("spacing", spacing)):
        if value <= 0:
            raise InvalidConfigurationError(name, value)
    if pin_predicate is None:
        pin_predicate = default_pin_predicate(cols)

    num_points = rows * cols
    x0, y0 = origin
    positions = np.empty((num_points, 2))
    pinned = np.zeros(num_points, dtype=bool)

    starts, ends = [], []
    for row in range(rows):
        for col in range(cols):
            idx = row * cols + col
            positions[idx] = (x0 + col * spacing, y0 + row * spacing)
            pinned[idx] = bool(pin_predicate(row, col))
            # Left neighbour
            if col > 0:
                starts.append(idx); ends.append(idx - 1)
            # Top neighbour
            if row > 0:
                starts.append(idx); ends.append(idx - cols)

    constraints = ConstraintArray(
        idx_start=np.array(starts, dtype=int),
        idx_end=np.array(ends, dtype=int),
        rest_length=np.full(len(starts), float(spacing)),
    )
    return Mesh(positions=positions,
                previous_positions=positions.copy(),
                pinned=pinned,
                constraints=constraints,
                rows=rows, cols=cols, spacing=float(spacing))


def set_pinned(mesh, index, value):
    """Pin or unpin a point. Pinning freezes its implicit velocity to zero."""
    index = mesh.check_index(index)
    mesh.pinned[index] = bool(value)
    if value:
        mesh.previous_positions[index] = mesh.positions[index]
    logger.debug("Point %d %s.", index, "pinned" if value else "unpinned")


def toggle_pin(mesh, index):
    index = mesh.check_index(index)
    set_pinned(mesh, index, not mesh.pinned[index])


def pin_corners(mesh):
    n, cols = mesh.num_points, mesh.cols
    for index in sorted({0, cols - 1, n - cols, n - 1}):
        set_pinned(mesh, index, True)


def unpin_all(mesh):
    mesh.pinned[:] = False
    logger.debug("All points unpinned.")


def move_point(mesh, index, coordinate):
    """Relocate a point externally.

    ``previous_positions`` is left alone, so a pinned point that is moved
    and later unpinned starts with the velocity implied by the move.
    """
    index = mesh.check_index(index)
    mesh.positions[index] = coordinate


def nearest_point(mesh, coordinate):
    """Index of the point closest to ``coordinate``, or None for an empty mesh."""
    if mesh.num_points == 0:
        return None
    delta = mesh.positions - np.asarray(coordinate, dtype=float)
    return int(np.argmin(np.einsum('ij,ij->i', delta, delta)))
