"""
clothsim
--------
2D position-based cloth: Verlet points, distance constraints,
a circle and a rectangle to drape over.
"""

from .config import SimConfig
from .errors import ClothSimError, InvalidConfigurationError, PointIndexError
from .geometry import Bounds, Circle, ObstacleSet, Rectangle, resolve_collisions, resolve_point
from .integrator import integrate
from .mesh import (Mesh, build_mesh, default_pin_predicate, move_point, nearest_point,
                   pin_corners, set_pinned, toggle_pin, unpin_all)
from .simulation import Simulation, reset, step
from .solver import relax

__all__ = [
    "SimConfig",
    "ClothSimError",
    "InvalidConfigurationError",
    "PointIndexError",
    "Bounds",
    "Circle",
    "ObstacleSet",
    "Rectangle",
    "resolve_collisions",
    "resolve_point",
    "integrate",
    "Mesh",
    "build_mesh",
    "default_pin_predicate",
    "move_point",
    "nearest_point",
    "pin_corners",
    "set_pinned",
    "toggle_pin",
    "unpin_all",
    "Simulation",
    "reset",
    "step",
    "relax",
]
