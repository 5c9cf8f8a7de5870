"""The simulation context: owns the mesh, the obstacles and the wind level."""

import logging
import numpy as np

from .config import SimConfig
from .integrator import integrate
from .mesh import (build_mesh, default_pin_predicate, nearest_point,
                   pin_corners, toggle_pin, unpin_all)
from .solver import relax

logger = logging.getLogger("clothsim")


class Simulation:
    def __init__(self, config=None, rng=None):
        self.config = (config if config is not None else SimConfig()).validate()
        if rng is None:
            rng = np.random.default_rng(self.config.seed)
        self.rng = rng
        self.obstacles = self.config.obstacles()
        self.wind_strength = self.config.wind_strength
        self.paused = False
        self.frame = 0
        self.mesh = None
        self.reset()

    def reset(self):
        """Discard the current mesh and build a fresh one from the config."""
        cfg = self.config
        self.mesh = reset(cfg)
        self.frame = 0
        logger.info("Cloth reset: %d x %d points, %d constraints.",
                    cfg.rows, cfg.cols, len(self.mesh.constraints))
        return self.mesh

    def step(self):
        """Advance one tick: integrate, then relax the constraints."""
        if self.paused:
            return
        step(self.mesh, self.wind_strength, self.obstacles,
             config=self.config, rng=self.rng)
        self.frame += 1

    def toggle_pin(self, index):
        toggle_pin(self.mesh, index)

    def pin_corners(self):
        pin_corners(self.mesh)

    def unpin_all(self):
        unpin_all(self.mesh)

    def nearest_point(self, coordinate):
        return nearest_point(self.mesh, coordinate)

    def pick(self, coordinate, radius=None):
        """Nearest point to ``coordinate`` if it lies within ``radius`` (default: one spacing)."""
        if radius is None:
            radius = self.config.spacing
        index = self.nearest_point(coordinate)
        if index is None:
            return None
        dist = np.hypot(*(self.mesh.positions[index] - np.asarray(coordinate, dtype=float)))
        return index if dist <= radius else None

    def is_finite(self):
        return bool(np.isfinite(self.mesh.positions).all())


def reset(config=None):
    """Build a mesh from ``config`` without keeping a simulation around."""
    cfg = (config if config is not None else SimConfig()).validate()
    return build_mesh(cfg.rows, cfg.cols, cfg.spacing, origin=cfg.origin(),
                      pin_predicate=default_pin_predicate(cfg.cols))


def step(mesh, wind_strength, obstacles, config=None, rng=None):
    """Advance ``mesh`` one tick with the gravity, damping, iterations and bounds of ``config``."""
    cfg = config if config is not None else SimConfig()
    integrate(mesh, cfg.gravity, wind_strength, cfg.damping,
              cfg.bounds(), obstacles, rng)
    relax(mesh, cfg.iterations, cfg.bounds(), obstacles)
