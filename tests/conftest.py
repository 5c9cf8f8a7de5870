"""Shared fixtures and test categorisation."""

from __future__ import annotations

import pathlib

import numpy as np
import pytest

from clothsim.geometry import Bounds, Circle, ObstacleSet, Rectangle


def pytest_collection_modifyitems(config, items):
    """Tag tests that drive the command-line front end as e2e, the rest as unit."""
    for item in items:
        name = pathlib.Path(str(item.fspath)).name.lower()
        if "front_end" in name:
            item.add_marker(pytest.mark.e2e)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def far_obstacles():
    """Obstacles parked well outside the area the tests use."""
    return ObstacleSet(Circle(-1000.0, -1000.0, 1.0),
                       Rectangle(-2000.0, -2000.0, 1.0, 1.0))


@pytest.fixture
def big_bounds():
    return Bounds(1000.0, 1000.0)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
