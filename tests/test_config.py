"""Configuration defaults, validation and the argparse mapping."""

import argparse

import pytest

from clothsim.config import SimConfig, add_arguments, config_from_args
from clothsim.errors import InvalidConfigurationError
from clothsim.geometry import Circle, Rectangle


def test_defaults_describe_the_demo_scene():
    cfg = SimConfig()
    assert (cfg.rows, cfg.cols, cfg.spacing) == (24, 42, 18.0)
    assert cfg.iterations == 6
    obstacles = cfg.obstacles()
    assert (obstacles.circle.x, obstacles.circle.y) == pytest.approx((630.0, 330.0))
    assert obstacles.circle.radius == 80.0
    assert obstacles.rectangle.width == 210.0
    assert obstacles.rectangle.y == pytest.approx(600.0 * 0.72)
    assert cfg.origin() == pytest.approx(((900.0 - 41 * 18.0) / 2, 60.0))


def test_explicit_obstacles_kept():
    circle = Circle(1.0, 2.0, 3.0)
    rect = Rectangle(4.0, 5.0, 6.0, 7.0)
    obstacles = SimConfig(circle=circle, rectangle=rect).obstacles()
    assert obstacles.circle is circle
    assert obstacles.rectangle is rect


@pytest.mark.parametrize("overrides", [
    {"rows": 0},
    {"cols": -3},
    {"spacing": 0.0},
    {"width": 0.0},
    {"height": -10.0},
    {"iterations": -1},
    {"circle": Circle(0.0, 0.0, -1.0)},
    {"rectangle": Rectangle(0.0, 0.0, -1.0, 5.0)},
])
def test_validate_rejects(overrides):
    with pytest.raises(InvalidConfigurationError) as excinfo:
        SimConfig(**overrides).validate()
    assert isinstance(excinfo.value, ValueError)


def test_validate_returns_config():
    cfg = SimConfig(iterations=0)
    assert cfg.validate() is cfg


def test_arguments_map_onto_config():
    parser = add_arguments(argparse.ArgumentParser())
    args = parser.parse_args(['--rows', '5', '--cols', '6', '--spacing', '12',
                              '--wind', '7.5', '--seed', '3', '--iterations', '2'])
    cfg = config_from_args(args)
    assert (cfg.rows, cfg.cols, cfg.spacing) == (5, 6, 12.0)
    assert cfg.wind_strength == 7.5
    assert cfg.seed == 3
    assert cfg.iterations == 2
    assert cfg.damping == SimConfig().damping


def test_invalid_arguments_fail_fast():
    parser = add_arguments(argparse.ArgumentParser())
    with pytest.raises(InvalidConfigurationError):
        config_from_args(parser.parse_args(['--rows', '0']))


@pytest.mark.parametrize("overrides", [
    {"circle": Circle(20.0, 300.0, 50.0)},            # crosses the left edge
    {"circle": Circle(450.0, 560.0, 80.0)},           # crosses the bottom edge
    {"rectangle": Rectangle(800.0, 100.0, 210.0, 55.0)},
    {"rectangle": Rectangle(100.0, -5.0, 50.0, 20.0)},
    {"width": 200.0},                                 # default rectangle no longer fits
])
def test_obstacles_must_fit_inside_bounds(overrides):
    with pytest.raises(InvalidConfigurationError):
        SimConfig(**overrides).validate()


def test_obstacle_touching_bounds_is_allowed():
    cfg = SimConfig(circle=Circle(80.0, 80.0, 80.0),
                    rectangle=Rectangle(690.0, 545.0, 210.0, 55.0))
    assert cfg.validate() is cfg
