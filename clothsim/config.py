"""Simulation configuration and its command-line mapping."""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfigurationError
from .geometry import Bounds, Circle, ObstacleSet, Rectangle

# Defaults
DEFAULT_ROWS = 24
DEFAULT_COLS = 42
DEFAULT_SPACING = 18.0
DEFAULT_GRAVITY = 0.55
DEFAULT_DAMPING = 0.995
DEFAULT_ITERATIONS = 6
DEFAULT_WIND = 40.0
DEFAULT_WIDTH = 900.0
DEFAULT_HEIGHT = 600.0


@dataclass
class SimConfig:
    """All recognised simulation options.

    Obstacle geometry left as ``None`` is placed relative to the bounds,
    the way the cloth demo lays out its scene.
    """
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    spacing: float = DEFAULT_SPACING
    gravity: float = DEFAULT_GRAVITY
    damping: float = DEFAULT_DAMPING
    iterations: int = DEFAULT_ITERATIONS
    wind_strength: float = DEFAULT_WIND
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    top_margin: float = 60.0
    circle: Optional[Circle] = None
    rectangle: Optional[Rectangle] = None
    seed: Optional[int] = None

    def validate(self):
        """Raise InvalidConfigurationError for values the simulation cannot start from."""
        for name in ("rows", "cols", "spacing", "width", "height"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidConfigurationError(name, value)
        if self.iterations < 0:
            raise InvalidConfigurationError(
                "iterations", self.iterations,
                f"Invalid configuration: iterations={self.iterations!r} must not be negative.")
        obstacles = self.obstacles()
        circle = obstacles.circle
        if circle.radius < 0:
            raise InvalidConfigurationError(
                "circle.radius", circle.radius,
                f"Invalid configuration: circle radius {circle.radius!r} must not be negative.")
        rect = obstacles.rectangle
        if rect.width < 0 or rect.height < 0:
            raise InvalidConfigurationError(
                "rectangle", (rect.width, rect.height),
                f"Invalid configuration: rectangle size {rect.width!r} x {rect.height!r} "
                "must not be negative.")

        # Obstacles are resolved after the bounds clamp, so they must fit inside the bounds
        circle_extent = (circle.x - circle.radius, circle.y - circle.radius,
                         circle.x + circle.radius, circle.y + circle.radius)
        rect_extent = (rect.x, rect.y, rect.x + rect.width, rect.y + rect.height)
        for name, (left, top, right, bottom) in (("circle", circle_extent),
                                                 ("rectangle", rect_extent)):
            if left < 0 or top < 0 or right > self.width or bottom > self.height:
                raise InvalidConfigurationError(
                    name, getattr(obstacles, name),
                    f"Invalid configuration: {name} extends outside the "
                    f"{self.width!r} x {self.height!r} bounds.")
        return self

    def bounds(self):
        return Bounds(self.width, self.height)

    def obstacles(self):
        circle = self.circle
        if circle is None:
            circle = Circle(self.width * 0.7, self.height * 0.55, 80.0)
        rectangle = self.rectangle
        if rectangle is None:
            rectangle = Rectangle(self.width * 0.2, self.height * 0.72, 210.0, 55.0)
        return ObstacleSet(circle, rectangle)

    def origin(self):
        """Top-left point of the cloth, centred horizontally."""
        return ((self.width - (self.cols - 1) * self.spacing) / 2, self.top_margin)


# argparse option -> SimConfig field
_ARG_FIELDS = {
    'rows': 'rows',
    'cols': 'cols',
    'spacing': 'spacing',
    'gravity': 'gravity',
    'damping': 'damping',
    'iterations': 'iterations',
    'wind': 'wind_strength',
    'width': 'width',
    'height': 'height',
    'seed': 'seed',
}


def add_arguments(parser):
    """Register the simulation options on an argparse parser."""
    add = parser.add_argument
    add('--rows',       type=int,   default=DEFAULT_ROWS)
    add('--cols',       type=int,   default=DEFAULT_COLS)
    add('--spacing',    type=float, default=DEFAULT_SPACING)
    add('--gravity',    type=float, default=DEFAULT_GRAVITY)
    add('--damping',    type=float, default=DEFAULT_DAMPING)
    add('--iterations', type=int,   default=DEFAULT_ITERATIONS)
    add('--wind',       type=float, default=DEFAULT_WIND)
    add('--width',      type=float, default=DEFAULT_WIDTH)
    add('--height',     type=float, default=DEFAULT_HEIGHT)
    add('--seed',       type=int,   default=None)
    return parser


def config_from_args(args):
    """Build a validated SimConfig from parsed arguments."""
    values = {field: getattr(args, option)
              for option, field in _ARG_FIELDS.items()
              if hasattr(args, option)}
    return SimConfig(**values).validate()
