"""Exception types for the cloth simulator."""

from __future__ import annotations


class ClothSimError(Exception):
    """Base class for cloth simulator errors."""


class InvalidConfigurationError(ClothSimError, ValueError):
    """Raised when a configuration value would start the simulation in an invalid state."""

    def __init__(self, field: str, value, message: str | None = None) -> None:
        if message is None:
            message = f"Invalid configuration: {field}={value!r} must be positive."
        super().__init__(message)
        self.field = field
        self.value = value


class PointIndexError(ClothSimError, IndexError):
    """Raised when a point index falls outside the mesh."""

    def __init__(self, index, num_points: int, message: str | None = None) -> None:
        if message is None:
            message = f"Point index {index} is out of range for a mesh of {num_points} points."
        super().__init__(message)
        self.index = index
        self.num_points = num_points


__all__ = ["ClothSimError", "InvalidConfigurationError", "PointIndexError"]
