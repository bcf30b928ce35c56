"""Exceptions raised by terrain generation."""


class InvalidConfigError(ValueError):
    """Raised when terrain options cannot produce a valid grid."""


class OutOfRangeError(IndexError):
    """Raised when a grid coordinate falls outside [0, size - 1]."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"Coordinate ({x}, {y}) outside grid of size {size}")
        self.x = x
        self.y = y
        self.size = size
