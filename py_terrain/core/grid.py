"""
Write-once elevation grid.

Cells hold an explicitly tagged optional value: a float array carries the
values and a parallel boolean mask records which cells have been assigned,
so a legitimate 0.0 is never mistaken for "unset".
"""

from typing import Callable, Optional

import numpy as np

from ..errors import InvalidConfigError, OutOfRangeError


def _check_size(size) -> int:
    """Validate a grid side length."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidConfigError(f"Grid size must be an integer, got {size!r}")
    if size < 1:
        raise InvalidConfigError(f"Grid size must be at least 1, got {size}")
    return int(size)


class Grid:
    """
    A ``size x size`` grid of optional elevation values indexed ``[x, y]``.

    Once a cell holds a value it is never overwritten: ``set`` on an
    assigned cell is a no-op.
    """

    def __init__(self, size: int):
        self.size = _check_size(size)
        self._values = np.zeros((self.size, self.size), dtype=np.float64)
        self._assigned = np.zeros((self.size, self.size), dtype=bool)

    @classmethod
    def from_array(cls, values) -> "Grid":
        """
        Build a grid from a square array-like.

        ``None`` and NaN entries are treated as unset cells.

        Args:
            values: Nested sequence or 2D array indexed ``[x][y]``

        Returns:
            New Grid holding the given values
        """
        data = np.array(values, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise InvalidConfigError(
                f"Map must be a square 2D array, got shape {data.shape}"
            )

        grid = cls(data.shape[0])
        grid._assigned = ~np.isnan(data)
        grid._values = np.where(grid._assigned, data, 0.0)
        return grid

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfRangeError(x, y, self.size)

    def get(self, x: int, y: int) -> Optional[float]:
        """Return the value at (x, y), or None if the cell is unset."""
        self._check(x, y)
        if not self._assigned[x, y]:
            return None
        return float(self._values[x, y])

    def set(self, x: int, y: int, value: float) -> bool:
        """
        Assign a value to (x, y) if the cell is still unset.

        Returns:
            True if the value was written, False if the cell already had one
        """
        self._check(x, y)
        if self._assigned[x, y]:
            return False
        self._values[x, y] = value
        self._assigned[x, y] = True
        return True

    def is_set(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self._assigned[x, y])

    def is_complete(self) -> bool:
        """True when every cell holds a value."""
        return bool(self._assigned.all())

    def count_set(self) -> int:
        return int(self._assigned.sum())

    def each(self, fn: Callable[[Optional[float], int, int], None]) -> None:
        """
        Call ``fn(value, x, y)`` for every cell.

        Traversal is ascending x, then ascending y within each x. Unset
        cells are passed as None.
        """
        for x in range(self.size):
            for y in range(self.size):
                fn(self.get(x, y), x, y)

    def to_array(self, fill: float = np.nan) -> np.ndarray:
        """Copy the values into a float64 array, unset cells replaced by ``fill``."""
        return np.where(self._assigned, self._values, fill)

    def copy(self) -> "Grid":
        grid = Grid(self.size)
        grid._values = self._values.copy()
        grid._assigned = self._assigned.copy()
        return grid

    def __getitem__(self, key) -> Optional[float]:
        x, y = key
        return self.get(x, y)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self._assigned, other._assigned)
            and np.array_equal(self.to_array(0.0), other.to_array(0.0))
        )

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, set={self.count_set()}/{self.size * self.size})"
