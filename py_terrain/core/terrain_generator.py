"""
Diamond-square heightmap generation.

This module fills a write-once Grid with elevations in [0, 1] using the
diamond-square midpoint displacement algorithm:
http://en.wikipedia.org/wiki/Diamond-square_algorithm

The four corners and the center are seeded with uniform random values, then
every quadrant computes its center (diamond step) and its edge midpoints
(square step) from averaged corners plus a displacement that shrinks with
both quadrant size and recursion depth.
"""

import time
from typing import Optional

import numpy as np
import structlog

from ..config.terrain_config import TerrainConfig
from ..utils.random import RandomSource, make_random_source
from .grid import Grid

logger = structlog.get_logger()


class TerrainGenerator:
    """
    Populates a Grid with diamond-square elevations.

    Draw order from the random source is fixed: five seeding draws (corners
    clockwise from the origin, then the center), then per quadrant one draw
    for the diamond step and four for the square step (top, right, bottom,
    left). Quadrants recurse top-left, bottom-left, bottom-right, top-right.
    A draw is consumed for every computed value, even when the write turns
    out to be a no-op.
    """

    def __init__(
        self,
        config: TerrainConfig,
        grid: Optional[Grid] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize the terrain generator.

        Args:
            config: Validated terrain configuration
            grid: Optional pre-existing grid; already set cells are kept
            random_source: Callable returning uniform values in [0, 1)
        """
        self.config = config
        self.size = config.size
        self.noise = config.noise
        self.grid = grid if grid is not None else Grid(self.size)
        self._random = random_source if random_source is not None else make_random_source()

    def generate(self) -> Grid:
        """
        Seed the corners and center, then subdivide the whole grid.

        Returns:
            The populated grid
        """
        start = time.time()
        preset = self.grid.count_set()
        last = self.size - 1
        center = self.size // 2

        self.grid.set(0, 0, self._random())
        self.grid.set(last, 0, self._random())
        self.grid.set(last, last, self._random())
        self.grid.set(0, last, self._random())
        self.grid.set(center, center, self._random())

        logger.debug(
            "Seeded terrain corners",
            corners=[self.grid.get(0, 0), self.grid.get(last, 0),
                     self.grid.get(last, last), self.grid.get(0, last)],
            center=self.grid.get(center, center),
        )

        self.subdivide(0, 0, last, 1)

        logger.info(
            "Terrain generated",
            size=self.size,
            noise=self.noise,
            preset_cells=preset,
            elapsed=round(time.time() - start, 4),
        )
        return self.grid

    def _average(self, *values: float) -> float:
        return sum(values) / len(values)

    def _constrain(self, value: float) -> float:
        """Limit values to 0-1 range."""
        return float(np.clip(value, 0.0, 1.0))

    def _displace(self, magnitude: float, roughness: float) -> float:
        """Random offset scaled by quadrant span relative to the grid."""
        max_offset = magnitude / (self.size + self.size) * roughness
        return (self._random() - 0.5) * max_offset

    def subdivide(self, x: int, y: int, s: int, level: int) -> None:
        """
        Fill the quadrant with origin (x, y) and span s, then recurse.

        Args:
            x: Quadrant origin column
            y: Quadrant origin row
            s: Distance between the quadrant's opposite corners
            level: Recursion depth, starting at 1
        """
        if s <= 1:
            return

        half = s // 2
        mid_x = x + half
        mid_y = y + half
        roughness = self.noise / level
        magnitude = half + half

        top_left = self.grid.get(x, y)
        top_right = self.grid.get(x + s, y)
        bottom_left = self.grid.get(x, y + s)
        bottom_right = self.grid.get(x + s, y + s)

        # Diamond step
        center_value = self._constrain(
            self._average(top_left, top_right, bottom_right, bottom_left)
            + self._displace(magnitude, roughness)
        )
        self.grid.set(mid_x, mid_y, center_value)

        # Square step
        top_value = self._constrain(
            self._average(top_left, top_right) + self._displace(magnitude, roughness)
        )
        right_value = self._constrain(
            self._average(top_right, bottom_right) + self._displace(magnitude, roughness)
        )
        bottom_value = self._constrain(
            self._average(bottom_left, bottom_right) + self._displace(magnitude, roughness)
        )
        left_value = self._constrain(
            self._average(top_left, bottom_left) + self._displace(magnitude, roughness)
        )

        self.grid.set(x + half, y, top_value)
        self.grid.set(x + s, y + half, right_value)
        self.grid.set(x + half, y + s, bottom_value)
        self.grid.set(x, y + half, left_value)

        self.subdivide(x, y, half, level + 1)
        self.subdivide(x, mid_y, half, level + 1)
        self.subdivide(mid_x, mid_y, half, level + 1)
        self.subdivide(mid_x, y, half, level + 1)
