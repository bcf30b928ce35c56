"""
Terrain construction and read access.

Usage:

    terrain = Terrain(size=33, noise=5, seed="island")

    terrain.each_node(lambda value, x, y: print((x, y), value))

A Terrain is fully generated on construction and never mutated afterwards.
"""

from enum import IntEnum
from typing import Callable, Optional, Union

import numpy as np
import structlog

from ..config.terrain_config import TerrainConfig
from ..errors import InvalidConfigError
from ..utils.random import RandomSource, make_random_source
from .grid import Grid
from .terrain_generator import TerrainGenerator

logger = structlog.get_logger()


class Edge(IntEnum):
    """Grid borders selectable by get_edge."""

    TOP = 0  # y == 0
    RIGHT = 1  # x == size - 1
    BOTTOM = 2  # y == size - 1
    LEFT = 3  # x == 0


class Flip(IntEnum):
    """Reorderings applied to an extracted edge."""

    NONE = 0
    VERT = 1  # reverse each row and the row order
    HORZ = 2  # reverse the row order only


EDGE_TOP = Edge.TOP
EDGE_RIGHT = Edge.RIGHT
EDGE_BOTTOM = Edge.BOTTOM
EDGE_LEFT = Edge.LEFT

FLIP_NONE = Flip.NONE
FLIP_VERT = Flip.VERT
FLIP_HORZ = Flip.HORZ


def _edge_mask(edge: Edge, size: int) -> np.ndarray:
    """Boolean [x, y] mask selecting the cells along an edge."""
    mask = np.zeros((size, size), dtype=bool)
    last = size - 1
    if edge == Edge.TOP:
        mask[:, 0] = True
    elif edge == Edge.RIGHT:
        mask[last, :] = True
    elif edge == Edge.BOTTOM:
        mask[:, last] = True
    else:
        mask[0, :] = True
    return mask


def _check_map_values(grid: Grid) -> None:
    """Preset elevations must be finite and within [0, 1]."""
    values = grid.to_array(fill=0.0)
    if not np.all(np.isfinite(values)) or values.min() < 0.0 or values.max() > 1.0:
        raise InvalidConfigError("Map values must be finite and within [0, 1]")


class Terrain:
    """
    A diamond-square heightmap with values in [0, 1].

    Rows are the outer index: ``terrain[x, y]`` reads column y of row x.
    """

    EDGE_TOP = EDGE_TOP
    EDGE_RIGHT = EDGE_RIGHT
    EDGE_BOTTOM = EDGE_BOTTOM
    EDGE_LEFT = EDGE_LEFT

    FLIP_NONE = FLIP_NONE
    FLIP_VERT = FLIP_VERT
    FLIP_HORZ = FLIP_HORZ

    def __init__(
        self,
        config: Optional[TerrainConfig] = None,
        *,
        map: Optional[Union[Grid, np.ndarray, list]] = None,
        random_source: Optional[RandomSource] = None,
        seed: Optional[Union[int, str]] = None,
        **options,
    ):
        """
        Generate a terrain.

        Args:
            config: Terrain configuration; mutually exclusive with options
            map: Pre-existing grid (or square array, None/NaN meaning unset)
                to fill instead of a fresh one; set cells are preserved
            random_source: Callable returning uniform values in [0, 1)
            seed: Seed for a NumPy-backed source; mutually exclusive with
                random_source
            **options: size, noise, deviation, roughness
        """
        if config is not None and options:
            raise InvalidConfigError("Pass either a TerrainConfig or keyword options, not both")
        if random_source is not None and seed is not None:
            raise InvalidConfigError("Pass either random_source or seed, not both")

        if config is not None and not isinstance(config, TerrainConfig):
            raise InvalidConfigError(
                f"config must be a TerrainConfig, got {type(config).__name__}"
            )

        self.config = config if config is not None else TerrainConfig.create(**options)
        self.size = self.config.size

        if map is not None:
            grid = map.copy() if isinstance(map, Grid) else Grid.from_array(map)
            if grid.size != self.size:
                raise InvalidConfigError(
                    f"Map size {grid.size} does not match terrain size {self.size}"
                )
            _check_map_values(grid)
        else:
            grid = Grid(self.size)

        if random_source is None:
            random_source = make_random_source(seed)

        generator = TerrainGenerator(self.config, grid, random_source)
        self.map = generator.generate()

    def get(self, x: int, y: int) -> float:
        return self.map.get(x, y)

    def __getitem__(self, key) -> float:
        return self.map[key]

    def __len__(self) -> int:
        return self.size

    def each_node(self, fn: Callable[[float, int, int], None]) -> None:
        """
        Call ``fn(value, x, y)`` for every node.

        Nodes are visited in ascending x, then ascending y.
        """
        self.map.each(fn)

    def to_array(self) -> np.ndarray:
        """Elevations as a float64 array indexed [x, y]."""
        return self.map.to_array()

    def get_edge(self, edge: Union[Edge, int], flip: Union[Flip, int] = FLIP_NONE) -> Grid:
        """
        Extract one border into an otherwise unset grid.

        The result can be passed as ``map`` to a neighbouring Terrain so the
        two tiles share that border.

        Args:
            edge: EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM or EDGE_LEFT
            flip: FLIP_NONE, FLIP_VERT (reverse rows and row order) or
                FLIP_HORZ (reverse row order)

        Returns:
            New Grid of the same size holding only the edge cells
        """
        try:
            edge = Edge(edge)
            flip = Flip(flip)
        except ValueError as e:
            raise ValueError(f"Invalid edge or flip: {e}") from e

        mask = _edge_mask(edge, self.size)
        values = np.where(mask, self.map.to_array(), np.nan)

        if flip == Flip.VERT:
            values = values[::-1, ::-1]
        elif flip == Flip.HORZ:
            values = values[::-1, :]

        logger.debug("Extracted terrain edge", edge=edge.name, flip=flip.name)
        return Grid.from_array(values)

    def __repr__(self) -> str:
        return f"Terrain(size={self.size}, noise={self.config.noise})"
