"""
py_terrain: diamond-square heightmap generation.
"""

from .errors import InvalidConfigError, OutOfRangeError
from .config import TerrainConfig, Settings, settings
from .core import (
    Grid, Terrain, TerrainGenerator, Edge, Flip,
    EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT,
    FLIP_NONE, FLIP_VERT, FLIP_HORZ,
)
from .utils import make_random_source, configure_logging

__version__ = "0.1.0"

__all__ = ['InvalidConfigError', 'OutOfRangeError', 'TerrainConfig', 'Settings', 'settings',
           'Grid', 'Terrain', 'TerrainGenerator', 'Edge', 'Flip',
           'EDGE_TOP', 'EDGE_RIGHT', 'EDGE_BOTTOM', 'EDGE_LEFT',
           'FLIP_NONE', 'FLIP_VERT', 'FLIP_HORZ',
           'make_random_source', 'configure_logging']
