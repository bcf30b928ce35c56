"""
Core terrain generation functionality.
"""

from .grid import Grid
from .terrain_generator import TerrainGenerator
from .terrain import (
    Terrain, Edge, Flip,
    EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT,
    FLIP_NONE, FLIP_VERT, FLIP_HORZ,
)

__all__ = ['Grid', 'TerrainGenerator', 'Terrain', 'Edge', 'Flip',
           'EDGE_TOP', 'EDGE_RIGHT', 'EDGE_BOTTOM', 'EDGE_LEFT',
           'FLIP_NONE', 'FLIP_VERT', 'FLIP_HORZ']
