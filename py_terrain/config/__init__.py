"""
Configuration for terrain generation.
"""

from .config import Settings, settings
from .terrain_config import TerrainConfig, is_valid_size

__all__ = ['Settings', 'settings', 'TerrainConfig', 'is_valid_size']
