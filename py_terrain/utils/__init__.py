"""
Utility helpers for random sources and logging.
"""

from .random import RandomSource, make_random_source
from .logging import configure_logging

__all__ = ['RandomSource', 'make_random_source', 'configure_logging']
