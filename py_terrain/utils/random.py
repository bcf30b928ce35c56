"""
Random number sources for terrain generation.

A random source is any zero-argument callable returning a float in [0, 1).
Generators take one explicitly instead of drawing from a global PRNG, so a
fixed seed or a scripted sequence reproduces a terrain exactly.
"""

from typing import Callable, Optional, Union

import numpy as np

from ..errors import InvalidConfigError

RandomSource = Callable[[], float]


def _seed_entropy(seed: Union[int, str]):
    """Turn an int or string seed into numpy seed entropy."""
    if isinstance(seed, str):
        return int.from_bytes(seed.encode("utf-8"), "little")
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidConfigError(f"Seed must be an int or str, got {seed!r}")
    if seed < 0:
        raise InvalidConfigError(f"Seed must be non-negative, got {seed}")
    return int(seed)


def make_random_source(seed: Optional[Union[int, str]] = None) -> RandomSource:
    """
    Create a uniform [0, 1) source backed by NumPy's default generator.

    Args:
        seed: Optional int or string seed; None draws fresh OS entropy

    Returns:
        Callable returning the next uniform value
    """
    rng = np.random.default_rng(None if seed is None else _seed_entropy(seed))

    def random() -> float:
        return float(rng.random())

    return random
