#!/usr/bin/env python3
"""
Simple demo script showing terrain generation and tile stitching.
"""

import numpy as np
from py_terrain import Terrain, EDGE_RIGHT, FLIP_HORZ, configure_logging, settings


def main():
    """Demonstrate diamond-square terrain generation."""
    configure_logging(settings)

    print("Py-Terrain Generation Demo")
    print("=" * 40)

    for noise in [0.0, 0.5, 5.0]:
        terrain = Terrain(size=33, noise=noise, seed="demo123")
        heights = terrain.to_array()

        print(f"\nnoise={noise}:")
        print(f"  Range: {heights.min():.3f} - {heights.max():.3f}")
        print(f"  Mean: {heights.mean():.3f}, Std: {heights.std():.3f}")

    # Stitch a second tile onto the right edge of the first
    west = Terrain(size=17, noise=1.0, seed="west")
    east = Terrain(size=17, noise=1.0, seed="east", map=west.get_edge(EDGE_RIGHT, FLIP_HORZ))

    shared = np.array_equal(west.to_array()[-1, :], east.to_array()[0, :])
    print(f"\nStitched tiles share border: {shared}")


if __name__ == "__main__":
    main()
