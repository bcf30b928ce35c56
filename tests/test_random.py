"""
Tests for random sources.
"""

import pytest
from py_terrain.errors import InvalidConfigError
from py_terrain.utils.random import make_random_source


class TestRandomSource:
    """Test seeded uniform sources."""

    @pytest.mark.parametrize("seed", [0, 12345, "terrain", "a much longer seed string"])
    def test_seeded_sources_repeat(self, seed):
        first = make_random_source(seed)
        second = make_random_source(seed)
        assert [first() for _ in range(20)] == [second() for _ in range(20)]

    def test_values_in_unit_interval(self):
        source = make_random_source("range")
        values = [source() for _ in range(1000)]

        assert all(isinstance(v, float) for v in values)
        assert all(0.0 <= v < 1.0 for v in values)

    def test_string_and_int_seeds_differ(self):
        assert make_random_source("1")() != make_random_source(1)()

    def test_unseeded_source(self):
        source = make_random_source()
        assert 0.0 <= source() < 1.0

    @pytest.mark.parametrize("seed", [-1, -12345, 1.5, False, b"bytes"])
    def test_invalid_seed_rejected(self, seed):
        with pytest.raises(InvalidConfigError):
            make_random_source(seed)
