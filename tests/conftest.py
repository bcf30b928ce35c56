"""Shared fixtures for terrain tests."""

import pytest


class SequenceSource:
    """Random source replaying a fixed list of values, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def sequence_source():
    """Factory for deterministic random sources."""
    return SequenceSource


@pytest.fixture
def scripted_values():
    """A fixed, irregular sequence of uniform draws."""
    return [0.12, 0.87, 0.45, 0.33, 0.91, 0.05, 0.64, 0.5, 0.29, 0.76, 0.18, 0.99, 0.41]
