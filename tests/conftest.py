"""Shared test fixtures for vertical-label-placement."""

import numpy as np
import pytest


@pytest.fixture
def mixed_positions():
    """Four labels, the middle two crowded together."""
    return [-10, -1, 1, 10]


@pytest.fixture
def random_positions():
    """200 sorted positions with plenty of collisions."""
    rng = np.random.default_rng(42)
    return np.sort(rng.integers(-500, 500, size=200))


@pytest.fixture
def random_cases():
    """A spread of (positions, separation) pairs for property checks."""
    rng = np.random.default_rng(7)
    cases = []
    for _ in range(50):
        n = int(rng.integers(0, 40))
        positions = np.sort(rng.integers(-100, 100, size=n)).tolist()
        separation = int(rng.integers(1, 15))
        cases.append((positions, separation))
    return cases
