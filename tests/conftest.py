import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class FixedRng:
    """Stand-in for np.random.Generator: uniform() returns a fixed fraction of the range."""

    def __init__(self, frac=0.5):
        self.frac = frac
        self.calls = 0

    def uniform(self, low, high):
        self.calls += 1
        return low + (high - low) * self.frac


@pytest.fixture
def rng():
    return FixedRng()
