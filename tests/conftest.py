import os
import random

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from rage_pong.engine import GameEngine
from rage_pong.physics_core import PhysicsCore


class FixedRandom(random.Random):
    """A Random whose random() always returns the same value."""

    def __init__(self, value=0.5):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)


@pytest.fixture
def core(fixed_rng):
    return PhysicsCore(rng=fixed_rng)


@pytest.fixture
def engine(fixed_rng):
    return GameEngine(rng=fixed_rng)


@pytest.fixture
def seeded_engine():
    return GameEngine(rng=random.Random(1234))
