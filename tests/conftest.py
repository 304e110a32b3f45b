import random

import numpy as np
import pytest

from game.game_logic import Game2048
from game.spawner import TileSpawner


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(rng):
    return Game2048(size=4, spawner=TileSpawner(rng=rng))


@pytest.fixture
def checkerboard():
    return np.array([
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 4, 2],
    ])
