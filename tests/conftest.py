import numpy as np
import pytest

from pixelbird.config import GameConfig
from pixelbird.game import Game
from pixelbird.scenery import build_scenery
from pixelbird.world import World

# Exact in binary floating point, so timer boundaries land on a tick
DT = 1 / 64


def ticks(seconds: float) -> int:
    return int(round(seconds / DT))


def step(game: Game, count: int) -> None:
    for _ in range(count):
        game.step(DT)


def start_game(game: Game) -> None:
    """Wait out the menu arm delay and press space."""
    step(game, ticks(game.config.menu_arm_delay))
    game.key_press("space")


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def floating_config() -> GameConfig:
    # No gravity: the bird hovers where it spawned
    return GameConfig(gravity=0.0)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def world(config, rng) -> World:
    world = World(config.width, config.height, gravity=config.gravity, rng=rng)
    build_scenery(world, config)
    return world


@pytest.fixture
def floating_world(floating_config, rng) -> World:
    world = World(floating_config.width, floating_config.height, gravity=0.0, rng=rng)
    build_scenery(world, floating_config)
    return world


@pytest.fixture
def game(config, rng) -> Game:
    return Game(config, rng=rng)


@pytest.fixture
def floating_game(floating_config, rng) -> Game:
    return Game(floating_config, rng=rng)

