from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pixelbird.entities.bird import Bird
from pixelbird.entities.score import ScoreBoard
from pixelbird.entities.ui import Label, Panel
from pixelbird.internal.math import Vector2D
from pixelbird.logic.difficulty import DifficultyRamp
from pixelbird.logic.spawner import PillarSpawner
from pixelbird.scenery import build_scenery
from pixelbird.world import World

if TYPE_CHECKING:
    from pixelbird.game import Game

logger = logging.getLogger(__name__)

KEY_SPACE = "space"
KEY_UP = "up"

PLAY_PROMPT = "Press [Space] to play"


class SceneName(Enum):
    MENU = "menu"
    GAME = "game"
    GAME_OVER = "game-over"


class Scene:
    """One screen of the game, owning a fresh :class:`World`."""

    name: SceneName

    def __init__(self, game: Game):
        self.game = game
        self.config = game.config
        self.world = World(
            self.config.width,
            self.config.height,
            gravity=self.config.gravity,
            rng=game.rng,
        )
        build_scenery(self.world, self.config)

    def update(self, delta_time: float) -> None:
        self.world.step(delta_time)

    def on_key_press(self, key: str) -> None:
        pass

    def on_click(self) -> None:
        pass

    def teardown(self) -> None:
        self.world.clear()

    def _add_title_card(self, title: str, title_size: int) -> None:
        cfg = self.config
        world = self.world
        world.add(Panel(world, 25, 25, cfg.width - 50, 120, cfg.colors.panel))
        world.add(Label(
            world,
            Vector2D(cfg.width / 2, 60),
            title,
            font_size=title_size,
            color=cfg.colors.label,
            centered=True,
        ))
        world.add(Label(
            world,
            Vector2D(cfg.width / 2, cfg.height / 2),
            PLAY_PROMPT,
            font_size=16,
            color=cfg.colors.label,
            centered=True,
        ))


class MenuScene(Scene):
    name = SceneName.MENU

    def __init__(self, game: Game):
        super().__init__(game)
        self.armed = False
        self._add_title_card("Pixel Bird", 34)
        # Ignore the key press that may have launched the game
        self.world.scheduler.wait(self.config.menu_arm_delay, self._arm)

    def _arm(self) -> None:
        self.armed = True

    def on_key_press(self, key: str) -> None:
        if key == KEY_SPACE and self.armed:
            self.game.machine.play()


class PlayScene(Scene):
    name = SceneName.GAME

    def __init__(self, game: Game):
        super().__init__(game)
        cfg = self.config
        world = self.world

        self.game.audio.play(cfg.asset(cfg.music_track), loop=cfg.music_loop)

        self.bird = world.add(Bird(world, cfg))
        self.bird.death_listeners.append(self._on_bird_death)
        self.bird.score_listeners.append(self._on_bird_score)
        world.scheduler.loop(cfg.flap_interval, self.bird.flap)

        self.score = world.add(ScoreBoard(world, color=cfg.colors.label))
        self.ramp = DifficultyRamp(world, cfg.pillar_speed_increment)
        self.spawner = PillarSpawner(world, self.bird, cfg)
        self.spawner.start()

    def on_key_press(self, key: str) -> None:
        if key in (KEY_SPACE, KEY_UP) and self.bird.is_alive:
            self.bird.jump()

    def on_click(self) -> None:
        if self.bird.is_alive:
            self.bird.jump()

    def teardown(self) -> None:
        self.game.audio.stop()
        super().teardown()

    def _on_bird_death(self, bird: Bird) -> None:
        self.game.audio.stop()
        self.game.record_score(self.score.count)
        # Lives on the game clock so it fires regardless of the scene
        self.game.scheduler.wait(self.config.game_over_delay, self.game.machine.crash)

    def _on_bird_score(self, bird: Bird) -> None:
        self.score.increment()
        self.ramp.apply()


class GameOverScene(Scene):
    name = SceneName.GAME_OVER

    def __init__(self, game: Game):
        super().__init__(game)
        cfg = self.config
        self._add_title_card("Game Over", 32)
        self.world.add(Label(
            self.world,
            Vector2D(cfg.width / 2, 92),
            f"Score: {game.last_score}  Best: {game.best_score}",
            font_size=12,
            color=cfg.colors.label,
            centered=True,
        ))

    def on_key_press(self, key: str) -> None:
        if key == KEY_SPACE:
            self.game.machine.play()


SCENES = {
    SceneName.MENU: MenuScene,
    SceneName.GAME: PlayScene,
    SceneName.GAME_OVER: GameOverScene,
}
