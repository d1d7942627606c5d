from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from pixelbird.config import GameConfig
from pixelbird.fsm.core import EventData, Machine
from pixelbird.internal.audio import AudioPlayer
from pixelbird.internal.timers import Scheduler
from pixelbird.scenes import SCENES, Scene, SceneName

logger = logging.getLogger(__name__)


class Game:
    """
    Scene controller: a state machine over the ``menu``, ``game`` and
    ``game-over`` scenes.

    Parameters
    ----------
    config: GameConfig | None
        Tunables; defaults to :class:`GameConfig`.
    rng: numpy.random.Generator | None
        Source of pillar offsets, shared by every scene.
    audio: AudioPlayer | None
        Music output. Defaults to a player with no widget slot.

    Triggers
    --------
    ``machine.play()`` enters ``game`` from ``menu`` or ``game-over``;
    ``machine.crash()`` enters ``game-over`` from ``game``. Entering a state
    tears down the previous scene and builds the next one.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
        audio: Optional[AudioPlayer] = None,
    ) -> None:
        self.config = config or GameConfig()
        if rng is None:
            rng = np.random.default_rng()
        self.rng = rng
        self.audio = audio or AudioPlayer()

        # Game-wide clock; scene timers live on each scene's world
        self.scheduler = Scheduler()
        self.scene: Optional[Scene] = None

        self.last_score = 0
        self.best_score = 0
        self.games_played = 0

        self.machine = Machine()
        for name in SceneName:
            self.machine.add_state(name, on_enter=self._enter_scene)
        self.machine.add_transition([SceneName.MENU, SceneName.GAME_OVER], SceneName.GAME, "play")
        self.machine.add_transition(SceneName.GAME, SceneName.GAME_OVER, "crash")
        self.machine.set_state(SceneName.MENU)

    @property
    def scene_name(self) -> Optional[SceneName]:
        return None if self.scene is None else self.scene.name

    @property
    def time(self) -> float:
        return self.scheduler.time

    def step(self, delta_time: Optional[float] = None) -> None:
        delta_time = self.config.tick if delta_time is None else delta_time
        self.scheduler.step(delta_time)
        if self.scene is not None:
            self.scene.update(delta_time)

    def run_for(self, seconds: float, delta_time: Optional[float] = None) -> None:
        delta_time = self.config.tick if delta_time is None else delta_time
        elapsed = 0.0
        while elapsed < seconds:
            self.step(delta_time)
            elapsed += delta_time

    def key_press(self, key: str) -> None:
        if self.scene is not None:
            self.scene.on_key_press(key)

    def click(self) -> None:
        if self.scene is not None:
            self.scene.on_click()

    def record_score(self, score: int) -> None:
        self.last_score = score
        self.best_score = max(self.best_score, score)

    def _enter_scene(self, data: EventData) -> None:
        if self.scene is not None:
            self.scene.teardown()

        name = SceneName[data.dest.name]
        if name is SceneName.GAME:
            self.games_played += 1
        logger.info(
            "Entering scene '%s' (from '%s')",
            name.value,
            data.source.value if data.source is not None else None
        )
        self.scene = SCENES[name](self)
