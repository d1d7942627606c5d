from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import numpy as np
from ipycanvas import Canvas
from ipyevents import Event
from ipywidgets import Box, VBox

from pixelbird.config import GameConfig
from pixelbird.game import Game
from pixelbird.internal.audio import AudioPlayer
from pixelbird.log import setup_logging
from pixelbird.render import Renderer
from pixelbird.scenes import KEY_SPACE, KEY_UP

logger = logging.getLogger(__name__)

# DOM ``KeyboardEvent.key`` values to game key names
KEY_MAP = {
    " ": KEY_SPACE,
    "Spacebar": KEY_SPACE,
    "ArrowUp": KEY_UP,
}


class PixelBird:
    """
    Notebook front end: a canvas, keyboard and click input, and the loops.

    Usage::

        app = PixelBird()
        display(app.widget)
        app.start()

    Parameters
    ----------
    config: GameConfig | None
        Tunables passed to the :class:`Game`.
    rng_seed: int | None
        Seed for the pillar layout.
    log_level: str | None
        When set, installs the console log handler at this level.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng_seed: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if log_level is not None:
            setup_logging(log_level)
        self.config = config or GameConfig()
        self.dt = self.config.tick

        self.canvas: Canvas = Canvas(width=self.config.width, height=self.config.height)
        self.audio_slot = Box()
        self.game = Game(
            self.config,
            rng=np.random.default_rng(rng_seed),
            audio=AudioPlayer(self.audio_slot),
        )
        self.renderer = Renderer(self.game, self.canvas)
        self.widget = VBox([self.canvas, self.audio_slot])

        self._tasks: Dict[str, asyncio.Task] = {}

        self._bind_events()
        self.renderer.draw()

    # ------------------------------------------------------------------ #
    # Input binding
    # ------------------------------------------------------------------ #
    def _bind_events(self) -> None:
        self._event = Event(
            source=self.canvas,
            watched_events=["keydown", "click"],
            prevent_default_action=True,
            stop_propagation=True,
        )
        self._event.on_dom_event(self._handle_dom_event)

    def _handle_dom_event(self, event: Dict[str, Any]) -> None:
        etype = event.get("type")
        if etype == "click":
            self.game.click()
            return
        if etype != "keydown" or event.get("repeat", False):
            return

        key = KEY_MAP.get(event.get("key"))
        if key is not None:
            self.game.key_press(key)

    # ------------------------------------------------------------------ #
    # Game loop & rendering
    # ------------------------------------------------------------------ #
    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks.values())

    def start(self) -> None:
        loops = {"logic": self._tick, "draw": self.renderer.draw}
        for name, body in loops.items():
            task = self._tasks.get(name)
            if task is None or task.done():
                self._tasks[name] = asyncio.create_task(self._every_tick(body))
        logger.info("Pixel Bird started at %.0f ticks/s", self.config.tick_rate)
        try:
            self.canvas.focus()
        except AttributeError:
            pass

    def stop(self) -> None:
        for task in self._tasks.values():
            task.cancel()
        self._tasks.clear()
        self.game.audio.stop()

    def _tick(self) -> None:
        self.game.step(self.dt)

    async def _every_tick(self, body: Callable[[], None]) -> None:
        while True:
            body()
            await asyncio.sleep(self.dt)
