from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pixelbird.entities.ui import Label
from pixelbird.internal.math import Vector2D

if TYPE_CHECKING:
    from pixelbird.world import World

logger = logging.getLogger(__name__)

SCORE_FORMAT = "Score: {}"


class ScoreBoard(Label):
    """Running score of one game. The label is redrawn from the counter every tick."""

    def __init__(self, world: World, position: Vector2D = Vector2D(10.0, 10.0), font_size: int = 12, color: str = "#ffffff"):
        super().__init__(world, position, SCORE_FORMAT.format(0), font_size=font_size, color=color)
        self.count = 0

    def increment(self) -> int:
        self.count += 1
        logger.debug("Score %d", self.count)
        return self.count

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        self.text = SCORE_FORMAT.format(self.count)
