from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pixelbird.entities.core import TAG_PILLAR, TAG_SCORE_ZONE

if TYPE_CHECKING:
    from pixelbird.world import World

logger = logging.getLogger(__name__)


class DifficultyRamp:
    """Speeds up every pillar and score zone already on screen.

    Each call bumps all live scrollers by the same ``increment``; entities
    spawned afterwards still start at the base speed.
    """

    def __init__(self, world: World, increment: float):
        self.world = world
        self.increment = increment
        self.level = 0

    def apply(self) -> int:
        bumped = 0
        for tag in (TAG_PILLAR, TAG_SCORE_ZONE):
            for entity in self.world.get(tag):
                entity.speed += self.increment
                bumped += 1
        self.level += 1
        logger.debug("Difficulty level %d, bumped %d scrollers", self.level, bumped)
        return bumped
