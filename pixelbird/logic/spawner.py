from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from pixelbird.entities.core import TAG_PILLAR, TAG_SCORE_ZONE
from pixelbird.entities.pillar import Pillar, ScoreZone, Scroller
from pixelbird.internal.math import Rect

if TYPE_CHECKING:
    from pixelbird.config import GameConfig
    from pixelbird.entities.bird import Bird
    from pixelbird.internal.timers import Timer
    from pixelbird.world import World

logger = logging.getLogger(__name__)


@dataclass
class PillarPair:
    upper: Pillar
    lower: Pillar
    zone: ScoreZone

    @property
    def gap(self) -> float:
        return self.lower.bounds.top - self.upper.bounds.bottom


class PillarSpawner:
    """Spawns pillar pairs at the right edge and scrolls everything left.

    A spawn loop fires every ``spawn_interval`` seconds and skips its cycle
    while the bird is dead. Scrolling also stops once the bird is dead, so
    the last scene freezes behind the falling bird.
    """

    def __init__(self, world: World, bird: Bird, config: GameConfig):
        self.world = world
        self.bird = bird
        self.config = config
        self.spawned = 0
        self._timer: Optional[Timer] = None

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done

    def start(self) -> None:
        self.stop()
        self._timer = self.world.scheduler.loop(self.config.spawn_interval, self._on_spawn_tick)
        self.world.add_updater(self.update)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self.update in self.world.updaters:
            self.world.updaters.remove(self.update)

    def spawn(self) -> PillarPair:
        cfg = self.config
        width, height = self.world.width, self.world.height
        offset = float(self.world.rng.uniform(-cfg.pillar_offset_range, cfg.pillar_offset_range))
        center = height / 2 + offset
        speed = cfg.pillar_base_speed

        lower = Pillar(
            self.world,
            cfg,
            Rect(width, center + cfg.pillar_gap / 2, cfg.pillar_width, height),
            speed,
        )
        upper = Pillar(
            self.world,
            cfg,
            Rect(width, center - cfg.pillar_gap / 2 - height, cfg.pillar_width, height),
            speed,
            flipped=True,
        )
        zone = ScoreZone(
            self.world,
            Rect(width + cfg.score_zone_lead, 0.0, 0.0, height),
            speed,
        )
        for entity in (upper, lower, zone):
            self.world.add(entity)

        self.spawned += 1
        logger.debug("Spawned pillar pair #%d with offset %.1f", self.spawned, offset)
        return PillarPair(upper=upper, lower=lower, zone=zone)

    def scrollers(self) -> List[Scroller]:
        return [
            entity for entity in self.world.get(TAG_PILLAR) + self.world.get(TAG_SCORE_ZONE)
            if isinstance(entity, Scroller)
        ]

    def update(self, delta_time: float) -> None:
        if not self.bird.is_alive:
            return
        for entity in self.scrollers():
            entity.scroll(delta_time)
            if entity.off_screen:
                self.world.destroy(entity)

    def _on_spawn_tick(self) -> None:
        if self.bird.is_alive:
            self.spawn()
        else:
            logger.debug("Bird is dead, skipping spawn")
