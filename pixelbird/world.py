from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional, TypeVar

import numpy as np

from pixelbird.internal.physics import DEFAULT_GRAVITY, Physics
from pixelbird.internal.timers import Scheduler

if TYPE_CHECKING:
    from pixelbird.entities.core import BaseEntity

logger = logging.getLogger(__name__)

UpdateFn = Callable[[float], None]
EntityT = TypeVar("EntityT", bound="BaseEntity")


class World:
    """Everything one scene owns: entities, physics, timers and updaters.

    A tick runs the scene timers, then every entity's ``update``, then the
    registered updaters, then physics. ``clear`` tears it all down.
    """

    def __init__(
        self,
        width: int,
        height: int,
        gravity: float = DEFAULT_GRAVITY,
        rng: Optional[np.random.Generator] = None,
    ):
        self.width = width
        self.height = height
        if rng is None:
            rng = np.random.default_rng()
        self.rng = rng

        self.physics = Physics(gravity=gravity)
        self.scheduler = Scheduler()
        self.updaters: List[UpdateFn] = []

        self._entities: List[BaseEntity] = []

    @property
    def entities(self) -> List[BaseEntity]:
        return list(self._entities)

    def add(self, entity: EntityT) -> EntityT:
        if entity not in self._entities:
            self._entities.append(entity)
        return entity

    def destroy(self, entity: BaseEntity) -> None:
        if entity in self._entities:
            self._entities.remove(entity)
            entity.delete()

    def get(self, tag: str) -> List[BaseEntity]:
        return [entity for entity in self._entities if entity.has_tag(tag)]

    def add_updater(self, fn: UpdateFn) -> None:
        self.updaters.append(fn)

    def step(self, delta_time: float) -> None:
        self.scheduler.step(delta_time)
        for entity in list(self._entities):
            if entity.exists:
                entity.update(delta_time)
        for fn in list(self.updaters):
            fn(delta_time)
        self.physics.step(delta_time)

    def clear(self) -> None:
        self.scheduler.clear()
        self.updaters.clear()
        for entity in self._entities:
            entity.delete()
        logger.debug("Cleared world with %d entities", len(self._entities))
        self._entities.clear()
        self.physics.clear()
