from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from pixelbird.entities.terrain import Background, Floor

if TYPE_CHECKING:
    from pixelbird.config import GameConfig
    from pixelbird.world import World


def build_scenery(world: World, config: GameConfig) -> Tuple[Background, Floor]:
    """Add the backdrop and the solid floor every scene stands on."""
    background = world.add(Background(world, config))
    floor = world.add(Floor(world, config))
    return background, floor
