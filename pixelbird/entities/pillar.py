from __future__ import annotations

from typing import TYPE_CHECKING

from pixelbird.entities.core import TAG_PILLAR, TAG_SCORE_ZONE, TAG_SURFACE, BaseEntity
from pixelbird.internal.collider import BoxCollider
from pixelbird.internal.layers import CollisionLayer, RenderLayer
from pixelbird.internal.math import Rect, Vector2D
from pixelbird.internal.sprite import Sprite, SpriteShape

if TYPE_CHECKING:
    from pixelbird.config import GameConfig
    from pixelbird.world import World


class Scroller(BaseEntity):
    """Entity sliding left at its own ``speed``, sized by a trigger box."""

    def __init__(self, world: World, rect: Rect, speed: float, layer_bits: CollisionLayer):
        super().__init__(world, rect.center)
        self.speed = speed
        self.attach_component(BoxCollider(
            size=Vector2D(rect.width, rect.height),
            layer_bits=layer_bits,
            mask_bits=CollisionLayer.BIRD,
            is_trigger=True,
        ))

    @property
    def left(self) -> float:
        return self.bounds.left

    @property
    def right(self) -> float:
        return self.bounds.right

    def scroll(self, delta_time: float) -> None:
        self.transform.translate(Vector2D(-self.speed * delta_time, 0.0))

    @property
    def off_screen(self) -> bool:
        return self.right < 0


class Pillar(Scroller):
    tags = frozenset({TAG_PILLAR, TAG_SURFACE})

    def __init__(self, world: World, config: GameConfig, rect: Rect, speed: float, flipped: bool = False):
        super().__init__(world, rect, speed, CollisionLayer.SURFACE)
        self.flipped = flipped
        self.attach_component(Sprite(
            size=Vector2D(rect.width, rect.height),
            color=config.colors.pillar,
            shape=SpriteShape.RECT,
            image_path=config.asset(config.pillar_image),
            layer=RenderLayer.MIDGROUND,
            flip_y=flipped,
        ))


class ScoreZone(Scroller):
    """Invisible full-height strip that scores when the bird crosses it."""

    tags = frozenset({TAG_SCORE_ZONE})

    def __init__(self, world: World, rect: Rect, speed: float):
        super().__init__(world, rect, speed, CollisionLayer.SCORE_ZONE)
