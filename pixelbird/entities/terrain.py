from __future__ import annotations

from typing import TYPE_CHECKING

from pixelbird.entities.core import TAG_FLOOR, TAG_SURFACE, BaseEntity
from pixelbird.internal.collider import BoxCollider
from pixelbird.internal.layers import CollisionLayer, RenderLayer
from pixelbird.internal.math import Vector2D
from pixelbird.internal.rigidbody import RigidBody
from pixelbird.internal.sprite import Sprite, SpriteShape

if TYPE_CHECKING:
    from pixelbird.config import GameConfig
    from pixelbird.world import World


class Background(BaseEntity):
    def __init__(self, world: World, config: GameConfig):
        super().__init__(world, Vector2D(world.width / 2, world.height / 2))
        self.attach_component(Sprite(
            size=Vector2D(world.width, world.height),
            color=config.colors.backdrop,
            shape=SpriteShape.RECT,
            image_path=config.asset(config.background_image),
            layer=RenderLayer.BACKGROUND,
        ))


class Floor(BaseEntity):
    """Solid strip along the bottom edge of the screen."""

    tags = frozenset({TAG_FLOOR, TAG_SURFACE})

    def __init__(self, world: World, config: GameConfig):
        height = config.floor_height
        super().__init__(world, Vector2D(world.width / 2, world.height - height / 2))
        size = Vector2D(world.width, height)
        self.attach_component(Sprite(
            size=size,
            color=config.colors.floor,
            shape=SpriteShape.RECT,
            image_path=config.asset(config.floor_image),
            layer=RenderLayer.FOREGROUND,
        ))
        self.attach_component(BoxCollider(
            size=size,
            layer_bits=CollisionLayer.SURFACE,
            mask_bits=CollisionLayer.BIRD,
        ))
        self.attach_component(RigidBody(is_static=True))
