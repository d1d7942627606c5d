from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List

from pixelbird.entities.core import TAG_SCORE_ZONE, TAG_SURFACE, BaseEntity, entity_of
from pixelbird.internal.collider import BoxCollider, Collider
from pixelbird.internal.layers import CollisionLayer, RenderLayer
from pixelbird.internal.math import Vector2D, clamp
from pixelbird.internal.rigidbody import RigidBody
from pixelbird.internal.sprite import Sprite, SpriteAnimation, SpriteShape

if TYPE_CHECKING:
    from pixelbird.config import GameConfig
    from pixelbird.world import World

logger = logging.getLogger(__name__)

FLAP_ANIMATION = "flapping"

BirdListener = Callable[["Bird"], None]


class Bird(BaseEntity):
    """The player. Falls under gravity, jumps on input, dies on any surface.

    The entity stays in the world after death: it drifts backwards and down
    until it rests on the floor, so every control action checks
    :attr:`is_alive` instead of relying on the entity being gone.
    """

    tags = frozenset({"bird"})

    def __init__(self, world: World, config: GameConfig):
        super().__init__(world, Vector2D(world.width / 2, world.height / 3))
        self.is_alive = True
        self.bounce_speed = config.bird_bounce_speed
        self.fall_speed = config.bird_fall_speed
        self.dead_frame = config.bird_dead_frame

        self.death_listeners: List[BirdListener] = []
        self.score_listeners: List[BirdListener] = []

        size = Vector2D(*config.bird_size)
        self.attach_component(Sprite(
            size=size,
            color=config.colors.bird,
            shape=SpriteShape.RECT,
            image_path=config.asset(config.bird_image),
            layer=RenderLayer.FOREGROUND,
            slice_x=config.bird_frames,
            anims={
                FLAP_ANIMATION: SpriteAnimation(
                    start=0,
                    end=config.bird_frames - 1,
                    speed=config.flap_speed
                ),
            },
        ))
        self.attach_component(BoxCollider(
            size=size,
            layer_bits=CollisionLayer.BIRD,
            mask_bits=CollisionLayer.SURFACE | CollisionLayer.SCORE_ZONE,
        ))
        self.attach_component(RigidBody(
            weight=config.bird_weight,
            max_velocity=config.bird_max_velocity,
            jump_force=config.bird_jump_force,
            freeze_position=[True, False],  # x only moves by the death drift
        ))

    def jump(self) -> bool:
        if not self.is_alive:
            return False
        self.rigidbody.jump()
        return True

    def flap(self) -> None:
        if self.is_alive:
            self.sprite.play(FLAP_ANIMATION)

    def die(self) -> None:
        if not self.is_alive:
            return
        self.is_alive = False
        self.sprite.stop(frame=self.dead_frame)
        logger.info("Bird died at %s", self.position)
        for listener in list(self.death_listeners):
            listener(self)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        position = self.transform.position
        position.y = clamp(position.y, 0.0, self.world.height)

        if not self.is_alive and not self.rigidbody.is_grounded:
            self.transform.translate(Vector2D(
                -self.bounce_speed * delta_time,
                self.fall_speed * delta_time
            ))

    def on_collision_enter(self, other: Collider) -> None:
        entity = entity_of(other)
        if entity is None:
            return
        if entity.has_tag(TAG_SURFACE):
            self.die()
        elif entity.has_tag(TAG_SCORE_ZONE) and self.is_alive:
            for listener in list(self.score_listeners):
                listener(self)
