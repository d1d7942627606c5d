from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Iterable, Optional
from uuid import uuid4

from pixelbird.internal.collider import Collider
from pixelbird.internal.math import Rect, Vector2D
from pixelbird.internal.rigidbody import RigidBody
from pixelbird.internal.sprite import Sprite
from pixelbird.internal.transform import Transform

if TYPE_CHECKING:
    from pixelbird.world import World

TAG_FLOOR = "floor"
TAG_SURFACE = "surface"
TAG_PILLAR = "pillar"
TAG_SCORE_ZONE = "score_zone"


class BaseEntity:
    tags: FrozenSet[str] = frozenset()

    def __init__(self, world: World, position: Vector2D, tags: Iterable[str] = ()):
        self.id = uuid4()
        self.world = world
        self.tags = frozenset(type(self).tags | set(tags))
        self.exists = True

        self._transform = Transform(position, physics=world.physics)

    def update(self, delta_time: float) -> None:
        sprite = self.sprite
        if sprite is not None:
            sprite.update(delta_time)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def attach_component(self, component):
        self.transform.attach_component(component)
        setattr(component, "entity", self)

        if isinstance(component, Collider):
            component.on_collision_enter = self.on_collision_enter
            component.on_collision_stay = self.on_collision_stay
            component.on_collision_exit = self.on_collision_exit
        return component

    def get_component(self, cls):
        return self.transform.get_component(cls)

    def delete(self) -> None:
        self.exists = False
        self.transform.delete()

    def on_collision_enter(self, other: Collider) -> None:
        pass

    def on_collision_stay(self, other: Collider) -> None:
        pass

    def on_collision_exit(self, other: Collider) -> None:
        pass

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def position(self) -> Vector2D:
        return self._transform.position

    @property
    def sprite(self) -> Optional[Sprite]:
        return self.get_component(Sprite)

    @property
    def collider(self) -> Optional[Collider]:
        return self.get_component(Collider)

    @property
    def rigidbody(self) -> Optional[RigidBody]:
        return self.get_component(RigidBody)

    @property
    def bounds(self) -> Optional[Rect]:
        if self.collider:
            return self.collider.bounds()
        elif self.sprite:
            return Rect.from_center(self.transform.position, self.sprite.size)

        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position}, tags={sorted(self.tags)})"


def entity_of(collider: Collider) -> Optional[BaseEntity]:
    return getattr(collider, "entity", None)
