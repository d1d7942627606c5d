from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pixelbird.internal.layers import CollisionLayer
from pixelbird.internal.math import Rect, Vector2D

if TYPE_CHECKING:
    from pixelbird.entities.core import BaseEntity
    from pixelbird.internal.transform import Transform


class Collider:
    """Hitbox attached to a :class:`Transform`.

    ``layer_bits`` is what the hitbox is, ``mask_bits`` what it reacts to.
    A trigger reports contacts to its hooks but is never pushed apart.
    The ``on_collision_*`` hooks are plain attributes so an entity can
    rebind them to its own methods.
    """

    def __init__(
        self,
        layer_bits: int | CollisionLayer = CollisionLayer.DEFAULT,
        mask_bits: int | CollisionLayer = CollisionLayer.ALL_BITS,
        is_trigger: bool = False,
    ):
        self.enabled = True
        self.transform: Optional[Transform] = None
        self.entity: Optional[BaseEntity] = None
        self.is_trigger = is_trigger
        self.layer_bits = int(layer_bits) or int(CollisionLayer.DEFAULT)
        self.mask_bits = int(mask_bits) or int(CollisionLayer.ALL_BITS)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def accepts(self, other: Collider) -> bool:
        return CollisionLayer.can_collide(
            self.layer_bits, self.mask_bits, other.layer_bits, other.mask_bits
        )

    def bounds(self) -> Rect:
        raise NotImplementedError

    def overlaps(self, other: Collider) -> bool:
        mine, theirs = self.bounds(), other.bounds()
        # Touching edges do not count
        return (
            mine.left < theirs.right
            and mine.right > theirs.left
            and mine.top < theirs.bottom
            and mine.bottom > theirs.top
        )

    def on_collision_enter(self, other: Collider) -> None:
        pass

    def on_collision_stay(self, other: Collider) -> None:
        pass

    def on_collision_exit(self, other: Collider) -> None:
        pass


class BoxCollider(Collider):
    """Axis-aligned box centred on its transform, shifted by ``offset``."""

    def __init__(
        self,
        size: Vector2D = Vector2D(1.0, 1.0),
        offset: Vector2D = Vector2D(0.0, 0.0),
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.size = Vector2D(abs(size.x), abs(size.y))
        self.offset = offset.copy()

    def bounds(self) -> Rect:
        return Rect.from_center(self.transform.position + self.offset, self.size)
