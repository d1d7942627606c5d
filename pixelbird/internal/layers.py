from __future__ import annotations

from enum import Enum, IntFlag


class CollisionLayer(IntFlag):
    """Bit flags used for collider layer/mask filtering."""

    DEFAULT = 1 << 0
    BIRD = 1 << 1
    SURFACE = 1 << 2
    SCORE_ZONE = 1 << 3

    ALL_BITS = 0xFFFFFFFF

    @staticmethod
    def can_collide(layer_bits_a: int, mask_bits_a: int, layer_bits_b: int, mask_bits_b: int) -> bool:
        """Both sides must list the other's layer in their mask."""
        return bool(mask_bits_a & layer_bits_b) and bool(mask_bits_b & layer_bits_a)


class RenderLayer(Enum):
    """Draw order, back to front."""

    BACKGROUND = "bg"
    MIDGROUND = "mg"
    FOREGROUND = "fg"
    UI = "ui"

    @property
    def order(self) -> int:
        return list(RenderLayer).index(self)
