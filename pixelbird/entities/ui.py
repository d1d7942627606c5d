from __future__ import annotations

from typing import TYPE_CHECKING

from pixelbird.entities.core import BaseEntity
from pixelbird.internal.layers import RenderLayer
from pixelbird.internal.math import Vector2D
from pixelbird.internal.sprite import Sprite, SpriteShape

if TYPE_CHECKING:
    from pixelbird.world import World


class Panel(BaseEntity):
    """Flat translucent rectangle, positioned by its top-left corner."""

    def __init__(self, world: World, x: float, y: float, width: float, height: float, color: str):
        size = Vector2D(width, height)
        super().__init__(world, Vector2D(x + width / 2, y + height / 2))
        self.attach_component(Sprite(
            size=size,
            color=color,
            shape=SpriteShape.RECT,
            layer=RenderLayer.UI,
        ))


class Label(BaseEntity):
    def __init__(
        self,
        world: World,
        position: Vector2D,
        text: str,
        font_size: int = 16,
        color: str = "#ffffff",
        centered: bool = False,
    ):
        super().__init__(world, position)
        self.attach_component(Sprite(
            size=Vector2D(0.0, float(font_size)),
            color=color,
            shape=SpriteShape.TEXT,
            layer=RenderLayer.UI,
            data={"text": text, "font_size": font_size, "centered": centered},
        ))

    @property
    def text(self) -> str:
        return self.sprite.data["text"]

    @text.setter
    def text(self, value: str) -> None:
        self.sprite.set_data(text=value)
