from __future__ import annotations

from typing import TYPE_CHECKING, List

from ipycanvas import Canvas, hold_canvas

from pixelbird.internal.sprite import Sprite, SpriteShape

if TYPE_CHECKING:
    from pixelbird.entities.core import BaseEntity
    from pixelbird.game import Game


class Renderer:
    """Draws the active scene of a :class:`Game` onto one canvas.

    The canvas has the game's virtual resolution and is stretched by CSS to
    ``config.scale`` times that size, with smoothing off to keep pixels sharp.
    """

    def __init__(self, game: Game, canvas: Canvas = None):
        self.game = game
        cfg = game.config
        if canvas is None:
            canvas = Canvas(width=cfg.width, height=cfg.height)
        self.canvas = canvas
        self.canvas.layout.width = f"{cfg.width * cfg.scale}px"
        self.canvas.layout.height = f"{cfg.height * cfg.scale}px"
        self.canvas.layout.border = "2px solid #444444"
        try:
            self.canvas.image_smoothing_enabled = False
        except AttributeError:
            pass

    def draw(self) -> None:
        cfg = self.game.config
        with hold_canvas(self.canvas):
            self.canvas.clear()
            self.canvas.fill_style = cfg.colors.background
            self.canvas.fill_rect(0, 0, cfg.width, cfg.height)

            for entity in self._drawables():
                self._draw_entity(entity)

    def _drawables(self) -> List[BaseEntity]:
        scene = self.game.scene
        if scene is None:
            return []
        drawables = [
            entity for entity in scene.world.entities
            if entity.sprite is not None and entity.sprite.enabled
        ]
        # Stable sort keeps insertion order inside a layer
        drawables.sort(key=lambda entity: entity.sprite.layer.order)
        return drawables

    def _draw_entity(self, entity: BaseEntity) -> None:
        sprite = entity.sprite
        pos = entity.position
        if sprite.shape is SpriteShape.TEXT:
            self._draw_text(sprite, pos.x, pos.y)
            return

        x = pos.x - sprite.size.x / 2
        y = pos.y - sprite.size.y / 2
        canvas = sprite.ensure_canvas()
        if canvas is not None:
            self.canvas.draw_image(canvas, x, y, sprite.size.x, sprite.size.y)
        else:
            self.canvas.fill_style = sprite.color
            self.canvas.fill_rect(x, y, sprite.size.x, sprite.size.y)

    def _draw_text(self, sprite: Sprite, x: float, y: float) -> None:
        centered = sprite.data.get("centered", False)
        self.canvas.fill_style = sprite.color
        self.canvas.font = f"{sprite.data.get('font_size', 16)}px {self.game.config.font}"
        self.canvas.text_align = "center" if centered else "left"
        self.canvas.text_baseline = "middle" if centered else "top"
        self.canvas.fill_text(sprite.data.get("text", ""), x, y)
