from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np
from ipycanvas import Canvas
from PIL import Image as PILImage
from PIL.Image import Image

from pixelbird.internal.layers import RenderLayer
from pixelbird.internal.math import Vector2D

logger = logging.getLogger(__name__)


class SpriteShape(Enum):
    RECT = "rect"
    TEXT = "text"


@dataclass(frozen=True)
class SpriteAnimation:
    """Frame range of a sprite sheet played at ``speed`` frames per second."""

    start: int
    end: int
    speed: float = 10.0
    loop: bool = False


class Sprite:
    """Drawable component: a sprite-sheet image, a flat primitive or a text.

    The image at ``image_path`` is cut into ``slice_x`` equal frames laid out
    in one row. When the image cannot be opened the sprite falls back to its
    primitive ``shape`` filled with ``color``.
    """

    def __init__(
        self,
        size: Vector2D,
        color: str = "#ffffff",
        shape: SpriteShape = SpriteShape.RECT,
        image_path: Optional[str] = None,  # falls back to primitive shape if None or unreadable
        layer: RenderLayer = RenderLayer.FOREGROUND,
        slice_x: int = 1,
        flip_y: bool = False,
        anims: Optional[Dict[str, SpriteAnimation]] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        self.size: Vector2D = size.copy()
        self.color: str = color
        self.shape: SpriteShape = shape
        self.image_path: Optional[str] = image_path
        self.layer: RenderLayer = layer
        self.slice_x: int = max(1, int(slice_x))
        self.flip_y: bool = flip_y
        self.anims: Dict[str, SpriteAnimation] = dict(anims or {})
        self.data: Dict[str, Any] = dict(data or {})

        self._frame: int = 0
        self._current_anim: Optional[str] = None
        self._anim_timer: float = 0.0

        self._image: Optional[Image] = None
        self._image_failed: bool = False
        self._canvases: Dict[int, Canvas] = {}
        self.enabled: bool = True

    def set_data(self, **kwargs: Any) -> None:
        self.data.update(kwargs)

    # ------------------------------------------------------------------ #
    # Animation
    # ------------------------------------------------------------------ #
    @property
    def frame(self) -> int:
        return self._frame

    def set_frame(self, frame: int) -> None:
        self._frame = max(0, min(int(frame), self.slice_x - 1))

    @property
    def current_anim(self) -> Optional[str]:
        return self._current_anim

    def play(self, name: str) -> None:
        """(Re)start the named animation from its first frame."""
        if name not in self.anims:
            raise ValueError(f"Sprite has no animation '{name}'.")
        self._current_anim = name
        self._anim_timer = 0.0
        self.set_frame(self.anims[name].start)

    def stop(self, frame: Optional[int] = None) -> None:
        self._current_anim = None
        self._anim_timer = 0.0
        if frame is not None:
            self.set_frame(frame)

    def update(self, delta_time: float) -> None:
        if self._current_anim is None:
            return
        anim = self.anims[self._current_anim]
        if anim.speed <= 0:
            return

        self._anim_timer += delta_time
        frame_time = 1.0 / anim.speed
        while self._current_anim is not None and self._anim_timer >= frame_time:
            self._anim_timer -= frame_time
            if self._frame < anim.end:
                self._frame += 1
            elif anim.loop:
                self._frame = anim.start
            else:
                self._current_anim = None

    # ------------------------------------------------------------------ #
    # Image data
    # ------------------------------------------------------------------ #
    @property
    def image(self) -> Optional[Image]:
        return self._ensure_image()

    @property
    def frame_size(self) -> Optional[Vector2D]:
        image = self.image
        if image is None:
            return None
        return Vector2D(float(image.width // self.slice_x), float(image.height))

    def ensure_canvas(self, frame: Optional[int] = None) -> Optional[Canvas]:
        """Return an offscreen canvas holding one frame, or None without an image."""
        frame = self._frame if frame is None else frame
        if frame in self._canvases:
            return self._canvases[frame]

        frame_array = self._frame_array(frame)
        if frame_array is None:
            return None

        canvas = Canvas(width=frame_array.shape[1], height=frame_array.shape[0])
        canvas.put_image_data(frame_array, 0, 0)
        self._canvases[frame] = canvas
        return canvas

    def _ensure_image(self) -> Optional[Image]:
        if self.image_path is None or self._image_failed:
            return None
        if self._image is not None:
            return self._image

        try:
            self._image = PILImage.open(self.image_path).convert("RGBA")
        except OSError as e:
            # Keep _image as None for primitive fallback
            logger.warning("Could not load sprite image %s: %s", self.image_path, e)
            self._image_failed = True
            return None
        return self._image

    def _frame_array(self, frame: int) -> Optional[np.ndarray]:
        image = self.image
        if image is None:
            return None

        frame_width = image.width // self.slice_x
        left = frame_width * max(0, min(frame, self.slice_x - 1))
        cropped = image.crop((left, 0, left + frame_width, image.height))
        if self.flip_y:
            cropped = cropped.transpose(PILImage.Transpose.FLIP_TOP_BOTTOM)
        return np.array(cropped, dtype=np.uint8)
