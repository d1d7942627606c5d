from __future__ import annotations

import logging
from typing import Optional

from ipywidgets import Audio, Box

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Plays one track at a time through an ``ipywidgets.Audio`` widget.

    The widget is mounted into ``slot``, which the notebook app displays next
    to the canvas. Without a slot nothing is mounted and only the playback
    state is tracked.
    """

    def __init__(self, slot: Optional[Box] = None):
        self.slot = slot
        self._widget: Optional[Audio] = None
        self._track: Optional[str] = None

    @property
    def is_playing(self) -> bool:
        return self._track is not None

    @property
    def track(self) -> Optional[str]:
        return self._track

    def play(self, path: str, loop: bool = True) -> None:
        self.stop()
        self._track = path
        if self.slot is None:
            return

        try:
            widget = Audio.from_file(path, autoplay=True, loop=loop, controls=False)
        except OSError as e:
            logger.warning("Could not load audio track %s: %s", path, e)
            return
        self._widget = widget
        self.slot.children = (widget,)

    def stop(self) -> None:
        self._track = None
        if self._widget is None:
            return
        if self.slot is not None:
            self.slot.children = ()
        self._widget.close()
        self._widget = None
