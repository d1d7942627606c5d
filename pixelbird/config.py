from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    background: str = "rgb(41, 173, 255)"
    panel: str = "rgba(0, 0, 0, 0.2)"
    label: str = "#ffffff"

    # Fallbacks when an image asset is missing
    backdrop: str = "#4ec0ca"
    floor: str = "#ded895"
    pillar: str = "#73bf2e"
    bird: str = "#f5c542"


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of the game. Distances in virtual pixels, times in seconds."""

    # Screen
    width: int = 320
    height: int = 240
    scale: int = 2
    font: str = "monospace"
    colors: Colors = field(default_factory=Colors)
    tick_rate: float = 60.0

    # Assets
    asset_dir: str = "assets"
    background_image: str = "bg.png"
    floor_image: str = "floor.png"
    pillar_image: str = "pillar.png"
    bird_image: str = "bird.png"
    bird_frames: int = 3
    music_track: str = "music.wav"
    music_loop: bool = True

    # Physics
    gravity: float = 1600.0
    bird_weight: float = 1.0
    bird_max_velocity: float = 120.0
    bird_jump_force: float = 300.0

    # Bird
    bird_size: Tuple[float, float] = (50 * 0.8, 28 * 0.8)
    bird_bounce_speed: float = 70.0
    bird_fall_speed: float = 30.0
    bird_dead_frame: int = 2
    flap_interval: float = 0.2
    flap_speed: float = 10.0

    # Pillars
    pillar_gap: float = 80.0
    pillar_width: float = 60.0
    pillar_offset_range: float = 15.0
    score_zone_lead: float = 60.0
    pillar_base_speed: float = 90.0
    pillar_speed_increment: float = 0.5
    spawn_interval: float = 2.5

    # Scenes
    menu_arm_delay: float = 0.5
    game_over_delay: float = 1.0

    @property
    def floor_height(self) -> float:
        return self.height / 8

    @property
    def tick(self) -> float:
        return 1.0 / self.tick_rate

    def asset(self, name: str) -> str:
        return os.path.join(self.asset_dir, name)

    def replace(self, **changes) -> "GameConfig":
        return replace(self, **changes)
