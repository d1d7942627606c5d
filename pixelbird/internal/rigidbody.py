from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pixelbird.internal.math import Vector2D

if TYPE_CHECKING:
    from pixelbird.entities.core import BaseEntity
    from pixelbird.internal.transform import Transform


class RigidBody:
    """Gravity-driven body with a capped fall speed and a jump impulse.

    Velocities are in units per second, positive y pointing down. ``weight``
    scales the gravity of the owning :class:`Physics`, ``max_velocity`` caps
    the downward speed and ``jump_force`` is the upward speed set by
    :meth:`jump`.
    """

    def __init__(
        self,
        weight: float = 1.0,
        max_velocity: float = 1600.0,
        jump_force: float = 640.0,
        is_static: bool = False,
        freeze_position: Optional[List[bool]] = None  # x, y
    ):
        self.transform: Optional[Transform] = None
        self.entity: Optional[BaseEntity] = None
        self.weight = weight
        self.max_velocity = max_velocity
        self.jump_force = jump_force
        self.is_static = is_static
        self._velocity = Vector2D(0.0, 0.0)
        self._freeze_position: List[bool] = list(freeze_position or [False, False])
        self._grounded = False

    @property
    def velocity(self) -> Vector2D:
        return self._velocity

    def set_velocity(self, velocity: Vector2D) -> None:
        self._velocity = self._apply_linear_constraints(velocity)

    @property
    def inverse_mass(self) -> float:
        if self.is_static or self.weight <= 0.0:
            return 0.0
        return 1.0 / self.weight

    @property
    def is_grounded(self) -> bool:
        return self._grounded

    def set_grounded(self, grounded: bool) -> None:
        self._grounded = grounded

    def jump(self, force: Optional[float] = None) -> None:
        if self.is_static:
            return
        force = self.jump_force if force is None else force
        self._grounded = False
        self.set_velocity(Vector2D(self._velocity.x, -force))

    def translate(self, delta: Vector2D) -> None:
        position = self.transform.position
        self.transform.position = Vector2D(
            position.x if self._freeze_position[0] else position.x + delta.x,
            position.y if self._freeze_position[1] else position.y + delta.y,
        )

    def integrate(self, gravity: float, delta_time: float) -> None:
        if self.is_static:
            return

        fall = min(self._velocity.y + gravity * self.weight * delta_time, self.max_velocity)
        self.set_velocity(Vector2D(self._velocity.x, fall))
        self.translate(self._velocity * delta_time)

    def _apply_linear_constraints(self, vec: Vector2D) -> Vector2D:
        return Vector2D(
            0.0 if self._freeze_position[0] else vec.x,
            0.0 if self._freeze_position[1] else vec.y,
        )
