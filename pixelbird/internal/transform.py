from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from pixelbird.internal.collider import Collider
from pixelbird.internal.math import Vector2D
from pixelbird.internal.rigidbody import RigidBody

if TYPE_CHECKING:
    from pixelbird.internal.physics import Physics


class Transform:
    def __init__(
        self,
        position: Vector2D = Vector2D(0, 0),
        physics: Optional[Physics] = None,
    ):
        self.position = position.copy()
        self.physics = physics

        self._components: Dict[type, List[object]] = {Transform: [self]}

    def attach_component(self, component):
        if component.__class__ == Transform:
            raise ValueError("Transform component already attached.")

        self._components.setdefault(component.__class__, []).append(component)
        setattr(component, "transform", self)

        # Track in physics system when attached
        if self.physics is not None:
            if isinstance(component, Collider):
                self.physics.add_collider(component)
            if isinstance(component, RigidBody):
                self.physics.add_rigidbody(component)
        return component

    def get_component(self, cls):
        components = self.get_components(cls)
        return components[0] if components else None

    def get_components(self, cls) -> list:
        results = []
        for key, components in self._components.items():
            if issubclass(key, cls):
                results.extend(components)
        return results

    def delete(self) -> None:
        for key, components in list(self._components.items()):
            if key is Transform:
                continue
            for component in components:
                if self.physics is not None:
                    if isinstance(component, Collider):
                        self.physics.remove_collider(component)
                    if isinstance(component, RigidBody):
                        self.physics.remove_rigidbody(component)
                setattr(component, "transform", None)
        self._components = {Transform: [self]}

    def translate(self, delta: Vector2D) -> None:
        self.position = self.position + delta

    def set_position(self, position: Vector2D) -> None:
        self.position = position.copy()

    def __repr__(self) -> str:
        return f"Transform(position={self.position})"
