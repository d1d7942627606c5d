from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Optional, Tuple

from pixelbird.internal.math import Vector2D
from pixelbird.internal.rigidbody import RigidBody

if TYPE_CHECKING:
    from pixelbird.internal.collider import Collider

DEFAULT_GRAVITY = 1600.0

Pair = FrozenSet["Collider"]


class Physics:
    """Gravity integration and box-vs-box collision for one world.

    Each :meth:`step` integrates every body, then tests every collider pair
    allowed by its layer/mask bits. Overlapping pairs get ``enter`` on the
    first tick of contact and ``stay`` afterwards; ``exit`` fires on the
    tick the pair separates. A removed collider drops its contacts without
    events. Solid pairs are pushed apart, trigger pairs only report.
    """

    def __init__(self, gravity: float = DEFAULT_GRAVITY):
        self.gravity = gravity
        self._colliders: List[Collider] = []
        self._rigidbodies: List[RigidBody] = []
        self._contacts: Dict[Pair, Tuple[Collider, Collider]] = {}

    def add_rigidbody(self, rigidbody: RigidBody) -> None:
        if rigidbody not in self._rigidbodies:
            self._rigidbodies.append(rigidbody)

    def remove_rigidbody(self, rigidbody: RigidBody) -> None:
        if rigidbody in self._rigidbodies:
            self._rigidbodies.remove(rigidbody)

    def add_collider(self, collider: Collider) -> None:
        if collider not in self._colliders:
            self._colliders.append(collider)

    def remove_collider(self, collider: Collider) -> None:
        if collider in self._colliders:
            self._colliders.remove(collider)
        self._contacts = {
            pair: contact for pair, contact in self._contacts.items()
            if collider not in pair
        }

    def clear(self) -> None:
        self._rigidbodies.clear()
        self._colliders.clear()
        self._contacts.clear()

    def colliders(self) -> Iterable[Collider]:
        return tuple(self._colliders)

    def active_colliders(self) -> Iterable[Collider]:
        for col in self._colliders:
            if col.enabled and col.transform is not None:
                yield col

    def step(self, delta_time: float) -> None:
        # Grounded is rebuilt from this tick's contacts
        for body in self._rigidbodies:
            body.set_grounded(False)
            body.integrate(self.gravity, delta_time)

        touching: Dict[Pair, Tuple[Collider, Collider]] = {}
        for a, b in combinations(tuple(self.active_colliders()), 2):
            if a.transform is b.transform or not a.accepts(b):
                continue
            collision = self._compute_collision(a, b)
            if collision is None:
                continue
            if not (a.is_trigger or b.is_trigger):
                self._resolve_collision(a, b, *collision)
            touching[frozenset((a, b))] = (a, b)

        self._dispatch_events(touching)

    def _dispatch_events(self, touching: Dict[Pair, Tuple[Collider, Collider]]) -> None:
        previous, self._contacts = self._contacts, touching
        for pair, (a, b) in touching.items():
            if pair in previous:
                a.on_collision_stay(b)
                b.on_collision_stay(a)
            else:
                a.on_collision_enter(b)
                b.on_collision_enter(a)
        for pair, (a, b) in previous.items():
            if pair not in touching:
                a.on_collision_exit(b)
                b.on_collision_exit(a)

    @staticmethod
    def _compute_collision(a: Collider, b: Collider) -> Optional[Tuple[Vector2D, float]]:
        if not a.overlaps(b):
            return None

        bounds_a = a.bounds()
        bounds_b = b.bounds()
        center_a = bounds_a.center
        center_b = bounds_b.center

        overlap_x = (bounds_a.width + bounds_b.width) / 2 - abs(center_a.x - center_b.x)
        overlap_y = (bounds_a.height + bounds_b.height) / 2 - abs(center_a.y - center_b.y)

        # Normal points from a towards b along the axis of least penetration
        if overlap_x < overlap_y:
            return Vector2D(1.0 if center_a.x < center_b.x else -1.0, 0.0), overlap_x
        return Vector2D(0.0, 1.0 if center_a.y < center_b.y else -1.0), overlap_y

    @staticmethod
    def _resolve_collision(a: Collider, b: Collider, normal: Vector2D, penetration: float) -> None:
        rb_a: Optional[RigidBody] = a.transform.get_component(RigidBody)
        rb_b: Optional[RigidBody] = b.transform.get_component(RigidBody)

        inv_mass_a = 0.0 if rb_a is None else rb_a.inverse_mass
        inv_mass_b = 0.0 if rb_b is None else rb_b.inverse_mass
        inv_mass_sum = inv_mass_a + inv_mass_b
        if inv_mass_sum == 0:
            return

        # Positional correction; a body resting on the other side is grounded
        correction = normal * (penetration / inv_mass_sum)
        if inv_mass_a > 0:
            rb_a.translate(rb_a._apply_linear_constraints(correction * -inv_mass_a))
            if normal.y > 0:
                rb_a.set_grounded(True)
        if inv_mass_b > 0:
            rb_b.translate(rb_b._apply_linear_constraints(correction * inv_mass_b))
            if normal.y < 0:
                rb_b.set_grounded(True)

        # Cancel the approaching velocity, no bounce
        va = Vector2D.zero() if rb_a is None else rb_a.velocity
        vb = Vector2D.zero() if rb_b is None else rb_b.velocity
        closing = (vb - va).dot(normal)
        if closing > 0:
            return

        impulse = normal * (-closing / inv_mass_sum)
        if inv_mass_a > 0:
            rb_a.set_velocity(va - impulse * inv_mass_a)
        if inv_mass_b > 0:
            rb_b.set_velocity(vb + impulse * inv_mass_b)
