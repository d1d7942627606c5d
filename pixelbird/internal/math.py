from dataclasses import dataclass


def clamp(value: float, low: float, high: float) -> float:
    return low if value < low else high if value > high else value


@dataclass
class Vector2D:
    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    @staticmethod
    def zero() -> "Vector2D":
        return Vector2D(0.0, 0.0)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass
class Rect:
    """Axis-aligned rectangle from its top-left corner, y pointing down."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.x + self.width / 2, self.y + self.height / 2)

    @staticmethod
    def from_center(center: Vector2D, size: Vector2D) -> "Rect":
        return Rect(center.x - size.x / 2, center.y - size.y / 2, size.x, size.y)
