"""Small vector types, transforms and point collision checks."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> Vector2:
        """Return the vector multiplied by the scalar ``s``."""
        return Vector2(self.x * s, self.y * s)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction; the zero vector is returned unchanged."""
        mag = self.magnitude()
        if mag == 0:
            return self
        return self.scale(1.0 / mag)

    def signed_angle(self, to: Vector2) -> float:
        """Signed angle in degrees from this vector to ``to``, in [-180, 180]."""
        angle = math.degrees(math.atan2(to.y, to.x) - math.atan2(self.y, self.x))
        while angle > 180.0:
            angle -= 360.0
        while angle < -180.0:
            angle += 360.0
        return angle


@dataclass(frozen=True)
class Vector3:
    """A three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, s: float) -> Vector3:
        """Return the vector multiplied by the scalar ``s``."""
        return Vector3(self.x * s, self.y * s, self.z * s)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction; the zero vector is returned unchanged."""
        mag = self.magnitude()
        if mag == 0:
            return self
        return self.scale(1.0 / mag)


@dataclass
class Transform:
    """A position in space and a yaw rotation in radians."""

    position: Vector3 = field(default_factory=Vector3)
    yaw: float = 0.0


def points_collide(a: Vector3, b: Vector3, threshold: float) -> bool:
    """True when the distance between ``a`` and ``b`` is strictly below ``threshold``."""
    return (a - b).magnitude() < threshold