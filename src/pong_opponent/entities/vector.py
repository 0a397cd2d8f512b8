"""
3D vector used for ball and paddle positions and velocities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """
    Immutable 3D vector.

    :ivar x (float): Approach axis (the ball travels along x toward a paddle).
    :ivar y (float): Height above the ground, unused by the controller.
    :ivar z (float): Paddle slide axis.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        """Zero vector."""
        return cls(0.0, 0.0, 0.0)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vector3:
        """
        Multiply every component by ``factor``.

        :param factor: Scale factor.
        :type factor: float

        :return: Scaled vector.
        :rtype: Vector3
        """
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def is_finite(self) -> bool:
        """Whether every component is a finite number."""
        return all(math.isfinite(c) for c in self.to_tuple())

    def to_tuple(self) -> tuple[float, float, float]:
        """Components as an ``(x, y, z)`` tuple."""
        return (self.x, self.y, self.z)
