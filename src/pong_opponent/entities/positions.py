"""
Per-tick positions snapshot and field geometry.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Literal

from pong_opponent.constants import (
    EDGE_HEIGHT,
    GROUND_HEIGHT,
    PADDLE_MAX_Z,
    PADDLE_MIN_Z,
    PADDLE_STEP,
)
from pong_opponent.entities.vector import Vector3
from pong_opponent.errors import InvalidSnapshotError

Side = Literal["LEFT", "RIGHT"]


@dataclass(frozen=True)
class MeshPositions:
    """
    Positions reported by the physics engine for one tick.

    :ivar ball (Vector3): Ball position.
    :ivar paddle_left (Vector3): Left paddle position.
    :ivar paddle_right (Vector3): Right paddle position.
    """

    ball: Vector3
    paddle_left: Vector3
    paddle_right: Vector3

    def paddle(self, side: Side) -> Vector3:
        """
        Position of the paddle on ``side``.

        :param side: "LEFT" or "RIGHT".
        :type side: Side

        :return: Paddle position.
        :rtype: Vector3
        """
        if side == "RIGHT":
            return self.paddle_right
        if side == "LEFT":
            return self.paddle_left
        raise ValueError(f"Unknown side: {side!r}")

    def validate(self):
        """Raise InvalidSnapshotError unless every position is a finite Vector3."""
        for name in ("ball", "paddle_left", "paddle_right"):
            value = getattr(self, name)
            if not isinstance(value, Vector3):
                raise InvalidSnapshotError(
                    f"{name} must be a Vector3, got {type(value).__name__}"
                )
            for axis, component in zip("xyz", value.to_tuple()):
                if not isinstance(component, numbers.Real):
                    raise InvalidSnapshotError(
                        f"{name}.{axis} must be a real number, "
                        f"got {component!r}"
                    )
            if not value.is_finite():
                raise InvalidSnapshotError(
                    f"{name} has non-finite coordinates: {value.to_tuple()}"
                )


@dataclass(frozen=True)
class FieldGeometry:
    """
    Play field and paddle travel limits along the z axis.

    - ground_height / edge_height: the ball bounces between
      ``±(ground_height / 2 - edge_height)``
    - paddle_min_z / paddle_max_z: legal paddle centre positions
    - paddle_step: per-tick paddle movement, applied by the actuator
    """

    ground_height: float = GROUND_HEIGHT
    edge_height: float = EDGE_HEIGHT
    paddle_min_z: float = PADDLE_MIN_Z
    paddle_max_z: float = PADDLE_MAX_Z
    paddle_step: float = PADDLE_STEP

    def __post_init__(self):
        if self.field_height <= 0:
            raise ValueError(
                "ground_height must exceed 2 * edge_height, got "
                f"ground_height={self.ground_height}, "
                f"edge_height={self.edge_height}"
            )
        if self.paddle_min_z > self.paddle_max_z:
            raise ValueError(
                f"paddle_min_z ({self.paddle_min_z}) is greater than "
                f"paddle_max_z ({self.paddle_max_z})"
            )

    @property
    def upper_bound(self) -> float:
        """Highest z the ball reaches before bouncing."""
        return self.ground_height / 2 - self.edge_height

    @property
    def lower_bound(self) -> float:
        """Lowest z the ball reaches before bouncing."""
        return -self.ground_height / 2 + self.edge_height

    @property
    def field_height(self) -> float:
        """Distance between the two bounce lines."""
        return self.upper_bound - self.lower_bound
