"""
Predicts where the ball crosses a paddle's plane, folding wall bounces.
"""

from __future__ import annotations

import math

from mini_arcade_core.utils import logger

from pong_opponent.entities.positions import FieldGeometry
from pong_opponent.entities.vector import Vector3


def reflect_into_band(raw_z: float, lower_bound: float, upper_bound: float) -> float:
    """
    Fold an unbounded z into ``[lower_bound, upper_bound]`` as if the ball
    bounced elastically off both edges.

    An even number of bounces leaves the ball travelling in its original
    direction, measured up from the lower edge; an odd number leaves it
    coming back down from the upper edge.

    :param raw_z: Straight-line extrapolated z.
    :type raw_z: float

    :param lower_bound: Lower bounce line.
    :type lower_bound: float

    :param upper_bound: Upper bounce line.
    :type upper_bound: float

    :return: Folded z.
    :rtype: float
    """
    field_height = upper_bound - lower_bound
    offset = raw_z - lower_bound

    # Floor modulo keeps remainder in [0, field_height) for negative offsets
    # too, so -10 folds to -8 in a [-9, 9] band. A truncating remainder
    # would give 10 and push the ball past the upper edge.
    bounces = math.floor(offset / field_height)
    remainder = offset % field_height

    if bounces % 2 == 0:
        return lower_bound + remainder
    return upper_bound - remainder


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


class TrajectoryPredictor:
    """
    Closed-form trajectory prediction:
    - Ignores balls moving away from the paddle.
    - Uses the current ball z when the ball is about to arrive.
    - Otherwise extrapolates, folds bounces and clamps to paddle travel.
    """

    def __init__(self, geometry: FieldGeometry, near_term_seconds: float):
        """
        :param geometry: Field and paddle limits.
        :type geometry: FieldGeometry

        :param near_term_seconds: Arrivals within this time are not extrapolated.
        :type near_term_seconds: float
        """
        self.geometry = geometry
        self.near_term_seconds = near_term_seconds

    def predict(
        self,
        ball: Vector3,
        paddle: Vector3,
        velocity: Vector3,
        approach_sign: int = 1,
    ) -> float:
        """
        Predict the z at which the ball reaches the paddle's x plane.

        :param ball: Current ball position.
        :type ball: Vector3

        :param paddle: Current position of the controlled paddle.
        :type paddle: Vector3

        :param velocity: Estimated ball velocity (units/sec).
        :type velocity: Vector3

        :param approach_sign: +1 if the ball approaches along +x, -1 along -x.
        :type approach_sign: int

        :return: Predicted crossing z.
        :rtype: float
        """
        closing_speed = velocity.x * approach_sign

        if closing_speed <= 0:
            logger.debug("Ball moving away, holding paddle position")
            return paddle.z

        distance_to_paddle = abs(paddle.x - ball.x)
        time_to_paddle = (
            distance_to_paddle / closing_speed
            if closing_speed != 0
            else math.inf
        )
        logger.debug(f"Time to paddle: {time_to_paddle}")

        if math.isinf(time_to_paddle) or time_to_paddle <= self.near_term_seconds:
            logger.debug(f"Ball close, using current ball z: {ball.z}")
            return ball.z

        raw_z = ball.z + velocity.z * time_to_paddle
        if math.isfinite(raw_z):
            folded_z = reflect_into_band(
                raw_z, self.geometry.lower_bound, self.geometry.upper_bound
            )
        else:
            # overflowed extrapolation has no bounce count, clamp only
            logger.warning(f"Extrapolated z overflowed ({raw_z}), clamping")
            folded_z = raw_z
        predicted_z = clamp(
            folded_z, self.geometry.paddle_min_z, self.geometry.paddle_max_z
        )

        logger.debug(
            f"Predicted z: raw={raw_z}, folded={folded_z}, clamped={predicted_z}"
        )
        return predicted_z
