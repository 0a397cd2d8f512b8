"""
Ball velocity estimation from successive position samples.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mini_arcade_core.utils import logger

from pong_opponent.entities.vector import Vector3

if TYPE_CHECKING:
    from pong_opponent.controllers.ai import AiControllerState


class VelocityEstimator:
    """
    Turns the displacement between two accepted ticks into units/second.

    Before the first sample pair exists the ball is assumed to be heading
    toward the controlled paddle at ``approach_speed``.
    """

    def __init__(self, update_interval_ms: float, approach_speed: float):
        """
        :param update_interval_ms: Time between accepted ticks (ms).
        :type update_interval_ms: float

        :param approach_speed: x-speed of the first-tick guess (units/sec).
        :type approach_speed: float
        """
        self.update_interval_ms = update_interval_ms
        self.approach_speed = approach_speed

    def estimate(
        self,
        state: AiControllerState,
        ball: Vector3,
        paddle_z: float,
        approach_sign: int = 1,
    ) -> Vector3:
        """
        Estimate the ball velocity and remember ``ball`` for the next call.

        :param state: Controller state; last_ball_position and
            estimated_velocity are updated in place.
        :type state: AiControllerState

        :param ball: Current ball position.
        :type ball: Vector3

        :param paddle_z: Current z of the controlled paddle.
        :type paddle_z: float

        :param approach_sign: +1 when the paddle receives balls moving
            toward +x, -1 for the mirrored side.
        :type approach_sign: int

        :return: Estimated velocity (units/sec).
        :rtype: Vector3
        """
        if state.last_ball_position is not None:
            delta_time = self.update_interval_ms / 1000
            velocity = (ball - state.last_ball_position).scale(1 / delta_time)
            logger.debug(f"Ball velocity: {velocity.to_tuple()}")
        else:
            # first sample: assume the ball heads for the paddle
            velocity = Vector3(
                self.approach_speed * approach_sign, 0.0, ball.z - paddle_z
            )
            logger.debug(f"Initial ball velocity: {velocity.to_tuple()}")

        state.last_ball_position = ball
        state.estimated_velocity = velocity
        return velocity
