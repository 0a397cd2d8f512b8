"""
Predictive AI paddle controller for the Pong opponent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.utils import logger

from pong_opponent.constants import (
    APPROACH_SPEED,
    DEAD_ZONE,
    DOWN,
    NEAR_TERM_SECONDS,
    PADDLE_STEP,
    UP,
    UPDATE_INTERVAL_MS,
    Direction,
)
from pong_opponent.controllers.prediction import TrajectoryPredictor
from pong_opponent.controllers.velocity import VelocityEstimator
from pong_opponent.entities import (
    FieldGeometry,
    Game,
    MeshPositions,
    PlayerInput,
    Side,
    Vector3,
)
from pong_opponent.errors import NonMonotonicTimeError


@dataclass(frozen=True)
class AiConfig:
    """
    AI opponent settings.

    - paddle_speed: informational, the actuator applies movement (units/tick)
    - update_interval_ms: minimum time between accepted ticks
    - dead_zone: how far the prediction may sit from the paddle before it moves
    - approach_speed: x-speed assumed on the very first tick (units/sec)
    - near_term_seconds: arrivals sooner than this use the current ball z
    """

    paddle_speed: float = PADDLE_STEP
    update_interval_ms: float = UPDATE_INTERVAL_MS
    dead_zone: float = DEAD_ZONE
    approach_speed: float = APPROACH_SPEED
    near_term_seconds: float = NEAR_TERM_SECONDS

    def __post_init__(self):
        if self.update_interval_ms <= 0:
            raise ValueError(
                f"update_interval_ms must be > 0, got {self.update_interval_ms}"
            )
        if self.dead_zone < 0:
            raise ValueError(f"dead_zone must be >= 0, got {self.dead_zone}")
        if self.approach_speed <= 0:
            raise ValueError(
                f"approach_speed must be > 0, got {self.approach_speed}"
            )
        if self.near_term_seconds < 0:
            raise ValueError(
                "near_term_seconds must be >= 0, "
                f"got {self.near_term_seconds}"
            )


@dataclass
class AiControllerState:
    """
    Mutable state owned by one controller.

    :ivar last_update_ms (float): Timestamp of the last accepted tick.
    :ivar last_ball_position (Vector3 | None): Ball position at that tick.
    :ivar estimated_velocity (Vector3): Last velocity estimate.
    """

    last_update_ms: float = 0.0
    last_ball_position: Vector3 | None = None
    estimated_velocity: Vector3 = field(default_factory=Vector3.zero)


class AiPaddleController:
    """
    Predictive CPU:
    - Estimates ball velocity from the previous accepted tick.
    - Predicts where the ball crosses this paddle's line, bounces included.
    - Asks the paddle to move UP/DOWN when the prediction leaves the dead zone.
    """

    def __init__(
        self,
        game: Game,
        *,
        side: Side = "RIGHT",
        config: AiConfig | None = None,
        geometry: FieldGeometry | None = None,
    ):
        """
        :param game: Game session the commands belong to.
        :type game: Game

        :param side: Paddle this controller drives.
        :type side: Side

        :param config: The AI configuration settings.
        :type config: AiConfig, optional

        :param geometry: Field and paddle limits.
        :type geometry: FieldGeometry, optional
        """
        if side not in ("LEFT", "RIGHT"):
            raise ValueError(f"side must be 'LEFT' or 'RIGHT', got {side!r}")

        self.game = game
        self.side = side
        self.config = config or AiConfig()
        self.geometry = geometry or FieldGeometry()
        self.state = AiControllerState()

        # RIGHT receives balls travelling toward +x
        self.approach_sign = 1 if side == "RIGHT" else -1

        self.estimator = VelocityEstimator(
            self.config.update_interval_ms, self.config.approach_speed
        )
        self.predictor = TrajectoryPredictor(
            self.geometry, self.config.near_term_seconds
        )
        logger.info(
            f"AI opponent for {side} paddle in game {game.id} "
            f"(interval={self.config.update_interval_ms} ms)"
        )

    def update(
        self, positions: MeshPositions, current_time_ms: float
    ) -> PlayerInput | None:
        """
        Run one tick.

        :param positions: Positions snapshot for this tick.
        :type positions: MeshPositions

        :param current_time_ms: Monotonic timestamp in milliseconds.
        :type current_time_ms: float

        :return: Movement command, or None to leave the paddle alone.
        :rtype: PlayerInput | None
        """
        state = self.state
        if current_time_ms < state.last_update_ms:
            raise NonMonotonicTimeError(current_time_ms, state.last_update_ms)

        elapsed_ms = current_time_ms - state.last_update_ms
        if elapsed_ms < self.config.update_interval_ms:
            return None

        positions.validate()
        state.last_update_ms = current_time_ms

        paddle = positions.paddle(self.side)
        velocity = self.estimator.estimate(
            state, positions.ball, paddle.z, self.approach_sign
        )
        predicted_z = self.predictor.predict(
            positions.ball, paddle, velocity, self.approach_sign
        )
        logger.debug(
            f"[{current_time_ms}] Predicted z: {predicted_z}, paddle z: {paddle.z}"
        )

        direction = self.decide(predicted_z, paddle.z)
        if direction is None:
            return None

        return PlayerInput(
            side=self.side, game_id=self.game.id, direction=direction
        )

    def decide(self, predicted_z: float, paddle_z: float) -> Direction | None:
        """
        Pick a direction for the paddle.

        UP lowers z and DOWN raises it, matching the actuator's convention.

        :param predicted_z: Where the ball is expected to cross.
        :type predicted_z: float

        :param paddle_z: Current paddle z.
        :type paddle_z: float

        :return: UP, DOWN, or None inside the dead zone.
        :rtype: Direction | None
        """
        threshold = self.config.dead_zone
        if predicted_z < paddle_z - threshold:
            return UP
        if predicted_z > paddle_z + threshold:
            return DOWN
        return None

    def use_power_up(self) -> PlayerInput | None:
        """Power-up hook. The AI does not use power-ups yet."""
        return None
