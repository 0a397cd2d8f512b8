"""
Shared constants for the Pong AI opponent.

Field geometry values must match the physics engine driving the game,
otherwise predictions drift from the playable field.
"""

from __future__ import annotations

from typing import Literal

# Play field (z is the paddle slide axis)
GROUND_HEIGHT: float = 20.0
EDGE_HEIGHT: float = 1.0

# Paddle travel
PADDLE_LENGTH: float = 3.0
PADDLE_MAX_Z: float = GROUND_HEIGHT / 2 - EDGE_HEIGHT - PADDLE_LENGTH / 2
PADDLE_MIN_Z: float = -PADDLE_MAX_Z
PADDLE_STEP: float = 0.5

# Controller cadence
UPDATE_INTERVAL_MS: float = 100.0
DEAD_ZONE: float = 0.5
APPROACH_SPEED: float = 5.0  # x-speed assumed before the first sample pair
NEAR_TERM_SECONDS: float = 1.0

# Directions
Direction = Literal["UP", "DOWN", "STOP"]

UP: Direction = "UP"
DOWN: Direction = "DOWN"
STOP: Direction = "STOP"
