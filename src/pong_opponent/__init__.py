"""
Predictive AI opponent for a two-paddle ball game.
"""

from __future__ import annotations

from .constants import DOWN, STOP, UP
from .controllers import AiConfig, AiControllerState, AiPaddleController
from .difficulty import DIFFICULTY_PRESETS, config_for
from .entities import FieldGeometry, Game, MeshPositions, PlayerInput, Vector3
from .errors import (
    InvalidSnapshotError,
    NonMonotonicTimeError,
    PongOpponentError,
)
from .systems import AiIntentSystem, AiTickContext

__all__ = [
    "AiConfig",
    "AiControllerState",
    "AiIntentSystem",
    "AiPaddleController",
    "AiTickContext",
    "DIFFICULTY_PRESETS",
    "DOWN",
    "FieldGeometry",
    "Game",
    "InvalidSnapshotError",
    "MeshPositions",
    "NonMonotonicTimeError",
    "PlayerInput",
    "PongOpponentError",
    "STOP",
    "UP",
    "Vector3",
    "config_for",
]
