"""
Controllers package for the Pong AI opponent.
"""

from __future__ import annotations

from .ai import AiConfig, AiControllerState, AiPaddleController
from .prediction import TrajectoryPredictor, clamp, reflect_into_band
from .velocity import VelocityEstimator

__all__ = [
    "AiConfig",
    "AiControllerState",
    "AiPaddleController",
    "TrajectoryPredictor",
    "VelocityEstimator",
    "clamp",
    "reflect_into_band",
]
