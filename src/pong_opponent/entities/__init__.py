"""
Entities package for the Pong AI opponent.
This package contains the value types passed in and out of a controller.
"""

from __future__ import annotations

from .commands import PlayerInput
from .game import Game
from .positions import FieldGeometry, MeshPositions, Side
from .vector import Vector3

__all__ = [
    "FieldGeometry",
    "Game",
    "MeshPositions",
    "PlayerInput",
    "Side",
    "Vector3",
]
