"""
Game session handle.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_game_id() -> str:
    """Random GUID string for a new game."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Game:
    """
    The game session an AI opponent plays in.

    :ivar id (str): Identifier stamped on every command the AI emits.
    """

    id: str = field(default_factory=new_game_id)
