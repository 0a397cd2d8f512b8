"""
Commands emitted by the AI opponent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pong_opponent.constants import Direction
from pong_opponent.entities.positions import Side


@dataclass(frozen=True)
class PlayerInput:
    """
    Paddle movement command, same shape a human player's input takes.

    :ivar side (Side): Paddle the command moves.
    :ivar game_id (str): Game the command belongs to.
    :ivar direction (Direction): "UP" or "DOWN". The AI never emits "STOP";
        returning no command means the paddle stays put.
    :ivar type (str): Discriminator, always "PlayerInput".
    """

    side: Side
    game_id: str
    direction: Direction
    type: Literal["PlayerInput"] = "PlayerInput"

    def to_dict(self) -> dict[str, str]:
        """Wire representation handed to the transport."""
        return {
            "type": self.type,
            "side": self.side.lower(),
            "gameId": self.game_id,
            "direction": self.direction,
        }
