"""
Tick pipeline system that runs an AI controller and queues its commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.engine.commands import CommandQueue

from pong_opponent.controllers.ai import AiPaddleController
from pong_opponent.entities import MeshPositions


@dataclass
class AiTickContext:
    """
    Context for one tick of the game loop.

    :ivar positions (MeshPositions): Positions reported by the physics engine.
    :ivar now_ms (float): Monotonic timestamp of the tick.
    :ivar commands (CommandQueue): Outgoing commands for the transport.
    """

    positions: MeshPositions
    now_ms: float
    commands: CommandQueue = field(default_factory=CommandQueue)


@dataclass
class AiIntentSystem:
    """
    Feeds positions to an AI controller and queues whatever it decides.
    """

    name: str = "ai_intent"
    order: int = 15  # after input, before paddles

    controller: AiPaddleController | None = None

    def enabled(self, _ctx: AiTickContext) -> bool:
        """Whether AI control is enabled."""
        return self.controller is not None

    def step(self, ctx: AiTickContext):
        """Run the controller for this tick."""
        if not self.enabled(ctx):
            return

        command = self.controller.update(ctx.positions, ctx.now_ms)
        if command is not None:
            ctx.commands.push(command)

        power_up = self.controller.use_power_up()
        if power_up is not None:
            ctx.commands.push(power_up)
