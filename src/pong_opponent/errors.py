"""
Exceptions raised when collaborators break the controller's contract.
"""

from __future__ import annotations


class PongOpponentError(Exception):
    """Base class for pong_opponent errors."""


class InvalidSnapshotError(PongOpponentError, ValueError):
    """A positions snapshot is missing data or holds non-finite values."""


class NonMonotonicTimeError(PongOpponentError, ValueError):
    """A tick timestamp went backwards."""

    def __init__(self, current_time_ms: float, last_update_ms: float):
        self.current_time_ms = current_time_ms
        self.last_update_ms = last_update_ms
        super().__init__(
            f"Tick timestamp {current_time_ms} ms is earlier than the last "
            f"accepted tick at {last_update_ms} ms"
        )
