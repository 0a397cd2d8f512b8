from __future__ import annotations

from pong_opponent import MeshPositions, Vector3


def make_positions(ball, right=(10.0, 0.0, 0.0), left=(-10.0, 0.0, 0.0)):
    return MeshPositions(
        ball=Vector3(*ball),
        paddle_left=Vector3(*left),
        paddle_right=Vector3(*right),
    )
