from __future__ import annotations

import pytest

from pong_opponent import AiConfig, AiPaddleController, Game


@pytest.fixture
def game():
    return Game(id="game-1")


@pytest.fixture
def controller(game):
    return AiPaddleController(game, config=AiConfig(update_interval_ms=100.0))
