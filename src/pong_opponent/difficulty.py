"""
Difficulty presets for the AI opponent.
"""

from __future__ import annotations

from mini_arcade_core.utils import logger

from pong_opponent.controllers.ai import AiConfig

DIFFICULTY_PRESETS: dict[str, AiConfig] = {
    # one look per second, lazy about small corrections
    "easy": AiConfig(update_interval_ms=1000.0, dead_zone=1.0),
    "normal": AiConfig(),
    "hard": AiConfig(update_interval_ms=50.0, dead_zone=0.25),
}


def config_for(difficulty: str) -> AiConfig:
    """
    Get the AI config for a difficulty name.

    :param difficulty: Preset name, case-insensitive.
    :type difficulty: str

    :return: Matching preset, or the "normal" preset for unknown names.
    :rtype: AiConfig
    """
    key = difficulty.lower()
    if key not in DIFFICULTY_PRESETS:
        logger.warning(f"Unknown difficulty {difficulty!r}, using normal")
        return DIFFICULTY_PRESETS["normal"]
    return DIFFICULTY_PRESETS[key]
