"""Difficulty suggestion services.

A service is any coroutine function taking the current score and returning a
mapping with ``enemy_spawn_rate``, ``obstacle_complexity`` and
``game_speed_multiplier``. Results are suggestions only; the controller clamps
whatever comes back.
"""

import asyncio
import logging

from shadow_strike.constants import MAX_SCORE
from shadow_strike.exceptions import SuggestionUnavailable

logger = logging.getLogger(__name__)


def score_scale(score):
    """Score mapped onto [0, 1], saturating at MAX_SCORE."""
    return max(0, min(score, MAX_SCORE)) / MAX_SCORE


async def suggest_difficulty(score, latency=0.0):
    """Linear curve from the floor at score 0 to the ceiling at MAX_SCORE."""
    if latency > 0:
        await asyncio.sleep(latency)
    t = score_scale(score)
    return {
        "enemy_spawn_rate": 1 + 4 * t,
        "obstacle_complexity": 1 + 9 * t,
        "game_speed_multiplier": 1.0 + 0.5 * t,
    }


async def offline_suggestion(score):
    raise SuggestionUnavailable("difficulty suggestions are disabled")
