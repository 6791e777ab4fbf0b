"""Shadow Strike: a side-scrolling ninja runner with adaptive difficulty."""

from shadow_strike.difficulty import Difficulty, FLOOR_DIFFICULTY, clamp_difficulty
from shadow_strike.session import GameSession, Phase

__all__ = [
    "Difficulty",
    "FLOOR_DIFFICULTY",
    "GameSession",
    "Phase",
    "clamp_difficulty",
]

__version__ = "0.1.0"
