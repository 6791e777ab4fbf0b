import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Difficulty:
    enemy_spawn_rate: float = 1
    obstacle_complexity: float = 1
    game_speed_multiplier: float = 1.0


FLOOR_DIFFICULTY = Difficulty()

# field -> (floor, ceiling)
BOUNDS = {
    "enemy_spawn_rate": (1, 5),
    "obstacle_complexity": (1, 10),
    "game_speed_multiplier": (1.0, 1.5),
}


def _coerce(value, floor):
    # bool is a Real subclass but never a meaningful suggestion
    if isinstance(value, bool) or not isinstance(value, Real):
        return floor
    value = float(value)
    if not math.isfinite(value):
        return floor
    return value


def clamp_difficulty(raw):
    """Turn a best-effort suggestion into a Difficulty inside the safe bounds.

    ``raw`` may be any mapping, a Difficulty, or None. Missing or invalid
    fields fall back to their floor before clamping, so the result is always
    within bounds whatever the service returned.
    """
    if isinstance(raw, Difficulty):
        raw = vars(raw)
    if raw is None or not hasattr(raw, "get"):
        raw = {}

    values = {}
    for name, (lo, hi) in BOUNDS.items():
        value = _coerce(raw.get(name), lo)
        values[name] = max(lo, min(hi, value))
    return Difficulty(**values)
