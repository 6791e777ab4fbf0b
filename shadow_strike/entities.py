from dataclasses import dataclass, field, replace

from shadow_strike.constants import (
    ENEMY_HEIGHT,
    ENEMY_WIDTH,
    PLAYER_GROUND_Y,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
    PLAYER_X,
    SHURIKEN_HEIGHT,
    SHURIKEN_WIDTH,
)
from shadow_strike.geometry import Rect


@dataclass(frozen=True)
class Player:
    y: float = PLAYER_GROUND_Y
    vy: float = 0.0
    airborne: bool = False
    x: float = field(default=PLAYER_X)
    width: float = field(default=PLAYER_WIDTH)
    height: float = field(default=PLAYER_HEIGHT)

    @property
    def rect(self):
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Projectile:
    id: int
    x: float
    y: float
    width: float = SHURIKEN_WIDTH
    height: float = SHURIKEN_HEIGHT

    @property
    def rect(self):
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Enemy:
    id: int
    x: float
    y: float
    width: float = ENEMY_WIDTH
    height: float = ENEMY_HEIGHT

    @property
    def rect(self):
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Obstacle:
    id: int
    x: float
    y: float
    width: float
    height: float

    @property
    def rect(self):
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class SimState:
    """Everything one tick reads and writes. Replaced wholesale, never mutated."""

    player: Player = field(default_factory=Player)
    projectiles: tuple = ()
    enemies: tuple = ()
    obstacles: tuple = ()

    # Spawn accumulators, in speed-scaled reference frames
    enemy_timer: float = 0.0
    obstacle_timer: float = 0.0

    score: int = 0
    next_id: int = 1

    @classmethod
    def initial(cls):
        return cls()

    def allocate_id(self):
        """Returns (entity_id, state_with_counter_bumped)."""
        return self.next_id, replace(self, next_id=self.next_id + 1)
