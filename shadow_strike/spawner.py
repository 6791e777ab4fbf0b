from dataclasses import replace
from typing import Protocol

from shadow_strike.constants import (
    ENEMY_SPAWN_THRESHOLD,
    ENEMY_Y,
    GAME_HEIGHT,
    GAME_WIDTH,
    GROUND_HEIGHT,
    OBSTACLE_MAX_HEIGHT,
    OBSTACLE_MAX_WIDTH,
    OBSTACLE_MIN_HEIGHT,
    OBSTACLE_MIN_WIDTH,
    OBSTACLE_SPAWN_THRESHOLD,
)
from shadow_strike.entities import Enemy, Obstacle
from shadow_strike.physics import normalize


class RandomSource(Protocol):
    def uniform(self, low, high):  # numpy Generator and random.Random both fit
        ...


def enemy_interval(difficulty):
    return ENEMY_SPAWN_THRESHOLD / difficulty.enemy_spawn_rate


def obstacle_interval(difficulty):
    return OBSTACLE_SPAWN_THRESHOLD / difficulty.obstacle_complexity


def advance_spawns(state, delta_ms, difficulty, rng: RandomSource):
    """Grow both spawn accumulators and emit at most one enemy and one obstacle."""
    game_speed = difficulty.game_speed_multiplier * normalize(delta_ms)
    enemy_timer = state.enemy_timer + game_speed
    obstacle_timer = state.obstacle_timer + game_speed

    enemies = state.enemies
    obstacles = state.obstacles

    if enemy_timer > enemy_interval(difficulty):
        enemy_timer = 0.0
        enemy_id, state = state.allocate_id()
        enemies = enemies + (Enemy(id=enemy_id, x=GAME_WIDTH, y=ENEMY_Y),)

    if obstacle_timer > obstacle_interval(difficulty):
        obstacle_timer = 0.0
        width = float(rng.uniform(OBSTACLE_MIN_WIDTH, OBSTACLE_MAX_WIDTH))
        height = float(rng.uniform(OBSTACLE_MIN_HEIGHT, OBSTACLE_MAX_HEIGHT))
        obstacle_id, state = state.allocate_id()
        obstacles = obstacles + (
            Obstacle(
                id=obstacle_id,
                x=GAME_WIDTH,
                y=GAME_HEIGHT - GROUND_HEIGHT - height,
                width=width,
                height=height,
            ),
        )

    return replace(
        state,
        enemies=enemies,
        obstacles=obstacles,
        enemy_timer=enemy_timer,
        obstacle_timer=obstacle_timer,
    )
