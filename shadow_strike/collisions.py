from dataclasses import replace
from typing import NamedTuple

from shadow_strike.constants import SCORE_PER_ENEMY
from shadow_strike.geometry import overlaps


class Resolution(NamedTuple):
    state: object
    crashed: bool = False
    points: int = 0


def player_hits_hazard(state):
    player_rect = state.player.rect
    for enemy in state.enemies:
        if overlaps(player_rect, enemy.rect):
            return True
    for obstacle in state.obstacles:
        if overlaps(player_rect, obstacle.rect):
            return True
    return False


def resolve_collisions(state):
    """Fatal player collisions first, then shuriken hits.

    A crash leaves the state untouched. Each shuriken takes out at most one
    enemy and is consumed by the hit.
    """
    if player_hits_hazard(state):
        return Resolution(state, crashed=True)

    surviving_shurikens = []
    enemies = list(state.enemies)
    points = 0

    for shuriken in state.projectiles:
        shuriken_rect = shuriken.rect
        for i, enemy in enumerate(enemies):
            if overlaps(shuriken_rect, enemy.rect):
                # sfx: enemy_hit.wav
                del enemies[i]
                points += SCORE_PER_ENEMY
                break
        else:
            surviving_shurikens.append(shuriken)

    if points == 0:
        return Resolution(state)

    state = replace(
        state,
        projectiles=tuple(surviving_shurikens),
        enemies=tuple(enemies),
        score=state.score + points,
    )
    return Resolution(state, points=points)
