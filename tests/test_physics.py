from dataclasses import replace

import pytest

from shadow_strike.constants import PLAYER_GROUND_Y, PLAYER_JUMP_VELOCITY
from shadow_strike.difficulty import Difficulty, FLOOR_DIFFICULTY
from shadow_strike.entities import Enemy, Obstacle, Projectile, SimState
from shadow_strike.physics import integrate, normalize
from shadow_strike.simulation import jump


def test_normalize_against_reference_frame():
    assert normalize(16) == 1
    assert normalize(8) == 0.5


def test_player_at_rest_stays_on_ground():
    state = integrate(SimState.initial(), 16, FLOOR_DIFFICULTY)
    assert state.player.y == PLAYER_GROUND_Y
    assert state.player.vy == 0
    assert not state.player.airborne


def test_jump_arc_returns_to_ground():
    state = jump(SimState.initial())
    assert state.player.airborne
    assert state.player.vy == PLAYER_JUMP_VELOCITY

    left_ground = False
    for _ in range(200):
        state = integrate(state, 16, FLOOR_DIFFICULTY)
        p = state.player
        assert p.y <= PLAYER_GROUND_Y
        if p.y == PLAYER_GROUND_Y:
            assert p.vy == 0
        else:
            left_ground = True

    assert left_ground
    assert state.player.y == PLAYER_GROUND_Y
    assert state.player.vy == 0
    assert not state.player.airborne


def test_gravity_scales_with_delta():
    state = jump(SimState.initial())
    state = integrate(state, 32, FLOOR_DIFFICULTY)
    # vy = -15 + 0.6 * 2, y = 490 + vy * 2
    assert state.player.vy == pytest.approx(-13.8)
    assert state.player.y == pytest.approx(PLAYER_GROUND_Y - 27.6)


def test_projectiles_move_right_with_speed_multiplier():
    state = replace(SimState.initial(), projectiles=(Projectile(id=1, x=100, y=300),))
    moved = integrate(state, 16, FLOOR_DIFFICULTY)
    assert moved.projectiles[0].x == pytest.approx(110)

    fast = Difficulty(game_speed_multiplier=1.5)
    moved = integrate(state, 32, fast)
    assert moved.projectiles[0].x == pytest.approx(130)


def test_projectile_leaving_playfield_is_dropped():
    state = replace(
        SimState.initial(),
        projectiles=(Projectile(id=1, x=795, y=300), Projectile(id=2, x=700, y=300)),
    )
    moved = integrate(state, 16, FLOOR_DIFFICULTY)
    assert [p.id for p in moved.projectiles] == [2]


def test_enemies_and_obstacles_scroll_left():
    state = replace(
        SimState.initial(),
        enemies=(Enemy(id=1, x=400, y=510),),
        obstacles=(Obstacle(id=2, x=600, y=500, width=40, height=60),),
    )
    moved = integrate(state, 8, FLOOR_DIFFICULTY)
    assert moved.enemies[0].x == pytest.approx(398)
    assert moved.obstacles[0].x == pytest.approx(598)


def test_offscreen_entities_despawn_by_own_width():
    state = replace(
        SimState.initial(),
        enemies=(Enemy(id=1, x=-48, y=510), Enemy(id=2, x=0, y=510)),
        obstacles=(
            Obstacle(id=3, x=-27, y=500, width=30, height=60),
            Obstacle(id=4, x=-27, y=500, width=80, height=60),
        ),
    )
    moved = integrate(state, 16, FLOOR_DIFFICULTY)
    assert [e.id for e in moved.enemies] == [2]
    assert [o.id for o in moved.obstacles] == [4]

    # Despawned entities never come back
    again = integrate(moved, 16, FLOOR_DIFFICULTY)
    assert 1 not in [e.id for e in again.enemies]
    assert 3 not in [o.id for o in again.obstacles]


def test_integrate_does_not_mutate_input():
    state = replace(SimState.initial(), enemies=(Enemy(id=1, x=400, y=510),))
    integrate(state, 16, FLOOR_DIFFICULTY)
    assert state.enemies[0].x == 400
