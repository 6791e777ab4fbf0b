"""One tick of the runner as a pure transition: integrate, spawn, resolve.

Entities that leave the playfield are dropped by the integrator before any
collision test runs, so an entity crossing the boundary this tick can no
longer hit or be hit.
"""

from dataclasses import replace

from shadow_strike.collisions import resolve_collisions
from shadow_strike.constants import PLAYER_JUMP_VELOCITY, SHURIKEN_HEIGHT
from shadow_strike.entities import Projectile
from shadow_strike.physics import integrate
from shadow_strike.spawner import advance_spawns


def step(state, delta_ms, difficulty, rng):
    state = integrate(state, delta_ms, difficulty)
    state = advance_spawns(state, delta_ms, difficulty, rng)
    return resolve_collisions(state)


def jump(state):
    p = state.player
    if p.airborne:
        return state
    # sfx: jump.wav
    return replace(state, player=replace(p, vy=float(PLAYER_JUMP_VELOCITY), airborne=True))


def shoot(state):
    p = state.player
    shuriken_id, state = state.allocate_id()
    shuriken = Projectile(
        id=shuriken_id,
        x=p.x + p.width,
        y=p.y + p.height / 2 - SHURIKEN_HEIGHT / 2,
    )
    # sfx: throw.wav
    return replace(state, projectiles=state.projectiles + (shuriken,))
