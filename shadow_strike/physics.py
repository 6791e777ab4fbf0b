from dataclasses import replace

from shadow_strike.constants import (
    FRAME_MS,
    GAME_WIDTH,
    GRAVITY,
    GROUND_SPEED,
    PLAYER_GROUND_Y,
    SHURIKEN_SPEED,
)


def normalize(delta_ms):
    return delta_ms / FRAME_MS


def integrate(state, delta_ms, difficulty):
    """Advance the player and every scrolling entity by one tick."""
    frames = normalize(delta_ms)
    game_speed = difficulty.game_speed_multiplier * frames

    # Player: gravity, then position, then ground clamp
    p = state.player
    vy = p.vy + GRAVITY * frames
    y = p.y + vy * frames
    airborne = p.airborne
    if y >= PLAYER_GROUND_Y:
        y = PLAYER_GROUND_Y
        vy = 0.0
        airborne = False
    player = replace(p, y=y, vy=vy, airborne=airborne)

    projectiles = tuple(
        moved
        for moved in (replace(s, x=s.x + SHURIKEN_SPEED * game_speed) for s in state.projectiles)
        if moved.x < GAME_WIDTH
    )
    enemies = tuple(
        moved
        for moved in (replace(e, x=e.x - GROUND_SPEED * game_speed) for e in state.enemies)
        if moved.x > -moved.width
    )
    obstacles = tuple(
        moved
        for moved in (replace(o, x=o.x - GROUND_SPEED * game_speed) for o in state.obstacles)
        if moved.x > -moved.width
    )

    return replace(
        state,
        player=player,
        projectiles=projectiles,
        enemies=enemies,
        obstacles=obstacles,
    )
