from shadow_strike.constants import GROUND_SPEED, PLAYER_GROUND_Y

# How far ahead (px of scroll) a hazard can be before the ninja reacts
JUMP_LEAD = 9
THROW_RANGE = 450


def policy(env):
    # Strategy: jump over obstacles just before they reach the ninja, and throw
    # a shuriken at any enemy ahead. Enemies that slip past the throws are
    # jumped like obstacles. Lead distance scales with the current game speed.
    state = env.session.state
    player = state.player
    speed = env.session.difficulty.game_speed_multiplier
    lead = JUMP_LEAD * GROUND_SPEED * speed

    on_ground = not player.airborne and player.y >= PLAYER_GROUND_Y
    front = player.x + player.width

    jump = 0
    for hazard in state.obstacles + state.enemies:
        gap = hazard.x - front
        if 0 <= gap <= lead and on_ground:
            jump = 1
            break

    shoot = 0
    for enemy in state.enemies:
        if 0 <= enemy.x - front <= THROW_RANGE:
            shoot = 1
            break

    return [jump, shoot]
