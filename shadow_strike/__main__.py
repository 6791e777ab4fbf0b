import argparse
import asyncio
import logging
import sys

import numpy as np
import pygame

from shadow_strike.constants import GAME_HEIGHT, GAME_WIDTH
from shadow_strike.controller import DifficultyController
from shadow_strike.highscore import JsonHighScoreStore
from shadow_strike.render import Renderer
from shadow_strike.session import GameSession
from shadow_strike.suggestion import offline_suggestion, suggest_difficulty

logger = logging.getLogger("shadow_strike")

MAX_FRAME_MS = 100


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="shadow_strike", description="Shadow Strike ninja runner")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle sizes")
    parser.add_argument("--offline", action="store_true", help="disable adaptive difficulty")
    parser.add_argument("--scores", default=None, help="high score file (default ~/.shadow_strike/scores.json)")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def handle_event(session, event):
    """Returns False when the player asked to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True

    if event.key == pygame.K_ESCAPE:
        return False
    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        session.start()
    elif event.key in (pygame.K_UP, pygame.K_w):
        session.jump()
    elif event.key == pygame.K_SPACE:
        session.shoot()
    return True


async def run_game(args):
    service = offline_suggestion if args.offline else suggest_difficulty
    logger.info("Starting (adaptive difficulty %s)", "off" if args.offline else "on")
    session = GameSession(
        controller=DifficultyController(service),
        store=JsonHighScoreStore(args.scores),
        rng=np.random.default_rng(args.seed),
    )

    pygame.init()
    pygame.display.set_caption("Shadow Strike")
    display = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT))
    renderer = Renderer(display)
    clock = pygame.time.Clock()
    frame = 0

    try:
        running = True
        while running:
            delta_ms = min(clock.tick(args.fps), MAX_FRAME_MS)

            for event in pygame.event.get():
                if not handle_event(session, event):
                    running = False

            session.tick(delta_ms)

            renderer.draw(session, frame=frame)
            pygame.display.flip()
            frame += 1

            # Yield so difficulty requests can run between frames
            await asyncio.sleep(0)
    finally:
        session.close()
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    asyncio.run(run_game(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
