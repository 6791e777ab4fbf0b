import logging
from enum import Enum

import numpy as np

from shadow_strike import simulation
from shadow_strike.constants import HIGH_SCORE_KEY
from shadow_strike.controller import DifficultyController
from shadow_strike.entities import SimState
from shadow_strike.highscore import InMemoryHighScoreStore

logger = logging.getLogger(__name__)


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class GameSession:
    """
    Menu -> playing -> game over -> playing ... state machine.

    Owns the score and high score, the simulation state and the difficulty
    controller. Only the playing phase ticks the simulation or runs the
    difficulty cadence.
    """

    def __init__(self, *, controller=None, store=None, rng=None):
        self.controller = controller or DifficultyController()
        self.store = store if store is not None else InMemoryHighScoreStore()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.phase = Phase.MENU
        self.state = SimState.initial()
        self.high_score = self.store.read(HIGH_SCORE_KEY)

    @property
    def score(self):
        return self.state.score

    @property
    def difficulty(self):
        return self.controller.difficulty

    @property
    def playing(self):
        return self.phase is Phase.PLAYING

    def start(self, rng=None):
        """Start from the menu, or restart after a game over."""
        if self.phase is Phase.PLAYING:
            logger.debug("start() ignored while already playing")
            return
        if rng is not None:
            self.rng = rng

        self.state = SimState.initial()
        self.controller.reset()
        self.controller.start()
        logger.info("%s -> %s", self.phase.value, Phase.PLAYING.value)
        self.phase = Phase.PLAYING

    restart = start

    def to_menu(self):
        """Abandon the current run without recording a high score."""
        self.controller.stop()
        self.phase = Phase.MENU

    def jump(self):
        if self.phase is Phase.PLAYING:
            self.state = simulation.jump(self.state)

    def shoot(self):
        if self.phase is Phase.PLAYING:
            self.state = simulation.shoot(self.state)

    def tick(self, delta_ms):
        """Run one frame. Returns the points scored this frame."""
        if self.phase is not Phase.PLAYING:
            return 0

        # Read once so the whole tick sees a single difficulty value
        difficulty = self.controller.difficulty
        result = simulation.step(self.state, delta_ms, difficulty, self.rng)
        self.state = result.state
        if result.crashed:
            self._end_game()
            return 0

        self.controller.advance(delta_ms, self.state.score)
        return result.points

    def _end_game(self):
        self.controller.stop()
        self.phase = Phase.GAME_OVER
        logger.info("Game over with score %d", self.score)

        if self.score > self.high_score:
            self.high_score = self.score
            self.store.write(HIGH_SCORE_KEY, self.high_score)
            logger.info("New high score: %d", self.high_score)

    def close(self):
        self.controller.stop()
