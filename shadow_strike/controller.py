import asyncio
import logging

from shadow_strike.constants import (
    DIFFICULTY_INTERVAL_MS,
    MAX_SCORE,
    SUGGESTION_TIMEOUT_S,
)
from shadow_strike.difficulty import FLOOR_DIFFICULTY, clamp_difficulty
from shadow_strike.suggestion import suggest_difficulty

logger = logging.getLogger(__name__)


class DifficultyController:
    """Periodically asks the suggestion service for new difficulty values.

    The tick loop reads :attr:`difficulty`; only this controller replaces it,
    and always with a whole new clamped value. Requests run as asyncio tasks
    so a slow service never holds up a tick. Every :meth:`stop` or
    :meth:`reset` bumps a generation counter, and a result that comes back
    under an older generation is dropped.
    """

    def __init__(self, service=suggest_difficulty, *, interval_ms=DIFFICULTY_INTERVAL_MS,
                 timeout=SUGGESTION_TIMEOUT_S, loop=None):
        self.service = service
        self.interval_ms = interval_ms
        self.timeout = timeout
        self._loop = loop

        self._difficulty = FLOOR_DIFFICULTY
        self._generation = 0
        self._elapsed_ms = 0.0
        self._active = False
        self._pending = None

    @property
    def difficulty(self):
        return self._difficulty

    @property
    def active(self):
        return self._active

    @property
    def in_flight(self):
        return self._pending is not None and not self._pending.done()

    def start(self):
        self._active = True
        self._elapsed_ms = 0.0

    def stop(self):
        self._active = False
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def reset(self):
        """Stop, then drop back to the floor values."""
        self.stop()
        self._elapsed_ms = 0.0
        self._difficulty = FLOOR_DIFFICULTY

    def advance(self, elapsed_ms, score):
        """Accumulate simulated time and fire a refresh on every interval."""
        if not self._active:
            return
        self._elapsed_ms += elapsed_ms
        if self._elapsed_ms < self.interval_ms:
            return
        self._elapsed_ms -= self.interval_ms
        if self.in_flight:
            logger.debug("Difficulty request still in flight; skipping this interval")
            return
        self._launch(score)

    def _launch(self, score):
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.warning("No event loop available; difficulty refresh skipped")
                return
        self._pending = loop.create_task(self.refresh(score))

    async def refresh(self, score):
        """Fetch, clamp and publish one suggestion.

        Returns the published Difficulty, or None when the result was
        discarded because the session moved on while the request was out.
        """
        generation = self._generation
        score = max(0, min(int(score), MAX_SCORE))
        try:
            raw = await asyncio.wait_for(self.service(score), self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Difficulty service timed out after %.1fs; using floor values", self.timeout)
            raw = None
        except Exception as e:
            logger.warning("Difficulty service failed (%s); using floor values", e)
            raw = None

        difficulty = clamp_difficulty(raw)
        if generation != self._generation:
            logger.debug("Discarding stale difficulty %s", difficulty)
            return None

        self._difficulty = difficulty
        logger.debug("Difficulty for score %d: %s", score, difficulty)
        return difficulty
