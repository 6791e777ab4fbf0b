import asyncio
import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from shadow_strike.constants import GAME_HEIGHT, GAME_WIDTH, SCORE_PER_ENEMY
from shadow_strike.controller import DifficultyController
from shadow_strike.highscore import InMemoryHighScoreStore
from shadow_strike.render import Renderer
from shadow_strike.session import GameSession, Phase
from shadow_strike.suggestion import suggest_difficulty

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: ↑ to jump. Press space to throw a shuriken."
    )

    game_description = (
        "Run as a ninja, leap over obstacles and take out charging enemies with shurikens while the game speeds up."
    )

    auto_advance = True

    # --- Constants ---
    SCREEN_WIDTH = GAME_WIDTH
    SCREEN_HEIGHT = GAME_HEIGHT
    FPS = 60
    FRAME_MS = 1000 / FPS
    MAX_STEPS = 180 * FPS  # 3 minutes
    SHOOT_COOLDOWN = 8  # steps

    # Rewards
    KILL_REWARD = 1.0
    SURVIVAL_REWARD = 0.01
    CRASH_PENALTY = -10.0

    def __init__(self, render_mode="rgb_array", suggestion_service=suggest_difficulty, store=None):
        super().__init__()
        self.render_mode = render_mode

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        # [jump, shoot]
        self.action_space = MultiDiscrete([2, 2])

        # Pygame setup
        pygame.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)

        # Difficulty requests run on a private loop that is pumped once per step
        self._loop = asyncio.new_event_loop()
        self.session = GameSession(
            controller=DifficultyController(suggestion_service, loop=self._loop),
            store=store if store is not None else InMemoryHighScoreStore(),
        )

        self.steps = 0
        self.game_over = False
        self.last_shot = -self.SHOOT_COOLDOWN

        self.reset()

        self.validate_implementation()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.steps = 0
        self.game_over = False
        self.last_shot = -self.SHOOT_COOLDOWN

        self.session.to_menu()
        self.session.start(rng=self.np_random)
        self._pump_background()

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game_over:
            return self._get_observation(), 0.0, True, False, self._get_info()

        self._handle_input(action)
        points = self.session.tick(self.FRAME_MS)
        self._pump_background()
        self.steps += 1

        reward = self.KILL_REWARD * (points // SCORE_PER_ENEMY)
        terminated = self.session.phase is Phase.GAME_OVER
        if terminated:
            self.game_over = True
            reward += self.CRASH_PENALTY
        else:
            reward += self.SURVIVAL_REWARD

        truncated = not terminated and self.steps >= self.MAX_STEPS
        if truncated:
            self.game_over = True

        return (
            self._get_observation(),
            float(reward),
            terminated,
            truncated,
            self._get_info()
        )

    def _handle_input(self, action):
        jump_pressed, shoot_pressed = action[0] == 1, action[1] == 1

        if jump_pressed:
            self.session.jump()

        if shoot_pressed and (self.steps - self.last_shot >= self.SHOOT_COOLDOWN):
            self.last_shot = self.steps
            self.session.shoot()

    def _pump_background(self):
        # One pass of the loop lets ready difficulty tasks make progress
        self._loop.run_until_complete(asyncio.sleep(0))

    def _get_observation(self):
        self.renderer.draw(self.session, frame=self.steps)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def render(self):
        return self._get_observation()

    def _get_info(self):
        d = self.session.difficulty
        state = self.session.state
        return {
            "score": self.session.score,
            "high_score": self.session.high_score,
            "steps": self.steps,
            "phase": self.session.phase.value,
            "enemies": len(state.enemies),
            "obstacles": len(state.obstacles),
            "enemy_spawn_rate": d.enemy_spawn_rate,
            "obstacle_complexity": d.obstacle_complexity,
            "game_speed_multiplier": d.game_speed_multiplier,
        }

    def close(self):
        self.session.close()
        if not self._loop.is_closed():
            # Let cancelled difficulty requests unwind before closing the loop
            self._pump_background()
            self._loop.close()
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this at the end of __init__ to verify implementation:
        '''
        # Test action space
        assert self.action_space.shape == (2,)
        assert self.action_space.nvec.tolist() == [2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        # Leave the env freshly reset for the caller
        self.reset()
