import math

import pygame
import pygame.gfxdraw

from shadow_strike.constants import GAME_HEIGHT, GAME_WIDTH, GROUND_HEIGHT
from shadow_strike.session import Phase


class Renderer:
    # Colors
    COLOR_BG = (18, 12, 30)
    COLOR_GROUND = (90, 40, 120)
    COLOR_GROUND_EDGE = (170, 80, 220)
    COLOR_PLAYER = (40, 40, 55)
    COLOR_PLAYER_BAND = (220, 40, 60)
    COLOR_SHURIKEN = (200, 210, 230)
    COLOR_ENEMY = (230, 60, 60)
    COLOR_ENEMY_EYES = (255, 230, 120)
    COLOR_OBSTACLE = (120, 60, 160)
    COLOR_OBSTACLE_TOP = (200, 120, 255)
    COLOR_UI_TEXT = (255, 255, 255)
    COLOR_UI_ACCENT = (255, 200, 80)

    def __init__(self, surface):
        pygame.font.init()
        self.screen = surface
        self.font_ui = pygame.font.SysFont("monospace", 22, bold=True)
        self.font_big = pygame.font.SysFont("monospace", 56, bold=True)

    def draw(self, session, frame=0):
        self.screen.fill(self.COLOR_BG)
        self._render_game(session.state, frame)
        self._render_ui(session)

    def _render_game(self, state, frame):
        # Ground
        ground_y = GAME_HEIGHT - GROUND_HEIGHT
        pygame.draw.rect(self.screen, self.COLOR_GROUND, (0, ground_y, GAME_WIDTH, GROUND_HEIGHT))
        pygame.draw.line(self.screen, self.COLOR_GROUND_EDGE, (0, ground_y), (GAME_WIDTH, ground_y), 2)

        # Obstacles
        for o in state.obstacles:
            rect = pygame.Rect(int(o.x), int(o.y), int(o.width), int(o.height))
            pygame.draw.rect(self.screen, self.COLOR_OBSTACLE, rect)
            pygame.draw.line(self.screen, self.COLOR_OBSTACLE_TOP, rect.topleft, rect.topright, 2)

        # Enemies
        for e in state.enemies:
            rect = pygame.Rect(int(e.x), int(e.y), int(e.width), int(e.height))
            pygame.draw.rect(self.screen, self.COLOR_ENEMY, rect, border_radius=6)
            eye_y = rect.top + rect.height // 3
            pygame.draw.circle(self.screen, self.COLOR_ENEMY_EYES, (rect.left + rect.width // 3, eye_y), 4)
            pygame.draw.circle(self.screen, self.COLOR_ENEMY_EYES, (rect.left + 2 * rect.width // 3, eye_y), 4)

        # Player
        p = state.player
        body = pygame.Rect(int(p.x), int(p.y), int(p.width), int(p.height))
        pygame.draw.rect(self.screen, self.COLOR_PLAYER, body, border_radius=8)
        band = pygame.Rect(body.left, body.top + body.height // 5, body.width, 8)
        pygame.draw.rect(self.screen, self.COLOR_PLAYER_BAND, band)

        # Shurikens (spinning four-point stars)
        for s in state.projectiles:
            cx = int(s.x + s.width / 2)
            cy = int(s.y + s.height / 2)
            r = s.width / 2
            angle = frame * 0.4 + s.id
            points = []
            for i in range(8):
                a = angle + i * math.pi / 4
                rr = r if i % 2 == 0 else r * 0.35
                points.append((int(cx + math.cos(a) * rr), int(cy + math.sin(a) * rr)))
            pygame.gfxdraw.filled_polygon(self.screen, points, self.COLOR_SHURIKEN)
            pygame.gfxdraw.aapolygon(self.screen, points, self.COLOR_SHURIKEN)

    def _render_ui(self, session):
        score_text = self.font_ui.render(f"SCORE: {session.score}", True, self.COLOR_UI_ACCENT)
        self.screen.blit(score_text, (15, 15))
        high_text = self.font_ui.render(f"HIGH SCORE: {session.high_score}", True, self.COLOR_UI_TEXT)
        self.screen.blit(high_text, (GAME_WIDTH - high_text.get_width() - 15, 15))

        d = session.difficulty
        diff_text = self.font_ui.render(
            f"SPAWN {d.enemy_spawn_rate:.1f}  OBST {d.obstacle_complexity:.1f}  SPEED x{d.game_speed_multiplier:.2f}",
            True,
            self.COLOR_UI_TEXT,
        )
        self.screen.blit(diff_text, (15, 45))

        if session.phase is Phase.PLAYING:
            return

        overlay = pygame.Surface((GAME_WIDTH, GAME_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, (0, 0))

        if session.phase is Phase.MENU:
            title, hint = "READY?", "ENTER to start"
        else:
            title, hint = "GAME OVER", f"Score {session.score}  -  ENTER to restart"

        title_text = self.font_big.render(title, True, self.COLOR_UI_TEXT)
        self.screen.blit(title_text, title_text.get_rect(center=(GAME_WIDTH / 2, GAME_HEIGHT / 2 - 30)))
        hint_text = self.font_ui.render(hint, True, self.COLOR_UI_ACCENT)
        self.screen.blit(hint_text, hint_text.get_rect(center=(GAME_WIDTH / 2, GAME_HEIGHT / 2 + 30)))
