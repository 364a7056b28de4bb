"""
PyGame renderer for Arena Pong
"""

from typing import Any

import pygame

from arena_pong.core.entities import Ball
from arena_pong.core.entities import Paddle
from arena_pong.core.entities import Wall
from arena_pong.utils.config import GameConfig
from arena_pong.utils.config import display_config
from arena_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Arena Pong"""

    def __init__(self, config: GameConfig = game_config):
        self.config = config
        self.width = 0
        self.height = 0
        self.scale = 1.0
        self.score: tuple[int, int] = (0, 0)
        self.active = False

        self.background_color: tuple[int, int, int] = display_config.BACKGROUND_COLOR
        self.wall_color: tuple[int, int, int] = display_config.WALL_COLOR
        self.ball_color: tuple[int, int, int] = display_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = display_config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = display_config.TEXT_COLOR

        self.show_fps = display_config.SHOW_FPS

    def initialize(self, width: int, height: int) -> None:
        """Open the window and load fonts"""
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Arena Pong")
        self.clock = pygame.time.Clock()

        # Fit the whole arena, walls included, in the window
        margin = 2 * self.config.WALL_THICKNESS
        self.scale = min(
            width / (self.config.arena_width + margin),
            height / (self.config.arena_height + margin),
        )

        # Scoreboard label and value, as in "Score: 3"
        self.font_label = pygame.font.Font(None, display_config.FONT_SIZE)
        self.font_value = pygame.font.Font(None, display_config.FONT_SIZE)
        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 36)
        self.active = True

    def to_screen_rect(self, x: float, y: float, width: float, height: float) -> pygame.Rect:
        """Convert a world rectangle (center, size, y up) to screen pixels"""
        rect = pygame.Rect(0, 0, round(width * self.scale), round(height * self.scale))
        rect.center = (
            round(self.width / 2 + x * self.scale),
            round(self.height / 2 - y * self.scale),
        )
        return rect

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_wall(self, wall: Wall) -> None:
        pygame.draw.rect(self.screen, self.wall_color, self.to_screen_rect(*wall.get_rect()))

    def draw_paddle(self, paddle: Paddle) -> None:
        pygame.draw.rect(self.screen, self.paddle_color, self.to_screen_rect(*paddle.get_rect()))

    def draw_ball(self, ball: Ball) -> None:
        pygame.draw.rect(self.screen, self.ball_color, self.to_screen_rect(*ball.get_rect()))

    def show_score(self, score: tuple[int, int]) -> None:
        """Remember the score shown on the next frame"""
        self.score = score

    def draw_score(self) -> None:
        """Draw both scoreboards in the top corners"""
        padding = display_config.TEXT_PADDING
        left_surface = self._render_scoreboard(self.score[0])
        self.screen.blit(left_surface, (padding, padding))

        right_surface = self._render_scoreboard(self.score[1])
        right_rect = right_surface.get_rect()
        right_rect.topright = (self.width - padding, padding)
        self.screen.blit(right_surface, right_rect)

    def _render_scoreboard(self, value: int) -> pygame.Surface:
        label = self.font_label.render("Score: ", True, self.text_color)
        number = self.font_value.render(str(value), True, self.text_color)
        surface = pygame.Surface(
            (label.get_width() + number.get_width(), max(label.get_height(), number.get_height())),
            pygame.SRCALPHA,
        )
        surface.blit(label, (0, 0))
        surface.blit(number, (label.get_width(), 0))
        return surface

    def draw_pause_screen(self) -> None:
        """Draw pause screen"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        pause_surface = self.font_large.render("PAUSE", True, self.text_color)
        pause_rect = pause_surface.get_rect()
        pause_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(pause_surface, pause_rect)

        inst_surface = self.font_small.render("Press P or SPACE to continue", True, self.text_color)
        inst_rect = inst_surface.get_rect()
        inst_rect.center = (self.width // 2, self.height // 2 + 60)
        self.screen.blit(inst_surface, inst_rect)

    def draw_fps(self) -> None:
        fps_surface = self.font_small.render(f"FPS: {self.clock.get_fps():.0f}", True, self.text_color)
        fps_rect = fps_surface.get_rect()
        fps_rect.midtop = (self.width // 2, display_config.TEXT_PADDING)
        self.screen.blit(fps_surface, fps_rect)

    def render_frame(
        self,
        ball: Ball,
        left_paddle: Paddle,
        right_paddle: Paddle,
        walls: list[Wall],
        additional_info: dict[str, Any] | None = None,
    ) -> None:
        """Render the complete game state"""
        self.clear_screen()
        for wall in walls:
            self.draw_wall(wall)
        self.draw_paddle(left_paddle)
        self.draw_paddle(right_paddle)
        self.draw_ball(ball)
        self.draw_score()

        if self.show_fps:
            self.draw_fps()
        if additional_info and additional_info.get("paused"):
            self.draw_pause_screen()

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def tick(self, fps: int | None = None) -> float:
        """Wait for the next frame and return the elapsed time in seconds"""
        fps = fps or display_config.FPS
        return self.clock.tick(fps) / 1000.0

    def toggle_fps_display(self) -> None:
        """Toggle FPS display"""
        self.show_fps = not self.show_fps

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        pygame.quit()
