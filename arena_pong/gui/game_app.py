"""
Main game application with PyGame GUI
"""

import logging

import pygame

from arena_pong.core.interfaces.random_source import RandomSource
from arena_pong.core.physics import PhysicsEngine
from arena_pong.gui.human_player import InputManager
from arena_pong.gui.pygame_renderer import PygameRenderer
from arena_pong.utils.config import display_config

logger = logging.getLogger(__name__)


class ArenaPongApp:
    """Main application class for Arena Pong with PyGame GUI"""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.physics_engine = PhysicsEngine(rng=rng)
        self.renderer = PygameRenderer()
        self.input_manager = InputManager()

        self.running = False
        self.paused = False

    def handle_command(self, command: str) -> None:
        """Apply a command coming from the input manager"""
        if command == "quit":
            self.running = False
        elif command == "pause":
            self.paused = not self.paused
            logger.info("Game %s", "paused" if self.paused else "resumed")
        elif command == "toggle_fps":
            self.renderer.toggle_fps_display()
        elif command == "restart":
            self.physics_engine.reset_game()
            self.paused = False

    def run_frame(self, dt: float) -> None:
        """Input, simulation, then presentation for one frame"""
        for event in pygame.event.get():
            command = self.input_manager.handle_event(event)
            if command:
                self.handle_command(command)

        if not self.paused:
            events = self.physics_engine.step(self.input_manager.poll(), dt)
            for goal in events["goals"]:
                logger.info("Goal for %s player, score %s", goal["scorer"], goal["score"])

        engine = self.physics_engine
        self.renderer.show_score(engine.score)
        self.renderer.render_frame(
            engine.ball,
            engine.left_paddle,
            engine.right_paddle,
            engine.state.walls,
            {"paused": self.paused},
        )
        self.renderer.present()

    def run(self) -> None:
        """Cooperative frame loop, runs until the window is closed"""
        self.renderer.initialize(display_config.WINDOW_WIDTH, display_config.WINDOW_HEIGHT)
        self.running = True
        # The first tick measures nothing useful, so start from a zero delta
        self.renderer.tick()
        dt = 0.0

        try:
            while self.running and self.renderer.is_active():
                self.run_frame(dt)
                dt = self.renderer.tick()
        finally:
            self.renderer.cleanup()
            logger.info("Final score: %s - %s", *self.physics_engine.score)


def main() -> None:
    """Entry point for the GUI"""
    app = ArenaPongApp()
    app.run()
