"""
Keyboard input for the two human players
"""

from collections.abc import Sequence

import pygame

from arena_pong.core.entities import InputState
from arena_pong.core.entities import PaddleInput
from arena_pong.utils.config import ARROW_KEYS
from arena_pong.utils.config import display_config


class InputManager:
    """Turns pygame keyboard state into per-frame paddle input and commands"""

    def __init__(self) -> None:
        layout = display_config.get_keyboard_layout()
        self.left_keys = {"up": layout.up_key, "down": layout.down_key}
        self.right_keys = ARROW_KEYS.copy()
        self.display_names = {
            "left": layout.display_names.copy(),
            "right": {"up": "↑", "down": "↓"},
        }

    def input_from_keys(self, keys_pressed: Sequence[bool]) -> InputState:
        """Build the input snapshot from a key-indexed pressed table"""
        return InputState(
            left=PaddleInput(
                up=bool(keys_pressed[self.left_keys["up"]]),
                down=bool(keys_pressed[self.left_keys["down"]]),
            ),
            right=PaddleInput(
                up=bool(keys_pressed[self.right_keys["up"]]),
                down=bool(keys_pressed[self.right_keys["down"]]),
            ),
        )

    def poll(self) -> InputState:
        """Snapshot the held keys, once per frame"""
        return self.input_from_keys(pygame.key.get_pressed())

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (pause, quit, etc.) or None
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "quit"
            elif event.key == pygame.K_p or event.key == pygame.K_SPACE:
                return "pause"
            elif event.key == pygame.K_F2:
                return "toggle_fps"
            elif event.key == pygame.K_r:
                return "restart"

        return None

    def get_control_info(self) -> dict[str, dict[str, str]]:
        """Get the key names shown to each player"""
        return {side: names.copy() for side, names in self.display_names.items()}
