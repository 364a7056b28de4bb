"""
Arena Pong utilities
"""

from arena_pong.utils.config import DisplayConfig
from arena_pong.utils.config import GameConfig
from arena_pong.utils.config import display_config
from arena_pong.utils.config import game_config

__all__ = ["game_config", "display_config", "GameConfig", "DisplayConfig"]
