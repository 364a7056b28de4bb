"""
Arena Pong configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Keys driving the left paddle for a given keyboard layout"""

    name: str
    up_key: int
    down_key: int
    display_names: dict[str, str]


# The right paddle always uses the arrow keys
ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        up_key=pygame.K_w,
        down_key=pygame.K_s,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        up_key=pygame.K_z,  # Z instead of W
        down_key=pygame.K_s,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        up_key=pygame.K_w,
        down_key=pygame.K_s,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Simulation constants, fixed for the lifetime of the process"""

    model_config = {"frozen": True}

    # Arena bounds (world units, origin at the arena center, y pointing up)
    TOP_WALL: float = Field(default=300.0, description="Y coordinate of the top wall")
    BOTTOM_WALL: float = Field(default=-300.0, description="Y coordinate of the bottom wall")
    LEFT_WALL: float = Field(default=-500.0, description="X coordinate of the left goal")
    RIGHT_WALL: float = Field(default=500.0, description="X coordinate of the right goal")
    WALL_THICKNESS: float = Field(default=10.0, gt=0, description="Wall thickness")
    WALL_PADDING: float = Field(default=15.0, ge=0, description="Paddle distance from its goal")

    # Paddles
    PADDLE_WIDTH: float = Field(default=15.0, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height")
    PADDLE_SPEED: float = Field(default=450.0, gt=0, description="Paddle speed")

    # Ball
    BALL_SIZE: float = Field(default=30.0, gt=0, description="Ball width and height")
    BALL_INITIAL_SPEED: float = Field(default=400.0, gt=0, description="Serve speed")
    BALL_SPEED: float = Field(default=600.0, gt=0, description="Speed after a paddle bounce")

    # Re-aim ranges, applied before normalization
    REAIM_X_RANGE: tuple[float, float] = Field(default=(0.3, 1.0))
    REAIM_Y_RANGE: tuple[float, float] = Field(default=(-1.0, 1.0))

    @field_validator("REAIM_X_RANGE")
    @classmethod
    def validate_reaim_x(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Horizontal re-aim must stay strictly away from zero"""
        low, high = v
        if not 0 < low <= high:
            raise ValueError(f"REAIM_X_RANGE must satisfy 0 < low <= high, got {v}")
        return v

    @field_validator("BALL_SPEED")
    @classmethod
    def validate_ball_speed(cls, v: float, info: ValidationInfo) -> float:
        """The serve must not be faster than a rally"""
        initial = info.data.get("BALL_INITIAL_SPEED", 400.0) if info.data else 400.0
        if v < initial:
            raise ValueError(f"BALL_SPEED ({v}) must not be below BALL_INITIAL_SPEED ({initial})")
        return v

    @model_validator(mode="after")
    def validate_arena(self) -> "GameConfig":
        """Validate the arena can hold its paddles and ball"""
        if self.TOP_WALL <= self.BOTTOM_WALL:
            raise ValueError("TOP_WALL must be greater than BOTTOM_WALL")
        if self.RIGHT_WALL <= self.LEFT_WALL:
            raise ValueError("RIGHT_WALL must be greater than LEFT_WALL")
        if self.PADDLE_HEIGHT >= self.TOP_WALL - self.BOTTOM_WALL:
            raise ValueError("PADDLE_HEIGHT must be smaller than the arena height")
        if 2 * self.WALL_PADDING >= self.RIGHT_WALL - self.LEFT_WALL:
            raise ValueError("WALL_PADDING leaves no room between the paddles")
        return self

    @property
    def arena_width(self) -> float:
        return self.RIGHT_WALL - self.LEFT_WALL

    @property
    def arena_height(self) -> float:
        return self.TOP_WALL - self.BOTTOM_WALL

    @property
    def paddle_min_y(self) -> float:
        """Lowest center position a paddle may reach"""
        return self.BOTTOM_WALL + self.PADDLE_HEIGHT * 0.5

    @property
    def paddle_max_y(self) -> float:
        """Highest center position a paddle may reach"""
        return self.TOP_WALL - self.PADDLE_HEIGHT * 0.5

    @property
    def left_paddle_x(self) -> float:
        return self.LEFT_WALL + self.WALL_PADDING

    @property
    def right_paddle_x(self) -> float:
        return self.RIGHT_WALL - self.WALL_PADDING


class DisplayConfig(BaseModel):
    """Presentation settings, independent from the simulation"""

    model_config = {"validate_assignment": True}

    WINDOW_WIDTH: int = Field(default=1280, gt=0, description="Window width in pixels")
    WINDOW_HEIGHT: int = Field(default=720, gt=0, description="Window height in pixels")
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    FONT_SIZE: int = Field(default=40, gt=0, description="Scoreboard font size")
    TEXT_PADDING: int = Field(default=5, ge=0, description="Scoreboard distance from the edges")
    SHOW_FPS: bool = Field(default=False, description="Show the FPS counter")

    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(40, 40, 40), description="RGB color")
    WALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "arena_pong_display.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "arena_pong_display.json") -> "DisplayConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path, encoding="utf-8") as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instances with validation
game_config = GameConfig()
display_config = DisplayConfig()


def load_display_config(filepath: str = "arena_pong_display.json") -> bool:
    """Load display settings from file into the global display_config"""
    try:
        loaded_config = DisplayConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    for field_name in DisplayConfig.model_fields.keys():
        setattr(display_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def display_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify display config (with validation)"""
    old_values = _change_values(display_config, **kwargs)
    try:
        yield
    finally:
        _change_values(display_config, **old_values)
