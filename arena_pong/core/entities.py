"""
Arena Pong entities: walls, paddles, ball and score
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from arena_pong.utils.config import GameConfig
from arena_pong.utils.config import game_config


class ColliderKind(Enum):
    """What happens when the ball overlaps a collider"""

    PLAIN = "plain"
    LEFT_GOAL = "left_goal"
    RIGHT_GOAL = "right_goal"


class Side(Enum):
    """Side of the arena a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass(frozen=True)
class Wall:
    """Static collider, created once at startup"""

    x: float
    y: float
    width: float
    height: float
    kind: ColliderKind = ColliderKind.PLAIN

    def __post_init__(self) -> None:
        assert self.width > 0 and self.height > 0, f"Malformed wall geometry: {self}"

    @property
    def position(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (center x, center y, width, height)"""
        return (self.x, self.y, self.width, self.height)


def create_walls(config: GameConfig = game_config) -> list[Wall]:
    """
    Builds the four static colliders of the arena.

    The order is left goal, right goal, top wall, bottom wall; the ball
    simulation scans colliders in this order.
    """
    center_x = (config.LEFT_WALL + config.RIGHT_WALL) / 2
    center_y = (config.TOP_WALL + config.BOTTOM_WALL) / 2
    goal_height = config.arena_height + config.WALL_THICKNESS
    wall_width = config.arena_width + config.WALL_THICKNESS

    return [
        Wall(
            config.LEFT_WALL, center_y, config.WALL_THICKNESS, goal_height, ColliderKind.LEFT_GOAL
        ),
        Wall(
            config.RIGHT_WALL, center_y, config.WALL_THICKNESS, goal_height, ColliderKind.RIGHT_GOAL
        ),
        Wall(center_x, config.TOP_WALL, wall_width, config.WALL_THICKNESS),
        Wall(center_x, config.BOTTOM_WALL, wall_width, config.WALL_THICKNESS),
    ]


class Paddle:
    """Player paddle, only moves vertically"""

    kind = ColliderKind.PLAIN

    def __init__(self, side: Side, config: GameConfig = game_config):
        self.side = side
        self.config = config
        x = config.left_paddle_x if side is Side.LEFT else config.right_paddle_x
        self.position = Vector2D(x, 0.0)
        self.width = config.PADDLE_WIDTH
        self.height = config.PADDLE_HEIGHT
        self.speed = config.PADDLE_SPEED

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def move(self, intent: int, dt: float) -> None:
        """Moves the paddle along y and keeps it inside the arena"""
        new_y = self.position.y + intent * self.speed * dt
        self.position.y = float(
            np.clip(new_y, self.config.paddle_min_y, self.config.paddle_max_y)
        )

    def reset(self) -> None:
        self.position.y = 0.0

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (center x, center y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


class Ball:
    """Game ball"""

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.size = size if size is not None else game_config.BALL_SIZE

    def update(self, dt: float) -> None:
        """Integrates the ball position"""
        self.position = self.position + self.velocity * dt

    def reset_to_center(self, velocity: Vector2D) -> None:
        """Puts the ball back at the arena center with a new velocity"""
        self.position = Vector2D(0.0, 0.0)
        self.velocity = velocity.copy()

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom faces), preserves speed"""
        self.velocity.y = -self.velocity.y

    def speed(self) -> float:
        return self.velocity.magnitude()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (center x, center y, width, height)"""
        return (self.position.x, self.position.y, self.size, self.size)


@dataclass
class Score:
    """Goals scored by each side"""

    left: int = 0
    right: int = 0

    def add_point(self, side: Side) -> None:
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def as_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class PaddleInput:
    """Direction keys held for one paddle"""

    up: bool = False
    down: bool = False

    @property
    def intent(self) -> int:
        """-1, 0 or +1; both keys held cancel out"""
        return int(self.up) - int(self.down)


@dataclass
class InputState:
    """Snapshot of both players' controls for one frame"""

    left: PaddleInput
    right: PaddleInput

    @classmethod
    def idle(cls) -> "InputState":
        return cls(PaddleInput(), PaddleInput())

    def for_side(self, side: Side) -> PaddleInput:
        return self.left if side is Side.LEFT else self.right
