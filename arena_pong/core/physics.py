"""
Physics system for Arena Pong
"""

import logging
import math
import random
from typing import Any

from arena_pong.core.collision import Collider
from arena_pong.core.collision import CollisionDetector
from arena_pong.core.collision import Face
from arena_pong.core.entities import Ball
from arena_pong.core.entities import ColliderKind
from arena_pong.core.entities import InputState
from arena_pong.core.entities import Paddle
from arena_pong.core.entities import Score
from arena_pong.core.entities import Side
from arena_pong.core.entities import Vector2D
from arena_pong.core.entities import create_walls
from arena_pong.core.interfaces.random_source import RandomSource
from arena_pong.utils.config import GameConfig
from arena_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def random_direction(
    rng: RandomSource,
    x_range: tuple[float, float],
    y_range: tuple[float, float],
    speed: float,
) -> Vector2D:
    """Draws x then y uniformly, normalizes and scales the result to ``speed``"""
    x = rng.uniform(*x_range)
    y = rng.uniform(*y_range)
    return Vector2D(x, y).normalize() * speed


def new_events() -> dict[str, list]:
    return {"wall_bounces": [], "paddle_hits": [], "goals": []}


class SimulationState:
    """Everything a frame step reads and mutates"""

    def __init__(self, config: GameConfig = game_config):
        self.config = config
        self.walls = create_walls(config)
        self.left_paddle = Paddle(Side.LEFT, config)
        self.right_paddle = Paddle(Side.RIGHT, config)
        self.ball = Ball(0.0, 0.0, 0.0, 0.0, config.BALL_SIZE)
        self.score = Score()
        self.game_time = 0.0

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.left_paddle, self.right_paddle)

    def colliders(self) -> list[Collider]:
        """Colliders in scan order: goals, top and bottom walls, then paddles"""
        return [*self.walls, self.left_paddle, self.right_paddle]


class PaddleController:
    """Turns held direction keys into paddle displacement"""

    def update(self, state: SimulationState, inputs: InputState, dt: float) -> None:
        for paddle in state.paddles:
            paddle.move(inputs.for_side(paddle.side).intent, dt)


class BallSimulation:
    """Moves the ball, resolves collisions and detects goals"""

    def __init__(self, config: GameConfig, rng: RandomSource):
        self.config = config
        self.rng = rng
        self.collision_detector = CollisionDetector()

    def serve(self, state: SimulationState, direction: int) -> None:
        """
        Puts the ball at the center, moving toward ``direction`` (-1 left, +1 right)
        at the initial speed.
        """
        low, high = self.config.REAIM_X_RANGE
        x_range = (low, high) if direction > 0 else (-high, -low)
        velocity = random_direction(
            self.rng, x_range, self.config.REAIM_Y_RANGE, self.config.BALL_INITIAL_SPEED
        )
        state.ball.reset_to_center(velocity)

    def update(self, state: SimulationState, dt: float) -> dict[str, list]:
        """Advances the ball by ``dt`` and returns the events of the frame"""
        events = new_events()
        ball = state.ball
        ball.update(dt)

        for collider in state.colliders():
            face = self.collision_detector.check_ball_collider(ball, collider)
            if face is None:
                continue

            if collider.kind is ColliderKind.LEFT_GOAL:
                self._score_goal(state, Side.RIGHT, events)
                return events
            if collider.kind is ColliderKind.RIGHT_GOAL:
                self._score_goal(state, Side.LEFT, events)
                return events

            reflect_x = (face is Face.LEFT and ball.velocity.x > 0) or (
                face is Face.RIGHT and ball.velocity.x < 0
            )
            reflect_y = (face is Face.BOTTOM and ball.velocity.y > 0) or (
                face is Face.TOP and ball.velocity.y < 0
            )

            if reflect_x:
                self._bounce_horizontal(ball)
            if reflect_y:
                ball.bounce_vertical()

            if reflect_x or reflect_y:
                event = {"face": face.value, "reaimed": reflect_x}
                if isinstance(collider, Paddle):
                    events["paddle_hits"].append({"side": collider.side.value, **event})
                else:
                    events["wall_bounces"].append(event)
                logger.debug("Ball bounced on %s face at %s", face.value, ball.position)

        return events

    def _bounce_horizontal(self, ball: Ball) -> None:
        """Re-aims the ball at full speed, always away from where it was heading"""
        new_velocity = random_direction(
            self.rng, self.config.REAIM_X_RANGE, self.config.REAIM_Y_RANGE, self.config.BALL_SPEED
        )
        if ball.velocity.x > 0:
            new_velocity.x = -new_velocity.x
        ball.velocity = new_velocity

    def _score_goal(self, state: SimulationState, scorer: Side, events: dict[str, list]) -> None:
        state.score.add_point(scorer)
        # The ball restarts toward the side that conceded
        self.serve(state, -1 if scorer is Side.RIGHT else 1)
        events["goals"].append({"scorer": scorer.value, "score": state.score.as_tuple()})
        logger.debug("Goal for %s player, score is now %s", scorer.value, state.score.as_tuple())


class PhysicsEngine:
    """Main physics engine"""

    def __init__(self, config: GameConfig = game_config, rng: RandomSource | None = None):
        self.config = config
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.state = SimulationState(config)
        self.paddle_controller = PaddleController()
        self.ball_simulation = BallSimulation(config, self.rng)

        self.spawn_ball()

    @property
    def ball(self) -> Ball:
        return self.state.ball

    @property
    def left_paddle(self) -> Paddle:
        return self.state.left_paddle

    @property
    def right_paddle(self) -> Paddle:
        return self.state.right_paddle

    @property
    def score(self) -> tuple[int, int]:
        """Current (left, right) score"""
        return self.state.score.as_tuple()

    def spawn_ball(self) -> None:
        """Initial serve, toward the right player"""
        self.ball_simulation.serve(self.state, 1)

    def step(self, inputs: InputState, dt: float) -> dict[str, list]:
        """Runs one frame: paddles first, then the ball"""
        assert math.isfinite(dt) and dt >= 0, f"Invalid frame delta: {dt}"

        self.state.game_time += dt
        self.paddle_controller.update(self.state, inputs, dt)
        return self.ball_simulation.update(self.state, dt)

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_size": self.ball.size,
            "left_paddle_position": self.left_paddle.position.to_tuple(),
            "right_paddle_position": self.right_paddle.position.to_tuple(),
            "paddle_size": self.left_paddle.size,
            "score": self.score,
            "time_elapsed": self.state.game_time,
        }

    def reset_game(self) -> None:
        """Resets the game to zero"""
        self.state.score = Score()
        self.state.game_time = 0.0
        for paddle in self.state.paddles:
            paddle.reset()
        self.spawn_ball()
        logger.info("Game reset")
