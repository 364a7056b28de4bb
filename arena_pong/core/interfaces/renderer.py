"""
Renderer protocol - defines interface for presentation backends
"""

from typing import Any, Protocol

from arena_pong.core.entities import Ball, Paddle, Wall


class ScoreSink(Protocol):
    """Anything that presents the current score"""

    def show_score(self, score: tuple[int, int]) -> None:
        """
        Present the score.

        Args:
            score: Current score (left, right), polled once per frame
        """
        ...


class RendererProtocol(ScoreSink, Protocol):
    """
    Protocol for renderer implementations.

    The simulation never calls a renderer; the application loop feeds it the
    entities after each step.
    """

    def initialize(self, width: int, height: int) -> None:
        """
        Initialize the renderer with window dimensions.

        Args:
            width: Window width in pixels
            height: Window height in pixels
        """
        ...

    def render_frame(
        self,
        ball: Ball,
        left_paddle: Paddle,
        right_paddle: Paddle,
        walls: list[Wall],
        additional_info: dict[str, Any] | None = None,
    ) -> None:
        """
        Render a single frame of the game.

        Args:
            ball: Ball entity
            left_paddle: Left player's paddle
            right_paddle: Right player's paddle
            walls: Static colliders of the arena
            additional_info: Optional extra data to display (FPS, pause, etc.)
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
