"""
Collision detection system for Arena Pong
"""

import math
from enum import Enum
from typing import Protocol

from arena_pong.core.entities import Ball
from arena_pong.core.entities import ColliderKind
from arena_pong.core.entities import Vector2D


class Face(Enum):
    """Face of the second rectangle penetrated by the first one"""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


class Collider(Protocol):
    """Anything the ball can strike: walls, goals and paddles"""

    position: Vector2D
    kind: ColliderKind

    @property
    def size(self) -> tuple[float, float]: ...


def collide(
    a_pos: Vector2D,
    a_size: tuple[float, float],
    b_pos: Vector2D,
    b_size: tuple[float, float],
) -> Face | None:
    """
    Axis-aligned overlap test between two rectangles given by center and size.

    Returns None when the rectangles do not overlap. Otherwise returns the face
    of ``b`` penetrated by ``a``: on each axis the face is known only when ``a``
    straddles exactly one edge of ``b``, and the axis with the smallest
    penetration depth wins, ties going to the horizontal axis. When ``a``
    straddles neither edge on both axes, the result is ``Face.INSIDE``.
    """
    a_min_x = a_pos.x - a_size[0] / 2
    a_max_x = a_pos.x + a_size[0] / 2
    a_min_y = a_pos.y - a_size[1] / 2
    a_max_y = a_pos.y + a_size[1] / 2
    b_min_x = b_pos.x - b_size[0] / 2
    b_max_x = b_pos.x + b_size[0] / 2
    b_min_y = b_pos.y - b_size[1] / 2
    b_max_y = b_pos.y + b_size[1] / 2

    if not (a_min_x < b_max_x and a_max_x > b_min_x and a_min_y < b_max_y and a_max_y > b_min_y):
        return None

    if a_min_x < b_min_x and a_max_x > b_min_x and a_max_x < b_max_x:
        x_face, x_depth = Face.LEFT, b_min_x - a_max_x
    elif a_min_x > b_min_x and a_min_x < b_max_x and a_max_x > b_max_x:
        x_face, x_depth = Face.RIGHT, a_min_x - b_max_x
    else:
        x_face, x_depth = Face.INSIDE, -math.inf

    if a_min_y < b_min_y and a_max_y > b_min_y and a_max_y < b_max_y:
        y_face, y_depth = Face.BOTTOM, b_min_y - a_max_y
    elif a_min_y > b_min_y and a_min_y < b_max_y and a_max_y > b_max_y:
        y_face, y_depth = Face.TOP, a_min_y - b_max_y
    else:
        y_face, y_depth = Face.INSIDE, -math.inf

    if abs(y_depth) < abs(x_depth):
        return y_face
    return x_face


def collide_rects(
    rect_a: tuple[float, float, float, float], rect_b: tuple[float, float, float, float]
) -> Face | None:
    """Same as collide() for (center x, center y, width, height) tuples"""
    ax, ay, aw, ah = rect_a
    bx, by, bw, bh = rect_b
    return collide(Vector2D(ax, ay), (aw, ah), Vector2D(bx, by), (bw, bh))


class CollisionDetector:
    """Main collision manager"""

    def check_ball_collider(self, ball: Ball, collider: Collider) -> Face | None:
        """Returns the face of the collider struck by the ball, if any"""
        return collide(ball.position, (ball.size, ball.size), collider.position, collider.size)
