"""
Unit tests for the axis-aligned collision utility
"""

import pytest

from arena_pong.core.collision import CollisionDetector, Face, collide, collide_rects
from arena_pong.core.entities import Ball, Paddle, Side, Vector2D, create_walls


class TestCollide:
    """Overlap test and struck face selection"""

    def test_no_overlap(self):
        assert collide(Vector2D(0, 0), (10, 10), Vector2D(100, 0), (10, 10)) is None

    def test_touching_edges_do_not_overlap(self):
        """Edges in contact are not an overlap"""
        assert collide(Vector2D(0, 0), (10, 10), Vector2D(10, 0), (10, 10)) is None

    def test_left_face(self):
        """A coming from the left penetrates the left face of B"""
        assert collide(Vector2D(-8, 0), (10, 10), Vector2D(0, 0), (10, 40)) is Face.LEFT

    def test_right_face(self):
        assert collide(Vector2D(8, 0), (10, 10), Vector2D(0, 0), (10, 40)) is Face.RIGHT

    def test_top_face(self):
        assert collide(Vector2D(0, 10), (10, 10), Vector2D(0, 0), (100, 20)) is Face.TOP

    def test_bottom_face(self):
        assert collide(Vector2D(0, -10), (10, 10), Vector2D(0, 0), (100, 20)) is Face.BOTTOM

    def test_inside(self):
        """A fully contained rectangle reports no face"""
        assert collide(Vector2D(0, 0), (10, 10), Vector2D(0, 0), (100, 100)) is Face.INSIDE

    def test_straddling_both_edges_is_inside(self):
        """A wider than B on both axes straddles no single edge"""
        assert collide(Vector2D(0, 0), (100, 100), Vector2D(0, 0), (10, 10)) is Face.INSIDE

    def test_minimal_penetration_wins(self):
        """Corner overlap: the shallower axis decides the face"""
        # x penetration 1, y penetration 4
        face = collide(Vector2D(-9, -6), (10, 10), Vector2D(0, 0), (10, 10))
        assert face is Face.LEFT

        # x penetration 4, y penetration 1
        face = collide(Vector2D(-6, -9), (10, 10), Vector2D(0, 0), (10, 10))
        assert face is Face.BOTTOM

    def test_tie_goes_to_horizontal_axis(self):
        face = collide(Vector2D(0, 0), (10, 10), Vector2D(12, 12), (20, 20))
        assert face is Face.LEFT

    def test_pure_and_deterministic(self):
        """Same inputs, same answer, inputs untouched"""
        a_pos = Vector2D(-8, 3)
        b_pos = Vector2D(0, 0)
        first = collide(a_pos, (10, 10), b_pos, (10, 40))
        second = collide(a_pos, (10, 10), b_pos, (10, 40))
        assert first is second is Face.LEFT
        assert a_pos == Vector2D(-8, 3)
        assert b_pos == Vector2D(0, 0)

    def test_collide_rects(self):
        assert collide_rects((-8, 0, 10, 10), (0, 0, 10, 40)) is Face.LEFT
        assert collide_rects((0, 0, 10, 10), (50, 0, 10, 10)) is None


class TestCollisionDetector:
    """Ball against arena colliders"""

    @pytest.fixture
    def detector(self):
        return CollisionDetector()

    def test_ball_approaching_right_paddle(self, detector):
        paddle = Paddle(Side.RIGHT)
        ball = Ball(465, 0, 50, 0)
        assert detector.check_ball_collider(ball, paddle) is Face.LEFT

    def test_ball_approaching_left_paddle(self, detector):
        paddle = Paddle(Side.LEFT)
        ball = Ball(-465, 0, -50, 0)
        assert detector.check_ball_collider(ball, paddle) is Face.RIGHT

    def test_ball_under_top_wall(self, detector):
        top_wall = create_walls()[2]
        ball = Ball(0, 282, 0, 50)
        assert detector.check_ball_collider(ball, top_wall) is Face.BOTTOM

    def test_ball_above_bottom_wall(self, detector):
        bottom_wall = create_walls()[3]
        ball = Ball(0, -282, 0, -50)
        assert detector.check_ball_collider(ball, bottom_wall) is Face.TOP

    def test_ball_in_center_hits_nothing(self, detector):
        ball = Ball(0, 0, 0, 0)
        for collider in [*create_walls(), Paddle(Side.LEFT), Paddle(Side.RIGHT)]:
            assert detector.check_ball_collider(ball, collider) is None

    def test_ball_past_left_goal(self, detector):
        left_goal = create_walls()[0]
        ball = Ball(-501, 0, -50, 0)
        assert detector.check_ball_collider(ball, left_goal) is not None
