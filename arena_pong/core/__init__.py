"""
Core module of Arena Pong
"""

from arena_pong.core.collision import Face
from arena_pong.core.collision import collide
from arena_pong.core.entities import Ball
from arena_pong.core.entities import ColliderKind
from arena_pong.core.entities import InputState
from arena_pong.core.entities import Paddle
from arena_pong.core.entities import PaddleInput
from arena_pong.core.entities import Score
from arena_pong.core.entities import Side
from arena_pong.core.entities import Vector2D
from arena_pong.core.entities import Wall
from arena_pong.core.physics import PhysicsEngine
from arena_pong.core.physics import SimulationState

__all__ = [
    "Ball",
    "Paddle",
    "Wall",
    "Score",
    "Side",
    "ColliderKind",
    "Face",
    "collide",
    "InputState",
    "PaddleInput",
    "PhysicsEngine",
    "SimulationState",
    "Vector2D",
]
