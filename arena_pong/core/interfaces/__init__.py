"""
Protocols between the simulation core and its collaborators
"""

from arena_pong.core.interfaces.random_source import RandomSource
from arena_pong.core.interfaces.renderer import RendererProtocol
from arena_pong.core.interfaces.renderer import ScoreSink

__all__ = ["RandomSource", "RendererProtocol", "ScoreSink"]
