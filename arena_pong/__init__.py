"""
Arena Pong: two-player pong in a fixed arena
"""

__version__ = "0.1.0"
