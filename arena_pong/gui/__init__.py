"""
PyGame interface for Arena Pong
"""
