"""Small 2D games and graphics toys, with window-free game logic and pygame front ends."""

__version__ = "0.1.0"