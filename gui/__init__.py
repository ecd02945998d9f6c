"""Pygame window host for the Pong core.

Contains the character grid surface and the application entry point
(`python -m gui.app`).
"""

__all__ = [
    "constants",
    "grid",
    "app",
]
