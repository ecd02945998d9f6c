"""Simulation and rendering core for a terminal Pong.

The engine steps the ball and paddles, the mapper places them on a cell grid,
and the driver runs the loop against any surface and event source.
"""

__all__ = [
    "constants",
    "controls",
    "engine",
    "mapper",
    "frame",
    "driver",
    "cli",
]
