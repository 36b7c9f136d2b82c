"""
Track module - Obstacle regions on the race track.

This module contains:
- ObstacleMask: Interface the car queries for collisions
- GridMask: Boolean raster implementation
"""

from tuxkart.track.mask import GridMask, ObstacleMask

__all__ = [
    "ObstacleMask",
    "GridMask",
]
