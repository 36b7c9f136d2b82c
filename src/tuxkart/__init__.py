"""
tuxkart - A minimal top-down kart racing prototype.

This package provides:
- Kinematic car model with turning, acceleration, coasting and bounce
- Race progress with lap target and blinking win banner
- Fixed-rate frame loop driving pluggable renderer and input sources
- pygame backend for window, assets and keyboard
"""

__version__ = "0.1.0"

from tuxkart.car.car import Car
from tuxkart.scoring.race_state import RaceState
from tuxkart.simulation.loop import FrameLoop

__all__ = ["Car", "RaceState", "FrameLoop", "__version__"]
