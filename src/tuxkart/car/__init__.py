"""
Car module - Top-down kart simulation.

This module contains:
- Car: Kinematic model with turning, acceleration, coasting and bounce
- Footprint: Oriented rectangle used for collision queries
- Presets: Named constant sets for each player slot
"""

from tuxkart.car.car import Car, CarConfig, CarInputs, CarPose, CarState
from tuxkart.car.footprint import Footprint
from tuxkart.car.presets import (
    PLAYER_ONE,
    PLAYER_TWO,
    PRESETS,
    Vehicle,
    VehiclePreset,
    get_preset,
)

__all__ = [
    "Car",
    "CarConfig",
    "CarInputs",
    "CarPose",
    "CarState",
    "Footprint",
    "Vehicle",
    "VehiclePreset",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "PRESETS",
    "get_preset",
]
