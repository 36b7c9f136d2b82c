"""
Scoring module - Race progress tracking.

This module contains:
- RaceState: Lap count, win detection and win-banner timing
"""

from tuxkart.scoring.race_state import RaceConfig, RacePhase, RaceState

__all__ = [
    "RaceConfig",
    "RacePhase",
    "RaceState",
]
