"""
Simulation module - Frame loop and its collaborators.

This module contains:
- FrameLoop: Fixed-rate input, physics and render cycle
- Renderer/InputSource: Interfaces the loop drives
"""

from tuxkart.simulation.interfaces import FrameView, InputSource, Renderer
from tuxkart.simulation.loop import FrameLoop, FrameResult, LoopConfig, apply_inputs

__all__ = [
    "FrameLoop",
    "FrameResult",
    "LoopConfig",
    "apply_inputs",
    "FrameView",
    "InputSource",
    "Renderer",
]
