"""
Render module - pygame rendering and keyboard input.

This module contains:
- Geometry helpers for sprite placement
- pygame renderer, input source and asset loading
"""

from tuxkart.render.geometry import scaled_size, sprite_rect
from tuxkart.render.pygame_backend import (
    KEYMAPS,
    GameAssets,
    KeyMap,
    PygameInput,
    PygameRenderer,
    load_assets,
    open_window,
)

__all__ = [
    "scaled_size",
    "sprite_rect",
    "KEYMAPS",
    "KeyMap",
    "GameAssets",
    "PygameInput",
    "PygameRenderer",
    "load_assets",
    "open_window",
]
