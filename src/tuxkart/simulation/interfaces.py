"""
Collaborator interfaces - What the frame loop needs from rendering and input.

Defines:
- FrameView: Per-frame snapshot handed to the renderer
- Renderer: Draws a frame and presents it
- InputSource: Reports quit requests and held keys
"""

from dataclasses import dataclass
from typing import Protocol

from tuxkart.car.car import CarInputs, CarPose


@dataclass(frozen=True)
class FrameView:
    """Everything a renderer needs to draw one frame."""
    frame: int
    car: CarPose
    banner_visible: bool
    lap_count: int = 0
    won: bool = False


class Renderer(Protocol):
    """Draws background, car sprite and win banner."""
    
    def draw(self, view: FrameView) -> None:
        """Draw a frame into the back buffer."""
        ...
    
    def present(self) -> None:
        """Flip the back buffer to the screen."""
        ...


class InputSource(Protocol):
    """Keyboard or scripted input."""
    
    def poll_quit(self) -> bool:
        """Drain pending events; True if the player asked to quit."""
        ...
    
    def sample(self) -> CarInputs:
        """Get the keys currently held."""
        ...
