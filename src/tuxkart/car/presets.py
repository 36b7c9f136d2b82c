"""
Vehicle presets - Named constant sets and the shared vehicle interface.

A preset bundles a car's physical constants with its spawn pose and the
control scheme that drives it.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, TYPE_CHECKING

from tuxkart.car.car import CarConfig, CarPose
from tuxkart.car.footprint import Footprint

if TYPE_CHECKING:
    from tuxkart.track.mask import ObstacleMask


class Vehicle(Protocol):
    """Operations the frame loop drives on a vehicle."""
    
    def rotate(self, left: bool, right: bool) -> None: ...
    
    def move_forward(self) -> None: ...
    
    def move_backward(self) -> None: ...
    
    def coast(self) -> None: ...
    
    def bounce(self) -> None: ...
    
    def reset(self) -> None: ...
    
    def pose(self) -> CarPose: ...
    
    def footprint(self) -> Footprint: ...
    
    def collide(self, mask: "ObstacleMask") -> Optional[tuple[int, int]]: ...


@dataclass(frozen=True)
class VehiclePreset:
    """Constants and spawn pose for one player slot."""
    name: str
    config: CarConfig = field(default_factory=CarConfig)
    spawn: tuple[float, float] = (0.0, 0.0)
    spawn_heading: float = 0.0
    controls: str = "wasd"


PLAYER_ONE = VehiclePreset(
    name="player1",
    config=CarConfig(max_velocity=3.0, rotation_velocity=4.0),
    spawn=(920.0, 1350.0),
    controls="wasd",
)

PLAYER_TWO = VehiclePreset(
    name="player2",
    config=CarConfig(max_velocity=3.0, rotation_velocity=4.0),
    spawn=(390.0, 433.0),
    controls="arrows",
)

PRESETS: Dict[str, VehiclePreset] = {
    PLAYER_ONE.name: PLAYER_ONE,
    PLAYER_TWO.name: PLAYER_TWO,
}


def get_preset(name: str) -> VehiclePreset:
    """Look up a preset by name.
    
    Args:
        name: Preset name
        
    Returns:
        Matching preset
        
    Raises:
        ValueError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown vehicle preset '{name}' (known: {known})") from None
