"""
Car - Top-down kart kinematics.

Handles:
- Turning at a fixed rate per tick
- Forward/reverse acceleration with velocity caps
- Multiplicative coasting when no pedal is held
- Inelastic bounce on collision
- Reset to the spawn pose

Heading convention: 0 degrees faces screen-up and positive headings turn
counter-clockwise. Screen y grows downwards, so one tick moves the car by
``(-v * sin(heading), -v * cos(heading))``. Renderers rotate the upright
sprite counter-clockwise by ``heading`` (clockwise by ``-heading``).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, TYPE_CHECKING
import numpy as np

from tuxkart.car.footprint import Footprint

if TYPE_CHECKING:
    from tuxkart.track.mask import ObstacleMask


@dataclass
class CarConfig:
    """Per-car physical constants.
    
    Values are tuned per tick, not per second. Defaults match the
    single-player kart.
    """
    max_velocity: float = 3.0        # Forward cap (units/tick)
    rotation_velocity: float = 4.0   # Turn rate (degrees/tick)
    acceleration: float = 0.1        # Velocity change per pedal tick
    
    # Damping
    coast_factor: float = 0.9        # Velocity multiplier with no pedal held
    bounce_factor: float = 0.5       # Fraction of speed kept after a hit
    stop_epsilon: float = 1e-3       # Speeds below this snap to zero
    
    # Footprint (scene units)
    width: float = 24.0
    length: float = 40.0
    
    @property
    def max_reverse_velocity(self) -> float:
        """Reverse cap, half the forward cap."""
        return self.max_velocity / 2
    
    def validate(self) -> None:
        """Reject constants that cannot describe a drivable car.
        
        Raises:
            ValueError: If any constant is out of range
        """
        for name in ("max_velocity", "rotation_velocity", "acceleration",
                     "coast_factor", "bounce_factor", "stop_epsilon", "width", "length"):
            value = getattr(self, name)
            if not np.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.max_velocity <= 0:
            raise ValueError(f"max_velocity must be positive, got {self.max_velocity}")
        if self.rotation_velocity < 0:
            raise ValueError(
                f"rotation_velocity must not be negative, got {self.rotation_velocity}"
            )
        if self.acceleration <= 0:
            raise ValueError(f"acceleration must be positive, got {self.acceleration}")
        if not 0.0 <= self.coast_factor < 1.0:
            raise ValueError(f"coast_factor must be in [0, 1), got {self.coast_factor}")
        if not 0.0 < self.bounce_factor <= 1.0:
            raise ValueError(f"bounce_factor must be in (0, 1], got {self.bounce_factor}")
        if self.stop_epsilon < 0:
            raise ValueError(f"stop_epsilon must not be negative, got {self.stop_epsilon}")
        if self.width <= 0 or self.length <= 0:
            raise ValueError(
                f"footprint must have positive size, got {self.width}x{self.length}"
            )


@dataclass
class CarInputs:
    """Held keys for one tick."""
    turn_left: bool = False
    turn_right: bool = False
    accelerate: bool = False
    decelerate: bool = False


@dataclass
class CarState:
    """Current car state."""
    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0    # Degrees, unbounded
    velocity: float = 0.0   # Signed, along heading


@dataclass(frozen=True)
class CarPose:
    """Snapshot handed to renderers."""
    x: float
    y: float
    heading: float
    
    @property
    def render_angle(self) -> float:
        """Clockwise sprite rotation in degrees."""
        return -self.heading


class Car:
    """Kinematic top-down car.
    
    Every transition keeps ``-max_reverse_velocity <= velocity <= max_velocity``.
    No transition raises once the car is constructed.
    
    Usage:
        car = Car(start=(920.0, 1350.0))
        car.rotate(left=True, right=False)
        car.move_forward()
        hit = car.collide(border_mask)
        if hit is not None:
            car.bounce()
    """
    
    def __init__(
        self,
        config: CarConfig | None = None,
        start: tuple[float, float] = (0.0, 0.0),
        start_heading: float = 0.0,
        car_id: int = 0,
    ):
        """Initialize car at its spawn pose.
        
        Args:
            config: Physical constants. Uses defaults if None.
            start: Spawn (x, y) position
            start_heading: Spawn heading in degrees
            car_id: Identifier for this car instance
            
        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or CarConfig()
        self.config.validate()
        self.car_id = car_id
        
        self._start_position = (float(start[0]), float(start[1]))
        self._start_heading = float(start_heading)
        
        self.state = CarState()
        self.reset()
    
    @property
    def start_position(self) -> tuple[float, float]:
        """Spawn (x, y) position."""
        return self._start_position
    
    @property
    def start_heading(self) -> float:
        """Spawn heading in degrees."""
        return self._start_heading
    
    @property
    def position(self) -> tuple[float, float]:
        """Current (x, y) position."""
        return (self.state.x, self.state.y)
    
    @property
    def heading(self) -> float:
        """Current heading in degrees."""
        return self.state.heading
    
    @property
    def velocity(self) -> float:
        """Signed velocity along the heading."""
        return self.state.velocity
    
    @property
    def speed(self) -> float:
        """Absolute velocity."""
        return abs(self.state.velocity)
    
    def _set_velocity(self, velocity: float) -> None:
        self.state.velocity = float(np.clip(
            velocity, -self.config.max_reverse_velocity, self.config.max_velocity
        ))
    
    def rotate(self, left: bool, right: bool) -> None:
        """Turn by one tick.
        
        Left takes priority when both directions are held.
        
        Args:
            left: Turn-left key held
            right: Turn-right key held
        """
        if left:
            self.state.heading += self.config.rotation_velocity
        elif right:
            self.state.heading -= self.config.rotation_velocity
    
    def move_forward(self) -> None:
        """Accelerate forwards and move."""
        self._set_velocity(
            min(self.state.velocity + self.config.acceleration, self.config.max_velocity)
        )
        self.update_position()
    
    def move_backward(self) -> None:
        """Brake/reverse and move."""
        self._set_velocity(
            max(self.state.velocity - self.config.acceleration,
                -self.config.max_reverse_velocity)
        )
        self.update_position()
    
    def coast(self) -> None:
        """Damp velocity towards zero and move."""
        velocity = self.state.velocity * self.config.coast_factor
        if abs(velocity) < self.config.stop_epsilon:
            velocity = 0.0
        self._set_velocity(velocity)
        self.update_position()
    
    def bounce(self) -> None:
        """Reverse direction at reduced speed after a collision and move."""
        self._set_velocity(-self.state.velocity * self.config.bounce_factor)
        self.update_position()
    
    def update_position(self) -> None:
        """Advance position by one tick of velocity along the heading."""
        radians = np.radians(self.state.heading)
        self.state.x -= self.state.velocity * float(np.sin(radians))
        self.state.y -= self.state.velocity * float(np.cos(radians))
    
    def reset(self) -> None:
        """Return to the spawn pose at rest."""
        self.state = CarState(
            x=self._start_position[0],
            y=self._start_position[1],
            heading=self._start_heading,
            velocity=0.0,
        )
    
    def pose(self) -> CarPose:
        """Get current pose for rendering."""
        return CarPose(self.state.x, self.state.y, self.state.heading)
    
    def footprint(self) -> Footprint:
        """Get the car's extent at its current pose."""
        return Footprint(
            center_x=self.state.x,
            center_y=self.state.y,
            heading=self.state.heading,
            width=self.config.width,
            length=self.config.length,
        )
    
    def collide(self, mask: "ObstacleMask") -> Optional[tuple[int, int]]:
        """Check the footprint against an obstacle mask.
        
        Args:
            mask: Impassable region
            
        Returns:
            First contact point, or None when clear
        """
        return mask.overlap(self.footprint())
    
    def get_telemetry(self) -> Dict[str, Any]:
        """Get car telemetry.
        
        Returns:
            Dictionary containing car state
        """
        return {
            "car_id": self.car_id,
            "x": self.state.x,
            "y": self.state.y,
            "heading_deg": self.state.heading,
            "velocity": self.state.velocity,
            "speed": self.speed,
            "max_velocity": self.config.max_velocity,
        }
