"""
Frame loop - Fixed-rate input/physics/render cycle.

Each advanced frame:
1. Checks for a quit request
2. Samples held keys and drives the car
3. Bounces the car off obstacles
4. Records laps and ticks the race state
5. Hands the frame to the renderer and presents it
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from tuxkart.car.car import Car, CarInputs
from tuxkart.car.presets import Vehicle
from tuxkart.scoring.race_state import RaceState
from tuxkart.simulation.interfaces import FrameView, InputSource, Renderer
from tuxkart.track.mask import ObstacleMask

logger = logging.getLogger(__name__)


@dataclass
class LoopConfig:
    """Frame pacing configuration."""
    frame_rate: float = 60.0   # Target ticks per second
    
    def __post_init__(self):
        if self.frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {self.frame_rate}")
    
    @property
    def frame_period(self) -> float:
        """Seconds per tick."""
        return 1.0 / self.frame_rate


class FrameResult(Enum):
    """Outcome of one loop iteration."""
    SKIPPED = "skipped"     # Too early, slept without advancing
    ADVANCED = "advanced"   # State advanced and frame rendered
    QUIT = "quit"           # Quit requested, loop finished


def apply_inputs(vehicle: Vehicle, inputs: CarInputs) -> None:
    """Drive a vehicle from one tick of held keys.
    
    At most one turn and one pedal action is applied. Left beats right and
    accelerate beats decelerate when both are held. With no pedal held the
    car coasts.
    
    Args:
        vehicle: Vehicle to drive
        inputs: Keys held this tick
    """
    vehicle.rotate(inputs.turn_left, inputs.turn_right)
    
    if inputs.accelerate:
        vehicle.move_forward()
    elif inputs.decelerate:
        vehicle.move_backward()
    else:
        vehicle.coast()


class FrameLoop:
    """Fixed-timestep game loop.
    
    Physics constants are tuned per tick, so the loop never scales by
    elapsed time: an iteration that arrives early sleeps off the remainder
    and leaves all state untouched.
    
    Usage:
        loop = FrameLoop(car, race, renderer, inputs)
        frames = loop.run()
    """
    
    def __init__(
        self,
        car: Car,
        race: RaceState,
        renderer: Renderer,
        inputs: InputSource,
        obstacles: Optional[ObstacleMask] = None,
        lap_trigger: Optional[Callable[[Car], bool]] = None,
        config: LoopConfig | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize loop.
        
        Args:
            car: Player car
            race: Race state for this race
            renderer: Frame renderer
            inputs: Input source
            obstacles: Impassable region, None for no collisions
            lap_trigger: Called each frame; True records a completed lap
            config: Pacing configuration. Uses defaults if None.
            clock: Monotonic time source in seconds
            sleep: Sleep function in seconds
        """
        self.car = car
        self.race = race
        self.renderer = renderer
        self.inputs = inputs
        self.obstacles = obstacles
        self.lap_trigger = lap_trigger
        self.config = config or LoopConfig()
        
        self._clock = clock
        self._sleep = sleep
        self._last_update: Optional[float] = None
        self._running: bool = False
        self._frame: int = 0
    
    @property
    def frame(self) -> int:
        """Number of advanced frames."""
        return self._frame
    
    @property
    def is_running(self) -> bool:
        """Whether run() is active and no stop was requested."""
        return self._running
    
    def stop(self) -> None:
        """Request a clean exit after the current iteration."""
        self._running = False
    
    def step(self) -> FrameResult:
        """Run one loop iteration.
        
        Returns:
            What the iteration did
        """
        now = self._clock()
        if self._last_update is not None:
            elapsed = now - self._last_update
            if elapsed < self.config.frame_period:
                self._sleep(self.config.frame_period - elapsed)
                return FrameResult.SKIPPED
        self._last_update = now
        
        if self.inputs.poll_quit():
            logger.info(f"Quit requested after {self._frame} frames")
            self._running = False
            return FrameResult.QUIT
        
        apply_inputs(self.car, self.inputs.sample())
        
        if self.obstacles is not None:
            contact = self.car.collide(self.obstacles)
            if contact is not None:
                logger.debug(f"Collision at {contact}, velocity {self.car.velocity:.3f}")
                self.car.bounce()
        
        if self.lap_trigger is not None and self.lap_trigger(self.car):
            laps = self.race.complete_lap()
            logger.info(f"Lap {laps}/{self.race.config.lap_target} completed")
        
        if self.race.tick():
            logger.info(f"Race won after {self.race.lap_count} laps")
        
        self._frame += 1
        self.renderer.draw(FrameView(
            frame=self._frame,
            car=self.car.pose(),
            banner_visible=self.race.banner_visible,
            lap_count=self.race.lap_count,
            won=self.race.won,
        ))
        self.renderer.present()
        
        return FrameResult.ADVANCED
    
    def run(self, max_frames: int | None = None) -> int:
        """Loop until quit, stop() or the frame budget runs out.
        
        Args:
            max_frames: Maximum frames to advance (None = unlimited)
            
        Returns:
            Number of frames advanced
        """
        self._running = True
        start_frame = self._frame
        logger.info(f"Frame loop started at {self.config.frame_rate:.0f} Hz")
        
        while self._running:
            if max_frames is not None and self._frame - start_frame >= max_frames:
                self._running = False
                break
            self.step()
        
        advanced = self._frame - start_frame
        logger.info(f"Frame loop stopped after {advanced} frames")
        return advanced
