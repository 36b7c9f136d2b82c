"""
Race state - Lap progress, win detection and win-banner blinking.

Provides:
- Lap count tracking
- One-way RACING -> WON transition when the lap target is reached
- Sawtooth blink counter driving the win banner
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class RacePhase(Enum):
    """Race progress phases."""
    RACING = "racing"
    WON = "won"


@dataclass
class RaceConfig:
    """Race rules and banner timing."""
    lap_target: int = 6
    
    # Blink sawtooth: count up to blink_high, then drop by blink_drop
    blink_period: int = 15   # Ticks per on/off half-cycle
    blink_high: int = 20
    blink_floor: int = 5
    blink_drop: int = 40
    
    def validate(self) -> None:
        """Reject unusable rules.
        
        Raises:
            ValueError: If any value is out of range
        """
        if self.lap_target < 1:
            raise ValueError(f"lap_target must be at least 1, got {self.lap_target}")
        if self.blink_period < 1:
            raise ValueError(f"blink_period must be at least 1, got {self.blink_period}")
        if self.blink_drop < 0:
            raise ValueError(f"blink_drop must not be negative, got {self.blink_drop}")
        if self.blink_high < self.blink_floor:
            raise ValueError(
                f"blink_high ({self.blink_high}) must not be below blink_floor ({self.blink_floor})"
            )


class RaceState:
    """Single-race progress.
    
    Once won, a race stays won. The blink counter only moves after the win
    and is purely cosmetic.
    
    Usage:
        race = RaceState(RaceConfig(lap_target=6))
        race.complete_lap()
        race.tick()
        if race.banner_visible:
            draw_banner()
    """
    
    def __init__(self, config: RaceConfig | None = None):
        """Initialize race state.
        
        Args:
            config: Race rules. Uses defaults if None.
            
        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or RaceConfig()
        self.config.validate()
        
        self._lap_count: int = 0
        self._won: bool = False
        self._blink_counter: int = 0
        self._frames: int = 0
    
    @property
    def lap_count(self) -> int:
        """Completed laps."""
        return self._lap_count
    
    @lap_count.setter
    def lap_count(self, value: int) -> None:
        if value < self._lap_count:
            raise ValueError(
                f"lap_count cannot decrease (current {self._lap_count}, got {value})"
            )
        self._lap_count = int(value)
    
    @property
    def won(self) -> bool:
        """Whether the lap target has been reached."""
        return self._won
    
    @property
    def phase(self) -> RacePhase:
        """Current race phase."""
        return RacePhase.WON if self._won else RacePhase.RACING
    
    @property
    def blink_counter(self) -> int:
        """Banner blink counter."""
        return self._blink_counter
    
    @property
    def frames(self) -> int:
        """Ticks since the race started."""
        return self._frames
    
    @property
    def banner_visible(self) -> bool:
        """Whether the win banner shows this frame."""
        if not self._won:
            return False
        # Truncate towards zero so negative counters keep the integer cadence
        phase = int(self._blink_counter / self.config.blink_period)
        return phase % 2 == 0
    
    def complete_lap(self) -> int:
        """Record a completed lap.
        
        Returns:
            New lap count
        """
        self._lap_count += 1
        return self._lap_count
    
    def tick(self) -> bool:
        """Advance one frame.
        
        Returns:
            True on the frame the race is won
        """
        self._frames += 1
        
        just_won = False
        if not self._won and self._lap_count >= self.config.lap_target:
            self._won = True
            just_won = True
        
        if self._won:
            if self._blink_counter <= self.config.blink_high:
                self._blink_counter += 1
            elif self._blink_counter > self.config.blink_floor:
                self._blink_counter -= self.config.blink_drop
        
        return just_won
    
    def get_state(self) -> Dict[str, Any]:
        """Get race state.
        
        Returns:
            Dictionary with race state
        """
        return {
            "phase": self.phase.value,
            "lap_count": self._lap_count,
            "lap_target": self.config.lap_target,
            "won": self._won,
            "blink_counter": self._blink_counter,
            "banner_visible": self.banner_visible,
            "frames": self._frames,
        }
