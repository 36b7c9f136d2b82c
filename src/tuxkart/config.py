"""
Game Configuration

Window, asset, car and race settings for a tuxkart session.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from tuxkart.car.car import CarConfig
from tuxkart.car.presets import VehiclePreset, get_preset
from tuxkart.scoring.race_state import RaceConfig
from tuxkart.simulation.loop import LoopConfig

CONTROL_SCHEMES = ("wasd", "arrows")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    """Configuration for one game session."""
    
    # Window
    width: int = 2560
    height: int = 1440
    title: str = "RustSTK"
    frame_rate: float = 60.0
    
    # Assets (relative paths resolve against asset_root)
    asset_root: Path = field(default_factory=lambda: Path.cwd())
    track_image: str = "imgs/rennstrecke.jpg"
    car_image: str = "imgs/tuxi.png"
    font_file: str = "fonts/arial.ttf"
    sprite_scale: float = 0.1
    
    # Car
    preset: str = "player1"
    controls: Optional[str] = None   # None = preset's scheme
    spawn: Optional[tuple[float, float]] = None   # None = preset's spawn
    
    # Race
    lap_target: int = 6
    
    # Win banner
    banner_text: str = "Player 1 has won!!!"
    banner_rect: tuple[int, int, int, int] = (215, 260, 370, 100)
    banner_color: tuple[int, int, int] = (0, 255, 0)
    font_size: int = 100
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    
    def __post_init__(self):
        """Validate and normalize configuration."""
        if isinstance(self.asset_root, str):
            self.asset_root = Path(self.asset_root)
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        self.log_level = self.log_level.upper()
        
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {self.frame_rate}")
        if self.sprite_scale <= 0:
            raise ValueError(f"sprite_scale must be positive, got {self.sprite_scale}")
        if self.lap_target < 1:
            raise ValueError(f"lap_target must be at least 1, got {self.lap_target}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")
        if self.controls is not None and self.controls not in CONTROL_SCHEMES:
            raise ValueError(
                f"Unknown control scheme '{self.controls}' (known: {', '.join(CONTROL_SCHEMES)})"
            )
        # Fail early on unknown preset names
        get_preset(self.preset)
    
    @property
    def vehicle(self) -> VehiclePreset:
        """Selected vehicle preset."""
        return get_preset(self.preset)
    
    @property
    def control_scheme(self) -> str:
        """Effective control scheme."""
        return self.controls or self.vehicle.controls
    
    @property
    def spawn_position(self) -> tuple[float, float]:
        """Effective spawn position."""
        return self.spawn if self.spawn is not None else self.vehicle.spawn
    
    def resolve(self, relative: str) -> Path:
        """Get the full path of an asset."""
        path = Path(relative)
        return path if path.is_absolute() else self.asset_root / path
    
    @property
    def track_path(self) -> Path:
        return self.resolve(self.track_image)
    
    @property
    def car_path(self) -> Path:
        return self.resolve(self.car_image)
    
    @property
    def font_path(self) -> Path:
        return self.resolve(self.font_file)
    
    def car_config(self) -> CarConfig:
        """Physical constants for the selected preset."""
        return self.vehicle.config
    
    def race_config(self) -> RaceConfig:
        """Race rules for this session."""
        return RaceConfig(lap_target=self.lap_target)
    
    def loop_config(self) -> LoopConfig:
        """Frame pacing for this session."""
        return LoopConfig(frame_rate=self.frame_rate)
