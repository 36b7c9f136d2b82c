"""
pygame backend - Window, assets, rendering and keyboard input.

Provides:
- open_window: Display setup
- load_assets: Track, car sprite and pre-rendered win banner
- PygameRenderer: Draws FrameView snapshots
- PygameInput: Keyboard state for one control scheme
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import pygame

from tuxkart.car.car import CarInputs
from tuxkart.config import GameConfig
from tuxkart.render.geometry import scaled_size, sprite_rect
from tuxkart.simulation.interfaces import FrameView

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (0, 0, 0)


@dataclass(frozen=True)
class KeyMap:
    """Keys for the four driving actions."""
    left: int
    right: int
    forward: int
    backward: int


KEYMAPS = {
    "wasd": KeyMap(pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s),
    "arrows": KeyMap(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN),
}


@dataclass
class GameAssets:
    """Loaded, display-ready surfaces."""
    track: pygame.Surface
    car: pygame.Surface
    banner: pygame.Surface


def open_window(config: GameConfig) -> pygame.Surface:
    """Initialize pygame and open the game window.
    
    Args:
        config: Game configuration
        
    Returns:
        Display surface
    """
    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption(config.title)
    logger.info(f"Opened {config.width}x{config.height} window '{config.title}'")
    return screen


def _require(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"Asset not found: {path}")
    return path


def load_assets(config: GameConfig) -> GameAssets:
    """Load and prepare all surfaces.
    
    The track is stretched to the window, the car is scaled by
    ``sprite_scale`` and the banner text is rendered once and stretched to
    the banner rectangle.
    
    Args:
        config: Game configuration
        
    Returns:
        Loaded assets
        
    Raises:
        FileNotFoundError: If an asset file is missing
    """
    track = pygame.image.load(str(_require(config.track_path))).convert()
    track = pygame.transform.smoothscale(track, (config.width, config.height))
    
    car = pygame.image.load(str(_require(config.car_path))).convert_alpha()
    car = pygame.transform.smoothscale(car, scaled_size(car.get_size(), config.sprite_scale))
    
    font = pygame.font.Font(str(_require(config.font_path)), config.font_size)
    text = font.render(config.banner_text, True, config.banner_color)
    _, _, banner_w, banner_h = config.banner_rect
    banner = pygame.transform.smoothscale(text, (banner_w, banner_h))
    
    logger.debug(f"Loaded assets from {config.asset_root}")
    return GameAssets(track=track, car=car, banner=banner)


class PygameRenderer:
    """Draws the track, car and win banner with pygame."""
    
    def __init__(self, screen: pygame.Surface, assets: GameAssets, config: GameConfig):
        self.screen = screen
        self.assets = assets
        self.banner_pos = config.banner_rect[:2]
    
    def draw(self, view: FrameView) -> None:
        self.screen.fill(BACKGROUND_COLOR)
        self.screen.blit(self.assets.track, (0, 0))
        
        x, y, w, h = sprite_rect(view.car, self.assets.car.get_size())
        # pygame rotates counter-clockwise; render_angle is clockwise
        rotated = pygame.transform.rotate(self.assets.car, -view.car.render_angle)
        center = (x + w // 2, y + h // 2)
        self.screen.blit(rotated, rotated.get_rect(center=center))
        
        if view.banner_visible:
            self.screen.blit(self.assets.banner, self.banner_pos)
    
    def present(self) -> None:
        pygame.display.flip()


class PygameInput:
    """Keyboard input for one control scheme.
    
    Closing the window or pressing Escape requests quit.
    """
    
    def __init__(self, scheme: str = "wasd"):
        if scheme not in KEYMAPS:
            raise ValueError(f"Unknown control scheme '{scheme}'")
        self.keymap = KEYMAPS[scheme]
    
    def poll_quit(self) -> bool:
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                quit_requested = True
        return quit_requested
    
    def sample(self) -> CarInputs:
        keys = pygame.key.get_pressed()
        return CarInputs(
            turn_left=bool(keys[self.keymap.left]),
            turn_right=bool(keys[self.keymap.right]),
            accelerate=bool(keys[self.keymap.forward]),
            decelerate=bool(keys[self.keymap.backward]),
        )
