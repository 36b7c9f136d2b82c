"""Screen-space placement of sprites."""

from tuxkart.car.car import CarPose


def scaled_size(size: tuple[int, int], scale: float) -> tuple[int, int]:
    """Scale a texture size, truncating to whole pixels (minimum 1)."""
    return (max(int(size[0] * scale), 1), max(int(size[1] * scale), 1))


def sprite_rect(pose: CarPose, size: tuple[int, int]) -> tuple[int, int, int, int]:
    """Get the destination rectangle of a sprite centred on a pose.
    
    Args:
        pose: Car pose
        size: Scaled sprite (width, height)
        
    Returns:
        (x, y, width, height) with the sprite centre on the car position
    """
    width, height = size
    return (int(pose.x) - width // 2, int(pose.y) - height // 2, width, height)
