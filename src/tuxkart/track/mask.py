"""
Obstacle masks - Impassable regions the car can collide with.

Defines:
- ObstacleMask protocol consumed by the car
- GridMask: rasterised mask backed by a boolean numpy array
"""

from typing import Iterable, Optional, Protocol, Tuple
import numpy as np

from tuxkart.car.footprint import Footprint


class ObstacleMask(Protocol):
    """Anything that can report where a footprint touches an obstacle."""
    
    def overlap(self, footprint: Footprint) -> Optional[Tuple[int, int]]:
        """Return the first contact point, or None when clear."""
        ...


class GridMask:
    """Raster obstacle mask.
    
    Each cell covers one scene unit. ``True`` cells are impassable.
    A cell collides when its centre lies inside the footprint.
    
    Usage:
        mask = GridMask.from_rects((2560, 1440), [(0, 0, 2560, 40)])
        hit = mask.overlap(car.footprint())
    """
    
    def __init__(
        self,
        cells: np.ndarray,
        offset: Tuple[int, int] = (0, 0),
    ):
        """Initialize mask.
        
        Args:
            cells: 2D array indexed [row=y, col=x]; truthy cells are blocked
            offset: Scene position of cell (0, 0)
            
        Raises:
            ValueError: If cells is not two-dimensional
        """
        cells = np.asarray(cells, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"Mask must be 2D, got shape {cells.shape}")
        self.cells = cells
        self.offset = (int(offset[0]), int(offset[1]))
    
    @classmethod
    def from_rects(
        cls,
        size: Tuple[int, int],
        rects: Iterable[Tuple[int, int, int, int]],
    ) -> "GridMask":
        """Build a mask from blocked rectangles.
        
        Args:
            size: (width, height) of the mask
            rects: (x, y, width, height) rectangles to block
            
        Returns:
            New mask
        """
        width, height = size
        cells = np.zeros((height, width), dtype=bool)
        for x, y, w, h in rects:
            cells[max(y, 0):max(y + h, 0), max(x, 0):max(x + w, 0)] = True
        return cls(cells)
    
    @property
    def width(self) -> int:
        """Mask width in cells."""
        return self.cells.shape[1]
    
    @property
    def height(self) -> int:
        """Mask height in cells."""
        return self.cells.shape[0]
    
    @property
    def blocked_count(self) -> int:
        """Number of impassable cells."""
        return int(self.cells.sum())
    
    def get_at(self, point: Tuple[float, float]) -> bool:
        """Check whether a scene point lies on a blocked cell.
        
        Points outside the mask are passable.
        """
        col = int(np.floor(point[0])) - self.offset[0]
        row = int(np.floor(point[1])) - self.offset[1]
        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.cells[row, col])
        return False
    
    def overlap(self, footprint: Footprint) -> Optional[Tuple[int, int]]:
        """Find the first blocked cell under a footprint.
        
        Cells are scanned in row-major order (top row first).
        
        Args:
            footprint: Car extent to test
            
        Returns:
            Scene (x, y) of the first blocked cell, or None
        """
        min_x, min_y, max_x, max_y = footprint.bounds()
        col0 = max(min_x - self.offset[0], 0)
        row0 = max(min_y - self.offset[1], 0)
        col1 = min(max_x - self.offset[0], self.width)
        row1 = min(max_y - self.offset[1], self.height)
        if col0 >= col1 or row0 >= row1:
            return None
        
        window = self.cells[row0:row1, col0:col1]
        if not window.any():
            return None
        
        rows, cols = np.mgrid[row0:row1, col0:col1]
        centers_x = cols + self.offset[0] + 0.5
        centers_y = rows + self.offset[1] + 0.5
        hits = np.argwhere(window & footprint.contains(centers_x, centers_y))
        if len(hits) == 0:
            return None
        
        row, col = hits[0]
        return (int(col0 + col + self.offset[0]), int(row0 + row + self.offset[1]))
