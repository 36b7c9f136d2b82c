"""
Footprint - Oriented bounding rectangle of a car at its current pose.

Provides:
- Corner positions for drawing/debugging
- Integer bounding box for raster queries
- Vectorised point containment test
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Footprint:
    """Car extent in scene coordinates.
    
    The rectangle is centred on the car position. ``length`` runs along the
    heading direction, ``width`` across it. Heading uses the same convention
    as the car: 0 degrees faces screen-up, positive values turn left.
    """
    center_x: float
    center_y: float
    heading: float     # Degrees
    width: float
    length: float
    
    @property
    def forward(self) -> np.ndarray:
        """Unit vector pointing in the direction of travel."""
        radians = np.radians(self.heading)
        return np.array([-np.sin(radians), -np.cos(radians)])
    
    @property
    def lateral(self) -> np.ndarray:
        """Unit vector pointing to the car's right-hand side."""
        radians = np.radians(self.heading)
        return np.array([np.cos(radians), -np.sin(radians)])
    
    def corners(self) -> np.ndarray:
        """Get rectangle corners.
        
        Returns:
            4x2 array ordered front-left, front-right, rear-right, rear-left
        """
        center = np.array([self.center_x, self.center_y])
        half_fwd = self.forward * self.length / 2
        half_lat = self.lateral * self.width / 2
        return np.array([
            center + half_fwd - half_lat,
            center + half_fwd + half_lat,
            center - half_fwd + half_lat,
            center - half_fwd - half_lat,
        ])
    
    def bounds(self) -> tuple[int, int, int, int]:
        """Get axis-aligned integer bounds enclosing the rectangle.
        
        Returns:
            Tuple (min_x, min_y, max_x, max_y), max values exclusive
        """
        corners = self.corners()
        min_x, min_y = np.floor(corners.min(axis=0)).astype(int)
        max_x, max_y = np.ceil(corners.max(axis=0)).astype(int)
        return int(min_x), int(min_y), int(max_x), int(max_y)
    
    def contains(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Test which points lie inside the rectangle (edges included).
        
        Args:
            xs: X coordinates
            ys: Y coordinates (same shape as xs)
            
        Returns:
            Boolean array with the shape of the inputs
        """
        dx = np.asarray(xs, dtype=float) - self.center_x
        dy = np.asarray(ys, dtype=float) - self.center_y
        fwd = self.forward
        lat = self.lateral
        along = dx * fwd[0] + dy * fwd[1]
        across = dx * lat[0] + dy * lat[1]
        return (np.abs(along) <= self.length / 2) & (np.abs(across) <= self.width / 2)
