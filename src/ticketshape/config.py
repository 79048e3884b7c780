"""
Configuration & Defaults
========================
This module serves as the central registry for the documented default values
and global constants of the ticket geometry.

Why is this file needed?
------------------------
1. Single source: the shape dataclasses, the container and the CLI all read
   their defaults from here, so they never drift apart.
2. Discretization: bounds and previews sample curves at a fixed resolution.

Exports:
    DEFAULT_CUTOUT_Y_POSITION (float): Notch centre as a fraction of the height.
    DEFAULT_CUTOUT_RADIUS (float): Radius of each side notch.
    DEFAULT_CORNER_RADIUS (float): Radius of the four rounded corners.
    DEFAULT_LINE_OFFSET (float): Distance of the separator above the notches.
"""
from typing import Tuple

# Shape geometry
DEFAULT_CUTOUT_Y_POSITION: float = 0.75
DEFAULT_CUTOUT_RADIUS: float = 8.0
DEFAULT_CORNER_RADIUS: float = 16.0

# Separator line
DEFAULT_LINE_Y_POSITION: float = DEFAULT_CUTOUT_Y_POSITION
DEFAULT_LINE_OFFSET: float = 10.0
DEFAULT_LINE_WIDTH: float = 0.5
DEFAULT_DASH: Tuple[float, ...] = (4.0, 4.0)

# Default colors as RGBA in [0, 1]
DEFAULT_FILL_RGBA: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
DEFAULT_LINE_RGBA: Tuple[float, float, float, float] = (0.5, 0.5, 0.5, 0.3)

# Number of samples used when curves are flattened to polylines
ARC_RESOLUTION: int = 33
CURVE_RESOLUTION: int = 17
