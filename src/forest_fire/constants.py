"""Bounds and default values for simulation configuration."""

from typing import Tuple

# ============================================================================
# GRID BOUNDS
# ============================================================================

MIN_DIMENSION: int = 5                              # Smallest accepted height/width
MAX_DIMENSION: int = 100                            # Largest accepted height/width

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_HEIGHT: int = 10                            # Grid height in cells
DEFAULT_WIDTH: int = 10                             # Grid width in cells
DEFAULT_SPREAD_PROBABILITY: float = 0.5             # Chance per burning neighbour
DEFAULT_IGNITION_POINTS: Tuple[Tuple[int, int], ...] = ((0, 0), (5, 5))

# ============================================================================
# IGNITION STRING FORMAT
# ============================================================================

POINT_SEPARATOR: str = ";"                          # Between ignition points
COORD_SEPARATOR: str = ","                          # Between row and col

# Orthogonal neighbour offsets: up, right, down, left
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
