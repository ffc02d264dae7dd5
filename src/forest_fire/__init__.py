"""
Forest Fire Simulation using Cellular Automata.

A stochastic cellular automaton where trees catch fire from burning
neighbours, burn for one step and turn to ash.
"""

from .cell import Cell
from .config import (
    Configuration,
    ValidationError,
    format_ignition_points,
    load_config,
    parse_config,
    parse_ignition_points,
)
from .engine import advance
from .grid import Grid, OutOfRangeError
from .model import FireModel, SimulationState
from .sweep import run_sweep

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Configuration",
    "ValidationError",
    "format_ignition_points",
    "load_config",
    "parse_config",
    "parse_ignition_points",
    "advance",
    "Grid",
    "OutOfRangeError",
    "FireModel",
    "SimulationState",
    "run_sweep",
]
