"""Fire spread model implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

import pandas as pd
from mesa import Model
from mesa.datacollection import DataCollector

from .cell import Cell
from .config import Configuration, ValidationError, parse_config
from .engine import advance
from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationState:
    """Snapshot handed to observers after every reset and step."""

    grid: Grid
    fire_remains: bool
    step_count: int

    @property
    def complete(self) -> bool:
        return not self.fire_remains

    def to_dict(self) -> dict[str, Any]:
        return {
            "grid": self.grid.labels(),
            "step": self.step_count,
            "complete": self.complete,
        }


Observer = Callable[[SimulationState], None]


class FireModel(Model):
    """Owns one simulation run: the configuration, the grid and the step count."""

    def __init__(self, config: Configuration | None = None, seed: int | None = None):
        """
        Initialize the fire spread model.

        Args:
            config: Validated configuration; defaults to Configuration.default()
            seed: Seed for the model's random source, for reproducible runs
        """
        super().__init__(seed=seed)
        self.config = config if config is not None else Configuration.default()
        self._observers: list[Observer] = []
        self.reset()

    def subscribe(self, observer: Observer) -> None:
        """Register a callback receiving a SimulationState after each update."""
        self._observers.append(observer)

    @property
    def state(self) -> SimulationState:
        return SimulationState(self.grid, self.fire_remains, self.step_count)

    def reset(self) -> None:
        """Start over from the current configuration."""
        self.grid = Grid.create(self.config)
        self.datacollector = DataCollector(
            model_reporters={cell.name: _counter(cell) for cell in Cell}
        )
        self.step_count = 0
        self.fire_remains = self.grid.has_fire()
        self.running = self.fire_remains
        logger.info(
            f"Reset {self.config.height}x{self.config.width} grid, "
            f"p={self.config.spread_probability}, {self.grid.count(Cell.Fire)} cells burning"
        )
        self._record()

    def reconfigure(self, raw: Mapping[str, Any]) -> Configuration:
        """
        Validate raw input and restart with it.

        On a validation error the current configuration, grid and step count
        are kept unchanged and the error is re-raised.
        """
        try:
            config = parse_config(raw)
        except ValidationError as e:
            logger.warning(f"Configuration rejected: {e}")
            raise
        self.config = config
        self.reset()
        return config

    def step(self):
        """
        Execute one step of the simulation.

        Does nothing once the fire has burned out.
        """
        if not self.running:
            return
        self.grid, self.fire_remains = advance(
            self.grid, self.config.spread_probability, self.random
        )
        self.step_count += 1
        self.running = self.fire_remains
        logger.debug(f"Step {self.step_count}: {self.grid.counts()}")
        if not self.fire_remains:
            logger.info(f"Fire extinguished after {self.step_count} steps")
        self._record()

    def run_to_completion(self, max_steps: int | None = None) -> int:
        """
        Step until no fire remains or ``max_steps`` steps have been taken.

        Returns:
            The step count reached
        """
        taken = 0
        while self.running and (max_steps is None or taken < max_steps):
            self.step()
            taken += 1
        return self.step_count

    def history(self) -> pd.DataFrame:
        """Per-state cell counts recorded since the last reset, one row per step."""
        return self.datacollector.get_model_vars_dataframe()

    def _record(self) -> None:
        self.datacollector.collect(self)
        state = self.state
        for observer in self._observers:
            observer(state)

    def __str__(self) -> str:
        return f"Step {self.step_count}\n{self.grid}"


def _counter(cell: Cell) -> Callable[[FireModel], int]:
    return lambda model: model.grid.count(cell)
