"""What-if runs over spread probabilities and seeds.

Each run gets its own FireModel and random source, so runs are
independent of one another.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

import pandas as pd

from .cell import Cell
from .config import Configuration, ValidationError
from .model import FireModel

logger = logging.getLogger(__name__)


def run_sweep(
    config: Configuration,
    probabilities: Iterable[float],
    seeds: Iterable[int],
    *,
    max_steps: int | None = None,
) -> pd.DataFrame:
    """
    Run one simulation per (probability, seed) pair to completion.

    Args:
        config: Base configuration; only the spread probability varies
        probabilities: Spread probabilities to try
        seeds: Seeds used for every probability
        max_steps: Optional cap on steps per run

    Returns:
        DataFrame with one row per run
    """
    seeds = list(seeds)
    rows = []
    total = config.height * config.width
    for p in probabilities:
        if not 0.0 <= p <= 1.0:
            raise ValidationError(f"spread_probability must be between 0 and 1, got {p}")
        run_config = replace(config, spread_probability=float(p))
        for seed in seeds:
            model = FireModel(run_config, seed=seed)
            steps = model.run_to_completion(max_steps=max_steps)
            counts = model.grid.counts()
            rows.append({
                "spread_probability": run_config.spread_probability,
                "seed": seed,
                "steps": steps,
                Cell.Tree.name: counts[Cell.Tree.name],
                Cell.Fire.name: counts[Cell.Fire.name],
                Cell.Ash.name: counts[Cell.Ash.name],
                "burned_fraction": counts[Cell.Ash.name] / total,
            })
        logger.info(f"Finished {len(seeds)} runs with p={run_config.spread_probability}")

    return pd.DataFrame(
        rows,
        columns=["spread_probability", "seed", "steps", "Tree", "Fire", "Ash", "burned_fraction"],
    )
