#!/usr/bin/env python3
"""Console driver for the forest fire simulation.

Usage:
    python scripts/run_simulation.py --height 10 --width 10 \
        --probability 0.6 --ignition "0,0;5,5" --seed 42
    python scripts/run_simulation.py --config my_run.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import (
    Cell,
    Configuration,
    FireModel,
    SimulationState,
    ValidationError,
    format_ignition_points,
    load_config,
    parse_config,
)

logger = logging.getLogger(__name__)

SYMBOLS = {
    Cell.Tree: "🌲",
    Cell.Fire: "🔥",
    Cell.Ash: "⬛",
}


def print_state(state: SimulationState) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        state: Snapshot published by the model
    """
    grid = state.grid
    grid_str = ""
    for row in range(grid.height):
        for col in range(grid.width):
            grid_str += SYMBOLS[grid.cell_at(row, col)]
        grid_str += "\n"
    print(f"\n--- STEP {state.step_count} ---")
    print(grid_str)


def build_parser() -> argparse.ArgumentParser:
    defaults = Configuration.default()
    parser = argparse.ArgumentParser(description="Run a forest fire cellular automaton in the console.")
    parser.add_argument("--config", type=Path, help="JSON configuration file (overrides the other options)")
    parser.add_argument("--height", default=str(defaults.height), help="Grid height (5-100)")
    parser.add_argument("--width", default=str(defaults.width), help="Grid width (5-100)")
    parser.add_argument("--probability", default=str(defaults.spread_probability),
                        help="Spread probability per burning neighbour (0-1)")
    parser.add_argument("--ignition", default=format_ignition_points(defaults.ignition_points),
                        help='Ignition points as "row,col;row,col"')
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after this many steps")
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    return parser


def main() -> int:
    """Run the fire spread simulation."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args()

    try:
        if args.config is not None:
            config = load_config(args.config)
        else:
            config = parse_config({
                "height": args.height,
                "width": args.width,
                "spread_probability": args.probability,
                "ignition_points": args.ignition,
            })
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    print("--- CREATING MODEL ---")
    model = FireModel(config, seed=args.seed)
    if not args.quiet:
        print_state(model.state)
        model.subscribe(print_state)

    steps = model.run_to_completion(max_steps=args.max_steps)

    counts = model.grid.counts()
    if model.fire_remains:
        print(f"\nStopped after {steps} steps with fire still burning.")
    else:
        print(f"\nFire has been extinguished after {steps} steps.")
    print(f"Trees left: {counts['Tree']}, burned: {counts['Ash']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
