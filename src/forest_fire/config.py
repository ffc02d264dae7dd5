"""Parsing and validation of simulation configuration.

Raw input usually comes straight from a form or a command line, so every
field may arrive as a string. Validation is all-or-nothing: either a complete
:class:`Configuration` is returned or a :class:`ValidationError` is raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Tuple

from .constants import (
    COORD_SEPARATOR,
    DEFAULT_HEIGHT,
    DEFAULT_IGNITION_POINTS,
    DEFAULT_SPREAD_PROBABILITY,
    DEFAULT_WIDTH,
    MAX_DIMENSION,
    MIN_DIMENSION,
    POINT_SEPARATOR,
)

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class ValidationError(ValueError):
    """Raised when configuration input is malformed or out of range."""


@dataclass(frozen=True)
class Configuration:
    """Validated parameters of a single simulation run."""

    height: int
    width: int
    spread_probability: float
    ignition_points: Tuple[Point, ...] = ()

    @classmethod
    def default(cls) -> "Configuration":
        return cls(
            height=DEFAULT_HEIGHT,
            width=DEFAULT_WIDTH,
            spread_probability=DEFAULT_SPREAD_PROBABILITY,
            ignition_points=DEFAULT_IGNITION_POINTS,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "height": self.height,
            "width": self.width,
            "spread_probability": self.spread_probability,
            "ignition_points": format_ignition_points(self.ignition_points),
        }


def _parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def _parse_dimension(raw: Mapping[str, Any], key: str) -> int:
    if key not in raw:
        raise ValidationError(f"Missing required field: {key}")
    try:
        value = _parse_int(raw[key])
    except ValueError:
        raise ValidationError(f"{key} must be an integer, got {raw[key]!r}") from None
    if not MIN_DIMENSION <= value <= MAX_DIMENSION:
        raise ValidationError(
            f"{key} must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {value}"
        )
    return value


def _parse_probability(raw: Mapping[str, Any]) -> float:
    if "spread_probability" not in raw:
        raise ValidationError("Missing required field: spread_probability")
    value = raw["spread_probability"]
    try:
        if isinstance(value, bool):
            raise ValueError(value)
        probability = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"spread_probability must be a number, got {value!r}") from None
    # NaN fails this comparison as well
    if not 0.0 <= probability <= 1.0:
        raise ValidationError(
            f"spread_probability must be between 0 and 1, got {probability}"
        )
    return probability


def _parse_point(entry: str) -> Point:
    parts = entry.split(COORD_SEPARATOR)
    if len(parts) != 2:
        raise ValidationError(f"Invalid ignition point {entry!r}, expected 'row,col'")
    try:
        return _parse_int(parts[0]), _parse_int(parts[1])
    except ValueError:
        raise ValidationError(f"Invalid ignition point {entry!r}, expected 'row,col'") from None


def parse_ignition_points(text: str) -> Tuple[Point, ...]:
    """
    Parse an ignition string such as ``"0,0; 5,5"``.

    Entries are separated by ``;`` and may carry surrounding whitespace.
    Empty entries are skipped. A single malformed entry rejects the whole
    string.

    Returns:
        Tuple of (row, col) pairs in input order
    """
    points = []
    for entry in text.split(POINT_SEPARATOR):
        entry = entry.strip()
        if not entry:
            continue
        points.append(_parse_point(entry))
    return tuple(points)


def _coerce_points(value: Any) -> Tuple[Point, ...]:
    if isinstance(value, str):
        return parse_ignition_points(value)
    try:
        pairs = list(value)
    except TypeError:
        raise ValidationError(f"ignition_points must be a string or sequence, got {value!r}") from None
    points = []
    for pair in pairs:
        try:
            row, col = pair
            points.append((_parse_int(row), _parse_int(col)))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid ignition point {pair!r}, expected (row, col)") from None
    return tuple(points)


def format_ignition_points(points: Iterable[Point]) -> str:
    """Inverse of :func:`parse_ignition_points`."""
    return POINT_SEPARATOR.join(f"{row}{COORD_SEPARATOR}{col}" for row, col in points)


def parse_config(raw: Mapping[str, Any]) -> Configuration:
    """
    Validate raw user input into a Configuration.

    Fields are checked in order (height, width, spread_probability,
    ignition_points) and the first violation is reported. Ignition points
    are not checked against the grid bounds here; out-of-range points are
    dropped later when the grid is created.

    Args:
        raw: Mapping with the keys ``height``, ``width``,
            ``spread_probability`` and ``ignition_points``

    Raises:
        ValidationError: if any field is missing, malformed or out of range
    """
    height = _parse_dimension(raw, "height")
    width = _parse_dimension(raw, "width")
    probability = _parse_probability(raw)
    if "ignition_points" not in raw:
        raise ValidationError("Missing required field: ignition_points")
    points = _coerce_points(raw["ignition_points"])

    return Configuration(
        height=height,
        width=width,
        spread_probability=probability,
        ignition_points=points,
    )


def load_config(path: str | Path) -> Configuration:
    """
    Load a configuration from a JSON file.

    Keys missing from the file fall back to :meth:`Configuration.default`.
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"Configuration file {path} must contain a JSON object")

    raw = Configuration.default().to_dict()
    raw.update(data)
    config = parse_config(raw)
    logger.info(f"Loaded configuration from {path}: {config}")
    return config
