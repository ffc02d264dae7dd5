import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class SequenceRandom:
    """Random source replaying fixed draws, recording how many were taken."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def sequence_random():
    """Factory for deterministic random sources."""
    return SequenceRandom


@pytest.fixture
def make_config():
    """Factory for validated configurations."""
    from forest_fire.config import Configuration

    def _make(height=5, width=5, p=1.0, points=((0, 0),)):
        return Configuration(
            height=height,
            width=width,
            spread_probability=p,
            ignition_points=tuple(points),
        )

    return _make
