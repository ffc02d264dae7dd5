"""Cell states for the forest fire automaton."""

from enum import Enum


class Cell(Enum):
    """Possible states of a forest cell.

    Transitions only go one way: Tree -> Fire -> Ash.
    """
    Tree = 0
    Fire = 1
    Ash = 2

    @property
    def symbol(self) -> str:
        """Single letter used in text dumps of a grid."""
        return self.name[0]

    @property
    def label(self) -> str:
        return self.name.upper()
