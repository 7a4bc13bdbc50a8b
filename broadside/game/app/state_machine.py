"""Match phases and modes."""

from enum import Enum, auto


class MatchPhase(Enum):
    """Match phases; transitions only move forward until restart."""

    PLACEMENT = auto()
    COMBAT = auto()
    FINISHED = auto()


class MatchMode(Enum):
    """Who sits on the second side of the table."""

    VS_COMPUTER = auto()
    TWO_PLAYER = auto()
