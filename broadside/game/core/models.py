"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10


class InvalidLengthError(ValueError):
    """Raised when a ship is created with a non-positive length."""


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @classmethod
    def parse(cls, value: object) -> Orientation | None:
        """Resolve user-selectable orientation input, or None when unknown."""
        if isinstance(value, Orientation):
            return value
        if not isinstance(value, str):
            return None
        return _ORIENTATION_ALIASES.get(value.strip().lower())

    def toggled(self) -> Orientation:
        return Orientation.VERTICAL if self is Orientation.HORIZONTAL else Orientation.HORIZONTAL


_ORIENTATION_ALIASES: dict[str, Orientation] = {
    "horizontal": Orientation.HORIZONTAL,
    "h": Orientation.HORIZONTAL,
    "vertical": Orientation.VERTICAL,
    "v": Orientation.VERTICAL,
}


class AttackOutcome(StrEnum):
    """Result of a single attack."""

    HIT = "HIT"
    MISS = "MISS"
    REJECTED = "REJECTED"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    def neighbors(self) -> tuple[Coord, Coord, Coord, Coord]:
        """Orthogonal neighbors in north, south, west, east order."""
        return (
            Coord(self.row - 1, self.col),
            Coord(self.row + 1, self.col),
            Coord(self.row, self.col - 1),
            Coord(self.row, self.col + 1),
        )


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Named ship slot of a fleet."""

    name: str
    length: int


DEFAULT_FLEET: tuple[ShipSpec, ...] = (
    ShipSpec("Carrier", 5),
    ShipSpec("Battleship", 4),
    ShipSpec("Cruiser", 3),
    ShipSpec("Submarine", 3),
    ShipSpec("Destroyer", 2),
)


def in_bounds(coord: Coord, size: int = BOARD_SIZE) -> bool:
    """Return whether the coordinate lies on a square board."""
    return 0 <= coord.row < size and 0 <= coord.col < size


def cells_for_placement(length: int, bow: Coord, orientation: Orientation) -> list[Coord]:
    """Compute occupied cells for a ship placement, in segment order."""
    result: list[Coord] = []
    for i in range(length):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(bow.row, bow.col + i))
        else:
            result.append(Coord(bow.row + i, bow.col))
    return result
