"""Board state representation and mutation helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from broadside.game.core.models import (
    BOARD_SIZE,
    AttackOutcome,
    Coord,
    Orientation,
    cells_for_placement,
)
from broadside.game.core.ship import Ship

logger = logging.getLogger(__name__)

_EMPTY = 0
_NO_SEGMENT = -1


@dataclass(frozen=True, slots=True)
class CellOccupant:
    """Non-owning reference from a grid cell to the ship segment it holds."""

    ship: Ship
    segment_index: int


@dataclass(frozen=True, slots=True)
class CellView:
    """Render-ready state of one cell."""

    occupied: bool
    ship_visible: bool
    hit: bool
    missed: bool


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only board view for presentation layers."""

    size: int
    cells: tuple[tuple[CellView, ...], ...]
    missed_attacks: tuple[Coord, ...]

    def cell(self, coord: Coord) -> CellView:
        return self.cells[coord.row][coord.col]


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state."""

    size: int = BOARD_SIZE
    ship_ids: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int16)
    )
    segments: np.ndarray = field(
        default_factory=lambda: np.full((BOARD_SIZE, BOARD_SIZE), _NO_SEGMENT, dtype=np.int16)
    )
    ships: dict[int, Ship] = field(default_factory=dict)
    _missed: list[Coord] = field(default_factory=list)
    _attacked: set[Coord] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.ship_ids.shape != (self.size, self.size):
            self.ship_ids = np.zeros((self.size, self.size), dtype=np.int16)
        if self.segments.shape != (self.size, self.size):
            self.segments = np.full((self.size, self.size), _NO_SEGMENT, dtype=np.int16)

    @property
    def missed_attacks(self) -> tuple[Coord, ...]:
        """Missed attacks in the order they were received."""
        return tuple(self._missed)

    @property
    def attacked_cells(self) -> frozenset[Coord]:
        return frozenset(self._attacked)

    @property
    def has_fleet(self) -> bool:
        return bool(self.ships)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def can_place(self, length: int, row: int, col: int, orientation: object) -> bool:
        """Return whether a ship of `length` fits at (row, col) without overlap.

        Unknown orientations fail the check instead of raising.
        """
        resolved = Orientation.parse(orientation)
        if resolved is None or length <= 0:
            return False
        for cell in cells_for_placement(length, Coord(row, col), resolved):
            if not self.in_bounds(cell):
                return False
            if self.ship_ids[cell.row, cell.col] != _EMPTY:
                return False
        return True

    def place_ship(self, ship: Ship, row: int, col: int, orientation: object) -> bool:
        """Place a ship on the board; on failure nothing is mutated."""
        if any(existing is ship for existing in self.ships.values()):
            return False
        resolved = Orientation.parse(orientation)
        if resolved is None or not self.can_place(ship.length, row, col, resolved):
            logger.debug(
                "placement_rejected length=%d row=%d col=%d orientation=%s",
                ship.length,
                row,
                col,
                orientation,
            )
            return False
        ship_id = len(self.ships) + 1
        for index, cell in enumerate(cells_for_placement(ship.length, Coord(row, col), resolved)):
            self.ship_ids[cell.row, cell.col] = ship_id
            self.segments[cell.row, cell.col] = index
        self.ships[ship_id] = ship
        return True

    def occupant_at(self, coord: Coord) -> CellOccupant | None:
        """Return the ship segment at a cell, or None for empty/out-of-range cells."""
        if not self.in_bounds(coord):
            return None
        ship_id = int(self.ship_ids[coord.row, coord.col])
        if ship_id == _EMPTY:
            return None
        return CellOccupant(
            ship=self.ships[ship_id],
            segment_index=int(self.segments[coord.row, coord.col]),
        )

    def occupancy_mask(self) -> np.ndarray:
        """Boolean copy of occupied cells."""
        return self.ship_ids != _EMPTY

    def was_attacked(self, coord: Coord) -> bool:
        return coord in self._attacked

    def receive_attack(self, row: int, col: int) -> AttackOutcome | None:
        """Resolve an attack; None means rejected (out of range or repeated)."""
        coord = Coord(row, col)
        if not self.in_bounds(coord):
            return None
        if coord in self._attacked:
            return None

        self._attacked.add(coord)
        occupant = self.occupant_at(coord)
        if occupant is None:
            self._missed.append(coord)
            return AttackOutcome.MISS
        occupant.ship.register_hit(occupant.segment_index)
        return AttackOutcome.HIT

    def all_sunk(self) -> bool:
        """Return whether every placed ship is sunk; vacuously true with no ships."""
        return all(ship.is_sunk() for ship in self.ships.values())

    def snapshot(self, *, reveal_ships: bool = True) -> BoardSnapshot:
        """Build a render view; hidden ships stay invisible until hit."""
        rows: list[tuple[CellView, ...]] = []
        for r in range(self.size):
            row_cells: list[CellView] = []
            for c in range(self.size):
                coord = Coord(r, c)
                occupied = self.ship_ids[r, c] != _EMPTY
                attacked = coord in self._attacked
                hit = bool(occupied and attacked)
                row_cells.append(
                    CellView(
                        occupied=bool(occupied),
                        ship_visible=bool(occupied and (reveal_ships or hit)),
                        hit=hit,
                        missed=bool(attacked and not occupied),
                    )
                )
            rows.append(tuple(row_cells))
        return BoardSnapshot(size=self.size, cells=tuple(rows), missed_attacks=self.missed_attacks)
