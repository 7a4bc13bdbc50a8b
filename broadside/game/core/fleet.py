"""Random fleet placement."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from broadside.game.core.board import BoardState
from broadside.game.core.models import ShipSpec
from broadside.game.core.ship import Ship

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 200


class FleetPlacementError(RuntimeError):
    """Raised when a ship cannot be seated within the attempt cap."""

    def __init__(self, spec: ShipSpec, attempts: int, placed: list[ShipSpec]) -> None:
        super().__init__(f"Could not place {spec.name} after {attempts} attempts.")
        self.spec = spec
        self.attempts = attempts
        self.placed = placed


def place_ship_randomly(
    board: BoardState,
    spec: ShipSpec,
    rng: random.Random,
    *,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Ship | None:
    """Try uniform-random positions for one ship; None when the cap is exhausted."""
    ship = Ship(spec.length)
    for _ in range(max_attempts):
        row = rng.randrange(board.size)
        col = rng.randrange(board.size)
        orientation = rng.choice(("horizontal", "vertical"))
        if board.place_ship(ship, row, col, orientation):
            logger.debug(
                "random_placement ship=%s row=%d col=%d orientation=%s",
                spec.name,
                row,
                col,
                orientation,
            )
            return ship
    return None


def place_fleet_randomly(
    board: BoardState,
    specs: Iterable[ShipSpec],
    rng: random.Random,
    *,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> list[ShipSpec]:
    """Place every spec at random, in order.

    Ships seated before a failure stay on the board; the failing ship leaves no
    trace. Returns the placed specs, or raises FleetPlacementError.
    """
    placed: list[ShipSpec] = []
    for spec in specs:
        if place_ship_randomly(board, spec, rng, max_attempts=max_attempts) is None:
            raise FleetPlacementError(spec, max_attempts, placed)
        placed.append(spec)
    return placed
