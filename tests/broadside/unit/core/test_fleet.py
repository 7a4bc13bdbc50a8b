import random

import pytest

from broadside.game.core.board import BoardState
from broadside.game.core.fleet import FleetPlacementError, place_fleet_randomly, place_ship_randomly
from broadside.game.core.models import DEFAULT_FLEET, ShipSpec


@pytest.mark.parametrize("seed", [0, 1, 7, 1337])
def test_standard_fleet_seats_without_overlap(seed: int) -> None:
    board = BoardState()
    placed = place_fleet_randomly(board, DEFAULT_FLEET, random.Random(seed))
    assert placed == list(DEFAULT_FLEET)
    assert len(board.ships) == 5
    assert int(board.occupancy_mask().sum()) == sum(spec.length for spec in DEFAULT_FLEET)


def test_single_ship_exhaustion_returns_none_and_leaves_board_empty() -> None:
    board = BoardState(size=3)
    assert place_ship_randomly(board, ShipSpec("Carrier", 5), random.Random(1)) is None
    assert not board.has_fleet


def test_fleet_exhaustion_keeps_earlier_ships_and_reports_failure() -> None:
    board = BoardState(size=3)
    specs = [ShipSpec("Destroyer", 2), ShipSpec("Carrier", 5)]
    with pytest.raises(FleetPlacementError) as excinfo:
        place_fleet_randomly(board, specs, random.Random(3), max_attempts=50)

    error = excinfo.value
    assert error.spec == ShipSpec("Carrier", 5)
    assert error.attempts == 50
    assert error.placed == [ShipSpec("Destroyer", 2)]
    assert len(board.ships) == 1
    assert int(board.occupancy_mask().sum()) == 2
    assert "Carrier" in str(error)
