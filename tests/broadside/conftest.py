from __future__ import annotations

import random

import pytest

from broadside.game.app.controller import MatchController
from broadside.game.app.state_machine import MatchMode
from broadside.game.core.board import BoardState
from broadside.game.core.models import DEFAULT_FLEET, Orientation, ShipSpec
from broadside.game.core.ship import Ship

# One ship per even row, bow in column 0.
STANDARD_LAYOUT: tuple[tuple[ShipSpec, int, int, Orientation], ...] = tuple(
    (spec, index * 2, 0, Orientation.HORIZONTAL) for index, spec in enumerate(DEFAULT_FLEET)
)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def standard_layout() -> tuple[tuple[ShipSpec, int, int, Orientation], ...]:
    return STANDARD_LAYOUT


@pytest.fixture
def standard_board() -> BoardState:
    board = BoardState()
    for spec, row, col, orientation in STANDARD_LAYOUT:
        assert board.place_ship(Ship(spec.length), row, col, orientation)
    return board


@pytest.fixture
def controller_factory():
    def _make(
        seed: int = 1337,
        mode: MatchMode = MatchMode.VS_COMPUTER,
        ai_delay_seconds: float = 0.0,
    ) -> MatchController:
        return MatchController(random.Random(seed), mode=mode, ai_delay_seconds=ai_delay_seconds)

    return _make


@pytest.fixture
def place_standard_fleet():
    """Place the standard layout for whoever is currently placing."""

    def _place(controller: MatchController) -> None:
        controller.set_orientation(Orientation.HORIZONTAL)
        for _, row, col, _ in STANDARD_LAYOUT:
            controller.select_ship(0)
            result = controller.place_at(row, col)
            assert result.accepted, result.status

    return _place
