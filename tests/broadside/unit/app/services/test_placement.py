import random

from broadside.game.app.controller_state import WELCOME_STATUS, MatchState
from broadside.game.app.services.placement import PlacementFlowService, PlacementRejection
from broadside.game.app.state_machine import MatchMode, MatchPhase
from broadside.game.core.models import DEFAULT_FLEET, Orientation, ShipSpec
from broadside.game.core.player import Player


def _state(mode: MatchMode = MatchMode.VS_COMPUTER, fleet=DEFAULT_FLEET) -> MatchState:
    if mode is MatchMode.TWO_PLAYER:
        second = Player("Player 2")
    else:
        second = Player("Computer", is_autonomous=True, rng=random.Random(5))
    return MatchState(
        players=(Player("Player 1"), second),
        mode=mode,
        fleet=tuple(fleet),
        pending_queue=list(fleet),
    )


def test_select_ship_out_of_range_is_rejected_without_mutation() -> None:
    state = _state()
    result = PlacementFlowService.select_ship(state, 9)
    assert not result.accepted
    assert result.reason is PlacementRejection.NO_SELECTION
    assert result.status == "Please select a ship to place"
    assert state.selected_index == 0
    assert state.status == WELCOME_STATUS


def test_set_orientation_accepts_aliases_and_rejects_unknown() -> None:
    state = _state()
    assert PlacementFlowService.set_orientation(state, "v").accepted
    assert state.orientation is Orientation.VERTICAL

    result = PlacementFlowService.set_orientation(state, "diagonal")
    assert result.reason is PlacementRejection.INVALID_ORIENTATION
    assert state.orientation is Orientation.VERTICAL


def test_place_selected_consumes_queue_entry() -> None:
    state = _state()
    PlacementFlowService.select_ship(state, 1)
    result = PlacementFlowService.place_selected(state, 0, 0)
    assert result.accepted
    assert result.placed == (ShipSpec("Battleship", 4),)
    assert not result.completed
    assert ShipSpec("Battleship", 4) not in state.pending_queue
    assert state.selected_index == 0
    assert result.status == "Ship Battleship placed. Next: Carrier."


def test_place_selected_rejects_overlap_and_keeps_queue() -> None:
    state = _state()
    PlacementFlowService.place_selected(state, 0, 0)
    queue_before = list(state.pending_queue)
    result = PlacementFlowService.place_selected(state, 0, 3)
    assert result.reason is PlacementRejection.OUT_OF_BOUNDS_OR_OVERLAP
    assert result.status == "Invalid ship placement. Try again."
    assert state.pending_queue == queue_before


def test_place_selected_rejects_out_of_bounds() -> None:
    state = _state()
    result = PlacementFlowService.place_selected(state, 0, 7)
    assert result.reason is PlacementRejection.OUT_OF_BOUNDS_OR_OVERLAP
    assert not state.placer.board.has_fleet


def test_last_ship_marks_completion() -> None:
    state = _state(fleet=(ShipSpec("Destroyer", 2),))
    result = PlacementFlowService.place_selected(state, 4, 4)
    assert result.completed
    assert result.status == "Ship Destroyer placed. Fleet ready."


def test_place_remaining_randomly_places_everything() -> None:
    state = _state()
    PlacementFlowService.place_selected(state, 0, 0)
    result = PlacementFlowService.place_remaining_randomly(state, random.Random(11))
    assert result.accepted
    assert result.completed
    assert result.placed == DEFAULT_FLEET[1:]
    assert state.pending_queue == []
    assert len(state.placer.board.ships) == len(DEFAULT_FLEET)


def test_place_remaining_randomly_reports_exhaustion() -> None:
    fleet = (ShipSpec("Destroyer", 2), ShipSpec("Leviathan", 11))
    state = _state(fleet=fleet)
    result = PlacementFlowService.place_remaining_randomly(state, random.Random(2))
    assert not result.accepted
    assert result.reason is PlacementRejection.EXHAUSTED
    assert result.placed == (ShipSpec("Destroyer", 2),)
    assert state.pending_queue == [ShipSpec("Leviathan", 11)]
    assert state.status.endswith("Redo the placement.")
    assert state.phase is MatchPhase.PLACEMENT


def test_complete_placement_seeds_computer_and_starts_combat() -> None:
    state = _state()
    PlacementFlowService.place_remaining_randomly(state, random.Random(3))
    result = PlacementFlowService.complete_placement(state, random.Random(4))
    assert result.accepted
    assert state.phase is MatchPhase.COMBAT
    assert state.active_index == 0
    assert len(state.players[1].board.ships) == len(DEFAULT_FLEET)
    assert state.status == "Game started! Fire at the enemy board."


def test_complete_placement_hands_over_in_two_player_mode() -> None:
    state = _state(MatchMode.TWO_PLAYER)
    PlacementFlowService.place_remaining_randomly(state, random.Random(3))
    result = PlacementFlowService.complete_placement(state, random.Random(4))
    assert result.accepted
    assert state.phase is MatchPhase.PLACEMENT
    assert state.placer_index == 1
    assert state.pending_queue == list(DEFAULT_FLEET)
    assert state.status == "Player 2: place your ships."


def test_commands_are_rejected_outside_placement() -> None:
    state = _state()
    state.phase = MatchPhase.COMBAT
    for result in (
        PlacementFlowService.select_ship(state, 0),
        PlacementFlowService.set_orientation(state, "h"),
        PlacementFlowService.place_selected(state, 0, 0),
        PlacementFlowService.place_remaining_randomly(state, random.Random(1)),
    ):
        assert result.reason is PlacementRejection.WRONG_PHASE
    assert not state.placer.board.has_fleet
