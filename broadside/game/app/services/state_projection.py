"""UI state projection helpers for controller snapshots."""

from __future__ import annotations

from broadside.game.app.controller_state import MatchState
from broadside.game.app.state_machine import MatchPhase
from broadside.game.app.ui_state import MatchUIState, PlacementOptions


def placement_options(state: MatchState) -> PlacementOptions:
    """Remaining fleet slots, selection and orientation of the placing player."""
    remaining = tuple(state.pending_queue)
    selected = state.selected_index if 0 <= state.selected_index < len(remaining) else None
    return PlacementOptions(remaining=remaining, selected_index=selected, orientation=state.orientation)


def default_viewer_index(state: MatchState) -> int:
    """Index of the human whose perspective the UI should show."""
    if state.phase is MatchPhase.PLACEMENT:
        return state.placer_index
    if state.active_player.is_autonomous():
        return state.opponent_index
    return state.active_index


def build_ui_state(state: MatchState, viewer_index: int, *, awaiting_autonomous: bool) -> MatchUIState:
    """Build MatchUIState; the opponent fleet is revealed only once the match is over."""
    viewer = state.players[viewer_index]
    opponent = state.players[1 - viewer_index]
    reveal = state.phase is MatchPhase.FINISHED
    if state.phase is MatchPhase.PLACEMENT:
        active_name = state.placer.name
    else:
        active_name = state.active_player.name
    return MatchUIState(
        phase=state.phase,
        mode=state.mode,
        status=state.status,
        viewer_name=viewer.name,
        active_player_name=active_name,
        winner_name=state.winner.name if state.winner is not None else None,
        placement=placement_options(state) if state.phase is MatchPhase.PLACEMENT else None,
        own_board=viewer.board.snapshot(reveal_ships=True),
        enemy_board=opponent.board.snapshot(reveal_ships=reveal),
        reveal_enemy_fleet=reveal,
        awaiting_autonomous_move=awaiting_autonomous,
    )
