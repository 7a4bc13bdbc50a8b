"""Typed UI state exposed by the controller."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.app.state_machine import MatchMode, MatchPhase
from broadside.game.core.board import BoardSnapshot
from broadside.game.core.models import Orientation, ShipSpec


@dataclass(frozen=True, slots=True)
class PlacementOptions:
    """Remaining fleet slots plus current selection for the placing player."""

    remaining: tuple[ShipSpec, ...]
    selected_index: int | None
    orientation: Orientation

    @property
    def selected(self) -> ShipSpec | None:
        if self.selected_index is None:
            return None
        return self.remaining[self.selected_index]


@dataclass(frozen=True, slots=True)
class MatchUIState:
    """View-ready state snapshot from one player's perspective."""

    phase: MatchPhase
    mode: MatchMode
    status: str
    viewer_name: str
    active_player_name: str
    winner_name: str | None
    placement: PlacementOptions | None
    own_board: BoardSnapshot
    enemy_board: BoardSnapshot
    reveal_enemy_fleet: bool
    awaiting_autonomous_move: bool
