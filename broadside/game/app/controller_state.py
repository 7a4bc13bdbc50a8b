"""Mutable match state container."""

from __future__ import annotations

from dataclasses import dataclass, field

from broadside.game.app.state_machine import MatchMode, MatchPhase
from broadside.game.core.models import Orientation, ShipSpec
from broadside.game.core.player import Player

WELCOME_STATUS = "Welcome to Battleship! Place your ships on the board."


@dataclass(slots=True)
class MatchState:
    """Aggregates all mutable state owned by one MatchController generation."""

    players: tuple[Player, Player]
    mode: MatchMode
    fleet: tuple[ShipSpec, ...]
    generation: int = 1
    phase: MatchPhase = MatchPhase.PLACEMENT
    placer_index: int = 0
    active_index: int = 0
    pending_queue: list[ShipSpec] = field(default_factory=list)
    selected_index: int = 0
    orientation: Orientation = Orientation.HORIZONTAL
    winner_index: int | None = None
    status: str = WELCOME_STATUS
    ai_task_id: int | None = None
    history: list[str] = field(default_factory=list)

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    @property
    def opponent_index(self) -> int:
        return 1 - self.active_index

    @property
    def placer(self) -> Player:
        return self.players[self.placer_index]

    @property
    def winner(self) -> Player | None:
        if self.winner_index is None:
            return None
        return self.players[self.winner_index]
