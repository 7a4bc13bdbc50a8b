"""Placement-phase orchestration over match state."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto

from broadside.game.app.controller_state import MatchState
from broadside.game.app.state_machine import MatchMode, MatchPhase
from broadside.game.core.board import BoardState
from broadside.game.core.fleet import FleetPlacementError, place_fleet_randomly
from broadside.game.core.models import Orientation, ShipSpec
from broadside.game.core.ship import Ship

logger = logging.getLogger(__name__)

AUTONOMOUS_SEED_RETRIES = 10


class PlacementRejection(Enum):
    """Why a placement command was refused."""

    WRONG_PHASE = auto()
    NO_SELECTION = auto()
    INVALID_ORIENTATION = auto()
    OUT_OF_BOUNDS_OR_OVERLAP = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True, slots=True)
class PlacementResult:
    """Outcome of a placement command."""

    accepted: bool
    status: str
    reason: PlacementRejection | None = None
    placed: tuple[ShipSpec, ...] = ()
    completed: bool = False


def _rejected(reason: PlacementRejection, status: str) -> PlacementResult:
    return PlacementResult(accepted=False, status=status, reason=reason)


class PlacementFlowService:
    """Placement commands as orchestration helpers over MatchState."""

    @staticmethod
    def select_ship(state: MatchState, index: int) -> PlacementResult:
        if state.phase is not MatchPhase.PLACEMENT:
            return _rejected(PlacementRejection.WRONG_PHASE, "Ship placement is over.")
        if not 0 <= index < len(state.pending_queue):
            return _rejected(PlacementRejection.NO_SELECTION, "Please select a ship to place")
        state.selected_index = index
        spec = state.pending_queue[index]
        state.status = f"Selected {spec.name} ({spec.length})."
        return PlacementResult(accepted=True, status=state.status)

    @staticmethod
    def set_orientation(state: MatchState, value: object) -> PlacementResult:
        if state.phase is not MatchPhase.PLACEMENT:
            return _rejected(PlacementRejection.WRONG_PHASE, "Ship placement is over.")
        orientation = Orientation.parse(value)
        if orientation is None:
            return _rejected(
                PlacementRejection.INVALID_ORIENTATION,
                f"Unknown orientation {value!r}. Use horizontal or vertical.",
            )
        state.orientation = orientation
        state.status = f"Orientation: {orientation.value.lower()}."
        return PlacementResult(accepted=True, status=state.status)

    @staticmethod
    def place_selected(state: MatchState, row: int, col: int) -> PlacementResult:
        """Place the selected ship with its bow at (row, col)."""
        if state.phase is not MatchPhase.PLACEMENT:
            return _rejected(PlacementRejection.WRONG_PHASE, "Ship placement is over.")
        if not 0 <= state.selected_index < len(state.pending_queue):
            return _rejected(PlacementRejection.NO_SELECTION, "No ship selected")

        spec = state.pending_queue[state.selected_index]
        placer = state.placer
        if not placer.board.place_ship(Ship(spec.length), row, col, state.orientation):
            return _rejected(
                PlacementRejection.OUT_OF_BOUNDS_OR_OVERLAP,
                "Invalid ship placement. Try again.",
            )

        del state.pending_queue[state.selected_index]
        state.selected_index = 0
        logger.debug("ship_placed player=%s ship=%s row=%d col=%d", placer.name, spec.name, row, col)
        if state.pending_queue:
            state.status = f"Ship {spec.name} placed. Next: {state.pending_queue[0].name}."
        else:
            state.status = f"Ship {spec.name} placed. Fleet ready."
        return PlacementResult(
            accepted=True,
            status=state.status,
            placed=(spec,),
            completed=not state.pending_queue,
        )

    @staticmethod
    def place_remaining_randomly(state: MatchState, rng: random.Random) -> PlacementResult:
        """Seat every remaining ship of the placing player at random."""
        if state.phase is not MatchPhase.PLACEMENT:
            return _rejected(PlacementRejection.WRONG_PHASE, "Ship placement is over.")
        placer = state.placer
        remaining = list(state.pending_queue)
        try:
            placed = place_fleet_randomly(placer.board, remaining, rng)
        except FleetPlacementError as exc:
            logger.warning("random_placement_exhausted player=%s ship=%s", placer.name, exc.spec.name)
            state.pending_queue = remaining[len(exc.placed) :]
            state.selected_index = 0
            state.status = f"{exc} Redo the placement."
            return PlacementResult(
                accepted=False,
                status=state.status,
                reason=PlacementRejection.EXHAUSTED,
                placed=tuple(exc.placed),
            )

        state.pending_queue = []
        state.selected_index = 0
        state.status = "Ships placed randomly."
        return PlacementResult(accepted=True, status=state.status, placed=tuple(placed), completed=True)

    @staticmethod
    def complete_placement(state: MatchState, rng: random.Random) -> PlacementResult:
        """Hand over to the next placer or start combat once the queue is empty."""
        if state.mode is MatchMode.TWO_PLAYER and state.placer_index == 0:
            state.placer_index = 1
            state.pending_queue = list(state.fleet)
            state.selected_index = 0
            state.orientation = Orientation.HORIZONTAL
            state.status = f"{state.placer.name}: place your ships."
            return PlacementResult(accepted=True, status=state.status, completed=True)

        for index, player in enumerate(state.players):
            if player.is_autonomous() and not player.board.has_fleet:
                if not PlacementFlowService._seed_autonomous_fleet(state, index, rng):
                    return _rejected(
                        PlacementRejection.EXHAUSTED,
                        f"Could not place the fleet for {player.name}.",
                    )

        state.phase = MatchPhase.COMBAT
        state.active_index = 0
        state.status = "Game started! Fire at the enemy board."
        logger.info("phase_changed phase=%s generation=%d", state.phase.name, state.generation)
        return PlacementResult(accepted=True, status=state.status, completed=True)

    @staticmethod
    def _seed_autonomous_fleet(state: MatchState, index: int, rng: random.Random) -> bool:
        player = state.players[index]
        for attempt in range(AUTONOMOUS_SEED_RETRIES):
            try:
                place_fleet_randomly(player.board, state.fleet, rng)
            except FleetPlacementError:
                logger.warning("autonomous_seed_retry player=%s attempt=%d", player.name, attempt + 1)
                player.board = BoardState()
                continue
            return True
        return False
