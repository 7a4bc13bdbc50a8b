"""Match controller: the single command surface presentation layers talk to."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from broadside.game.app.controller_state import MatchState
from broadside.game.app.events import (
    AttackResolved,
    MatchEventBus,
    MatchFinished,
    MatchRestarted,
    PlacementCompleted,
    ShipPlaced,
)
from broadside.game.app.services.battle import (
    TurnResult,
    resolve_autonomous_attack,
    resolve_human_attack,
)
from broadside.game.app.services.placement import PlacementFlowService, PlacementResult
from broadside.game.app.services.state_projection import (
    build_ui_state,
    default_viewer_index,
    placement_options,
)
from broadside.game.app.state_machine import MatchMode, MatchPhase
from broadside.game.app.ui_state import MatchUIState, PlacementOptions
from broadside.game.core.board import BoardSnapshot
from broadside.game.core.models import DEFAULT_FLEET, ShipSpec
from broadside.game.core.player import Player
from broadside.game.infra.scheduler import Scheduler

logger = logging.getLogger(__name__)


class MatchController:
    """Owns both players and drives placement, combat and resolution.

    Every command runs synchronously and returns a typed result; rule
    violations come back as rejected results and never raise. The only
    deferred work is the autonomous player's move when `ai_delay_seconds`
    is positive, which runs on the owned scheduler and is cancelled by
    restart.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        mode: MatchMode = MatchMode.VS_COMPUTER,
        scheduler: Scheduler | None = None,
        ai_delay_seconds: float = 0.0,
        fleet: Sequence[ShipSpec] = DEFAULT_FLEET,
    ) -> None:
        if ai_delay_seconds < 0.0:
            raise ValueError("ai_delay_seconds must be >= 0")
        self._rng = rng or random.Random()
        self._mode = mode
        self._scheduler = scheduler or Scheduler()
        self._ai_delay_seconds = ai_delay_seconds
        self._fleet = tuple(fleet)
        self.events = MatchEventBus()
        self._state = self._new_state(generation=1)

    @property
    def phase(self) -> MatchPhase:
        return self._state.phase

    @property
    def mode(self) -> MatchMode:
        return self._mode

    @property
    def generation(self) -> int:
        return self._state.generation

    @property
    def players(self) -> tuple[Player, Player]:
        return self._state.players

    @property
    def active_player(self) -> Player:
        """The placing player during placement, otherwise the player whose turn it is."""
        if self._state.phase is MatchPhase.PLACEMENT:
            return self._state.placer
        return self._state.active_player

    @property
    def winner(self) -> Player | None:
        return self._state.winner

    @property
    def status(self) -> str:
        return self._state.status

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._state.history)

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def awaiting_autonomous_move(self) -> bool:
        return self._state.ai_task_id is not None

    def placement_options(self) -> PlacementOptions:
        return placement_options(self._state)

    def ui_state(self, viewer: Player | None = None) -> MatchUIState:
        viewer_index = default_viewer_index(self._state) if viewer is None else self._index_of(viewer)
        return build_ui_state(
            self._state, viewer_index, awaiting_autonomous=self.awaiting_autonomous_move
        )

    def board_snapshot(self, player: Player, *, reveal: bool) -> BoardSnapshot:
        return player.board.snapshot(reveal_ships=reveal)

    def select_ship(self, index: int) -> PlacementResult:
        return PlacementFlowService.select_ship(self._state, index)

    def set_orientation(self, value: object) -> PlacementResult:
        return PlacementFlowService.set_orientation(self._state, value)

    def place_at(self, row: int, col: int) -> PlacementResult:
        placer = self._state.placer
        result = PlacementFlowService.place_selected(self._state, row, col)
        return self._after_placement(placer, result)

    def place_randomly(self) -> PlacementResult:
        state = self._state
        if state.phase is MatchPhase.PLACEMENT and not state.pending_queue:
            return self._complete_placement(state.placer)
        placer = state.placer
        result = PlacementFlowService.place_remaining_randomly(state, self._rng)
        return self._after_placement(placer, result)

    def attack_at(self, row: int, col: int) -> TurnResult:
        """Resolve the active human's attack, then the autonomous reply if one is due."""
        attacker = self._state.active_player
        result = resolve_human_attack(self._state, row, col)
        if not result.accepted:
            return result
        self._publish_turn(attacker.name, result)
        if self._state.phase is not MatchPhase.COMBAT:
            return result
        if not self._state.active_player.is_autonomous():
            return result

        if self._ai_delay_seconds > 0.0:
            self._schedule_autonomous_turn()
            return result
        reply = self._run_autonomous_turn()
        return TurnResult(
            outcome=result.outcome,
            coord=result.coord,
            status=f"{result.status} {reply.status}",
            winner=reply.winner,
            sunk=result.sunk,
        )

    def advance(self, delta_seconds: float) -> int:
        """Advance the owned scheduler, running a due autonomous move."""
        return self._scheduler.advance(delta_seconds)

    def restart(self) -> None:
        """Discard the match and start a fresh placement phase."""
        if self._state.ai_task_id is not None:
            self._scheduler.cancel(self._state.ai_task_id)
        generation = self._state.generation + 1
        self._state = self._new_state(generation=generation)
        logger.info("match_restarted generation=%d", generation)
        self.events.publish(MatchRestarted(generation=generation))

    def _new_state(self, *, generation: int) -> MatchState:
        first = Player("Player 1", is_autonomous=False)
        if self._mode is MatchMode.TWO_PLAYER:
            second = Player("Player 2", is_autonomous=False)
        else:
            second = Player("Computer", is_autonomous=True, rng=self._rng)
        return MatchState(
            players=(first, second),
            mode=self._mode,
            fleet=self._fleet,
            generation=generation,
            pending_queue=list(self._fleet),
        )

    def _index_of(self, player: Player) -> int:
        for index, candidate in enumerate(self._state.players):
            if candidate is player:
                return index
        raise ValueError(f"{player!r} does not belong to this match")

    def _after_placement(self, placer: Player, result: PlacementResult) -> PlacementResult:
        for spec in result.placed:
            self.events.publish(ShipPlaced(player_name=placer.name, spec=spec))
        if not result.completed:
            return result
        completion = self._complete_placement(placer)
        return PlacementResult(
            accepted=completion.accepted,
            status=f"{result.status} {completion.status}",
            reason=completion.reason,
            placed=result.placed,
            completed=completion.accepted,
        )

    def _complete_placement(self, placer: Player) -> PlacementResult:
        completion = PlacementFlowService.complete_placement(self._state, self._rng)
        if completion.accepted:
            self.events.publish(
                PlacementCompleted(player_name=placer.name, next_phase=self._state.phase)
            )
        return completion

    def _schedule_autonomous_turn(self) -> None:
        generation = self._state.generation
        self._state.ai_task_id = self._scheduler.call_later(
            self._ai_delay_seconds,
            lambda: self._on_autonomous_turn_due(generation),
        )

    def _on_autonomous_turn_due(self, generation: int) -> None:
        if generation != self._state.generation:
            logger.debug("stale_autonomous_turn generation=%d", generation)
            return
        self._state.ai_task_id = None
        self._run_autonomous_turn()

    def _run_autonomous_turn(self) -> TurnResult:
        attacker = self._state.active_player
        result = resolve_autonomous_attack(self._state)
        if result.accepted:
            self._publish_turn(attacker.name, result)
        return result

    def _publish_turn(self, attacker_name: str, result: TurnResult) -> None:
        if result.coord is not None:
            self.events.publish(
                AttackResolved(
                    attacker_name=attacker_name,
                    coord=result.coord,
                    outcome=result.outcome,
                    sunk=result.sunk,
                )
            )
        if result.winner is not None:
            self.events.publish(MatchFinished(winner_name=result.winner))
