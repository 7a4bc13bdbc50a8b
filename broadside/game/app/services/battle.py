"""Combat flow orchestration separated from the controller."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from broadside.game.app.controller_state import MatchState
from broadside.game.app.state_machine import MatchPhase
from broadside.game.core.models import AttackOutcome, Coord
from broadside.game.core.player import AttackReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of one attack command."""

    outcome: AttackOutcome
    coord: Coord | None
    status: str
    winner: str | None = None
    sunk: bool = False

    @property
    def accepted(self) -> bool:
        return self.outcome is not AttackOutcome.REJECTED


def resolve_human_attack(state: MatchState, row: int, col: int) -> TurnResult:
    """Apply the active human player's attack on the opponent board."""
    if state.phase is not MatchPhase.COMBAT:
        return _reject(None, "The battle is not in progress.")
    attacker = state.active_player
    if attacker.is_autonomous():
        return _reject(None, "Wait for your turn.")

    report = attacker.attack(state.players[state.opponent_index].board, row, col)
    if not report.accepted:
        if report.coord is not None and attacker.has_attacked(report.coord):
            return _reject(report.coord, "You already attacked that position")
        return _reject(report.coord, "Invalid target. Choose another enemy cell.")
    return _apply_report(state, report)


def resolve_autonomous_attack(state: MatchState) -> TurnResult:
    """Let the active autonomous player pick and fire its own target."""
    if state.phase is not MatchPhase.COMBAT:
        return _reject(None, "The battle is not in progress.")
    attacker = state.active_player
    if not attacker.is_autonomous():
        return _reject(None, f"{attacker.name} is not autonomous.")

    report = attacker.attack(state.players[state.opponent_index].board)
    if not report.accepted:
        logger.warning("autonomous_attack_rejected player=%s", attacker.name)
        return _reject(report.coord, f"{attacker.name} has no legal move left.")
    return _apply_report(state, report)


def _apply_report(state: MatchState, report: AttackReport) -> TurnResult:
    attacker = state.active_player
    defender = state.players[state.opponent_index]
    message = _describe(attacker.name, report)
    state.history.append(message)

    if defender.board.has_fleet and defender.board.all_sunk():
        state.phase = MatchPhase.FINISHED
        state.winner_index = state.active_index
        state.status = f"{message} {attacker.name} wins."
        logger.info(
            "match_finished winner=%s generation=%d shots=%d",
            attacker.name,
            state.generation,
            len(attacker.attack_history),
        )
        return TurnResult(report.outcome, report.coord, state.status, attacker.name, report.sunk)

    state.active_index = state.opponent_index
    state.status = message
    return TurnResult(report.outcome, report.coord, state.status, None, report.sunk)


def _describe(name: str, report: AttackReport) -> str:
    coord = report.coord
    if report.outcome is AttackOutcome.MISS:
        return f"{name} fired at ({coord.row}, {coord.col}): miss."
    if report.sunk:
        return f"{name} fired at ({coord.row}, {coord.col}): hit and sunk!"
    return f"{name} fired at ({coord.row}, {coord.col}): hit."


def _reject(coord: Coord | None, status: str) -> TurnResult:
    return TurnResult(AttackOutcome.REJECTED, coord, status, None)
