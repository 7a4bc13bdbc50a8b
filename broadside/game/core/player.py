"""Player ownership of a board, attack history and optional autonomous targeting."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from broadside.game.ai.hunt_target import HuntTargetAI
from broadside.game.ai.strategy import AIStrategy
from broadside.game.core.board import BoardState
from broadside.game.core.models import AttackOutcome, Coord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AttackReport:
    """Outcome of one attack attempt by a player."""

    outcome: AttackOutcome
    coord: Coord | None
    sunk: bool = False

    @property
    def accepted(self) -> bool:
        return self.outcome is not AttackOutcome.REJECTED

    @property
    def row(self) -> int | None:
        return None if self.coord is None else self.coord.row

    @property
    def col(self) -> int | None:
        return None if self.coord is None else self.coord.col


class Player:
    """A participant with its own board and attack history."""

    def __init__(
        self,
        name: str,
        is_autonomous: bool = False,
        *,
        rng: random.Random | None = None,
        strategy: AIStrategy | None = None,
    ) -> None:
        self.name = name
        self._is_autonomous = is_autonomous
        self.board = BoardState()
        self._history: set[Coord] = set()
        self._strategy: AIStrategy | None = None
        if is_autonomous:
            self._strategy = strategy if strategy is not None else HuntTargetAI(rng or random.Random())

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, is_autonomous={self._is_autonomous})"

    def is_autonomous(self) -> bool:
        return self._is_autonomous

    @property
    def strategy(self) -> AIStrategy | None:
        return self._strategy

    @property
    def attack_history(self) -> frozenset[Coord]:
        return frozenset(self._history)

    def has_attacked(self, coord: Coord) -> bool:
        return coord in self._history

    def attack(
        self, enemy_board: BoardState, row: int | None = None, col: int | None = None
    ) -> AttackReport:
        """Fire at the enemy board.

        Autonomous players ignore supplied coordinates. A REJECTED report leaves
        every piece of state untouched.
        """
        if self._strategy is not None:
            target = self._strategy.choose_shot(self._history | enemy_board.attacked_cells)
            if target is None:
                logger.info("attack_exhausted player=%s", self.name)
                return AttackReport(AttackOutcome.REJECTED, None)
        else:
            if row is None or col is None:
                return AttackReport(AttackOutcome.REJECTED, None)
            target = Coord(row, col)
            if target in self._history:
                return AttackReport(AttackOutcome.REJECTED, target)

        outcome = enemy_board.receive_attack(target.row, target.col)
        if outcome is None:
            return AttackReport(AttackOutcome.REJECTED, target)

        self._history.add(target)
        sunk = False
        if outcome is AttackOutcome.HIT:
            occupant = enemy_board.occupant_at(target)
            sunk = occupant is not None and occupant.ship.is_sunk()
        if self._strategy is not None:
            self._strategy.notify_result(
                target, outcome, sunk, self._history | enemy_board.attacked_cells
            )
        logger.debug(
            "attack player=%s row=%d col=%d outcome=%s sunk=%s",
            self.name,
            target.row,
            target.col,
            outcome.value,
            sunk,
        )
        return AttackReport(outcome, target, sunk)
