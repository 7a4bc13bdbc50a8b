"""Hunt/Target AI strategy: random search with depth-first follow-up on hits."""

from __future__ import annotations

import logging
import random
from collections.abc import Set

from broadside.game.ai.strategy import AIStrategy
from broadside.game.core.models import BOARD_SIZE, AttackOutcome, Coord, in_bounds

logger = logging.getLogger(__name__)

MAX_RANDOM_ATTEMPTS = 100


class HuntTargetAI(AIStrategy):
    """Random hunt that switches to neighbor probing after a hit.

    Neighbors are stacked north, south, west, east, so the east neighbor of the
    latest hit is tried first. Sinking a ship drops every pending candidate.
    """

    def __init__(
        self,
        rng: random.Random,
        size: int = BOARD_SIZE,
        max_random_attempts: int = MAX_RANDOM_ATTEMPTS,
    ) -> None:
        self._rng = rng
        self._size = size
        self._max_random_attempts = max_random_attempts
        self._pending: list[Coord] = []

    @property
    def pending_targets(self) -> tuple[Coord, ...]:
        """Queued candidates, next to be tried last."""
        return tuple(self._pending)

    def choose_shot(self, attacked: Set[Coord]) -> Coord | None:
        while self._pending:
            coord = self._pending.pop()
            if in_bounds(coord, self._size) and coord not in attacked:
                logger.debug("ai_target row=%d col=%d", coord.row, coord.col)
                return coord

        for _ in range(self._max_random_attempts):
            coord = Coord(self._rng.randrange(self._size), self._rng.randrange(self._size))
            if coord not in attacked:
                return coord

        for row in range(self._size):
            for col in range(self._size):
                coord = Coord(row, col)
                if coord not in attacked:
                    logger.debug("ai_scan_fallback row=%d col=%d", row, col)
                    return coord
        return None

    def notify_result(
        self, coord: Coord, outcome: AttackOutcome, sunk: bool, attacked: Set[Coord]
    ) -> None:
        if outcome is not AttackOutcome.HIT:
            return
        if sunk:
            self._pending.clear()
            return
        for cell in coord.neighbors():
            if not in_bounds(cell, self._size):
                continue
            if cell in attacked:
                continue
            self._pending.append(cell)
