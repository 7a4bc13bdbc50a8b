"""Targeting strategy contract for autonomous players."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Set

from broadside.game.core.models import AttackOutcome, Coord


class AIStrategy(ABC):
    """Chooses attack coordinates from the owning player's own attack history."""

    @abstractmethod
    def choose_shot(self, attacked: Set[Coord]) -> Coord | None:
        """Return next coordinate to fire, or None when no legal move remains."""

    @abstractmethod
    def notify_result(
        self, coord: Coord, outcome: AttackOutcome, sunk: bool, attacked: Set[Coord]
    ) -> None:
        """Update strategy state with an accepted attack result."""
