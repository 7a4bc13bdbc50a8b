"""Match events and the in-process bus presentation layers subscribe to."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from broadside.game.app.state_machine import MatchPhase
from broadside.game.core.models import AttackOutcome, Coord, ShipSpec

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]


@dataclass(frozen=True, slots=True)
class ShipPlaced:
    player_name: str
    spec: ShipSpec


@dataclass(frozen=True, slots=True)
class PlacementCompleted:
    """A player's fleet is fully seated."""

    player_name: str
    next_phase: MatchPhase


@dataclass(frozen=True, slots=True)
class AttackResolved:
    attacker_name: str
    coord: Coord
    outcome: AttackOutcome
    sunk: bool


@dataclass(frozen=True, slots=True)
class MatchFinished:
    winner_name: str


@dataclass(frozen=True, slots=True)
class MatchRestarted:
    generation: int


class MatchEventBus:
    """Simple synchronous pub/sub keyed on event type."""

    def __init__(self) -> None:
        self._subscriptions: list[tuple[type[object], EventHandler]] = []

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> None:
        """Subscribe handler for an event type."""
        self._subscriptions.append((event_type, handler))

    def publish(self, event: object) -> int:
        """Publish one event and return number of invoked handlers."""
        invoked = 0
        for subscribed_type, handler in tuple(self._subscriptions):
            if isinstance(event, subscribed_type):
                handler(event)
                invoked += 1
        return invoked
