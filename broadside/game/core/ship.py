"""Per-segment damage tracking for a single vessel."""

from __future__ import annotations

import numpy as np

from broadside.game.core.models import InvalidLengthError


class Ship:
    """A ship of fixed length with one damage flag per segment."""

    __slots__ = ("_length", "_hit_mask")

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise InvalidLengthError(f"Ship length must be positive, got {length}.")
        self._length = int(length)
        self._hit_mask = np.zeros(self._length, dtype=np.bool_)

    def __repr__(self) -> str:
        return f"Ship(length={self._length}, hits={self.hits})"

    @property
    def length(self) -> int:
        return self._length

    @property
    def hits(self) -> int:
        """Number of damaged segments."""
        return int(np.count_nonzero(self._hit_mask))

    @property
    def hit_mask(self) -> tuple[bool, ...]:
        return tuple(bool(flag) for flag in self._hit_mask)

    def register_hit(self, segment_index: int) -> None:
        """Mark a segment damaged; out-of-range indices are ignored."""
        if 0 <= segment_index < self._length:
            self._hit_mask[segment_index] = True

    def is_hit_at(self, segment_index: int) -> bool:
        if not 0 <= segment_index < self._length:
            return False
        return bool(self._hit_mask[segment_index])

    def is_sunk(self) -> bool:
        return bool(self._hit_mask.all())
