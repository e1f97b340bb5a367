"""FrameSequencer - cyclic frame counter over an inclusive range."""
from __future__ import annotations

from tick_animgraph.types import InvalidRange


class FrameSequencer:
    """Walks the inclusive frame range ``first..last``, wrapping back to ``first``."""

    def __init__(self, first: int, last: int) -> None:
        if first > last:
            raise InvalidRange(first, last)
        self._first = first
        self._last = last
        self._length = last - first + 1
        self._offset = 0

    @property
    def first(self) -> int:
        return self._first

    @property
    def last(self) -> int:
        return self._last

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def range(self) -> tuple[int, int]:
        return (self._first, self._last)

    def length(self) -> int:
        return self._length

    def current(self) -> int:
        return self._first + self._offset

    def advance(self, steps: int = 1) -> int:
        """Move forward ``steps`` frames, wrapping to ``first``. Returns the new frame."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        self._offset = (self._offset + steps) % self._length
        return self.current()

    def is_last_frame(self) -> bool:
        return self._offset == self._length - 1
