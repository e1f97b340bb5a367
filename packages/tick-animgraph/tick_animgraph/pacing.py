"""FrameClock - turns host timestamps into Animator ticks."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_animgraph.animator import Animator
    from tick_animgraph.types import Frame


class FrameClock:
    """Ticks an Animator once per ``frame_duration`` of the active clip.

    The clock never reads wall time. The host passes monotonic
    timestamps (seconds) to ``update``. When the host falls behind, at
    most ``max_catch_up`` ticks run in one update and the remaining lag
    is dropped.
    """

    def __init__(self, animator: Animator, max_catch_up: int = 5) -> None:
        if max_catch_up <= 0:
            raise ValueError("max_catch_up must be positive")
        self._animator = animator
        self._max_catch_up = max_catch_up
        self._frame_start: float | None = None

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def max_catch_up(self) -> int:
        return self._max_catch_up

    @property
    def frame_start(self) -> float | None:
        """Timestamp at which the most recently emitted frame became due."""
        return self._frame_start

    def update(self, now: float) -> list[Frame]:
        """Run every tick that is due at ``now``. Returns the emitted frames."""
        if self._frame_start is None:
            self._frame_start = now
            return [self._animator.tick(now)]

        frames: list[Frame] = []
        while len(frames) < self._max_catch_up:
            _, clip = self._animator.graph.get_active()
            due = self._frame_start + clip.frame_duration
            if now < due:
                return frames
            self._frame_start = due
            frames.append(self._animator.tick(now))

        _, clip = self._animator.graph.get_active()
        if now >= self._frame_start + clip.frame_duration:
            # Still behind after the cap: drop the backlog.
            self._frame_start = now
        return frames

    def reset(self) -> None:
        self._frame_start = None
