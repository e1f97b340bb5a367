"""Shared types and error taxonomy for tick-animgraph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NodeId = str


class AnimGraphError(Exception):
    """Base class for all animation graph errors."""


class ConfigurationError(AnimGraphError, ValueError):
    """Raised when a graph, clip, or sequencer is built from bad data.

    Only raised at construction or mutation time, never from ``tick``.
    """


class UnknownDefaultNode(ConfigurationError):
    """Raised when the default node is not part of the node map."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Default node '{node_id}' not found in nodes")


class UnknownNode(ConfigurationError):
    """Raised when operating on a node id that is not in the graph."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' does not exist")


class UnknownTransitionTarget(ConfigurationError):
    """Raised when a transition points at a node that is not in the graph."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"Node '{source}' has a transition to unknown node '{target}'"
        )


class InvalidRange(ConfigurationError):
    """Raised when a frame range ends before it starts."""

    def __init__(self, first: int, last: int) -> None:
        self.first = first
        self.last = last
        super().__init__(f"Last frame {last} is before first frame {first}")


class GraphDataError(ConfigurationError):
    """Raised by the loader on malformed graph data."""


class CycleDetected(AnimGraphError):
    """Raised when transition resolution does not halt.

    ``start`` is the node that was active when resolution began and
    ``path`` lists every node visited, in order, starting with ``start``.
    """

    def __init__(self, start: str, path: list[str]) -> None:
        self.start = start
        self.path = path
        super().__init__(
            "Transition loop detected: " + " -> ".join(path)
        )


@dataclass(frozen=True)
class AnimationClip:
    """A contiguous run of frames in a texture atlas.

    Attributes:
        first: Index of the first frame in the atlas (inclusive).
        last: Index of the last frame in the atlas (inclusive).
        texture: Opaque atlas handle handed back to the renderer.
        frame_duration: Seconds each frame stays on screen.
        has_exit_time: Default exit-time policy for nodes built from this clip.
    """

    first: int
    last: int
    texture: Any = None
    frame_duration: float = 0.1
    has_exit_time: bool = False

    def __post_init__(self) -> None:
        if self.first < 0:
            raise ValueError(f"first frame must be >= 0, got {self.first}")
        if self.first > self.last:
            raise InvalidRange(self.first, self.last)
        if not self.frame_duration > 0:
            raise ValueError(
                f"frame_duration must be positive, got {self.frame_duration}"
            )

    @property
    def frame_range(self) -> tuple[int, int]:
        return (self.first, self.last)

    @property
    def length(self) -> int:
        return self.last - self.first + 1


@dataclass(frozen=True, slots=True)
class Frame:
    """What the renderer draws for one tick."""

    index: int
    node: NodeId
    clip: AnimationClip
    now: float | None = None
