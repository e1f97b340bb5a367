"""Animator - keeps a StateGraph and a FrameSequencer in step, one tick at a time."""
from __future__ import annotations

import logging
from typing import Callable

from tick_animgraph.config import AnimatorConfig
from tick_animgraph.graph import GraphNode, StateGraph
from tick_animgraph.sequencer import FrameSequencer
from tick_animgraph.types import AnimationClip, CycleDetected, Frame, UnknownNode

logger = logging.getLogger(__name__)

TransitionCallback = Callable[[str, str], None]
ErrorCallback = Callable[[CycleDetected], None]


class Animator:
    """Drives sprite playback for one entity.

    Each ``tick`` decides which node is active, restarts playback when
    the node changes, returns the frame to draw, then steps the
    sequencer. Nodes with exit time hold manual requests until their
    clip has shown its last frame; nodes without exit time cut at once.

    A request made with ``request_transition`` beats condition
    transitions: under exit time the conditions are not evaluated while
    a request is pending, and without exit time the request is applied
    first and conditions resolve from its target.
    """

    def __init__(
        self,
        graph: StateGraph[AnimationClip],
        config: AnimatorConfig | None = None,
        on_transition: TransitionCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._graph = graph
        self._config = config if config is not None else AnimatorConfig()
        self._on_transition = on_transition
        self._on_error = on_error
        self._sequencer: FrameSequencer | None = None
        self._pending: str | None = None
        self._clip_finished = False
        self._last_error: CycleDetected | None = None

    # --- Properties ---

    @property
    def graph(self) -> StateGraph[AnimationClip]:
        return self._graph

    @property
    def config(self) -> AnimatorConfig:
        return self._config

    @property
    def active(self) -> str:
        return self._graph.active

    @property
    def pending(self) -> str | None:
        return self._pending

    @property
    def sequencer(self) -> FrameSequencer | None:
        return self._sequencer

    @property
    def last_error(self) -> CycleDetected | None:
        """The loop detected during the most recent tick, if any."""
        return self._last_error

    def current_frame(self) -> int | None:
        """Frame index the next tick will show, or None before the first tick."""
        if self._sequencer is None:
            return None
        return self._sequencer.current()

    # --- Input ---

    def set_float(self, name: str, value: float) -> None:
        self._graph.set_float(name, value)

    def set_trigger(self, name: str) -> None:
        self._graph.set_trigger(name)

    def reset_triggers(self) -> None:
        self._graph.reset_triggers()

    def request_transition(self, target: str) -> None:
        """Ask to switch to ``target``, honouring the active node's exit time.

        Requesting the active node does nothing. Otherwise the request
        replaces any earlier one. Raises UnknownNode if ``target`` is not
        in the graph.
        """
        if not self._graph.has_node(target):
            raise UnknownNode(target)
        if target == self._graph.active:
            return
        self._pending = target

    def clear_pending(self) -> None:
        self._pending = None

    # --- Tick ---

    def tick(self, now: float | None = None) -> Frame:
        """Reconcile transitions, emit the current frame, then advance one frame."""
        graph = self._graph
        self._last_error = None
        if self._sequencer is None:
            self._resync()
        before = graph.active

        if not graph.active_node().has_exit_time:
            if self._pending is not None:
                graph.set_active(self._take_pending())
            if not self._holds_conditions():
                self._resolve()
            if graph.active != before:
                self._resync()
        else:
            may_resolve = (
                self._clip_finished or not self._config.exit_time_defers_conditions
            )
            if self._pending is None and may_resolve:
                self._resolve()
            if self._clip_finished:
                if self._pending is not None:
                    graph.set_active(self._take_pending())
                self._resync()
            elif graph.active != before:
                # A condition cut the clip short; the frame must come from the new clip.
                self._resync()

        sequencer = self._sequencer
        assert sequencer is not None
        active, clip = graph.get_active()
        frame = Frame(index=sequencer.current(), node=active, clip=clip, now=now)

        if active != before:
            logger.debug("Animator switched %s -> %s", before, active)
            if self._on_transition is not None:
                self._on_transition(before, active)

        self._clip_finished = sequencer.is_last_frame()
        sequencer.advance(1)
        return frame

    # --- Internals ---

    def _take_pending(self) -> str:
        target = self._pending
        assert target is not None
        self._pending = None
        return target

    def _holds_conditions(self) -> bool:
        """True when a just-entered exit-time node must not resolve yet."""
        return (
            self._config.exit_time_defers_conditions
            and self._graph.active_node().has_exit_time
        )

    def _resolve(self) -> None:
        halt_on = _has_exit_time if self._config.exit_time_defers_conditions else None
        try:
            self._graph.transition_until_halt(halt_on)
        except CycleDetected as exc:
            logger.warning("Ignoring transitions this tick: %s", exc)
            self._last_error = exc
            if self._config.restore_on_cycle:
                self._graph.set_active(exc.start)
            if self._on_error is not None:
                self._on_error(exc)

    def _resync(self) -> None:
        _, clip = self._graph.get_active()
        self._sequencer = FrameSequencer(clip.first, clip.last)
        self._clip_finished = False


def _has_exit_time(node: GraphNode[AnimationClip]) -> bool:
    return node.has_exit_time
