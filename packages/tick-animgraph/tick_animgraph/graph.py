"""StateGraph - condition-gated node graph with halting transition resolution."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Iterable, Mapping, TypeVar

from tick_animgraph.conditions import Condition, evaluate_all
from tick_animgraph.types import (
    CycleDetected,
    UnknownDefaultNode,
    UnknownNode,
    UnknownTransitionTarget,
)
from tick_animgraph.variables import VariableStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Transition:
    """Edge to ``target``. Fires when every condition holds (empty fires always)."""

    target: str
    conditions: tuple[Condition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but store an immutable tuple.
        object.__setattr__(self, "conditions", tuple(self.conditions))


@dataclass(frozen=True)
class GraphNode(Generic[T]):
    """A state carrying a payload and its transitions in priority order."""

    payload: T
    transitions: tuple[Transition, ...] = field(default_factory=tuple)
    has_exit_time: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "transitions", tuple(self.transitions))


class StateGraph(Generic[T]):
    """Guarded finite state machine over string node ids.

    Transitions are checked in list order and the first one whose
    conditions all hold wins. Every transition target is validated when
    the node is inserted, so traversal never meets a dangling edge.
    """

    def __init__(self, default: str, nodes: Mapping[str, GraphNode[T]]) -> None:
        if default not in nodes:
            raise UnknownDefaultNode(default)
        self._nodes: dict[str, GraphNode[T]] = {
            node_id: GraphNode(node.payload, node.transitions, node.has_exit_time)
            for node_id, node in nodes.items()
        }
        for node_id, node in self._nodes.items():
            self._validate_targets(node_id, node.transitions)
        self._active = default
        self._variables = VariableStore()

    # --- Properties ---

    @property
    def active(self) -> str:
        return self._active

    @property
    def variables(self) -> VariableStore:
        return self._variables

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    # --- Node access ---

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def node(self, node_id: str) -> GraphNode[T]:
        """Look up a node. Raises UnknownNode if absent."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNode(node_id) from None

    def node_ids(self) -> list[str]:
        return list(self._nodes)

    def get_active(self) -> tuple[str, T]:
        """Return ``(active_id, active_payload)``."""
        return self._active, self._nodes[self._active].payload

    def active_node(self) -> GraphNode[T]:
        return self._nodes[self._active]

    # --- Mutation ---

    def set_active(self, node_id: str) -> None:
        """Make ``node_id`` active without checking any transition."""
        if node_id not in self._nodes:
            raise UnknownNode(node_id)
        self._active = node_id

    def insert_or_replace_node(
        self,
        node_id: str,
        payload: T,
        transitions: Iterable[Transition] = (),
        has_exit_time: bool = False,
    ) -> None:
        """Add a node or replace an existing one wholesale.

        A node may list itself as a target. Any other target must
        already be in the graph.
        """
        transitions = tuple(transitions)
        self._validate_targets(node_id, transitions, extra=node_id)
        self._nodes[node_id] = GraphNode(
            payload=payload, transitions=transitions, has_exit_time=has_exit_time,
        )

    def set_transitions(self, node_id: str, transitions: Iterable[Transition]) -> None:
        """Replace the transition list of an existing node."""
        node = self.node(node_id)
        transitions = tuple(transitions)
        self._validate_targets(node_id, transitions)
        self._nodes[node_id] = replace(node, transitions=transitions)

    # --- Variables ---

    def set_float(self, name: str, value: float) -> None:
        self._variables.set_float(name, value)

    def set_trigger(self, name: str) -> None:
        self._variables.set_trigger(name)

    def reset_triggers(self) -> None:
        self._variables.reset_triggers()

    # --- Resolution ---

    def attempt_single_transition(self) -> bool:
        """Take the first satisfied transition of the active node, if any."""
        for transition in self._nodes[self._active].transitions:
            if evaluate_all(transition.conditions, self._variables):
                self._active = transition.target
                return True
        return False

    def transition_until_halt(
        self, halt_on: Callable[[GraphNode[T]], bool] | None = None,
    ) -> bool:
        """Follow satisfied transitions until none holds.

        Triggers are reset after the first hop, so a trigger can gate at
        most one hop per call. After that first hop at most ``len(self)``
        further hops are allowed; exhausting them raises CycleDetected.
        If ``halt_on`` is given, resolution also stops as soon as it
        enters a node for which ``halt_on(node)`` is True.
        Returns whether any transition happened.
        """
        start = self._active
        if not self.attempt_single_transition():
            return False
        self._variables.reset_triggers()

        path = [start, self._active]
        for _ in range(len(self._nodes)):
            if halt_on is not None and halt_on(self._nodes[self._active]):
                break
            if not self.attempt_single_transition():
                break
            path.append(self._active)
        else:
            raise CycleDetected(start, path)
        logger.debug("Resolved %s", " -> ".join(path))
        return True

    # --- Validation ---

    def _validate_targets(
        self,
        source: str,
        transitions: Iterable[Transition],
        extra: str | None = None,
    ) -> None:
        for transition in transitions:
            if transition.target not in self._nodes and transition.target != extra:
                raise UnknownTransitionTarget(source, transition.target)
