"""Build graphs and animators from JSON-compatible dicts.

Expected shape::

    {
        "default": "idle",
        "nodes": {
            "idle": {
                "clip": {"first": 0, "last": 6, "texture": "hero",
                         "frame_duration": 0.1, "has_exit_time": False},
                "has_exit_time": False,
                "transitions": [
                    {"target": "run",
                     "conditions": [{"op": "gt", "left": "speed", "right": 0.0}]},
                ],
            },
        },
    }

``has_exit_time`` on a node defaults to the clip's flag.
"""
from __future__ import annotations

from typing import Any

from tick_animgraph.animator import Animator, ErrorCallback, TransitionCallback
from tick_animgraph.conditions import (
    Condition,
    Equal,
    GreaterThan,
    LessThan,
    TriggerSet,
)
from tick_animgraph.config import AnimatorConfig
from tick_animgraph.graph import GraphNode, StateGraph, Transition
from tick_animgraph.types import AnimationClip, GraphDataError, InvalidRange

_COMPARISON_OPS: dict[str, type] = {
    "gt": GreaterThan,
    "lt": LessThan,
    "eq": Equal,
}


def condition_from_dict(data: dict[str, Any]) -> Condition:
    """Parse ``{"op": "gt"|"lt"|"eq", "left", "right"}`` or ``{"op": "trigger", "name"}``."""
    if not isinstance(data, dict):
        raise GraphDataError(f"Condition must be a mapping: {data!r}")
    op = data.get("op")
    if op == "trigger":
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise GraphDataError(f"Trigger condition needs a name: {data!r}")
        return TriggerSet(name)
    ctype = _COMPARISON_OPS.get(op) if isinstance(op, str) else None
    if ctype is None:
        raise GraphDataError(f"Unknown condition op {op!r}")
    left = data.get("left")
    right = data.get("right")
    if not isinstance(left, str):
        raise GraphDataError(f"Condition 'left' must be a variable name: {data!r}")
    if isinstance(right, bool) or not isinstance(right, (str, int, float)):
        raise GraphDataError(
            f"Condition 'right' must be a variable name or a number: {data!r}"
        )
    return ctype(left, right)


def conditions_from_list(items: list[dict[str, Any]]) -> tuple[Condition, ...]:
    if not isinstance(items, list):
        raise GraphDataError(f"Conditions must be a list, got {type(items).__name__}")
    return tuple(condition_from_dict(item) for item in items)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _clip_from_dict(node_id: str, data: Any) -> AnimationClip:
    if not isinstance(data, dict):
        raise GraphDataError(f"Node '{node_id}' is missing a 'clip' mapping")
    for key in ("first", "last"):
        if key not in data:
            raise GraphDataError(f"Clip of node '{node_id}' is missing {key!r}")
        if not isinstance(data[key], int) or isinstance(data[key], bool):
            raise GraphDataError(
                f"Clip of node '{node_id}': {key!r} must be an integer, got {data[key]!r}"
            )
    frame_duration = data.get("frame_duration", 0.1)
    if not _is_number(frame_duration):
        raise GraphDataError(
            f"Clip of node '{node_id}': 'frame_duration' must be a number, "
            f"got {frame_duration!r}"
        )
    try:
        return AnimationClip(
            first=data["first"],
            last=data["last"],
            texture=data.get("texture"),
            frame_duration=frame_duration,
            has_exit_time=bool(data.get("has_exit_time", False)),
        )
    except InvalidRange:
        raise
    except (TypeError, ValueError) as exc:
        raise GraphDataError(f"Clip of node '{node_id}': {exc}") from exc


def _node_from_dict(node_id: str, data: Any) -> GraphNode[AnimationClip]:
    if not isinstance(data, dict):
        raise GraphDataError(f"Node '{node_id}' must be a mapping")
    clip = _clip_from_dict(node_id, data.get("clip"))
    raw_transitions = data.get("transitions", [])
    if not isinstance(raw_transitions, list):
        raise GraphDataError(f"Transitions of node '{node_id}' must be a list")
    transitions = []
    for item in raw_transitions:
        if not isinstance(item, dict):
            raise GraphDataError(f"Transition of node '{node_id}' must be a mapping")
        if not isinstance(item.get("target"), str):
            raise GraphDataError(f"Transition of node '{node_id}' has no target")
        try:
            conditions = conditions_from_list(item.get("conditions", []))
        except GraphDataError as exc:
            raise GraphDataError(f"Node '{node_id}': {exc}") from exc
        transitions.append(Transition(target=item["target"], conditions=conditions))
    return GraphNode(
        payload=clip,
        transitions=tuple(transitions),
        has_exit_time=bool(data.get("has_exit_time", clip.has_exit_time)),
    )


def graph_from_dict(data: dict[str, Any]) -> StateGraph[AnimationClip]:
    """Build a StateGraph of AnimationClips. Validates every reference up front."""
    if not isinstance(data, dict):
        raise GraphDataError("Graph data must be a mapping")
    if "default" not in data:
        raise GraphDataError("Graph data has no 'default' node")
    default = data["default"]
    if not isinstance(default, str):
        raise GraphDataError(f"Graph 'default' must be a node id, got {default!r}")
    raw_nodes = data.get("nodes")
    if not isinstance(raw_nodes, dict) or not raw_nodes:
        raise GraphDataError("Graph data needs a non-empty 'nodes' mapping")
    nodes = {
        node_id: _node_from_dict(node_id, raw) for node_id, raw in raw_nodes.items()
    }
    return StateGraph(default, nodes)


def animator_from_dict(
    data: dict[str, Any],
    config: AnimatorConfig | None = None,
    on_transition: TransitionCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> Animator:
    """Build an Animator over ``graph_from_dict(data)``."""
    return Animator(
        graph_from_dict(data),
        config=config,
        on_transition=on_transition,
        on_error=on_error,
    )
