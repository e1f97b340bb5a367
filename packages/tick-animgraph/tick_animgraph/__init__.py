"""tick-animgraph - Condition-gated sprite animation graphs for the tick engine."""
from __future__ import annotations

from tick_animgraph.animator import Animator
from tick_animgraph.conditions import (
    Condition,
    Equal,
    GreaterThan,
    LessThan,
    TriggerSet,
    evaluate,
    evaluate_all,
)
from tick_animgraph.config import AnimatorConfig
from tick_animgraph.graph import GraphNode, StateGraph, Transition
from tick_animgraph.loader import animator_from_dict, graph_from_dict
from tick_animgraph.pacing import FrameClock
from tick_animgraph.sequencer import FrameSequencer
from tick_animgraph.types import (
    AnimationClip,
    AnimGraphError,
    ConfigurationError,
    CycleDetected,
    Frame,
    GraphDataError,
    InvalidRange,
    UnknownDefaultNode,
    UnknownNode,
    UnknownTransitionTarget,
)
from tick_animgraph.variables import VariableStore

__all__ = [
    "Animator",
    "AnimatorConfig",
    "FrameClock",
    "StateGraph",
    "GraphNode",
    "Transition",
    "FrameSequencer",
    "VariableStore",
    "Condition",
    "GreaterThan",
    "LessThan",
    "Equal",
    "TriggerSet",
    "evaluate",
    "evaluate_all",
    "AnimationClip",
    "Frame",
    "graph_from_dict",
    "animator_from_dict",
    "AnimGraphError",
    "ConfigurationError",
    "UnknownDefaultNode",
    "UnknownNode",
    "UnknownTransitionTarget",
    "InvalidRange",
    "GraphDataError",
    "CycleDetected",
]
