"""Hero animation graph and animator factory."""
from __future__ import annotations

from typing import Callable

from tick_animgraph import Animator, AnimatorConfig, FrameClock, animator_from_dict

# 5x5 atlas, one row per clip.
# idle -> forward (when moving), forward -> idle (when still)
# idle/forward -> jump (on trigger), jump -> forward/idle (after landing)
# attack is only entered by request and always plays to the end.
HERO_GRAPH = {
    "default": "idle",
    "nodes": {
        "idle": {
            "clip": {"first": 0, "last": 4, "texture": "hero", "frame_duration": 0.15},
            "transitions": [
                {"target": "jump", "conditions": [{"op": "trigger", "name": "jump"}]},
                {"target": "forward", "conditions": [{"op": "gt", "left": "movement", "right": 0.0}]},
            ],
        },
        "forward": {
            "clip": {"first": 5, "last": 9, "texture": "hero", "frame_duration": 0.1},
            "transitions": [
                {"target": "jump", "conditions": [{"op": "trigger", "name": "jump"}]},
                {"target": "idle", "conditions": [{"op": "eq", "left": "movement", "right": 0.0}]},
            ],
        },
        "jump": {
            "clip": {"first": 10, "last": 14, "texture": "hero",
                     "frame_duration": 0.08, "has_exit_time": True},
            "transitions": [
                {"target": "forward", "conditions": [{"op": "gt", "left": "movement", "right": 0.0}]},
                {"target": "idle"},
            ],
        },
        "attack": {
            "clip": {"first": 15, "last": 19, "texture": "hero",
                     "frame_duration": 0.06, "has_exit_time": True},
            "transitions": [{"target": "idle"}],
        },
    },
}


def make_hero(
    on_transition: Callable[[str, str], None] | None = None,
) -> tuple[Animator, FrameClock]:
    animator = animator_from_dict(
        HERO_GRAPH,
        config=AnimatorConfig(exit_time_defers_conditions=True),
        on_transition=on_transition,
    )
    animator.set_float("movement", 0.0)
    return animator, FrameClock(animator)
