"""Animator configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnimatorConfig:
    """Immutable options for Animator tick reconciliation.

    Attributes:
        exit_time_defers_conditions: When True, a node with exit time only
            evaluates its condition transitions once its clip has played
            its last frame. When False, condition transitions may cut an
            exit-time clip short; only manual requests wait.
        restore_on_cycle: When True, a transition loop detected during a
            tick puts the active node back where resolution started.
    """

    exit_time_defers_conditions: bool = False
    restore_on_cycle: bool = True
