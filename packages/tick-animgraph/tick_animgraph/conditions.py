"""Transition conditions and their evaluation against a VariableStore."""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Union

if TYPE_CHECKING:
    from tick_animgraph.variables import VariableStore

Operand = Union[str, float]


# --- Comparisons ---


@dataclass(frozen=True)
class GreaterThan:
    """True when ``left`` > ``right``. ``right`` is a variable name or a literal."""

    left: str
    right: Operand


@dataclass(frozen=True)
class LessThan:
    """True when ``left`` < ``right``. ``right`` is a variable name or a literal."""

    left: str
    right: Operand


@dataclass(frozen=True)
class Equal:
    """True when ``left`` == ``right``. ``right`` is a variable name or a literal."""

    left: str
    right: Operand


# --- Triggers ---


@dataclass(frozen=True)
class TriggerSet:
    """True while the named one-shot trigger is armed."""

    name: str


Condition = Union[GreaterThan, LessThan, Equal, TriggerSet]

_COMPARISONS: dict[type, Callable[[float, float], bool]] = {
    GreaterThan: operator.gt,
    LessThan: operator.lt,
    Equal: operator.eq,
}


def _resolve(operand: Operand, store: VariableStore) -> float | None:
    if isinstance(operand, str):
        return store.get_float(operand)
    return float(operand)


def evaluate(condition: Condition, store: VariableStore) -> bool:
    """Evaluate one condition. Missing variables make a comparison False."""
    if isinstance(condition, TriggerSet):
        return store.trigger_is_set(condition.name)
    compare = _COMPARISONS.get(type(condition))
    if compare is None:
        raise TypeError(f"Not a condition: {condition!r}")
    left = _resolve(condition.left, store)
    right = _resolve(condition.right, store)
    if left is None or right is None:
        return False
    return compare(left, right)


def evaluate_all(conditions: Iterable[Condition], store: VariableStore) -> bool:
    """AND over ``conditions``. Stops at the first False; empty is True."""
    for condition in conditions:
        if not evaluate(condition, store):
            return False
    return True
