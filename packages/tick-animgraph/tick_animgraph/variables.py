"""VariableStore - named floats and one-shot triggers."""
from __future__ import annotations


class VariableStore:
    """Holds the float variables and armed triggers conditions read from.

    Floats are overwritten on every ``set_float``. Triggers stay armed
    until ``reset_triggers`` clears all of them at once.
    """

    def __init__(self) -> None:
        self._floats: dict[str, float] = {}
        self._triggers: set[str] = set()

    # --- Floats ---

    def set_float(self, name: str, value: float) -> None:
        self._floats[name] = float(value)

    def get_float(self, name: str) -> float | None:
        return self._floats.get(name)

    def floats(self) -> dict[str, float]:
        """Return a copy of all float variables."""
        return dict(self._floats)

    # --- Triggers ---

    def set_trigger(self, name: str) -> None:
        """Arm a trigger. Re-arming an armed trigger is a no-op."""
        self._triggers.add(name)

    def trigger_is_set(self, name: str) -> bool:
        return name in self._triggers

    def reset_triggers(self) -> None:
        self._triggers.clear()

    def triggers(self) -> frozenset[str]:
        """Return the names of all armed triggers."""
        return frozenset(self._triggers)
