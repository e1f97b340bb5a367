"""Tests for VariableStore."""
from tick_animgraph import VariableStore


class TestFloats:
    """Float variable storage."""

    def test_missing_float_is_none(self):
        store = VariableStore()
        assert store.get_float("speed") is None

    def test_set_and_get(self):
        store = VariableStore()
        store.set_float("speed", 2.5)
        assert store.get_float("speed") == 2.5

    def test_set_overwrites(self):
        store = VariableStore()
        store.set_float("speed", 1.0)
        store.set_float("speed", -3.0)
        assert store.get_float("speed") == -3.0

    def test_ints_are_stored_as_floats(self):
        store = VariableStore()
        store.set_float("hp", 10)
        assert isinstance(store.get_float("hp"), float)

    def test_floats_returns_copy(self):
        store = VariableStore()
        store.set_float("a", 1.0)
        snapshot = store.floats()
        snapshot["a"] = 99.0
        assert store.get_float("a") == 1.0


class TestTriggers:
    """One-shot trigger storage."""

    def test_unset_trigger_is_false(self):
        store = VariableStore()
        assert store.trigger_is_set("jump") is False

    def test_set_trigger(self):
        store = VariableStore()
        store.set_trigger("jump")
        assert store.trigger_is_set("jump") is True

    def test_set_trigger_is_idempotent(self):
        store = VariableStore()
        store.set_trigger("jump")
        store.set_trigger("jump")
        assert store.triggers() == frozenset({"jump"})

    def test_reset_clears_all_triggers(self):
        store = VariableStore()
        store.set_trigger("jump")
        store.set_trigger("attack")
        store.reset_triggers()
        assert store.trigger_is_set("jump") is False
        assert store.trigger_is_set("attack") is False
        assert store.triggers() == frozenset()

    def test_reset_leaves_floats_alone(self):
        store = VariableStore()
        store.set_float("speed", 1.0)
        store.set_trigger("jump")
        store.reset_triggers()
        assert store.get_float("speed") == 1.0

    def test_triggers_and_floats_are_separate_namespaces(self):
        store = VariableStore()
        store.set_trigger("x")
        assert store.get_float("x") is None
        store.set_float("y", 1.0)
        assert store.trigger_is_set("y") is False
