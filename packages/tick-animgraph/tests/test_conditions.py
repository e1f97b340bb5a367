"""Tests for condition evaluation."""
import pytest

from tick_animgraph import (
    Equal,
    GreaterThan,
    LessThan,
    TriggerSet,
    VariableStore,
    evaluate,
    evaluate_all,
)


def _store(**floats):
    store = VariableStore()
    for name, value in floats.items():
        store.set_float(name, value)
    return store


class TestComparisonsAgainstLiterals:
    """Variable compared with a literal threshold."""

    def test_greater_than(self):
        store = _store(speed=1.0)
        assert evaluate(GreaterThan("speed", 0.0), store) is True
        assert evaluate(GreaterThan("speed", 1.0), store) is False

    def test_less_than(self):
        store = _store(speed=1.0)
        assert evaluate(LessThan("speed", 2.0), store) is True
        assert evaluate(LessThan("speed", 1.0), store) is False

    def test_equal(self):
        store = _store(speed=0.0)
        assert evaluate(Equal("speed", 0.0), store) is True
        assert evaluate(Equal("speed", 0.5), store) is False

    def test_int_literal(self):
        store = _store(hp=3.0)
        assert evaluate(Equal("hp", 3), store) is True

    def test_missing_variable_is_false(self):
        store = VariableStore()
        assert evaluate(GreaterThan("speed", 0.0), store) is False
        assert evaluate(LessThan("speed", 0.0), store) is False
        assert evaluate(Equal("speed", 0.0), store) is False


class TestComparisonsBetweenVariables:
    """Two named variables compared with each other."""

    def test_equal_variables(self):
        store = _store(V1=0.0, V2=0.0)
        assert evaluate(Equal("V1", "V2"), store) is True

    def test_unequal_variables(self):
        store = _store(V1=0.0, V2=1.0)
        assert evaluate(Equal("V1", "V2"), store) is False
        assert evaluate(LessThan("V1", "V2"), store) is True
        assert evaluate(GreaterThan("V2", "V1"), store) is True

    def test_either_missing_is_false(self):
        store = _store(V1=0.0)
        assert evaluate(Equal("V1", "V2"), store) is False
        assert evaluate(Equal("V2", "V1"), store) is False


class TestTriggerCondition:
    """TriggerSet reads the armed set."""

    def test_unarmed(self):
        assert evaluate(TriggerSet("jump"), VariableStore()) is False

    def test_armed(self):
        store = VariableStore()
        store.set_trigger("jump")
        assert evaluate(TriggerSet("jump"), store) is True

    def test_float_with_same_name_does_not_arm(self):
        store = _store(jump=1.0)
        assert evaluate(TriggerSet("jump"), store) is False


class TestEvaluateAll:
    """AND over a condition sequence."""

    def test_empty_is_true(self):
        assert evaluate_all([], VariableStore()) is True

    def test_all_true(self):
        store = _store(speed=1.0)
        store.set_trigger("jump")
        assert evaluate_all([GreaterThan("speed", 0.0), TriggerSet("jump")], store) is True

    def test_one_false(self):
        store = _store(speed=1.0)
        assert evaluate_all([GreaterThan("speed", 0.0), TriggerSet("jump")], store) is False

    def test_short_circuits_on_first_false(self):
        store = VariableStore()
        # The second entry is not a condition; reaching it would raise.
        assert evaluate_all([TriggerSet("jump"), object()], store) is False

    def test_unknown_condition_type_raises(self):
        with pytest.raises(TypeError):
            evaluate(object(), VariableStore())

    def test_conditions_are_hashable_values(self):
        assert GreaterThan("a", 1.0) == GreaterThan("a", 1.0)
        assert len({TriggerSet("t"), TriggerSet("t")}) == 1
