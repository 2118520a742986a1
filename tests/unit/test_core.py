"""Unit tests for the CalculatorEngine state machine."""

import pytest

from ios_calculator import (
    BufferInvariantError,
    CalculatorEngine,
    InvalidInputError,
    NumberValue,
    Operator,
    OutOfRangeError,
)


def enter(engine: CalculatorEngine, *keys) -> CalculatorEngine:
    """Drive the engine with ints as digits and Operators as operator keys."""
    for key in keys:
        if isinstance(key, Operator):
            engine.submit_operator(key)
        elif key == "=":
            engine.submit_equals()
        else:
            engine.submit_number(key)
    return engine


ADD = Operator.ADD
SUB = Operator.SUBTRACT
MUL = Operator.MULTIPLY
DIV = Operator.DIVIDE


def shape(engine: CalculatorEngine) -> list:
    return [
        token.numeric if isinstance(token, NumberValue) else token.symbol
        for token in engine.buffer
    ]


class TestInitialState:
    """Tests for a new engine."""

    def test_single_zero(self, engine):
        assert shape(engine) == [0.0]
        assert engine.display == "0"
        assert engine.display_index == 0

    def test_flags(self, engine):
        assert engine.cleared
        assert not engine.editing

    def test_no_active_operator(self, engine):
        assert engine.active_operator() is None

    def test_rejects_bad_significant_figures(self):
        with pytest.raises(OutOfRangeError):
            CalculatorEngine(significant_figures=20)


class TestSubmitNumber:
    """Tests for digit entry."""

    def test_replaces_initial_zero(self, engine):
        enter(engine, 5)
        assert engine.display == "5"
        assert shape(engine) == [5.0]

    def test_sets_flags(self, engine):
        enter(engine, 5)
        assert engine.editing
        assert not engine.cleared

    def test_appends_while_editing(self, engine):
        enter(engine, 1, 2, 3)
        assert engine.display == "123"

    def test_new_operand_after_operator(self, engine):
        enter(engine, 1, ADD, 2)
        assert shape(engine) == [1.0, "+", 2.0]
        assert engine.display_index == 2
        assert engine.display == "2"

    def test_starts_new_entry_after_equals(self, engine):
        enter(engine, 1, ADD, 2, "=", 3)
        assert engine.display == "3"
        assert shape(engine) == [3.0, "+", 2.0]

    def test_multi_digit_key(self, engine):
        enter(engine, 1, 2, MUL, 10, "=")
        assert engine.display == "120"

    def test_rejects_negative_digit(self, engine):
        with pytest.raises(InvalidInputError):
            engine.submit_number(-1)
        assert engine.display == "0"


class TestSubmitOperator:
    """Tests for operator keys."""

    def test_pending_operator(self, engine):
        enter(engine, 1, ADD)
        assert engine.active_operator() is ADD
        assert engine.display == "1"
        assert not engine.editing

    def test_swaps_pending_operator(self, engine):
        enter(engine, 1, ADD, MUL)
        assert shape(engine) == [1.0, "*"]
        assert engine.active_operator() is MUL

    def test_same_operator_twice(self, engine):
        enter(engine, 1, ADD, ADD)
        assert shape(engine) == [1.0, "+"]

    def test_operator_on_fresh_engine(self, engine):
        enter(engine, SUB, 5, "=")
        assert engine.display == "-5"

    def test_calculates_on_new_operator(self, engine):
        enter(engine, 1, ADD, 2, ADD)
        assert engine.display == "3"
        assert shape(engine) == [3.0, "+"]

    def test_defers_tighter_operator(self, engine):
        enter(engine, 1, ADD, 2, MUL)
        assert engine.display == "2"
        assert engine.active_operator() is MUL
        assert shape(engine) == [1.0, "+", 2.0, "*"]

    def test_reduces_looser_operator(self, engine):
        enter(engine, 2, MUL, 3, ADD)
        assert engine.display == "6"
        assert shape(engine) == [6.0, "+"]

    def test_reduces_whole_chain(self, engine):
        enter(engine, 1, ADD, 2, MUL, 3, SUB)
        assert engine.display == "7"
        assert shape(engine) == [7.0, "-"]

    def test_equal_precedence_chain(self, engine):
        enter(engine, 1, ADD, 2, MUL, 3, MUL)
        assert engine.display == "7"

    def test_operator_after_equals_drops_memory(self, engine):
        enter(engine, 1, ADD, 2, "=", MUL)
        assert shape(engine) == [3.0, "*"]


class TestSubmitEquals:
    """Tests for the equals key."""

    def test_add(self, engine):
        enter(engine, 1, ADD, 2, "=")
        assert engine.display == "3"

    def test_subtract(self, engine):
        enter(engine, 3, SUB, 2, "=")
        assert engine.display == "1"

    def test_multiply(self, engine):
        enter(engine, 2, MUL, 2, "=")
        assert engine.display == "4"

    def test_divide(self, engine):
        enter(engine, 2, DIV, 2, "=")
        assert engine.display == "1"

    def test_precedence(self, engine):
        enter(engine, 1, ADD, 2, MUL, 3, "=")
        assert engine.display == "7"

    def test_precedence_with_subtract_and_divide(self, engine):
        enter(engine, 9, SUB, 8, DIV, 4, "=")
        assert engine.display == "7"

    def test_keeps_last_operation(self, engine):
        enter(engine, 1, ADD, 2, MUL, 3, "=")
        assert shape(engine) == [7.0, "*", 3.0]
        assert engine.display_index == 0

    def test_repeats_last_operation(self, engine):
        enter(engine, 2, MUL, 2, "=", "=")
        assert engine.display == "8"

    def test_repeats_many_times(self, engine):
        enter(engine, 1, ADD, 1, "=", "=", "=", "=")
        assert engine.display == "5"

    def test_two_calculations(self, engine):
        enter(engine, 2, MUL, 2, "=", 1, MUL, 3, "=")
        assert engine.display == "3"

    def test_nothing_pending(self, engine):
        enter(engine, 5, "=")
        assert shape(engine) == [5.0]
        assert not engine.editing

    def test_pending_operator_without_operand(self, engine):
        enter(engine, 5, ADD, "=")
        assert shape(engine) == [5.0, "+"]

    def test_dangling_operator_discarded(self, engine):
        enter(engine, 1, ADD, 2, MUL, "=")
        assert engine.display == "3"
        assert shape(engine) == [3.0, "+", 2.0]

    def test_divide_by_zero(self, engine):
        enter(engine, 1, DIV, 0, "=")
        assert engine.display == "inf"

    def test_zero_by_zero(self, engine):
        enter(engine, 0, DIV, 0, "=")
        assert engine.display == "NaN"

    def test_exponential_result(self, engine):
        enter(engine, 1, 2, 3, 4, 5, 6, 7, 8, 9, MUL, 1, 0, "=")
        assert engine.display == "1.234567e9"


class TestClear:
    """Tests for the AC/C key."""

    def test_clear_entry(self, engine):
        enter(engine, 3)
        engine.clear()
        assert engine.display == "0"
        assert engine.cleared
        assert not engine.editing

    def test_all_clear_after_clear(self, engine):
        enter(engine, 2, MUL, 2, "=")
        engine.clear()
        engine.clear()
        assert shape(engine) == [0.0]
        assert engine.display_index == 0

    def test_clear_keeps_pending_operator(self, engine):
        enter(engine, 3, ADD)
        engine.clear()
        assert engine.display == "0"
        assert engine.cleared
        enter(engine, 3, "=")
        assert engine.display == "6"

    def test_clear_drops_operator_highlight(self, engine):
        enter(engine, 3, ADD)
        engine.clear()
        assert engine.active_operator() is None
        assert shape(engine) == [3.0, "+", 0.0]
        assert engine.display_index == 2

    def test_clear_second_operand(self, engine):
        enter(engine, 1, ADD, 2)
        engine.clear()
        assert engine.display == "0"
        enter(engine, 5, "=")
        assert engine.display == "6"

    def test_clear_keeps_memory(self, engine):
        enter(engine, 2, MUL, 2, "=")
        engine.clear()
        enter(engine, 3, "=")
        assert engine.display == "6"

    def test_all_clear_drops_pending_operator(self, engine):
        enter(engine, 3, ADD)
        engine.clear()
        engine.clear()
        assert engine.active_operator() is None
        assert shape(engine) == [0.0]

    def test_all_clear_keeps_significant_figures(self):
        engine = CalculatorEngine(significant_figures=3)
        engine.clear()
        assert engine.significant_figures == 3
        enter(engine, 1, 2, 3, 4)
        assert engine.display == "123"


class TestSubmitDecimal:
    """Tests for the decimal point key."""

    def test_decimalise(self, engine):
        enter(engine, 1)
        engine.submit_decimal()
        assert engine.display == "1."

    def test_no_double_decimal(self, engine):
        enter(engine, 1)
        engine.submit_decimal()
        engine.submit_decimal()
        assert engine.display == "1."

    def test_fresh_entry_starts_with_zero(self, engine):
        engine.submit_decimal()
        assert engine.display == "0."
        assert engine.editing

    def test_after_operator_starts_with_zero(self, engine):
        enter(engine, 1, ADD)
        engine.submit_decimal()
        assert engine.display == "0."
        assert engine.display_index == 2

    def test_fraction_entry(self, engine):
        enter(engine, 1)
        engine.submit_decimal()
        enter(engine, 5, ADD, 1, "=")
        assert engine.display == "2.5"


class TestSubmitNegative:
    """Tests for the sign key."""

    def test_negates(self, engine):
        enter(engine, 1)
        engine.submit_negative()
        assert engine.display == "-1"

    def test_negative_zero(self, engine):
        engine.submit_negative()
        assert engine.display == "-0"
        assert engine.editing

    def test_digit_after_negative_zero(self, engine):
        engine.submit_negative()
        enter(engine, 1)
        assert engine.display == "-1"

    def test_only_affects_displayed_operand(self, engine):
        enter(engine, 1, ADD, 2)
        engine.submit_negative()
        enter(engine, "=")
        assert engine.display == "-1"

    def test_drops_trailing_point(self, engine):
        enter(engine, 1)
        engine.submit_decimal()
        engine.submit_negative()
        assert engine.display == "-1"


class TestSubmitPercentage:
    """Tests for the percent key."""

    def test_percentage(self, engine):
        enter(engine, 1)
        engine.submit_percentage()
        assert engine.display == "0.01"

    def test_negative_percentage(self, engine):
        enter(engine, 1)
        engine.submit_percentage()
        engine.submit_negative()
        assert engine.display == "-0.01"

    def test_reduces_pending_chain_first(self, engine):
        enter(engine, 5, 0, ADD, 1, 0)
        engine.submit_percentage()
        assert engine.display == "0.6"
        assert engine.display_index == 0


class TestAccessors:
    """Tests for the read-only surface."""

    def test_current_display_is_a_copy(self, engine):
        enter(engine, 1)
        number = engine.current_display()
        number.append_digit(2)
        assert engine.display == "1"

    def test_buffer_is_a_snapshot(self, engine):
        enter(engine, 1, ADD, 2)
        buffer = engine.buffer
        buffer[0].set_numeric(9)
        assert shape(engine) == [1.0, "+", 2.0]

    def test_display_index_on_non_number_is_fatal(self, engine):
        enter(engine, 1, ADD)
        engine._display_index = 1
        with pytest.raises(BufferInvariantError):
            engine.current_display()

    def test_repr(self, engine):
        enter(engine, 1, ADD, 2)
        assert repr(engine) == (
            "CalculatorEngine(buffer=[1 + 2], display_index=2, cleared=False, editing=True)"
        )
