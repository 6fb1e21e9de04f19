import pytest

from calculadora.core.calculator import (
    INITIAL_STATE,
    Calculator,
    CalculatorState,
    calculate,
    transition,
)
from calculadora.core.errors import UnknownKeyError


def press(*keys):
    calc = Calculator()
    calc.press_sequence(keys)
    return calc


# --- Entrada de dígitos ---

def test_digits_append_in_order():
    assert press("1", "2", "3").display == "123"


def test_leading_zeros_collapse():
    assert press("0", "0", "7").display == "7"
    assert press("0", "0").display == "0"


def test_decimal_point():
    assert press(".").display == "0."
    assert press("1", ".", ".", "5").display == "1.5"
    assert press("0", ".", "0", "5").display == "0.05"


def test_decimal_after_operator_starts_new_operand():
    calc = press("4", "+", ".")
    assert calc.display == "0."
    assert not calc.waiting_for_operand


# --- Operaciones ---

def test_addition():
    assert press("1", "+", "2", "=").display == "3"


def test_subtraction_and_multiplication():
    assert press("2", "-", "5", "=").display == "-3"
    assert press("6", "×", "7", "=").display == "42"
    assert press("1", "0", "÷", "4", "=").display == "2.5"


def test_float_results_use_shortest_repr():
    assert press(".", "1", "+", ".", "2", "=").display == "0.30000000000000004"


def test_division_by_zero_yields_zero():
    assert press("5", "÷", "0", "=").display == "0"


def test_percentage():
    assert press("5", "0", "%").display == "0.5"
    assert press("5", "%").display == "0.05"


def test_toggle_sign():
    assert press("7", "+/-").display == "-7"
    assert press("7", "+/-", "+/-").display == "7"
    assert press("+/-").display == "0"


def test_chained_operations_evaluate_left_to_right():
    calc = press("2", "+", "3", "+")
    assert calc.display == "5"
    assert calc.previous == "5"
    assert calc.operator == "+"

    calc.press_sequence(["4", "="])
    assert calc.display == "9"


def test_mixed_chain_has_no_precedence():
    # (2 + 3) × 4, no precedencia de operadores
    assert press("2", "+", "3", "×", "4", "=").display == "20"


def test_second_operator_without_operand_folds_pending():
    calc = press("3", "+", "×")
    assert calc.display == "6"
    assert calc.previous == "6"
    assert calc.operator == "×"


def test_operator_captures_normalized_previous():
    calc = press("1", ".", "5", "0", "+")
    assert calc.previous == "1.5"
    assert calc.display == "1.50"
    assert calc.waiting_for_operand


def test_equals_clears_pending_and_waits():
    calc = press("1", "+", "2", "=")
    assert calc.previous is None
    assert calc.operator is None
    assert calc.waiting_for_operand

    calc.press("5")
    assert calc.display == "5"


def test_result_can_start_new_operation():
    assert press("1", "+", "2", "=", "×", "4", "=").display == "12"


def test_equals_without_operation_is_noop():
    calc = press("8")
    state = calc.state
    calc.press("=")
    assert calc.state == state


@pytest.mark.parametrize("keys", [
    [],
    ["9"],
    ["1", "+"],
    ["1", "+", "2"],
    ["1", "+", "2", "="],
    ["3", ".", "+/-", "%"],
])
def test_clear_resets_from_any_state(keys):
    calc = press(*keys)
    calc.press("C")
    assert calc.state == INITIAL_STATE
    assert calc.display == "0"
    assert calc.previous is None
    assert calc.operator is None
    assert calc.waiting_for_operand is False


# --- Evaluador y transiciones ---

def test_calculate():
    assert calculate(2, 3, "+") == 5
    assert calculate(2, 3, "-") == -1
    assert calculate(2, 3, "×") == 6
    assert calculate(3, 2, "÷") == 1.5
    assert calculate(3, 0, "÷") == 0
    assert calculate(2, 3, "?") == 3


def test_operator_aliases():
    assert calculate(2, 3, "*") == 6
    assert calculate(3, 2, "/") == 1.5
    assert calculate(2, 3, "−") == -1
    assert press("6", "*", "7", "=").display == "42"
    assert press("6", "*").operator == "×"


def test_transition_is_pure():
    state = CalculatorState()
    new_state = transition(state, "5")
    assert state.display == "0"
    assert new_state.display == "5"


def test_unknown_key_raises():
    with pytest.raises(UnknownKeyError):
        transition(INITIAL_STATE, "sqrt")
    with pytest.raises(UnknownKeyError):
        transition(INITIAL_STATE, "")


# --- Display y callbacks ---

def test_expression_preview():
    assert press("1", "2", "+").get_expression() == "12 +"
    assert press("1", "2").get_expression() == ""
    assert press("1", "2", "+", "3", "=").get_expression() == ""


def test_long_display_uses_exponential():
    calc = press(*"1234567890123")
    assert calc.display == "1234567890123"
    assert calc.get_display() == "1.234568e+12"
    assert press(*"123456789012").get_display() == "123456789012"


def test_subscribers_receive_each_state():
    calc = Calculator()
    seen = []
    calc.subscribe(seen.append)
    calc.press_sequence(["1", "+", "2"])
    assert [s.display for s in seen] == ["1", "1", "2"]

    calc.unsubscribe(seen.append)
    calc.press("=")
    assert len(seen) == 3


# --- Display con texto no numérico al final ---

def test_operator_after_exponent_and_decimal_point():
    calc = press("1", "%", "%", "%", "%", ".", "+")
    assert calc.operator == "+"
    assert calc.waiting_for_operand

    calc = Calculator(CalculatorState(display="1e-8"))
    calc.press_sequence([".", "+"])
    assert calc.previous == "1e-8"
    assert calc.display == "1e-8."
    calc.press_sequence(["2", "="])
    assert calc.display == "2.00000001"


def test_digits_appended_to_infinity():
    calc = Calculator(CalculatorState(display="Infinity"))
    calc.press_sequence(["5", "+"])
    assert calc.display == "Infinity5"
    assert calc.previous == "Infinity"
    calc.press_sequence(["1", "="])
    assert calc.display == "Infinity"


def test_sign_and_percentage_read_leading_number():
    assert transition(CalculatorState(display="1e-8."), "+/-").display == "-1e-8"
    assert transition(CalculatorState(display="Infinity5"), "%").display == "Infinity"
    assert transition(CalculatorState(display="NaN5"), "+/-").display == "NaN"


def test_long_display_with_trailing_text():
    calc = Calculator(CalculatorState(display="Infinity5000"))
    calc.press("0")
    assert calc.get_display() == "Infinity"
