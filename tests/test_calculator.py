import pytest

from consolecalc.calculator import (
    CalculatorError,
    DivisionByZeroError,
    WrongInputError,
    calculate,
    evaluate,
    format_result,
    parse_number,
    perform_operation,
    tokenize,
)


def test_perform_operation_inverse_pairs():
    assert perform_operation(7.5, 2.5, "-") + 2.5 == 7.5
    assert perform_operation(perform_operation(6.0, 3.0, "/"), 3.0, "*") == 6.0
    assert perform_operation(6.0, 3.0, "*") == perform_operation(3.0, 6.0, "*")
    assert perform_operation(1.5, 2.5, "+") - 2.5 == 1.5


def test_perform_operation_division_by_zero():
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        perform_operation(1.0, 0.0, "/")
    with pytest.raises(ZeroDivisionError):
        perform_operation(1.0, 0.0, "/")


def test_perform_operation_unknown_operator():
    with pytest.raises(CalculatorError, match="Wrong operation '%'"):
        perform_operation(1.0, 2.0, "%")


def test_parse_number_with_fraction():
    assert parse_number("12.5+", 0) == (12.5, len("12.5"))


def test_parse_number_from_offset():
    assert parse_number("x42", 1) == (42.0, len("x42"))


def test_parse_number_dot_without_digit_is_not_taken():
    assert parse_number("7.", 0) == (7.0, len("7"))


def test_parse_number_without_digits():
    assert parse_number("abc", 0) == (0.0, 0)


def test_tokenize_simple():
    assert tokenize("1 + 2 * 3") == ([1.0, 2.0, 3.0], ["+", "*"])


def test_tokenize_negative_numbers():
    assert tokenize("-3 * -2") == ([-3.0, -2.0], ["*"])
    assert tokenize("12--12") == ([12.0, -12.0], ["-"])


def test_tokenize_empty():
    assert tokenize("") == ([], [])
    assert tokenize("   ") == ([], [])


@pytest.mark.parametrize("text", ["5 ++ 3", "5 x 3", "- 3", "12.", ".5", "*2", "--3"])
def test_tokenize_wrong_input(text):
    with pytest.raises(WrongInputError, match="Wrong input"):
        tokenize(text)


def test_evaluate_precedence():
    assert evaluate([2.0, 3.0, 4.0], ["+", "*"]) == 2.0 + 3.0 * 4.0
    assert evaluate([2.0, 3.0, 4.0], ["*", "+"]) == evaluate([4.0, 2.0, 3.0], ["+", "*"])


def test_evaluate_left_associative():
    assert evaluate([8.0, 4.0, 2.0], ["-", "-"]) == (8.0 - 4.0) - 2.0
    assert evaluate([8.0, 4.0, 2.0], ["/", "/"]) == (8.0 / 4.0) / 2.0


def test_evaluate_does_not_mutate_inputs():
    numbers = [1.0, 2.0, 3.0]
    operators = ["*", "-"]
    evaluate(numbers, operators)
    assert numbers == [1.0, 2.0, 3.0]
    assert operators == ["*", "-"]


def test_evaluate_missing_operand():
    with pytest.raises(WrongInputError):
        evaluate([5.0], ["+"])
    with pytest.raises(WrongInputError):
        evaluate([], [])


def test_calculate_help_example():
    assert calculate(["12.3+12--12/5.23"]) == pytest.approx(12.3 + 12 + 12 / 5.23)


def test_calculate_joins_arguments():
    assert calculate(["1", "+", "2"]) == calculate(["1+2"])
    assert calculate(["1", "2"]) == 1.0


def test_calculate_single_number():
    assert calculate(["42"]) == 42.0


def test_calculate_length_limit():
    assert calculate(["1" * 255]) == float("1" * 255)
    with pytest.raises(CalculatorError, match="Too many arguments"):
        calculate(["1" * 256])
    with pytest.raises(CalculatorError, match="Too many arguments"):
        calculate(["1" * 200, "+" * 56])


def test_calculate_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        calculate(["5/0"])


def test_format_result():
    assert format_result(12.0) == "12"
    assert format_result(0.5) == "0.5"
    assert format_result(-3.25) == "-3.25"
    assert format_result(1e20) == "1e+20"