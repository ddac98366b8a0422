"""Evaluation of simple arithmetic expressions with ``+ - * /``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MAX_SOURCE_LENGTH = 256

_DIGITS = frozenset("0123456789")
_SPACES = frozenset(" \t\n\v\f\r")
_OPERATORS = frozenset("+-*/")
_PRIORITY_GROUPS = (frozenset("*/"), frozenset("+-"))


class CalculatorError(ValueError):
    """Raised when an expression cannot be evaluated."""


class WrongInputError(CalculatorError):
    """Raised when an expression is malformed."""

    def __init__(self, message: str = "Wrong input") -> None:
        super().__init__(message)


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when an expression divides by zero."""

    def __init__(self, message: str = "Error: Division by zero") -> None:
        super().__init__(message)


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in _DIGITS


def perform_operation(a: float, b: float, op: str) -> float:
    """Apply the binary operator ``op`` to ``a`` and ``b``."""
    match op:
        case "+":
            return a + b
        case "-":
            return a - b
        case "*":
            return a * b
        case "/":
            if b == 0:
                raise DivisionByZeroError()
            return a / b
        case _:
            raise CalculatorError(f"Wrong operation '{op}'")


def parse_number(text: str, pos: int) -> tuple[float, int]:
    """Read an unsigned decimal number starting at ``pos``.

    Returns the value and the position just after it. A fractional part is
    only taken when the dot is followed by a digit.
    """
    start = pos
    while pos < len(text) and _is_digit(text[pos]):
        pos += 1
    value = float(int(text[start:pos])) if pos > start else 0.0

    if pos + 1 < len(text) and text[pos] == "." and _is_digit(text[pos + 1]):
        pos += 1
        frac_start = pos
        while pos < len(text) and _is_digit(text[pos]):
            pos += 1
        digits = text[frac_start:pos]
        value += int(digits) / 10 ** len(digits)

    return value, pos


def tokenize(text: str) -> tuple[list[float], list[str]]:
    """Split an expression into its numbers and its operators."""
    numbers: list[float] = []
    operators: list[str] = []
    expect_operand = True
    negative = False
    pos = 0

    while pos < len(text):
        ch = text[pos]
        if ch in _SPACES:
            pos += 1
            continue
        following = text[pos + 1] if pos + 1 < len(text) else ""
        if expect_operand and ch == "-" and _is_digit(following):
            negative = True
            pos += 1
        elif _is_digit(ch):
            value, pos = parse_number(text, pos)
            if negative:
                value = -value
                negative = False
            numbers.append(value)
            expect_operand = False
        elif ch in _OPERATORS:
            if expect_operand:
                raise WrongInputError()
            operators.append(ch)
            expect_operand = True
            pos += 1
        else:
            raise WrongInputError()

    return numbers, operators


def evaluate(numbers: Sequence[float], operators: Sequence[str]) -> float:
    """Evaluate numbers joined by operators, ``*`` and ``/`` first, left to right."""
    if len(numbers) < len(operators) + 1:
        raise WrongInputError()

    values = list(numbers)
    ops = list(operators)
    for group in _PRIORITY_GROUPS:
        i = 0
        while i < len(ops):
            if ops[i] in group:
                values[i : i + 2] = [perform_operation(values[i], values[i + 1], ops[i])]
                del ops[i]
            else:
                i += 1
    return values[0]


def calculate(args: Iterable[str]) -> float:
    """Evaluate the expression formed by joining ``args`` with spaces."""
    parts = list(args)
    if sum(len(part) for part in parts) >= MAX_SOURCE_LENGTH:
        raise CalculatorError('Too many arguments in function "calculator"')
    numbers, operators = tokenize(" ".join(parts))
    return evaluate(numbers, operators)


def format_result(value: float) -> str:
    """Format a result the way the calculator prints it."""
    return f"{value:g}"