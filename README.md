# consolecalc

A small interactive console for evaluating simple arithmetic expressions.

## Installation

```
pip install .
```

## Usage

Start the console:

```
consolecalc
```

It can also be started with `python -m consolecalc.shell`.

A `>` prompt appears, and one command is read per line. The following commands
are available:

| Command             | Description                                   | Example                      |
|---------------------|-----------------------------------------------|------------------------------|
| `calc {expression}` | calculate a simple expression                 | `calc 12.3+12--12/5.23`      |
| `print {words}`     | print the words you write                     | `print hello world`          |
| `help`              | list the available commands                   | `help`                       |
| `clear`             | run the system `clear` program                | `clear`                      |
| `exit`              | leave the console                             | `exit`                       |

Any other command prints `Unknown command`. An empty line does nothing. The
console also stops at the end of input.

### Expressions

`calc` understands non-negative decimal numbers, the operators `+`, `-`, `*` and
`/`, and a leading minus on a number that follows an operator (or starts the
expression), so `2*-3` is `-6`. Multiplication and division are evaluated before
addition and subtraction, each left to right. The words after `calc` are joined
with spaces before parsing, so `calc 1 + 2` and `calc 1+2` give the same result.

Results are printed in a compact form: `calc 7/2` prints `3.5`, and `calc 10/2`
prints `5`.

### Errors

- A malformed expression prints `Wrong input` and the console carries on.
- If the words after `calc` hold 256 characters or more in total, the console
  prints `Too many arguments in function "calculator"` and carries on.
- Division by zero prints `Error: Division by zero` and ends the console with
  exit status 1.
- A word longer than 256 characters prints `Too long word` and ends the console
  with exit status 1.

## Using it from Python

```python
from consolecalc.calculator import calculate, format_result

value = calculate(["2+3*4"])
print(format_result(value))  # 14
```

`calculate` raises `WrongInputError` for malformed expressions and
`DivisionByZeroError` for division by zero; both derive from `CalculatorError`.
The lower-level pieces are available too: `tokenize` splits an expression into
numbers and operators, `evaluate` combines them, `parse_number` reads one number
and `perform_operation` applies one operator.

The console itself lives in `consolecalc.shell`: `split_command` splits a line
into words, `run_command` runs a list of words and writes its output to a text
stream, and `handle_line` does both. `exit` raises `ExitRequested`.

## Running the tests

```
pip install .[test]
pytest
```