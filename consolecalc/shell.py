"""Interactive command shell offering calc, print, clear, help and exit."""

from __future__ import annotations

import re
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from consolecalc.calculator import (
    MAX_SOURCE_LENGTH,
    CalculatorError,
    DivisionByZeroError,
    calculate,
    format_result,
)

MAX_WORD_LENGTH = MAX_SOURCE_LENGTH

HELP_TEXT = (
    "Available functions: calc  print  exit  \n"
    "\ncalc {arguments} \tdescription: calculate simple expressions         "
    "\texample: calc 12.3+12--12/5.23\n"
    "\nprint {arguments}\tdescription: print any string you write           "
    "\texample: print hello world\n"
    "\nexit             \tdescription: exit the programm                    "
    "\texample: exit\n"
    '\nclear            \tdescription: the same as "clear"function in terminal'
    "\texample: clear\n"
)

# A word starts at a non-space character and runs up to a space or a tab.
_WORD = re.compile(r"[^ \t\n\v\f\r][^ \t]*")


class ExitRequested(Exception):
    """Raised when the user asks the shell to stop."""


class WordTooLongError(ValueError):
    """Raised when a word of the command line is too long."""

    def __init__(self, message: str = "Too long word") -> None:
        super().__init__(message)


def split_command(line: str) -> list[str]:
    """Split a command line into words."""
    words = _WORD.findall(line)
    if any(len(word) > MAX_WORD_LENGTH for word in words):
        raise WordTooLongError()
    return words


def run_command(words: Sequence[str], out: TextIO) -> None:
    """Run one command given as a list of words, writing its output to ``out``."""
    if not words:
        return
    command, args = words[0], words[1:]

    if command == "exit":
        raise ExitRequested()
    if command == "help":
        out.write(HELP_TEXT)
    elif command == "clear":
        try:
            subprocess.run(["clear"], check=False)
        except OSError:
            pass
    elif command == "calc":
        try:
            value = calculate(args)
        except DivisionByZeroError:
            raise
        except CalculatorError as exc:
            print(exc, file=out)
        else:
            print(format_result(value), file=out)
    elif command == "print":
        print("".join(f"{word} " for word in args), file=out)
    else:
        print("Unknown command", file=out)


def handle_line(line: str, out: TextIO) -> None:
    """Split ``line`` into words and run it as a command."""
    run_command(split_command(line), out)


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until ``exit`` or end of input."""
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        stdout.write(">")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        if line.endswith("\n"):
            line = line[:-1]
        try:
            handle_line(line, stdout)
        except ExitRequested:
            return 0
        except (WordTooLongError, DivisionByZeroError) as exc:
            print(exc, file=stdout)
            return 1


if __name__ == "__main__":
    raise SystemExit(main())