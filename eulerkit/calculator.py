"""A small interactive menu-driven calculator."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum
from typing import TextIO

MENU = (
    "Choose what you want to do\n\n"
    "1 for addition\n"
    "2 for extraction\n"
    "3 for multiplication\n"
    "4 for division\n"
    "5 for modding\n"
    "6 for exponentiation\n"
    "Otherwise for exit\n"
    "\n--> "
)
OPERANDS_PROMPT = "Enter two numbers with blank between them\t"
CONTINUE_PROMPT = "If you want to \ncountinue : 1 stop: 0:  "


class Operation(IntEnum):
    """Menu choices of the calculator."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    MOD = 5
    POWER = 6

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Operation.ADD: "addition",
    Operation.SUBTRACT: "extraction",
    Operation.MULTIPLY: "multiplication",
    Operation.DIVIDE: "division",
    Operation.MOD: "modding",
    Operation.POWER: "exponentiation",
}


def _ieee_div(a: float, b: float) -> float:
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _truncated_mod(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("modulo by zero")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _int_pow(base: int, exponent: int) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and exponent % 2 else math.inf
    except ValueError:
        return math.inf


def format_result(operation: Operation, a: float, b: float) -> str:
    """Return the result line the calculator prints for an operation."""
    match Operation(operation):
        case Operation.ADD:
            return f"{a:.2f} + {b:.2f} = {a + b:.2f}"
        case Operation.SUBTRACT:
            return f"{a:.2f} - {b:.2f} = {a - b:.2f}"
        case Operation.MULTIPLY:
            return f"{a:.2f} x {b:.2f} = {a * b:.4f}"
        case Operation.DIVIDE:
            return f"{a:.2f} / {b:.2f} = {_ieee_div(a, b):.4f}"
        case Operation.MOD:
            x, y = int(a), int(b)
            return f"{x} MOD {y} = {_truncated_mod(x, y)}"
        case Operation.POWER:
            x, y = int(a), int(b)
            return f"{x}^{y} = {_int_pow(x, y):.0f}"
    raise ValueError(f"unknown operation: {operation!r}")


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _parse_choice(token: str | None) -> Operation | None:
    try:
        return Operation(int(token))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _parse_int(token: str | None) -> int | None:
    try:
        return int(token)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the calculator session reading from stdin and writing to stdout."""
    tokens = _tokens(stdin)

    def ask(prompt: str) -> str | None:
        stdout.write(prompt)
        stdout.flush()
        return next(tokens, None)

    while True:
        choice = _parse_choice(ask(MENU))
        if choice is None:
            stdout.write("EXIT...\n\n")
            return
        stdout.write(f"----> {choice.title}\n\n")
        first = ask(OPERANDS_PROMPT)
        second = next(tokens, None)
        if first is None or second is None:
            return
        stdout.write(format_result(choice, float(first), float(second)) + "\n\n")
        if not _parse_int(ask(CONTINUE_PROMPT)):
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive session on the standard streams."""
    try:
        run(sys.stdin, sys.stdout)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0