"""Greatest common divisor and least common multiple by direct search."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import count


def gcd(a: int, b: int) -> int:
    """Return the largest d in 1..min(a, b) dividing both numbers, or 1 if none."""
    return next(
        (d for d in range(min(a, b), 0, -1) if a % d == 0 and b % d == 0),
        1,
    )


def lcm(a: int, b: int) -> int:
    """Return the first multiple of the larger number that the smaller divides."""
    high, low = (a, b) if a > b else (b, a)
    if low == 0:
        raise ZeroDivisionError("least common multiple with zero is undefined")
    return next(high * k for k in count(1) if (high * k) % low == 0)


def _read_pair(argv: Sequence[str] | None, prompt: str) -> tuple[int, int]:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(prompt, end="", flush=True)
        args = sys.stdin.readline().split()
    if len(args) != 2:
        raise ValueError("expected exactly two integers")
    return int(args[0]), int(args[1])


def _run(argv: Sequence[str] | None, prompt: str, label: str, func) -> int:
    try:
        a, b = _read_pair(argv, prompt)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    try:
        result = func(a, b)
    except ZeroDivisionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"\n{label}{result}")
    return 0


def gcd_main(argv: Sequence[str] | None = None) -> int:
    """Print the GCD of two integers given as arguments or read from stdin."""
    return _run(argv, "Enter two numbers:\t", "GCD:  ", gcd)


def lcm_main(argv: Sequence[str] | None = None) -> int:
    """Print the LCM of two integers given as arguments or read from stdin."""
    return _run(argv, "\nEnter two numbers:\t", "LCM:   ", lcm)