"""Solutions to the fourth group of number puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import count, permutations
from pathlib import Path

from eulerkit.problems_01_14 import is_prime
from eulerkit.problems_16_25 import parse_quoted_words

CHAMPERNOWNE_POSITIONS = (1, 10, 100, 1000, 10000, 100000, 1000000)

_TRIANGULAR_INDEX_LIMIT = 1000
_SUBSTRING_PRIMES = (2, 3, 5, 7, 11, 13, 17)
_NO_RESULT = 999_999_999


def _champernowne_digits(length: int) -> str:
    pieces = []
    total = 0
    for i in count(1):
        if total >= length:
            break
        text = str(i)
        pieces.append(text)
        total += len(text)
    return "".join(pieces)


def champernowne_product(positions: Iterable[int] = CHAMPERNOWNE_POSITIONS) -> int:
    """Product of the digits of 0.123456789101112... at the given 1-based positions."""
    wanted = list(positions)
    if any(p < 1 for p in wanted):
        raise ValueError("positions must be at least 1")
    digits = _champernowne_digits(max(wanted, default=0))
    return math.prod(int(digits[p - 1]) for p in wanted)


def largest_pandigital_prime() -> int:
    """Largest prime using each of the digits 1..n exactly once; 0 if there is none."""
    for n in range(9, 0, -1):
        # Every arrangement has the digit sum n(n+1)/2; if 3 divides it, so does 3 divide the number.
        if n * (n + 1) // 2 % 3 == 0:
            continue
        descending = "".join(str(d) for d in range(n, 0, -1))
        for arrangement in permutations(descending):
            number = int("".join(arrangement))
            if is_prime(number):
                return number
    return 0


def word_value(word: str) -> int:
    """Alphabetical value of the upper-case letters of a word (A=1 ... Z=26)."""
    return sum(ord(ch) - ord("A") + 1 for ch in word if "A" <= ch <= "Z")


def is_triangle_word(word: str) -> bool:
    """True if the word's value is one of the first 999 triangle numbers."""
    value = word_value(word)
    if value < 1:
        return False
    n = (math.isqrt(8 * value + 1) - 1) // 2
    return 1 <= n < _TRIANGULAR_INDEX_LIMIT and n * (n + 1) // 2 == value


def count_triangle_words(words: Iterable[str]) -> int:
    """Number of triangle words among words."""
    return sum(1 for word in words if is_triangle_word(word))


def load_words(path: str | Path) -> list[str]:
    """Load a quoted, comma-separated list of words from a file."""
    return parse_quoted_words(Path(path).read_text())


def substring_divisible_sum(max_digit: int = 9) -> int:
    """Sum of the 0..max_digit pandigitals whose 3-digit substrings from the second digit
    are divisible by 2, 3, 5, 7, 11, 13 and 17 in turn."""
    if not 0 <= max_digit <= 9:
        raise ValueError("max_digit must be between 0 and 9")
    checks = max(max_digit - 2, 0)

    def extend(prefix: str, remaining: str) -> int:
        i = len(prefix) - 4
        if 0 <= i < checks and int(prefix[i + 1:i + 4]) % _SUBSTRING_PRIMES[i]:
            return 0
        if not remaining:
            return int(prefix)
        return sum(
            extend(prefix + digit, remaining[:k] + remaining[k + 1:])
            for k, digit in enumerate(remaining)
        )

    return extend("", "0123456789"[: max_digit + 1])


def pentagonal(n: int) -> int:
    """The n-th pentagonal number n(3n - 1)/2."""
    return n * (3 * n - 1) // 2


def is_pentagonal(x: int) -> bool:
    """True if x is a pentagonal number (0 counts as P(0))."""
    if x < 0:
        return False
    n = (1 + math.isqrt(24 * x + 1)) // 6
    return pentagonal(n) == x


def minimal_pentagonal_difference() -> int:
    """Smallest pentagonal difference D = P(j) - P(k) where P(j) + P(k) is pentagonal too."""
    best = _NO_RESULT
    n = 2
    last = 1
    while best == _NO_RESULT:
        p_n = pentagonal(n)
        if p_n - last > best:
            break
        for x in range(n - 1, 0, -1):
            p_x = x * (3 * x - 1) // 2
            difference = p_n - p_x
            if difference > best:
                break
            if is_pentagonal(p_n + p_x) and is_pentagonal(difference):
                best = difference
        last = p_n
        n += 1
    return best


def pentagonal_pairs(max_index: int, distance: int) -> list[int]:
    """P(n) for distance < n <= max_index where P(n) +/- P(n - distance) is pentagonal."""
    if distance < 0:
        raise ValueError("distance must not be negative")
    found = []
    for n in range(distance + 1, max_index + 1):
        p_n = pentagonal(n)
        p_x = pentagonal(n - distance)
        if is_pentagonal(p_n + p_x) or is_pentagonal(p_n - p_x):
            found.append(p_n)
    return found


def is_square(n: int) -> bool:
    """True if n is a perfect square."""
    return n >= 0 and math.isqrt(n) ** 2 == n


def next_triangle_pentagonal_hexagonal(start: int = 143) -> int:
    """First hexagonal number H(n), n > start, that is also pentagonal (and so triangular)."""
    if start < 0:
        raise ValueError("start must not be negative")
    for n in count(start + 1):
        y = 4 * n - 1
        square = 3 * y * y - 2
        if not is_square(square):
            continue
        if (math.isqrt(square) + 1) % 6 == 0:
            return n * (2 * n - 1)
    raise AssertionError("unreachable")