"""Solutions to the second group of number puzzles."""

from __future__ import annotations

import datetime
import math
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

TRIANGLE = (
    (75,),
    (95, 64),
    (17, 47, 82),
    (18, 35, 87, 10),
    (20, 4, 82, 47, 65),
    (19, 1, 23, 75, 3, 34),
    (88, 2, 77, 73, 7, 63, 67),
    (99, 65, 4, 28, 6, 16, 70, 92),
    (41, 41, 26, 56, 83, 40, 80, 70, 33),
    (41, 48, 72, 33, 47, 32, 37, 16, 94, 29),
    (53, 71, 44, 65, 25, 43, 91, 52, 97, 51, 14),
    (70, 11, 33, 28, 77, 73, 17, 78, 39, 68, 17, 57),
    (91, 71, 52, 38, 17, 14, 91, 43, 58, 50, 27, 29, 48),
    (63, 66, 4, 68, 89, 53, 67, 30, 73, 16, 69, 87, 40, 31),
    (4, 62, 98, 27, 23, 9, 70, 98, 73, 93, 38, 53, 60, 4, 23),
)

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

_QUOTED = re.compile(r'"([^"]+)",?')

_MONTH_DAYS = (31, None, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def power_digit_sum(base: int = 2, exponent: int = 1000) -> int:
    """Sum of the decimal digits of base ** exponent."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return sum(int(ch) for ch in str(abs(base**exponent)))


def number_to_words(n: int) -> str:
    """British English words for 0..1000, tens and units written together."""
    if not 0 <= n <= 1000:
        raise ValueError("n must be between 0 and 1000")
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + _ONES[n % 10]
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        head = f"{_ONES[hundreds]} hundred"
        return head if rest == 0 else f"{head} and {number_to_words(rest)}"
    return "one thousand"


def letter_count(limit: int = 1000) -> int:
    """Letters used writing out 1..limit in words, spaces and hyphens ignored."""
    return sum(
        sum(1 for ch in number_to_words(i) if ch not in " -")
        for i in range(1, limit + 1)
    )


def max_path_sum(triangle: Sequence[Sequence[int]] = TRIANGLE) -> int:
    """Greatest total on a path from the apex to the base of a number triangle."""
    rows = [list(row) for row in triangle]
    if not rows:
        raise ValueError("triangle is empty")
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must have {depth + 1} entries")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def count_first_sundays(start_year: int = 1901, end_year: int = 2000) -> int:
    """Number of months in start_year..end_year whose first day is a Sunday."""
    days_since_sunday = (datetime.date(start_year, 1, 1).weekday() + 1) % 7
    sundays = 0
    for year in range(start_year, end_year + 1):
        for month_days in _MONTH_DAYS:
            if days_since_sunday % 7 == 0:
                sundays += 1
            if month_days is None:
                month_days = 29 if is_leap_year(year) else 28
            days_since_sunday += month_days
    return sundays


def factorial_digit_sum(n: int = 100) -> int:
    """Sum of the decimal digits of n!."""
    return sum(int(ch) for ch in str(math.factorial(n)))


def sum_of_divisors(n: int) -> int:
    """Sum of the proper divisors of n, counting 1 for every n."""
    if n < 1:
        raise ValueError("n must be positive")
    total = 1
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            total += i
            if i * i != n:
                total += n // i
    return total


def amicable_sum(limit: int = 10000) -> int:
    """Sum of the amicable pairs whose smaller member lies below limit."""
    total = 0
    for a in range(2, limit):
        b = sum_of_divisors(a)
        if b > a and sum_of_divisors(b) == a:
            total += a + b
    return total


def parse_quoted_words(text: str) -> list[str]:
    """Read a comma-separated list of double-quoted words, stopping at the first bad entry."""
    text = text.strip()
    words = []
    pos = 0
    while (match := _QUOTED.match(text, pos)) is not None:
        words.append(match.group(1))
        pos = match.end()
    return words


def load_names(path: str | Path) -> list[str]:
    """Load a quoted, comma-separated list of names from a file."""
    return parse_quoted_words(Path(path).read_text())


def name_score(name: str) -> int:
    """Alphabetical value of an upper-case name: A=1 ... Z=26."""
    if not all("A" <= ch <= "Z" for ch in name):
        raise ValueError(f"name must consist of letters A-Z: {name!r}")
    return sum(ord(ch) - ord("A") + 1 for ch in name)


def names_total_score(names: Iterable[str]) -> int:
    """Sum of position times alphabetical value over the sorted names."""
    return sum(rank * name_score(name) for rank, name in enumerate(sorted(names), 1))


def is_abundant(n: int) -> bool:
    """True if the proper divisors of n sum to more than n."""
    return sum_of_divisors(n) > n


def _proper_divisor_sums(limit: int) -> list[int]:
    sums = [0] * (limit + 1)
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit + 1, d):
            sums[multiple] += d
    return sums


def non_abundant_sum(limit: int = 28123) -> int:
    """Sum of 1..limit that are not the sum of two abundant numbers."""
    if limit < 1:
        return 0
    sums = _proper_divisor_sums(limit)
    abundant = [n for n in range(12, limit + 1) if sums[n] > n]
    mask = 0
    for n in abundant:
        mask |= 1 << n
    expressible = 0
    for n in abundant:
        expressible |= mask << n
    return sum(i for i in range(1, limit + 1) if not (expressible >> i) & 1)


def nth_permutation(digits: Sequence[int] = tuple(range(10)), index: int = 1_000_000) -> str:
    """The index-th (1-based) lexicographic permutation of digits, as a string."""
    pool = list(digits)
    if not 1 <= index <= math.factorial(len(pool)):
        raise ValueError("index out of range")
    remaining = index - 1
    chosen = []
    while pool:
        position, remaining = divmod(remaining, math.factorial(len(pool) - 1))
        chosen.append(pool.pop(position))
    return "".join(str(d) for d in chosen)


def fibonacci_index_with_digits(digits: int = 1000) -> int:
    """Index of the first Fibonacci term (F1 = F2 = 1) with the given number of digits."""
    if digits < 1:
        raise ValueError("digits must be positive")
    threshold = 10 ** (digits - 1)
    previous, current, index = 0, 1, 1
    while current < threshold:
        previous, current = current, previous + current
        index += 1
    return index