"""Command line entry point printing puzzle answers."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from eulerkit import problems_01_14 as p1
from eulerkit import problems_16_25 as p2
from eulerkit import problems_26_39 as p3
from eulerkit import problems_40_45 as p4

Answer = int | str


def _triplet_product() -> int:
    triplet = p1.pythagorean_triplet()
    if triplet is None:
        raise ValueError("no solution found within the given constraints")
    return math.prod(triplet)


_PROBLEMS: dict[int, Callable[[], Answer]] = {
    1: p1.sum_multiples,
    2: p1.even_fibonacci_sum,
    3: p1.largest_prime_factor,
    4: p1.largest_palindrome_product,
    5: p1.smallest_multiple,
    6: p1.sum_square_difference,
    8: p1.largest_adjacent_product,
    9: _triplet_product,
    10: p1.sum_primes_below,
    11: p1.greatest_grid_product,
    12: p1.first_triangle_with_divisors,
    14: lambda: p1.longest_collatz_start()[0],
    16: p2.power_digit_sum,
    17: p2.letter_count,
    18: p2.max_path_sum,
    19: p2.count_first_sundays,
    20: p2.factorial_digit_sum,
    21: p2.amicable_sum,
    23: p2.non_abundant_sum,
    24: p2.nth_permutation,
    25: p2.fibonacci_index_with_digits,
    26: p3.longest_reciprocal_cycle,
    27: p3.quadratic_primes_product,
    28: p3.spiral_diagonal_sum,
    29: p3.distinct_powers,
    30: p3.digit_power_numbers_sum,
    32: p3.pandigital_products_sum,
    33: p3.digit_cancelling_denominator,
    34: p3.curious_numbers_sum,
    35: p3.count_circular_primes,
    36: p3.double_base_palindromes_sum,
    37: p3.truncatable_primes_sum,
    38: p3.largest_pandigital_multiple,
    39: p3.max_right_triangle_perimeter,
    40: p4.champernowne_product,
    41: p4.largest_pandigital_prime,
    43: p4.substring_divisible_sum,
    44: p4.minimal_pentagonal_difference,
    45: p4.next_triangle_pentagonal_hexagonal,
}

_FILE_PROBLEMS: dict[int, tuple[str, Callable[[Path], Answer]]] = {
    22: ("names.txt", lambda path: p2.names_total_score(p2.load_names(path))),
    42: ("words.txt", lambda path: p4.count_triangle_words(p4.load_words(path))),
}


def _available() -> list[int]:
    return sorted({*_PROBLEMS, *_FILE_PROBLEMS})


def answer(problem: int, data_file: str | Path | None = None) -> Answer:
    """Answer to a puzzle; puzzles 22 and 42 read their word list from data_file."""
    if problem in _FILE_PROBLEMS:
        default, solve_file = _FILE_PROBLEMS[problem]
        return solve_file(Path(default if data_file is None else data_file))
    try:
        solve = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"no solution for problem {problem}") from None
    return solve()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the answers to the puzzles named on the command line."""
    parser = argparse.ArgumentParser(
        prog="eulerkit",
        description="Print answers to number puzzles. Available: "
        + ", ".join(str(n) for n in _available()),
    )
    parser.add_argument("problems", nargs="+", type=int, metavar="PROBLEM")
    parser.add_argument(
        "--data-file",
        help="word list for puzzles 22 and 42 (defaults: names.txt, words.txt)",
    )
    args = parser.parse_args(argv)

    for problem in args.problems:
        if problem not in _available():
            print(f"error: no solution for problem {problem}", file=sys.stderr)
            return 2
        try:
            value = answer(problem, args.data_file)
        except OSError as exc:
            print(f"Error opening file: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(f"Problem {problem}: {value}")
    return 0