"""Solutions to the first group of number puzzles."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence
from functools import reduce

DIGITS = (
    "73167176531330624919225119674426574742355349194934"
    "96983520312774506326239578318016984801869478851843"
    "85861560789112949495459501737958331952853208805511"
    "12540698747158523863050715693290963295227443043557"
    "66896648950445244523161731856403098711121722383113"
    "62229893423380308135336276614282806444486645238749"
    "30358907296290491560440772390713810515859307960866"
    "70172427121883998797908792274921901699720888093776"
    "65727333001053367881220235421809751254540594752243"
    "52584907711670556013604839586446706324415722155397"
    "53697817977846174064955149290862569321978468622482"
    "83972241375657056057490261407972968652414535100474"
    "82166370484403199890008895243450658541227588666881"
    "16427171479924442928230863465674813919123162824586"
    "17866458359124566529476545682848912883142607690042"
    "24219022671055626321111109370544217506941658960408"
    "07198403850962455444362981230987879927244284909188"
    "84580156166097919133875499200524063689912560717606"
    "05886116467109405077541002256983155200055935729725"
    "71636269561882670428252483600823257530420752963450"
)

GRID = (
    (8, 2, 22, 97, 38, 15, 0, 40, 0, 75, 4, 5, 7, 78, 52, 12, 50, 77, 91, 8),
    (49, 49, 99, 40, 17, 81, 18, 57, 60, 87, 17, 40, 98, 43, 69, 48, 4, 56, 62, 0),
    (81, 49, 31, 73, 55, 79, 14, 29, 93, 71, 40, 67, 53, 88, 30, 3, 49, 13, 36, 65),
    (52, 70, 95, 23, 4, 60, 11, 42, 69, 24, 68, 56, 1, 32, 56, 71, 37, 2, 36, 91),
    (22, 31, 16, 71, 51, 67, 63, 89, 41, 92, 36, 54, 22, 40, 40, 28, 66, 33, 13, 80),
    (24, 47, 32, 60, 99, 3, 45, 2, 44, 75, 33, 53, 78, 36, 84, 20, 35, 17, 12, 50),
    (32, 98, 81, 28, 64, 23, 67, 10, 26, 38, 40, 67, 59, 54, 70, 66, 18, 38, 64, 70),
    (67, 26, 20, 68, 2, 62, 12, 20, 95, 63, 94, 39, 63, 8, 40, 91, 66, 49, 94, 21),
    (24, 55, 58, 5, 66, 73, 99, 26, 97, 17, 78, 78, 96, 83, 14, 88, 34, 89, 63, 72),
    (21, 36, 23, 9, 75, 0, 76, 44, 20, 45, 35, 14, 0, 61, 33, 97, 34, 31, 33, 95),
    (78, 17, 53, 28, 22, 75, 31, 67, 15, 94, 3, 80, 4, 62, 16, 14, 9, 53, 56, 92),
    (16, 39, 5, 42, 96, 35, 31, 47, 55, 58, 88, 24, 0, 17, 54, 24, 36, 29, 85, 57),
    (86, 56, 0, 48, 35, 71, 89, 7, 5, 44, 44, 37, 44, 60, 21, 58, 51, 54, 17, 58),
    (19, 80, 81, 68, 5, 94, 47, 69, 28, 73, 92, 13, 86, 52, 17, 77, 4, 89, 55, 40),
    (4, 52, 8, 83, 97, 35, 99, 16, 7, 97, 57, 32, 16, 26, 26, 79, 33, 27, 98, 66),
    (88, 36, 68, 87, 57, 62, 20, 72, 3, 46, 33, 67, 46, 55, 12, 32, 63, 93, 53, 69),
    (4, 42, 16, 73, 38, 25, 39, 11, 24, 94, 72, 18, 8, 46, 29, 32, 40, 62, 76, 36),
    (20, 69, 36, 41, 72, 30, 23, 88, 34, 62, 99, 69, 82, 67, 59, 85, 74, 4, 36, 16),
    (20, 73, 35, 29, 78, 31, 90, 1, 74, 31, 49, 71, 48, 86, 81, 16, 23, 57, 5, 54),
    (1, 70, 54, 71, 83, 51, 54, 69, 16, 92, 33, 48, 61, 43, 52, 1, 89, 19, 67, 48),
)


def sum_multiples(limit: int = 1000) -> int:
    """Sum of the numbers below limit that are multiples of 3 or 5."""
    return sum(i for i in range(limit) if i % 3 == 0 or i % 5 == 0)


def even_fibonacci_sum(limit: int = 4_000_000) -> int:
    """Sum of the even Fibonacci terms (1, 2, 3, ...) not exceeding limit."""
    total = 0
    a, b = 1, 2
    while a <= limit:
        if a % 2 == 0:
            total += a
        a, b = b, a + b
    return total


def largest_prime_factor(n: int = 600_851_475_143) -> int:
    """Largest prime factor of n."""
    if n < 2:
        raise ValueError("n must be at least 2")
    largest = 1
    while n % 2 == 0:
        largest = 2
        n //= 2
    factor = 3
    while factor * factor <= n:
        while n % factor == 0:
            largest = factor
            n //= factor
        factor += 2
    return n if n > 2 else largest


def is_palindrome(n: int) -> bool:
    """True if the decimal digits of n read the same both ways."""
    text = str(n)
    return text == text[::-1]


def largest_palindrome_product() -> int:
    """Largest palindrome that is a product of two three-digit numbers."""
    best = 0
    for i in range(999, 99, -1):
        for j in range(i, 99, -1):
            product = i * j
            if product <= best:
                break
            if is_palindrome(product):
                best = product
    return best


def smallest_multiple(limit: int = 20) -> int:
    """Smallest positive number divisible by every number from 1 to limit."""
    return reduce(math.lcm, range(2, limit + 1), 1)


def square_sum(n: int) -> int:
    """Square of the sum of 1..n."""
    return (n * (n + 1) // 2) ** 2


def sum_squares(n: int) -> int:
    """Sum of the squares of 1..n."""
    return sum(i * i for i in range(1, n + 1))


def sum_square_difference(n: int = 100) -> int:
    """Absolute difference between square_sum(n) and sum_squares(n)."""
    return abs(square_sum(n) - sum_squares(n))


def largest_adjacent_product(digits: str = DIGITS, span: int = 13) -> int:
    """Greatest product of span adjacent digits; 0 if there is no window."""
    values = [int(ch) for ch in digits]
    return max(
        (math.prod(values[start:start + span])
         for start in range(len(values) - span + 1)),
        default=0,
    )


def pythagorean_triplet(total: int = 1000) -> tuple[int, int, int] | None:
    """First (a, b, c) with a + b + c == total and a^2 + b^2 == c^2."""
    for a in range(1, total + 1):
        for b in range(1, total + 1):
            c = total - a - b
            if c > 0 and a * a + b * b == c * c:
                return a, b, c
    return None


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def sum_primes_below(limit: int = 2_000_000) -> int:
    """Sum of all primes below limit."""
    if limit < 3:
        return 0
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, limit, i)))
    return sum(itertools.compress(range(limit), sieve))


_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def greatest_grid_product(grid: Sequence[Sequence[int]] = GRID, run: int = 4) -> int:
    """Greatest product of run adjacent cells in a row, column or diagonal."""
    if run < 1:
        raise ValueError("run must be positive")
    best = 0
    for r, row in enumerate(grid):
        for c in range(len(row)):
            for dr, dc in _DIRECTIONS:
                cells = [(r + k * dr, c + k * dc) for k in range(run)]
                if all(0 <= y < len(grid) and 0 <= x < len(grid[y]) for y, x in cells):
                    best = max(best, math.prod(grid[y][x] for y, x in cells))
    return best


def triangle_number(n: int) -> int:
    """The n-th triangle number."""
    return n * (n + 1) // 2


def divisor_count(n: int) -> int:
    """Number of positive divisors of n."""
    total = 0
    for i in range(1, math.isqrt(n) + 1 if n > 0 else 1):
        if n % i == 0:
            total += 1 if i * i == n else 2
    return total


def first_triangle_with_divisors(count: int = 500) -> int:
    """First triangle number with more than count divisors."""
    for n in itertools.count(1):
        value = triangle_number(n)
        if divisor_count(value) > count:
            return value
    raise AssertionError("unreachable")


def collatz_length(n: int) -> int:
    """Number of terms in the Collatz chain starting at n, both ends included."""
    if n < 1:
        raise ValueError("n must be positive")
    length = 1
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def longest_collatz_start(limit: int = 1_000_000) -> tuple[int, int]:
    """Start below limit with the longest Collatz chain, and that length."""
    cache = {1: 1}
    best = (0, 0)
    for start in range(1, limit):
        path = []
        n = start
        while n not in cache:
            path.append(n)
            n = n // 2 if n % 2 == 0 else 3 * n + 1
        length = cache[n]
        for m in reversed(path):
            length += 1
            cache[m] = length
        if cache[start] > best[1]:
            best = (start, cache[start])
    return best