"""Solutions to the third group of number puzzles."""

from __future__ import annotations

import math
from collections import Counter
from fractions import Fraction
from functools import lru_cache

from eulerkit.problems_01_14 import is_prime

_SIEVE_LIMIT = 1_000_000


@lru_cache(maxsize=None)
def _sieve(size: int) -> bytearray:
    table = bytearray([1]) * size
    table[0:2] = b"\x00\x00"[: min(2, size)]
    for i in range(2, math.isqrt(max(size - 1, 0)) + 1):
        if table[i]:
            table[i * i::i] = bytes(len(range(i * i, size, i)))
    return table


def _fast_prime(n: int) -> bool:
    if 0 <= n < _SIEVE_LIMIT:
        return bool(_sieve(_SIEVE_LIMIT)[n])
    return is_prime(n)


def reciprocal_cycle_length(d: int) -> int:
    """Length of the recurring cycle in the decimal expansion of 1/d; 0 if it terminates."""
    if d < 1:
        raise ValueError("d must be positive")
    seen: dict[int, int] = {}
    remainder = 1 % d
    position = 0
    while remainder != 0 and remainder not in seen:
        seen[remainder] = position
        remainder = remainder * 10 % d
        position += 1
    return 0 if remainder == 0 else position - seen[remainder]


def longest_reciprocal_cycle(limit: int = 1000) -> int:
    """The d below limit whose reciprocal has the longest recurring cycle; 0 if none."""
    best_length, best_d = 0, 0
    for d in range(2, limit):
        length = reciprocal_cycle_length(d)
        if length > best_length:
            best_length, best_d = length, d
    return best_d


def consecutive_primes(a: int, b: int) -> int:
    """Number of consecutive n from 0 for which n^2 + a*n + b is prime."""
    n = 0
    while _fast_prime(n * n + a * n + b):
        n += 1
    return n


def quadratic_primes_product(limit: int = 1000) -> int:
    """Product a*b of the quadratic n^2 + a*n + b (|a| < limit, b <= limit) giving most primes."""
    primes_b = [b for b in range(2, limit + 1) if _fast_prime(b)]
    best_run, product = 0, 0
    for a in range(-limit + 1, limit):
        for b in primes_b:
            run = consecutive_primes(a, b)
            if run > best_run:
                best_run, product = run, a * b
    return product


def spiral_diagonal_sum(size: int = 1001) -> int:
    """Sum of the diagonals of a size-by-size number spiral starting at 1."""
    if size < 1:
        raise ValueError("size must be positive")
    total = current = 1
    for step in range(2, size + 1, 2):
        for _ in range(4):
            current += step
            total += current
    return total


def distinct_powers(limit: int = 100) -> int:
    """Number of distinct values a**b for 2 <= a, b <= limit."""
    return len({a**b for a in range(2, limit + 1) for b in range(2, limit + 1)})


def digit_power_sum(n: int, power: int) -> int:
    """Sum of the decimal digits of n, each raised to power."""
    return sum(int(ch) ** power for ch in str(abs(n)))


def digit_power_numbers_sum(power: int = 5) -> int:
    """Sum of the numbers of two or more digits equal to their digit_power_sum."""
    upper = power * 9**power
    return sum(n for n in range(10, upper + 1) if digit_power_sum(n, power) == n)


def is_pandigital_product(a: int, b: int, c: int) -> bool:
    """True if the digits of a, b and c together use each of 1..9 exactly once."""
    counts = Counter(f"{a}{b}{c}")
    return all(counts[str(d)] == 1 for d in range(1, 10))


def pandigital_products_sum() -> int:
    """Sum of the distinct products below 10000 whose identity a*b=c is 1-9 pandigital."""
    products = set()
    for a in range(1, 10000):
        for b in range(1, 10000):
            product = a * b
            if product > 9999:
                break
            if is_pandigital_product(a, b, product):
                products.add(product)
    return sum(products)


def digit_cancelling_denominator() -> int:
    """Denominator, in lowest terms, of the product of the curious digit-cancelling fractions."""
    product = Fraction(1)
    for numerator in range(10, 100):
        for denominator in range(numerator + 1, 100):
            n1, n2 = divmod(numerator, 10)
            d1, d2 = divmod(denominator, 10)
            if n2 == 0 and d2 == 0:
                continue
            if n1 == d1 and numerator * d2 == denominator * n2:
                product *= Fraction(n2, d2)
            elif n1 == d2 and numerator * d1 == denominator * n2:
                product *= Fraction(n2, d1)
            elif n2 == d1 and numerator * d2 == denominator * n1:
                product *= Fraction(n1, d2)
            elif n2 == d2 and numerator * d1 == denominator * n1:
                product *= Fraction(n1, d1)
    return product.denominator


def digit_factorial_sum(n: int) -> int:
    """Sum of the factorials of the decimal digits of n."""
    return sum(math.factorial(int(ch)) for ch in str(abs(n)))


def curious_numbers_sum(limit: int = 100_000) -> int:
    """Sum of the numbers from 10 below limit equal to their digit_factorial_sum."""
    return sum(n for n in range(10, limit) if digit_factorial_sum(n) == n)


def is_circular_prime(n: int) -> bool:
    """True if n and every rotation of its digits are prime."""
    if not _fast_prime(n):
        return False
    text = str(n)
    return all(_fast_prime(int(text[k:] + text[:k])) for k in range(1, len(text)))


def count_circular_primes(limit: int = 1_000_000) -> int:
    """Number of circular primes below limit."""
    return sum(1 for n in range(2, limit) if is_circular_prime(n))


def is_palindromic_decimal(n: int) -> bool:
    """True if n reads the same both ways in base 10."""
    text = str(n)
    return text == text[::-1]


def is_palindromic_binary(n: int) -> bool:
    """True if n reads the same both ways in base 2."""
    text = format(n, "b")
    return text == text[::-1]


def double_base_palindromes_sum(limit: int = 1_000_000) -> int:
    """Sum of the positive numbers below limit palindromic in bases 10 and 2."""
    return sum(
        n for n in range(1, limit)
        if is_palindromic_decimal(n) and is_palindromic_binary(n)
    )


def is_truncatable_prime(n: int) -> bool:
    """True if n >= 10 stays prime when digits are removed from either end."""
    if n < 10:
        return False
    base = 10
    rest = n
    while rest > 0:
        if not _fast_prime(rest) or not _fast_prime(n % base):
            return False
        base *= 10
        rest //= 10
    return True


def truncatable_primes_sum() -> int:
    """Sum of the eleven primes truncatable from both ends."""
    total = found = 0
    for n in range(23, _SIEVE_LIMIT, 2):
        if found >= 11:
            break
        if is_truncatable_prime(n):
            total += n
            found += 1
    return total


def is_pandigital(n: int) -> bool:
    """True if the digits of n are exactly 1..9, each once."""
    return "".join(sorted(str(n))) == "123456789"


def concatenated_product(num: int, n: int) -> int:
    """Concatenation of num*1, num*2, ..., num*n, stopping once nine digits are reached."""
    text = ""
    for i in range(1, n + 1):
        text += str(num * i)
        if len(text) >= 9:
            break
    return int(text) if text else 0


def largest_pandigital_multiple() -> int:
    """Largest 1-9 pandigital number formed as a concatenated product with n > 1."""
    best = 0
    for num in range(1, 10000):
        for n in range(2, 10):
            product = concatenated_product(num, n)
            if len(str(product)) == 9 and is_pandigital(product):
                best = max(best, product)
    return best


def count_right_triangles(p: int) -> int:
    """Number of integer right triangles a <= b < c with perimeter p."""
    total = 0
    for a in range(1, p // 3 + 1):
        numerator = p * (p - 2 * a)
        denominator = 2 * (p - a)
        if numerator % denominator:
            continue
        b = numerator // denominator
        if a <= b <= (p - a) // 2:
            total += 1
    return total


def max_right_triangle_perimeter(limit: int = 1000) -> int:
    """The perimeter below limit with the most integer right triangles; 0 if none."""
    best_count, best_p = 0, 0
    for p in range(1, limit):
        solutions = count_right_triangles(p)
        if solutions > best_count:
            best_count, best_p = solutions, p
    return best_p