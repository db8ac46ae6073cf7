import pytest

from eulerkit.problems_01_14 import is_prime
from eulerkit.problems_26_39 import (
    concatenated_product,
    consecutive_primes,
    count_circular_primes,
    count_right_triangles,
    curious_numbers_sum,
    digit_cancelling_denominator,
    digit_factorial_sum,
    digit_power_numbers_sum,
    digit_power_sum,
    distinct_powers,
    double_base_palindromes_sum,
    is_circular_prime,
    is_palindromic_binary,
    is_palindromic_decimal,
    is_pandigital,
    is_pandigital_product,
    is_truncatable_prime,
    largest_pandigital_multiple,
    longest_reciprocal_cycle,
    max_right_triangle_perimeter,
    pandigital_products_sum,
    quadratic_primes_product,
    reciprocal_cycle_length,
    spiral_diagonal_sum,
    truncatable_primes_sum,
)


@pytest.mark.parametrize("d", [1, 2, 4, 5, 8, 10, 16, 20, 25])
def test_terminating_decimals_have_no_cycle(d):
    assert reciprocal_cycle_length(d) == 0


@pytest.mark.parametrize("d", [3, 7, 11, 13, 17, 97])
def test_cycle_length_divides_prime_minus_one(d):
    length = reciprocal_cycle_length(d)
    assert length > 0
    assert (d - 1) % length == 0


def test_cycle_length_rejects_non_positive():
    with pytest.raises(ValueError):
        reciprocal_cycle_length(0)


def test_longest_reciprocal_cycle_is_maximal():
    best = longest_reciprocal_cycle(60)
    assert 2 <= best < 60
    assert all(
        reciprocal_cycle_length(d) <= reciprocal_cycle_length(best) for d in range(2, 60)
    )


def test_longest_reciprocal_cycle_default():
    assert longest_reciprocal_cycle() == 983


def test_consecutive_primes_of_euler_polynomial():
    run = consecutive_primes(1, 41)
    assert all(is_prime(n * n + n + 41) for n in range(run))
    assert not is_prime(run * run + run + 41)


def test_quadratic_primes_product_default():
    assert quadratic_primes_product() == -59231


def test_spiral_diagonal_sum_small():
    assert spiral_diagonal_sum(1) == 1
    assert spiral_diagonal_sum(3) == 1 + 3 + 5 + 7 + 9


@pytest.mark.parametrize("n", [5, 7, 9, 101])
def test_spiral_ring_adds_its_corners(n):
    corners = sum(n * n - k * (n - 1) for k in range(4))
    assert spiral_diagonal_sum(n) - spiral_diagonal_sum(n - 2) == corners


def test_spiral_rejects_zero():
    with pytest.raises(ValueError):
        spiral_diagonal_sum(0)


def test_distinct_powers_without_collisions():
    assert distinct_powers(3) == (3 - 1) ** 2


def test_distinct_powers_with_collision():
    assert distinct_powers(4) == (4 - 1) ** 2 - 1


@pytest.mark.parametrize("n", [1634, 8208, 9474])
def test_digit_power_sum_fixed_points(n):
    assert digit_power_sum(n, 4) == n


def test_digit_power_numbers_sum_fourth_powers():
    assert digit_power_numbers_sum(4) == 1634 + 8208 + 9474


def test_pandigital_product_identity():
    assert is_pandigital_product(39, 186, 7254)
    assert not is_pandigital_product(1, 2, 3)
    assert not is_pandigital_product(11, 186, 7254)


def test_pandigital_products_sum():
    assert pandigital_products_sum() == 45228


def test_digit_cancelling_denominator():
    assert digit_cancelling_denominator() == 100


@pytest.mark.parametrize("n", [145, 40585])
def test_digit_factorial_fixed_points(n):
    assert digit_factorial_sum(n) == n


def test_curious_numbers_sum():
    assert curious_numbers_sum(146) == 145
    assert curious_numbers_sum() == 145 + 40585


def test_circular_primes():
    assert is_circular_prime(197)
    assert is_circular_prime(971)
    assert not is_circular_prime(19)
    assert not is_circular_prime(1)


def test_count_circular_primes_matches_predicate():
    assert count_circular_primes(100) == sum(
        1 for n in range(100) if is_circular_prime(n)
    )


def test_palindromes():
    assert is_palindromic_decimal(585)
    assert is_palindromic_binary(585)
    assert not is_palindromic_decimal(12)
    assert not is_palindromic_binary(6)


def test_double_base_palindromes_sum_small():
    assert double_base_palindromes_sum(10) == 1 + 3 + 5 + 7 + 9


def test_double_base_palindromes_sum_consistent():
    assert double_base_palindromes_sum(1000) == sum(
        n for n in range(1, 1000) if is_palindromic_decimal(n) and is_palindromic_binary(n)
    )


def test_truncatable_primes():
    assert is_truncatable_prime(3797)
    assert is_truncatable_prime(23)
    assert not is_truncatable_prime(7)
    assert not is_truncatable_prime(29)


def test_truncatable_primes_sum():
    assert truncatable_primes_sum() == 748317


def test_is_pandigital():
    assert is_pandigital(192384576)
    assert not is_pandigital(123456780)
    assert not is_pandigital(12345678)


def test_concatenated_product():
    assert concatenated_product(192, 3) == int("192" + "384" + "576")
    assert concatenated_product(9, 5) == int("9" + "18" + "27" + "36" + "45")


def test_largest_pandigital_multiple():
    result = largest_pandigital_multiple()
    assert is_pandigital(result)
    assert result >= concatenated_product(9, 5)
    assert result == 932718654


def test_count_right_triangles_example():
    assert count_right_triangles(120) == 3
    assert count_right_triangles(12) == 1
    assert count_right_triangles(11) == 0


def test_max_right_triangle_perimeter_is_maximal():
    best = max_right_triangle_perimeter(200)
    assert all(count_right_triangles(p) <= count_right_triangles(best) for p in range(1, 200))


def test_max_right_triangle_perimeter_default():
    assert max_right_triangle_perimeter() == 840