import math

import pytest

from dsakit.numbers import (
    binary_to_decimal,
    count_primes,
    decimal_to_binary,
    digit_count,
    digit_sum,
    gcd,
    gcd_brute,
    gcd_subtractive,
    is_armstrong,
    is_palindrome_number,
    is_prime,
    lcm,
    n_choose_r,
    power,
    primes_up_to,
    reverse_number,
    triangular,
)


def test_is_prime_source_example():
    assert is_prime(47) is True


@pytest.mark.parametrize("a, b", [(2, 2), (3, 7), (5, 11), (13, 17)])
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("n", [-5, 0, 1])
def test_small_numbers_are_not_prime(n):
    assert is_prime(n) is False


def test_primes_up_to_are_all_prime_and_complete():
    primes = primes_up_to(60)
    assert all(is_prime(p) for p in primes)
    assert [p for p in range(61) if is_prime(p)] == primes


@pytest.mark.parametrize("n", [0, 1, 2, 3, 11, 50, 101])
def test_count_primes_matches_prime_list(n):
    assert count_primes(n) == len(primes_up_to(n - 1))


def test_digit_sum_ignores_trailing_zeros():
    assert digit_sum(7860) == digit_sum(786)


@pytest.mark.parametrize("digit", range(10))
def test_digit_sum_of_single_digit(digit):
    assert digit_sum(digit) == digit


def test_digit_sum_keeps_sign():
    assert digit_sum(-7860) == -digit_sum(7860)


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, 7860, 123456789])
def test_digit_count_matches_text_length(n):
    assert digit_count(n) == len(str(n))


def test_digit_count_rejects_zero():
    with pytest.raises(ValueError):
        digit_count(0)


@pytest.mark.parametrize("n", [153, 371])
def test_armstrong_examples(n):
    assert is_armstrong(n) is True


def test_non_armstrong():
    assert is_armstrong(372) is False


@pytest.mark.parametrize("a", range(0, 30))
@pytest.mark.parametrize("b", [0, 1, 12, 20, 28])
def test_gcd_variants_agree_with_math(a, b):
    expected = math.gcd(a, b)
    assert gcd(a, b) == expected
    assert gcd_brute(a, b) == expected
    assert gcd_subtractive(a, b) == expected


@pytest.mark.parametrize("a, b", [(20, 28), (4, 6), (7, 13), (0, 9)])
def test_lcm_agrees_with_math(a, b):
    assert lcm(a, b) == math.lcm(a, b)


def test_lcm_times_gcd_is_product():
    assert lcm(20, 28) * gcd(20, 28) == 20 * 28


def test_lcm_of_zeros_raises():
    with pytest.raises(ValueError):
        lcm(0, 0)


def test_gcd_rejects_negative():
    with pytest.raises(ValueError):
        gcd(-4, 6)


def test_reverse_number_example():
    assert reverse_number(4537) == 7354


@pytest.mark.parametrize("n", [4537, 1, 12345, -98])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


def test_palindrome_numbers():
    assert is_palindrome_number(32023) is True
    assert is_palindrome_number(4537) is False
    assert is_palindrome_number(-121) is False


@pytest.mark.parametrize("n", [0, 1, 5, 10, 100])
def test_triangular_matches_sum(n):
    assert triangular(n) == sum(range(n + 1))


def test_n_choose_r_source_example():
    assert n_choose_r(6, 3) == 20


@pytest.mark.parametrize("n, r", [(0, 0), (5, 2), (10, 10), (3, 5), (12, 4)])
def test_n_choose_r_agrees_with_math(n, r):
    assert n_choose_r(n, r) == math.comb(n, r)


def test_n_choose_r_rejects_negative():
    with pytest.raises(ValueError):
        n_choose_r(-1, 2)


@pytest.mark.parametrize("n", range(0, 40))
def test_decimal_to_binary_matches_bin(n):
    assert decimal_to_binary(n) == int(bin(n)[2:])


@pytest.mark.parametrize("n", range(0, 64))
def test_binary_round_trip(n):
    assert binary_to_decimal(decimal_to_binary(n)) == n


def test_binary_to_decimal_rejects_non_binary_digits():
    with pytest.raises(ValueError):
        binary_to_decimal(12)


def test_decimal_to_binary_rejects_negative():
    with pytest.raises(ValueError):
        decimal_to_binary(-1)


def test_power_source_example():
    assert power(3, 5) == 243.0


@pytest.mark.parametrize(
    "x, n", [(2.0, 10), (2.0, -2), (1.5, 3), (-2.0, 5), (0.5, -3), (10.0, 0)]
)
def test_power_agrees_with_builtin(x, n):
    assert power(x, n) == pytest.approx(x ** n)


def test_power_special_cases():
    assert power(-1, 7) == -1.0
    assert power(-1, 8) == 1.0
    assert power(0, 5) == 0.0
    assert power(1, -100) == 1.0