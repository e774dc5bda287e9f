"""Number utilities: primes, digits, GCD/LCM, base-2 conversion and fast powers."""

import math


def _require_non_negative(**named):
    for name, value in named.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def is_prime(n):
    """True if ``n`` is prime, testing divisors up to the square root."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def primes_up_to(n):
    """Return every prime from 2 to ``n`` inclusive, in ascending order."""
    return [candidate for candidate in range(2, n + 1) if is_prime(candidate)]


def count_primes(n):
    """Count the primes strictly less than ``n`` with the sieve of Eratosthenes."""
    if n <= 2:
        return 0
    sieve = [True] * n
    count = 0
    for i in range(2, n):
        if sieve[i]:
            count += 1
            for multiple in range(i * 2, n, i):
                sieve[multiple] = False
    return count


def _digits(n):
    """Yield the decimal digits of ``abs(n)`` from least to most significant."""
    n = abs(n)
    while n:
        n, digit = divmod(n, 10)
        yield digit


def _signed(n, magnitude):
    return -magnitude if n < 0 else magnitude


def digit_sum(n):
    """Sum of the decimal digits of ``n``; negative input gives a negative sum."""
    return _signed(n, sum(_digits(n)))


def digit_count(n):
    """Number of decimal digits in a positive integer.

    Raises ValueError if ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    return len(str(n))


def is_armstrong(n):
    """True if ``n`` equals the sum of the cubes of its digits."""
    return _signed(n, sum(digit ** 3 for digit in _digits(n))) == n


def gcd_brute(a, b):
    """Greatest common divisor by trying every candidate up to ``min(a, b)``."""
    _require_non_negative(a=a, b=b)
    if min(a, b) == 0:
        return max(a, b)
    best = 1
    for candidate in range(1, min(a, b) + 1):
        if a % candidate == 0 and b % candidate == 0:
            best = candidate
    return best


def gcd_subtractive(a, b):
    """Greatest common divisor by repeatedly reducing the larger value modulo the smaller."""
    _require_non_negative(a=a, b=b)
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def gcd(a, b):
    """Greatest common divisor by Euclid's algorithm."""
    _require_non_negative(a=a, b=b)
    while b:
        a, b = b, a % b
    return a


def lcm(a, b):
    """Least common multiple, computed as ``a * b // gcd(a, b)``.

    Raises ValueError when both arguments are zero.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm is undefined when both arguments are zero")
    return a * b // divisor


def reverse_number(n):
    """Reverse the decimal digits of ``n``, keeping its sign."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return _signed(n, reversed_value)


def is_palindrome_number(n):
    """True if ``n`` is non-negative and reads the same reversed."""
    return n >= 0 and reverse_number(n) == n


def triangular(n):
    """Sum of the integers from 1 to ``n`` in constant time."""
    return n * (n + 1) // 2


def n_choose_r(n, r):
    """Binomial coefficient ``n! / (r! (n - r)!)``; zero when ``r`` exceeds ``n``.

    Raises ValueError for negative arguments.
    """
    _require_non_negative(n=n, r=r)
    if r > n:
        return 0
    return math.factorial(n) // (math.factorial(r) * math.factorial(n - r))


def decimal_to_binary(n):
    """Return the binary digits of ``n`` written as a decimal integer (5 -> 101).

    Raises ValueError for negative ``n``.
    """
    _require_non_negative(n=n)
    result, place = 0, 1
    while n > 0:
        n, bit = divmod(n, 2)
        result += bit * place
        place *= 10
    return result


def binary_to_decimal(n):
    """Interpret the decimal digits of ``n`` as a binary number (101 -> 5).

    Raises ValueError for negative ``n`` or any digit other than 0 or 1.
    """
    _require_non_negative(n=n)
    result, place = 0, 1
    for digit in _digits(n):
        if digit > 1:
            raise ValueError(f"{n} is not made of binary digits")
        result += digit * place
        place *= 2
    return result


def power(x, n):
    """Raise ``x`` to the integer power ``n`` by binary exponentiation, as a float."""
    if n == 0:
        return 1.0
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x == -1:
        return 1.0 if n % 2 == 0 else -1.0
    base = float(x)
    exponent = n
    if exponent < 0:
        base = 1 / base
        exponent = -exponent
    result = 1.0
    while exponent > 0:
        if exponent % 2 == 1:
            result *= base
        base *= base
        exponent //= 2
    return result