"""Number theory primitives backing the textbook RSA key generator and cipher.

Everything here operates on plain Python integers. As `int` is arbitrary precision, none of the products computed
below can overflow; the practical ceiling on magnitudes is the `O(sqrt(n))` trial division in `is_prime`, which is
why key generation samples primes from a small, fixed window.

Typical usage example:

    is_prime(97)
    p = generate_prime(100, 200, random.Random(42))
    d = mod_inverse(5, 9996)
    c = mod_pow(65, 5, 10403)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random
import secrets

from textbookrsa.errors import NotInvertible
from textbookrsa.errors import RangeExhausted


def is_prime(n: int) -> bool:
    """Deterministic primality test by trial division.

    Excludes 2 and then only tries odd divisors up to the integer square root of `n`.

    Args:
        n: Any integer.

    Returns:
        True if `n` is prime, False otherwise (including every `n < 2`).
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def primes_between(low: int, high: int) -> list[int]:
    """List all primes in the closed interval [`low`, `high`], ascending."""
    return [i for i in range(max(low, 2), high + 1) if is_prime(i)]


def generate_prime(low: int, high: int, rng: random.Random | None = None) -> int:
    """Pick a prime uniformly at random from the closed interval [`low`, `high`].

    Args:
        low: Lower bound of the interval, inclusive.
        high: Upper bound of the interval, inclusive.
        rng: Source of randomness. Defaults to `secrets.SystemRandom()`.
            Pass a seeded `random.Random` for reproducible results.

    Returns:
        A prime `p` with `low <= p <= high`.

    Raises:
        RangeExhausted: If the interval holds no prime.
    """
    candidates = primes_between(low, high)
    if not candidates:
        raise RangeExhausted(f"No prime numbers found in range {low}-{high}")
    if rng is None:
        rng = secrets.SystemRandom()
    return rng.choice(candidates)


def gcd(a: int, b: int) -> int:
    """Euclidean algorithm. The result is always non-negative."""
    while b != 0:
        a, b = b, a % b
    return abs(a)


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_inverse(a: int, m: int) -> int:
    """Compute the modular multiplicative inverse of `a` modulo `m`.

    Args:
        a: The value to invert.
        m: The modulus. Must be >= 1.

    Returns:
        `x` in range [0, m) with `a * x % m == 1`. For `m == 1` that is always 0.

    Raises:
        NotInvertible: If `gcd(a, m) != 1`.
        ValueError: If `m < 1`.
    """
    if m < 1:
        raise ValueError("Modulus must be >= 1")
    if m == 1:
        return 0
    g, x, _ = eea(a % m, m)
    if g != 1:
        raise NotInvertible(f"Modular inverse of {a} modulo {m} does not exist")
    if x < 0:
        x += m
    return x


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Modular exponentiation by right-to-left square-and-multiply.

    The base is reduced modulo `modulus` up front, so neither `base * base` nor `result * base` ever exceeds
    `(modulus - 1) ** 2`. Python integers do not overflow, so any modulus is arithmetically safe; a fixed-width
    port would need `modulus ** 2` to fit its integer type.

    Args:
        base: The base. May be negative or larger than `modulus`.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        `base ** exponent % modulus`.

    Raises:
        ValueError: If `exponent` is negative or `modulus < 1`.
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus < 1:
        raise ValueError("Modulus must be >= 1")
    if modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result
