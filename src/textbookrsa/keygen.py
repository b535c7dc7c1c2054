"""Textbook RSA key generation over small primes.

Combines two distinct primes from a small sampling window into a public/private key pair. The window is kept small
on purpose: primality is established by trial division, and every modulus must stay cheap to work with by hand.

Typical usage example:

    kp = generate_key_pair()
    kp = generate_key_pair(rng=random.Random(7))
    kp = generate_key_pair(prime_range=(1000, 2000))
    print(kp.public_key.n, kp.public_key.e, kp.private_key.d)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
import secrets
import typing

from textbookrsa import numtheory
from textbookrsa.errors import KeyTooSmall
from textbookrsa.errors import RangeExhausted

logger = logging.getLogger(__name__)

DEFAULT_PRIME_RANGE: tuple[int, int] = (100, 200)
DEFAULT_PUBLIC_EXPONENT: int = 65537
# Strictly above the largest 7-bit ASCII code, with headroom.
MIN_MODULUS: int = 256
MAX_RESAMPLES: int = 1000


class PublicKey(typing.NamedTuple):
    """Public half of a key pair.

    Attributes:
        n: The modulus.
        e: The public exponent.
    """
    n: int
    e: int


class PrivateKey(typing.NamedTuple):
    """Private half of a key pair.

    Attributes:
        n: The modulus, shared with the matching public key.
        d: The private exponent.
    """
    n: int
    d: int


class KeyPair(typing.NamedTuple):
    """A generated key pair along with the primes it was built from.

    The primes are only retained for display and key-file export; no cipher operation needs them.
    """
    public_key: PublicKey
    private_key: PrivateKey
    p: int
    q: int


def choose_public_exponent(phi: int, preferred: int = DEFAULT_PUBLIC_EXPONENT) -> int:
    """Select the public exponent for a given totient.

    Uses `preferred` when it is below `phi` and coprime to it. Otherwise falls back to the smallest odd value from 3
    upward that is coprime to `phi`, giving up the search once it reaches `phi`. Only coprimality is required, the
    exponent does not have to be prime.

    Args:
        phi: Euler's totient of the modulus.
        preferred: The exponent to try first. Defaults to 65537.

    Returns:
        The public exponent. If the fallback search runs out, the (non-coprime) value it stopped at, which the
        subsequent modular inverse will reject.
    """
    if preferred < phi and numtheory.gcd(preferred, phi) == 1:
        return preferred
    e = 3
    while e < phi and numtheory.gcd(e, phi) != 1:
        e += 2
    return e


def _draw_distinct_primes(low: int, high: int, rng: random.Random, max_resamples: int) -> tuple[int, int]:
    p = numtheory.generate_prime(low, high, rng)
    for _ in range(max_resamples):
        q = numtheory.generate_prime(low, high, rng)
        if q != p:
            return p, q
    raise RangeExhausted(f"No second distinct prime found in range {low}-{high} after {max_resamples} draws")


def generate_key_pair(prime_range: tuple[int, int] = DEFAULT_PRIME_RANGE,
                      rng: random.Random | None = None,
                      max_resamples: int = MAX_RESAMPLES,
                      min_modulus: int = MIN_MODULUS) -> KeyPair:
    """Generates a textbook RSA key pair.

    Draws two distinct primes from `prime_range`, derives the modulus and totient, picks the public exponent with
    `choose_public_exponent` and inverts it to get the private exponent.

    Widening `prime_range` grows the modulus. Arithmetic stays exact at any size since Python integers do not
    overflow, but prime sampling costs `O(sqrt(high))` per candidate, so keep the range modest.

    Args:
        prime_range: Closed interval (low, high) to sample both primes from. Defaults to (100, 200).
        rng: Source of randomness. Defaults to `secrets.SystemRandom()`.
        max_resamples: How often to redraw the second prime when it equals the first.
        min_modulus: Smallest acceptable modulus. Defaults to 256.

    Returns:
        The generated `KeyPair`.

    Raises:
        ValueError: If `prime_range` is not an ordered pair.
        RangeExhausted: If the range holds no prime, or never yields a second distinct one.
        KeyTooSmall: If the modulus is below `min_modulus`.
    """
    low, high = prime_range
    if low > high:
        raise ValueError(f"Invalid prime range {low}-{high}")
    if rng is None:
        rng = secrets.SystemRandom()
    p, q = _draw_distinct_primes(low, high, rng, max_resamples)
    n = p * q
    phi = (p - 1) * (q - 1)
    e = choose_public_exponent(phi)
    d = numtheory.mod_inverse(e, phi)
    logger.debug("Generated primes p=%d q=%d, n=%d phi=%d e=%d", p, q, n, phi, e)
    if n < min_modulus:
        raise KeyTooSmall(f"Generated key size {n} too small for ASCII encryption (need at least {min_modulus})")
    return KeyPair(PublicKey(n, e), PrivateKey(n, d), p, q)
