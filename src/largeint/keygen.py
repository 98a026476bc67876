"""Key derivation for textbook RSA on LargeInteger arithmetic.

Given two probable primes, the modulus and totient are computed with LargeInteger operations and the public exponent
is searched upward from a small odd seed until extended Euclid reports it coprime to the totient. The matching Bezout
coefficient becomes the private exponent.

Typical usage example:

    (e, n), (d, _) = generate_key_pair(256)
    (e, n), (d, n, p, q) = derive_key_pair(p, q, expose_primes=True)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
from typing import Callable, Literal, overload

from largeint import errors
from largeint import numtheory
from largeint.integer import LargeInteger
from largeint.integer import ONE
from largeint.integer import TWO

logger = logging.getLogger(__name__)

DEFAULT_PRIME_BITS: int = 256
DEFAULT_EXPONENT_SEED: int = 3
MAX_EXPONENT_CANDIDATES: int = 1 << 16

PublicPair = tuple[LargeInteger, LargeInteger]
PrivatePair = tuple[LargeInteger, LargeInteger]
ExposedPrivate = tuple[LargeInteger, LargeInteger, LargeInteger, LargeInteger]


def totient(p: LargeInteger, q: LargeInteger) -> LargeInteger:
    return p.subtract(ONE).multiply(q.subtract(ONE))


def find_public_exponent(
    tot: LargeInteger,
    seed: int = DEFAULT_EXPONENT_SEED,
    max_candidates: int = MAX_EXPONENT_CANDIDATES,
) -> tuple[LargeInteger, LargeInteger]:
    """Searches the smallest usable public exponent and its private counterpart.

    Odd candidates starting at `seed` are checked with extended Euclid against the totient. The first candidate with
    a gcd of one wins, and its Bezout coefficient, moved into [0, tot), is the private exponent.

    Args:
        tot: The totient of the modulus.
        seed: First public exponent candidate. Must be odd and at least 3.
        max_candidates: How many candidates to try before giving up.

    Returns:
        Tuple of (public exponent, private exponent).

    Raises:
        ValueError: If `seed` is even or smaller than 3.
        KeyGenerationFailure: If no coprime exponent below the totient shows up within `max_candidates` tries.
    """
    if seed < 3 or seed % 2 == 0:
        raise ValueError("Public exponent seed must be odd and at least 3.")
    e = LargeInteger.from_int(seed)
    for attempt in range(max_candidates):
        if e.compare(tot) != -1:
            break
        g, _, y = numtheory.xgcd(tot, e)
        if g.is_one():
            d = y.add(tot) if y.is_negative() else y.mod(tot)
            logger.debug("Public exponent %d accepted after %d candidates", int(e), attempt + 1)
            return e, d
        e = e.add(TWO)
    raise errors.KeyGenerationFailure(f"No public exponent coprime to the totient found from seed {seed}.")


@overload
def derive_key_pair(p: LargeInteger,
                    q: LargeInteger,
                    seed: int = DEFAULT_EXPONENT_SEED,
                    expose_primes: Literal[False] = False) -> tuple[PublicPair, PrivatePair]:
    ...


@overload
def derive_key_pair(p: LargeInteger,
                    q: LargeInteger,
                    seed: int = DEFAULT_EXPONENT_SEED,
                    expose_primes: Literal[True] = False) -> tuple[PublicPair, ExposedPrivate]:
    ...


def derive_key_pair(
    p: LargeInteger,
    q: LargeInteger,
    seed: int = DEFAULT_EXPONENT_SEED,
    expose_primes: bool = False,
) -> tuple[PublicPair, PrivatePair] | tuple[PublicPair, ExposedPrivate]:
    """Derives an RSA key pair from two primes.

    Args:
        p: The first prime.
        q: The second prime, distinct from `p`.
        seed: First public exponent candidate.
        expose_primes: Whether to return the primes with the private part. Defaults to False.

    Returns:
        A tuple of (public, private) sub-tuples (exponent, modulus), or if exposed for the private
        (exponent, modulus, p, q).

    Raises:
        ValueError: If `p` equals `q`.
    """
    if p.compare(q) == 0:
        raise ValueError("The two primes must be distinct.")
    n = p.multiply(q)
    e, d = find_public_exponent(totient(p, q), seed)
    logger.info("Derived key pair with %d byte modulus", len(n.stripped()))
    if not expose_primes:
        return (e, n), (d, n)
    return (e, n), (d, n, p, q)


def generate_key_pair(
    bits: int = DEFAULT_PRIME_BITS,
    seed: int = DEFAULT_EXPONENT_SEED,
    randbits: Callable[[int], int] | None = None,
) -> tuple[PublicPair, PrivatePair]:
    """Generates an RSA key pair from two fresh probable primes.

    Args:
        bits: The bit length of each prime. The modulus is roughly twice as long.
        seed: First public exponent candidate.
        randbits: Source of random bits handed to the prime provider.

    Returns:
        A tuple of (public, private) sub-tuples (exponent, modulus).

    Raises:
        ValueError: If `bits` is too small to hold two distinct primes.
    """
    if bits < 3:
        raise ValueError("Primes must be at least 3 bits long.")
    p = LargeInteger.probable_prime(bits, randbits)
    q = LargeInteger.probable_prime(bits, randbits)
    while p.compare(q) == 0:  # (Un)Likely story.
        q = LargeInteger.probable_prime(bits, randbits)
    return derive_key_pair(p, q, seed)
