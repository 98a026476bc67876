"""Probable prime provider used by key generation.

Candidates of the requested length are drawn from a random bit source and handed to sympy's primality test
(trial division, then a strong Baillie-PSW check). This is the one place in the package that works on Python
integers directly: it stands in for a platform's `probablePrime(bits, rng)` and hands its results over to
LargeInteger.

Typical usage example:

    p = probable_prime(256)
    check_prime(p)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import secrets
from typing import Callable

import sympy

from largeint import errors

logger = logging.getLogger(__name__)

CANDIDATES_PER_BIT: int = 50


def check_prime(candidate: int) -> bool:
    return candidate >= 2 and bool(sympy.isprime(candidate))


def _candidate(bits: int, randbits: Callable[[int], int]) -> int:
    # Top bit for the length, low bit for oddness.
    return randbits(bits) & ((1 << bits) - 1) | (1 << (bits - 1)) | 1


def probable_prime(bits: int, randbits: Callable[[int], int] | None = None) -> int:
    """Generate a probable prime of exactly `bits` bits.

    Args:
        bits: The bit length of the prime. Must be at least 2.
        randbits: Callable returning that many random bits. Defaults to `secrets.randbits`.

    Returns:
        A probable prime with its top bit set.

    Raises:
        ValueError: If `bits` is smaller than 2.
        KeyGenerationFailure: If no prime turns up within `bits * CANDIDATES_PER_BIT` candidates.
    """
    if bits < 2:
        raise ValueError("A prime needs at least 2 bits.")
    if randbits is None:
        randbits = secrets.randbits
    rep_cap = bits * CANDIDATES_PER_BIT
    for attempt in range(rep_cap):
        candidate = _candidate(bits, randbits)
        if check_prime(candidate):
            logger.debug("Found %d bit probable prime after %d candidates", bits, attempt + 1)
            return candidate
    raise errors.KeyGenerationFailure(
        f"Ran an improbable {rep_cap} amount of loops with no prime found. Check the random number generator.")
