"""Number-theoretic routines on top of LargeInteger: extended Euclid and modular exponentiation.

Typical usage example:

    g, x, y = xgcd(LargeInteger.from_int(240), LargeInteger.from_int(46))
    c = modular_exp(LargeInteger.from_int(65), LargeInteger.from_int(17), LargeInteger.from_int(3233))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from largeint import errors
from largeint.integer import LargeInteger
from largeint.integer import ONE
from largeint.integer import ZERO


def xgcd(a: LargeInteger, b: LargeInteger) -> tuple[LargeInteger, LargeInteger, LargeInteger]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b).

    Args:
        a: The first non-negative number.
        b: The second non-negative number.

    Returns:
        Greatest common divisor of the two numbers, as well as the Bezout coefficients x and y.

    Raises:
        ValueError: If either number is negative.
    """
    if a.is_negative() or b.is_negative():
        raise ValueError("Extended Euclid is only defined here for non-negative inputs.")
    x, last_x = ZERO, ONE
    y, last_y = ONE, ZERO
    while not b.is_zero():
        q = a.divide(b)
        r = a.mod(b)
        x, last_x = last_x.subtract(q.multiply(x)), x
        y, last_y = last_y.subtract(q.multiply(y)), y
        a, b = b, r
    return a, last_x, last_y


def gcd(a: LargeInteger, b: LargeInteger) -> LargeInteger:
    return xgcd(a, b)[0]


def modular_exp(base: LargeInteger, exponent: LargeInteger, modulus: LargeInteger) -> LargeInteger:
    """Computes base**exponent mod modulus by square-and-multiply.

    Walks the exponent from its least significant bit upward, multiplying the running result by the current power
    of the base wherever a bit is set and squaring that power every round.

    Args:
        base: The base, any sign.
        exponent: The non-negative exponent.
        modulus: The positive modulus.

    Returns:
        The result in range [0, modulus). A zero exponent yields 1 mod modulus.

    Raises:
        DivisionByZero: If `modulus` is zero.
        ValueError: If `modulus` or `exponent` is negative.
    """
    if modulus.is_zero():
        raise errors.DivisionByZero("Modulus must not be zero.")
    if modulus.is_negative():
        raise ValueError("Modulus must be positive.")
    if exponent.is_negative():
        raise ValueError("Exponent must be non-negative.")
    if exponent.is_zero():
        return ONE.mod(modulus)
    result = ONE
    base = base.mod(modulus)
    power = exponent
    while not power.is_zero():
        if power.val[-1] & 0x01:
            result = result.multiply(base).mod(modulus)
        base = base.multiply(base).mod(modulus)
        power = power.shift_right()
    return result
