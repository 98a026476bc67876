"""Arbitrary-precision signed integers stored as two's-complement byte sequences.

A LargeInteger wraps an immutable, most-significant-byte-first byte string whose first bit is the sign. All of the
arithmetic is performed on the bytes themselves (carry propagation, sign extension, bit shifts), never by
round-tripping through Python's own integers. Every operation returns a new value, operands are never mutated.

Typical usage example:

    a = LargeInteger(b"\x7b")
    b = LargeInteger.from_int(456)
    c = a.multiply(b)
    q, r = c.divmod(LargeInteger(b"\x05"))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import functools
from typing import Callable

from largeint import errors
from largeint import primes


def _compare_magnitudes(a: bytes, b: bytes) -> int:
    """Orders two non-negative byte sequences.

    Leading zero bytes are dropped, then the longer magnitude wins. Equal lengths are decided by the first
    differing byte, which is the same as scanning the bits from the most significant one downwards.

    Args:
        a: Non-negative two's-complement bytes.
        b: Non-negative two's-complement bytes.

    Returns:
        -1, 0 or 1 as `a` is smaller, equal or greater than `b`.
    """
    a = a.lstrip(b"\x00")
    b = b.lstrip(b"\x00")
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for byte_a, byte_b in zip(a, b):
        if byte_a != byte_b:
            return 1 if byte_a > byte_b else -1
    return 0


@functools.total_ordering
class LargeInteger:
    """A signed integer of any size held in a two's-complement byte sequence.

    The sequence may carry redundant leading 0x00 (non-negative) or 0xFF (negative) bytes, arithmetic results are
    free to grow by such a byte whenever the magnitude would otherwise spill into the sign bit.

    Attributes:
        val: The raw, most-significant-byte-first byte sequence.
    """

    __slots__ = ("_val",)

    def __init__(self, val: bytes | bytearray | memoryview) -> None:
        """Initialize the LargeInteger from a byte sequence.

        Args:
            val: Two's-complement bytes, most significant first. Copied, so later changes to a mutable source
                do not leak into the value.

        Raises:
            InvalidEncoding: If `val` is not a byte sequence or is empty.
        """
        if not isinstance(val, (bytes, bytearray, memoryview)):
            raise errors.InvalidEncoding(f"Expected a byte sequence, got {type(val).__name__}.")
        val = bytes(val)
        if not val:
            raise errors.InvalidEncoding("A LargeInteger needs at least one byte.")
        self._val = val

    @classmethod
    def from_int(cls, value: int) -> "LargeInteger":
        """Builds the shortest two's-complement encoding of a Python integer (plus at most one sign byte)."""
        return cls(value.to_bytes(value.bit_length() // 8 + 1, byteorder="big", signed=True))

    @classmethod
    def probable_prime(cls, bits: int, randbits: Callable[[int], int] | None = None) -> "LargeInteger":
        """Generates a LargeInteger that is probably prime.

        Args:
            bits: The exact bit length of the prime.
            randbits: Source of random bits, see `primes.probable_prime`.

        Returns:
            A non-negative, probably prime LargeInteger.
        """
        return cls.from_int(primes.probable_prime(bits, randbits))

    @property
    def val(self) -> bytes:
        return self._val

    def __len__(self) -> int:
        return len(self._val)

    def __bytes__(self) -> bytes:
        return self._val

    def __int__(self) -> int:
        return int.from_bytes(self._val, byteorder="big", signed=True)

    def __repr__(self) -> str:
        return f"LargeInteger(0x{self._val.hex()}) = {int(self)}"

    def __hash__(self) -> int:
        return hash(self.stripped()._val)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Representation & Comparison

    def is_negative(self) -> bool:
        return bool(self._val[0] & 0x80)

    def is_zero(self) -> bool:
        return not any(self._val)

    def is_one(self) -> bool:
        return self._val[-1] == 1 and not any(self._val[:-1])

    def _sign_byte(self) -> int:
        return 0xFF if self.is_negative() else 0x00

    def _padded(self, width: int) -> bytes:
        """Sign-extends the byte sequence on the left to `width` bytes."""
        return bytes([self._sign_byte()]) * (width - len(self._val)) + self._val

    def extend(self, fill: int) -> "LargeInteger":
        """Adds a new most significant byte.

        Args:
            fill: The byte to place in front. 0x00 keeps a non-negative value, 0xFF a negative one.

        Returns:
            A LargeInteger one byte longer.

        Raises:
            ValueError: If `fill` is not a byte value.
        """
        if not 0 <= fill <= 0xFF:
            raise ValueError(f"Extension byte {fill} is out of range [0, 255].")
        return LargeInteger(bytes([fill]) + self._val)

    def stripped(self) -> "LargeInteger":
        """Returns the same value without redundant leading sign bytes."""
        val = self._val
        fill = self._sign_byte()
        start = 0
        # A sign byte is redundant as long as the byte after it still carries the same sign bit.
        while start < len(val) - 1 and val[start] == fill and (val[start + 1] & 0x80) == (fill & 0x80):
            start += 1
        return self if start == 0 else LargeInteger(val[start:])

    def compare(self, other: "LargeInteger") -> int:
        """Total order over two LargeIntegers of any lengths.

        The magnitude comparison underneath (strip leading zero bytes, longer wins, then bitwise from the top) is
        only meaningful for non-negative operands, so signs are dealt with first: a negative value is always
        smaller than a non-negative one and two negative values are ordered by their negations, reversed.

        Args:
            other: The value to compare against.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other.
        """
        if self.is_negative() != other.is_negative():
            return -1 if self.is_negative() else 1
        if self.is_negative():
            return _compare_magnitudes(other.negate()._val, self.negate()._val)
        return _compare_magnitudes(self._val, other._val)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "LargeInteger") -> bool:
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.compare(other) < 0

    # Additive Core

    def add(self, other: "LargeInteger") -> "LargeInteger":
        """Computes the sum of self and other.

        The shorter operand is sign-extended to the longer one's length and the bytes are summed from the least
        significant end. Carries are taken from unsigned byte values. Two operands of the same sign can overflow
        into the sign bit, in which case the result receives one extra sign byte.

        Args:
            other: The LargeInteger to add.

        Returns:
            The sum, as long as the longer operand or one byte longer.
        """
        width = max(len(self._val), len(other._val))
        a = self._padded(width)
        b = other._padded(width)
        res = bytearray(width)
        carry = 0
        for i in range(width - 1, -1, -1):
            carry += a[i] + b[i]
            res[i] = carry & 0xFF
            carry >>= 8
        result = LargeInteger(res)
        if not self.is_negative() and not other.is_negative():
            if result.is_negative():
                result = result.extend(0x00)
        elif self.is_negative() and other.is_negative():
            if not result.is_negative():
                result = result.extend(0xFF)
        return result

    def negate(self) -> "LargeInteger":
        """Two's-complement negation: flip every bit, then add one.

        The most negative value of a given length (0x80 followed by zero bytes) has no positive counterpart of the
        same length, so it is widened by one byte before flipping.
        """
        src = self._val
        if src[0] == 0x80 and not any(src[1:]):
            src = b"\xff" + src
        flipped = LargeInteger(bytes(~byte & 0xFF for byte in src))
        return flipped.add(ONE)

    def subtract(self, other: "LargeInteger") -> "LargeInteger":
        return self.add(other.negate())

    def __add__(self, other: "LargeInteger") -> "LargeInteger":
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "LargeInteger") -> "LargeInteger":
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "LargeInteger":
        return self.negate()

    def __abs__(self) -> "LargeInteger":
        return self.negate() if self.is_negative() else self

    # Multiplicative Core

    def shift_left(self) -> "LargeInteger":
        """Doubles the value by shifting every bit one position up.

        Each byte receives the high bit of the byte below it. If the shift flips the sign bit the original sign
        byte is put in front, so the value is exactly doubled.
        """
        if self.is_zero():
            return self
        val = self._val
        res = bytearray(len(val))
        carry = 0
        for i in range(len(val) - 1, -1, -1):
            res[i] = ((val[i] << 1) & 0xFF) | carry
            carry = val[i] >> 7
        result = LargeInteger(res)
        if result.is_negative() != self.is_negative():
            result = result.extend(self._sign_byte())
        return result

    def shift_right(self) -> "LargeInteger":
        """Logical one bit right shift, meant for non-negative magnitudes.

        Each byte hands its lowest bit to the highest bit of the byte below it. A zero bit enters at the top.
        """
        if self.is_zero():
            return self
        res = bytearray(len(self._val))
        carry = 0
        for i, byte in enumerate(self._val):
            res[i] = (byte >> 1) | carry
            carry = (byte & 0x01) << 7
        return LargeInteger(res)

    def multiply(self, other: "LargeInteger") -> "LargeInteger":
        """Computes the product of self and other by shift-and-add.

        The loop walks the multiplier's bits from the lowest up, adding the doubling multiplicand wherever a bit is
        set. It only works on magnitudes, so both signs are taken off first and the product is negated afterwards
        if exactly one operand was negative.

        Args:
            other: The LargeInteger to multiply by.

        Returns:
            The product.
        """
        if self.is_zero() or other.is_zero():
            return ZERO
        multiplicand = abs(self)
        multiplier = abs(other)
        product = ZERO
        while not multiplier.is_zero():
            if multiplier._val[-1] & 0x01:
                product = product.add(multiplicand)
            multiplicand = multiplicand.shift_left()
            multiplier = multiplier.shift_right()
        if self.is_negative() != other.is_negative():
            return product.negate()
        return product

    def __mul__(self, other: "LargeInteger") -> "LargeInteger":
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.multiply(other)

    # Division & Modulo

    def _restoring_divide(self, other: "LargeInteger") -> tuple["LargeInteger", "LargeInteger"]:
        """Restoring long division of two non-negative values.

        The divisor is padded with one zero byte per magnitude byte of the dividend and then walked down one bit at
        a time. Wherever it fits into what is left of the dividend it is subtracted and a one enters the quotient.

        Args:
            other: The non-zero, non-negative divisor.

        Returns:
            Tuple of (quotient, remainder).
        """
        dividend = self.stripped()
        width = len(dividend._val.lstrip(b"\x00"))
        divisor = LargeInteger(other._val + bytes(width))
        quotient = ZERO
        for _ in range(8 * width):
            divisor = divisor.shift_right()
            quotient = quotient.shift_left()
            if not dividend.is_zero() and dividend.compare(divisor) != -1:
                dividend = dividend.subtract(divisor).stripped()
                quotient = quotient.add(ONE)
        return quotient, dividend

    def divide(self, other: "LargeInteger") -> "LargeInteger":
        """Computes the integer quotient of self and other.

        Non-negative operands run straight through the restoring division. Otherwise the division runs on the
        magnitudes and the sign is put back afterwards, rounding towards negative infinity like Python's `//`.

        Args:
            other: The divisor.

        Returns:
            The quotient. Dividing by one returns self unchanged.

        Raises:
            DivisionByZero: If `other` is zero.
        """
        if other.is_one():
            return self
        if other.is_zero():
            raise errors.DivisionByZero("Division by zero.")
        quotient, remainder = abs(self)._restoring_divide(abs(other))
        if self.is_negative() == other.is_negative():
            return quotient.stripped()
        if not remainder.is_zero():
            quotient = quotient.add(ONE)
        return quotient.negate().stripped()

    def mod(self, other: "LargeInteger") -> "LargeInteger":
        """Computes self modulo other as `self - (self // other) * other`.

        The remainder carries the sign of `other`, so for a positive modulus it always lies in [0, other).

        Args:
            other: The modulus.

        Returns:
            The remainder.

        Raises:
            DivisionByZero: If `other` is zero.
        """
        if other.is_zero():
            raise errors.DivisionByZero("Modulo by zero.")
        if other.is_one() or self.compare(other) == 0:
            return ZERO
        return self.subtract(self.divide(other).multiply(other)).stripped()

    def divmod(self, other: "LargeInteger") -> tuple["LargeInteger", "LargeInteger"]:
        return self.divide(other), self.mod(other)

    def __floordiv__(self, other: "LargeInteger") -> "LargeInteger":
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: "LargeInteger") -> "LargeInteger":
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.mod(other)

    def __divmod__(self, other: "LargeInteger") -> tuple["LargeInteger", "LargeInteger"]:
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self.divmod(other)


ZERO = LargeInteger(b"\x00")
ONE = LargeInteger(b"\x01")
TWO = LargeInteger(b"\x02")
