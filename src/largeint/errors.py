"""Error conditions raised by the large integer engine and its RSA collaborators.

Each condition also derives from the builtin exception a caller would naturally expect, so that code catching
`ValueError`, `ZeroDivisionError`, `RuntimeError` or `IOError` keeps working.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class LargeIntError(Exception):
    """Base class of all largeint specific errors."""


class InvalidEncoding(LargeIntError, ValueError):
    """The byte sequence handed to a LargeInteger is empty or not bytes at all."""


class DivisionByZero(LargeIntError, ZeroDivisionError):
    """Division, modulo or modular exponentiation with a zero divisor."""


class KeyGenerationFailure(LargeIntError, RuntimeError):
    """No usable prime or public exponent was found within the search bound."""


class DeserializationFailure(LargeIntError, IOError):
    """A key or signature artifact is missing, unreadable or corrupt."""
