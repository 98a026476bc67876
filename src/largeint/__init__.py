"""Arbitrary-precision signed integers on two's-complement byte sequences, and textbook RSA built on them.

Provides a LargeInteger value type with addition, negation, subtraction, shift-and-add multiplication, restoring
division and modulo, the extended Euclidean algorithm and square-and-multiply modular exponentiation. On top of
that sit RSA key generation, file signing and verification, and PEM persistence of keys and signatures.

Typical usage example:

    a = LargeInteger.from_int(240)
    g, x, y = xgcd(a, LargeInteger.from_int(46))
    pk = RSAPrivKey.generate(256)
    sig = pk.sign(b"Hi there!")
    pk.pub.verify(b"Hi there!", sig)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from largeint.errors import DeserializationFailure
from largeint.errors import DivisionByZero
from largeint.errors import InvalidEncoding
from largeint.errors import KeyGenerationFailure
from largeint.errors import LargeIntError
from largeint.integer import LargeInteger
from largeint.keygen import derive_key_pair
from largeint.keygen import generate_key_pair
from largeint.numtheory import modular_exp
from largeint.numtheory import xgcd
from largeint.rsa import RSAPrivKey
from largeint.rsa import RSAPubKey

__version__ = "0.1.0"
__all__ = [
    "LargeInteger",
    "xgcd",
    "modular_exp",
    "derive_key_pair",
    "generate_key_pair",
    "RSAPrivKey",
    "RSAPubKey",
    "LargeIntError",
    "InvalidEncoding",
    "DivisionByZero",
    "KeyGenerationFailure",
    "DeserializationFailure",
]
