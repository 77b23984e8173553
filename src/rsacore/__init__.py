"""Number-theoretic core for textbook RSA.

Provides key generation from caller-supplied primes, encryption and decryption by fast modular exponentiation, and the
supporting arithmetic: Extended Euclid, modular inverses and the Jacobi symbol.

Typical usage example:

    key = generate_key(104729, 130043)
    c = encrypt(1234, key.public)
    r = decrypt(c, key.private)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacore.arith import euclid
from rsacore.arith import fast_modexp
from rsacore.arith import gcd
from rsacore.arith import int_pow
from rsacore.arith import mod_inverse
from rsacore.arith import WORD_BITS
from rsacore.errors import KeyGenerationFailed
from rsacore.errors import NotInvertible
from rsacore.errors import RSACoreError
from rsacore.errors import UnsupportedInput
from rsacore.jacobi import jacobi_symbol
from rsacore.keygen import F4
from rsacore.keygen import generate_key
from rsacore.keygen import RSAKey
from rsacore.rsa import decrypt
from rsacore.rsa import decrypt_text
from rsacore.rsa import encrypt
from rsacore.rsa import encrypt_text

__version__ = "0.1.0"
__all__ = [
    "F4",
    "WORD_BITS",
    "RSAKey",
    "RSACoreError",
    "NotInvertible",
    "KeyGenerationFailed",
    "UnsupportedInput",
    "euclid",
    "gcd",
    "mod_inverse",
    "fast_modexp",
    "int_pow",
    "jacobi_symbol",
    "generate_key",
    "encrypt",
    "decrypt",
    "encrypt_text",
    "decrypt_text",
]
