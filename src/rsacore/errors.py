"""Errors raised by the arithmetic core.

All of them are recoverable, deterministic conditions: a caller retrying key generation with a different prime pair
is expected to catch `KeyGenerationFailed` and move on.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSACoreError(Exception):
    """Base class of every error raised by rsacore."""


class NotInvertible(RSACoreError, ArithmeticError):
    """No modular inverse exists as the operands are not coprime.

    Attributes:
        a: The value that was to be inverted.
        modulus: The modulus of the residue ring.
        gcd: The greatest common divisor of `a` and `modulus`.
    """

    def __init__(self, a: int, modulus: int, gcd: int) -> None:
        super().__init__(f"{a} has no inverse modulo {modulus} (gcd is {gcd}).")
        self.a = a
        self.modulus = modulus
        self.gcd = gcd


class KeyGenerationFailed(RSACoreError):
    """The public exponent does not fit the chosen primes, gcd(e, phi(n)) != 1.

    Attributes:
        e: The public exponent.
        phi: Euler's totient of the modulus.
    """

    def __init__(self, e: int, phi: int) -> None:
        super().__init__(f"Public exponent {e} is not coprime with phi(n) = {phi}.")
        self.e = e
        self.phi = phi


class UnsupportedInput(RSACoreError, ValueError):
    """Input outside the domain the Jacobi symbol evaluator handles."""
