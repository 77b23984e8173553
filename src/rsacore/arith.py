"""Core integer arithmetic: Extended Euclid, modular inverse and exponentiation.

Everything here is a pure function over Python integers. The working width `WORD_BITS` describes the largest modulus
the package is configured for; the arithmetic itself is exact, so intermediate products never overflow.

Typical usage example:

    g, x, y = euclid(240, 46)
    d = mod_inverse(65537, phi)
    c = fast_modexp(m, 65537, n)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from rsacore.errors import NotInvertible

WORD_BITS: int = 128

logger = logging.getLogger(__name__)


def euclid(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b). Works for `a < b` as well, the first step simply swaps their roles.

    Args:
        a: The first natural number.
        b: The second natural number. May be 0.

    Returns:
        Greatest common divisor of the two integers, as well as the Bezout coefficients of `a` and `b`.

    Raises:
        ValueError: If either number is negative.
    """
    if a < 0 or b < 0:
        raise ValueError("Euclid operands must be >= 0")
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def gcd(a: int, b: int) -> int:
    """Plain recursive Euclid, for when the coefficients are not needed."""
    if b == 0:
        return a
    return gcd(b, a % b)


def mod_inverse(a: int, modulus: int) -> int:
    """Computes the multiplicative inverse of `a` modulo `modulus`.

    The Bezout coefficient of `a` is brought into range by adding the modulus until it is non-negative, then reduced.

    Args:
        a: The value to invert. Must be >= 0.
        modulus: The modulus. Must be > 0.

    Returns:
        The unique x in [0, modulus) with (a * x) % modulus == 1.

    Raises:
        NotInvertible: If gcd(a, modulus) != 1.
        ValueError: If `a` is negative or `modulus` is not positive.
    """
    if modulus <= 0:
        raise ValueError("Modulus must be > 0")
    g, x, _ = euclid(a, modulus)
    logger.debug("a: %d, modulus %d, gcd %d", a, modulus, g)
    if g != 1:
        raise NotInvertible(a, modulus, g)
    while x < 0:
        x += modulus
    return x % modulus


def fast_modexp(base: int, exponent: int, modulus: int) -> int:
    """Computes base**exponent % modulus by repeated squaring.

    Args:
        base: The base. Must be >= 0.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        base**exponent reduced modulo `modulus`.

    Raises:
        ValueError: On negative operands or a modulus below 1.
    """
    if base < 0 or exponent < 0:
        raise ValueError("Base and exponent must be >= 0")
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


def int_pow(base: int, exponent: int) -> int:
    """Signed integer power by square-and-multiply, without any reduction.

    Args:
        base: Any integer, negative bases included.
        exponent: The exponent. Must be >= 0.

    Returns:
        base**exponent.

    Raises:
        ValueError: If `exponent` is negative.
    """
    if exponent < 0:
        raise ValueError("Exponent must be >= 0")
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        exponent >>= 1
        base *= base
    return result
