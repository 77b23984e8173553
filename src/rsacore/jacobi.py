"""Jacobi symbol evaluation through quadratic reciprocity.

A building block for probabilistic primality tests (e.g. Solovay-Strassen) a caller may run over the primes it feeds
into key generation.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacore.arith import int_pow
from rsacore.errors import UnsupportedInput


def _two_over(b: int) -> int:
    """Second supplementary law: (2/b) = (-1)**((b*b - 1) / 8) for odd b."""
    return int_pow(-1, (b * b - 1) // 8)


def _jacobi(a: int, b: int) -> int:
    if a == 1 or b == 1:
        return 1
    if a == 0:
        return 0
    if a % 2 == 0:
        return _two_over(b) * _jacobi(a // 2, b)
    if a < 0:
        raise UnsupportedInput(f"Negative odd numerator {a} is not supported.")
    exp = (a - 1) * (b - 1) // 4
    return _jacobi(b % a, a) * int_pow(-1, exp)


def jacobi_symbol(a: int, b: int) -> int:
    """Computes the Jacobi symbol (a/b).

    Rules apply in order: 1 when `a` or `b` is 1, 0 when `a` is 0, factoring out 2 for even `a`, and reciprocity
    (a/b) = (b mod a / a) * (-1)**((a-1)(b-1)/4) for odd positive `a`.

    Args:
        a: The numerator. Odd negative values are rejected.
        b: The denominator. Must be odd and positive.

    Returns:
        -1, 0 or 1.

    Raises:
        UnsupportedInput: If `b` is not odd and positive, or the reduction reaches an odd negative numerator.
    """
    if b <= 0 or b % 2 == 0:
        raise UnsupportedInput(f"Denominator must be odd and positive, got {b}.")
    return _jacobi(a, b)
