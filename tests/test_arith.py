# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math

import pytest
import sympy

from rsacore import arith
from rsacore import errors

euclid_cases = [
    (240, 46),
    (46, 240),
    (7, 0),
    (0, 5),
    (0, 0),
    (17, 17),
    (65537, 1000000016000000063),
    (2**127 - 1, 2**89 - 1),
]

inverse_cases = [
    # Concrete
    (368, 117, 62),
    (111059998755241, 115788865422351189, 45094773746044996),
    (65537, 13619038576, 4992975569),
    # Edge Cases
    (1, 2, 1),
    (5, 1, 0),
    (3, 7, 5),
]


def test_euclid_concrete():
    g, x, y = arith.euclid(240, 46)
    assert (g, x, y) == (2, -9, 47)
    assert x * 240 + y * 46 == g


@pytest.mark.parametrize("a,b", euclid_cases)
def test_euclid_bezout(a, b):
    g, x, y = arith.euclid(a, b)
    assert g == math.gcd(a, b)
    assert x * a + y * b == g


def test_euclid_swaps_roles():
    assert arith.euclid(46, 240) == (2, 47, -9)


@pytest.mark.parametrize("a,b", [(-1, 5), (5, -1), (-240, -46)])
def test_euclid_validates(a, b):
    with pytest.raises(ValueError):
        arith.euclid(a, b)


@pytest.mark.parametrize("a,b", euclid_cases)
def test_gcd(a, b):
    assert arith.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,modulus,expected", inverse_cases)
def test_mod_inverse_concrete(a, modulus, expected):
    assert arith.mod_inverse(a, modulus) == expected


def test_mod_inverse_large_coefficient():
    # The Bezout coefficient here is negative: taking its absolute value would yield 55.
    assert arith.euclid(368, 117)[1] < 0
    assert arith.mod_inverse(368, 117) != 55


@pytest.mark.parametrize("modulus", [2, 3, 10, 97, 120, 256, 3120])
def test_mod_inverse_all_units(modulus):
    for a in range(modulus * 2):
        if math.gcd(a, modulus) != 1:
            continue
        x = arith.mod_inverse(a, modulus)
        assert 0 <= x < modulus
        assert (a * x) % modulus == 1
        assert x == sympy.mod_inverse(a, modulus)


@pytest.mark.parametrize("a,modulus,g", [(6, 9, 3), (0, 7, 7), (65537 * 3, 65537 * 5, 65537), (10, 10, 10)])
def test_mod_inverse_not_invertible(a, modulus, g):
    with pytest.raises(errors.NotInvertible) as excinfo:
        arith.mod_inverse(a, modulus)
    assert excinfo.value.gcd == g
    assert excinfo.value.a == a
    assert excinfo.value.modulus == modulus


def test_mod_inverse_not_invertible_is_arithmetic():
    with pytest.raises(ArithmeticError):
        arith.mod_inverse(4, 8)


@pytest.mark.parametrize("modulus", [0, -7])
def test_mod_inverse_validates(modulus):
    with pytest.raises(ValueError):
        arith.mod_inverse(3, modulus)


def test_mod_inverse_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="rsacore.arith"):
        arith.mod_inverse(368, 117)
    assert "a: 368, modulus 117, gcd 1" in caplog.text


def test_mod_inverse_quiet_by_default(caplog):
    with caplog.at_level(logging.INFO, logger="rsacore.arith"):
        arith.mod_inverse(368, 117)
    assert not caplog.records


@pytest.mark.parametrize("base,exponent,modulus,expected", [
    (2, 5, 13, 6),
    (10, 2, 1000, 100),
    (2, 10, 1024, 0),
    (7, 0, 13, 1),
    (0, 10, 13, 0),
    (3, 3, 1, 0),
    (0, 0, 1, 0),
    (1234, 65537, 1022117, 412611),
])
def test_fast_modexp_concrete(base, exponent, modulus, expected):
    assert arith.fast_modexp(base, exponent, modulus) == expected


@pytest.mark.parametrize("modulus", [1, 2, 13, 64, 97, 1000])
def test_fast_modexp_reference(modulus):
    for base in range(0, 40, 3):
        for exponent in range(0, 30):
            assert arith.fast_modexp(base, exponent, modulus) == (base**exponent) % modulus


def test_fast_modexp_wide():
    n = 1000000016000000063
    base = n - 2
    assert arith.fast_modexp(base, 2**64 + 13, n) == pow(base, 2**64 + 13, n)


def test_fast_modexp_modulus_one_shortcut():
    big = 2**4096 + 1
    assert arith.fast_modexp(big, big, 1) == 0


@pytest.mark.parametrize("base,exponent,modulus", [(-1, 2, 5), (2, -1, 5), (2, 2, 0), (2, 2, -5)])
def test_fast_modexp_validates(base, exponent, modulus):
    with pytest.raises(ValueError):
        arith.fast_modexp(base, exponent, modulus)


@pytest.mark.parametrize("base,exponent,expected", [
    (2, 3, 8),
    (0, 0, 1),
    (-1, 0, 1),
    (-1, 1, -1),
    (-1, 12344 * 6788 // 4, 1),
    (-1, 5, -1),
    (-3, 3, -27),
    (-2, 4, 16),
    (10, 20, 10**20),
])
def test_int_pow(base, exponent, expected):
    assert arith.int_pow(base, exponent) == expected


@pytest.mark.parametrize("base", range(-6, 7))
def test_int_pow_reference(base):
    for exponent in range(0, 25):
        assert arith.int_pow(base, exponent) == base**exponent


def test_int_pow_validates():
    with pytest.raises(ValueError):
        arith.int_pow(2, -1)
