"""Key Generation from a caller-chosen pair of primes.

Prime selection is the caller's business: the primes are taken as given and only the private exponent is derived.

Typical usage example:

    key = generate_key(104729, 130043)
    n, e = key.public
    n, d = key.private
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import typing

from rsacore.arith import mod_inverse
from rsacore.arith import WORD_BITS
from rsacore.errors import KeyGenerationFailed
from rsacore.errors import NotInvertible

F4: int = 65537

logger = logging.getLogger(__name__)


class RSAKey(typing.NamedTuple):
    """An immutable RSA key pair.

    Attributes:
        public: The public key as (modulus, public exponent).
        private: The private key as (modulus, private exponent).
    """
    public: tuple[int, int]
    private: tuple[int, int]

    @property
    def n(self) -> int:
        return self.public[0]

    @property
    def e(self) -> int:
        return self.public[1]

    @property
    def d(self) -> int:
        return self.private[1]


def generate_key(p: int, q: int, e: int = F4, width: int = WORD_BITS) -> RSAKey:
    """Generates an RSA key pair from two primes.

    Derives the private exponent as the inverse of `e` modulo phi(n) = (p-1)(q-1). Primality of `p` and `q` is not
    checked.

    Args:
        p: The first prime.
        q: The second prime, distinct from `p`.
        e: The public exponent. Defaults (and recommended) to use 65537.
        width: The working width in bits the modulus has to fit in. Defaults to `WORD_BITS`.

    Returns:
        The key pair.

    Raises:
        KeyGenerationFailed: If `e` is not coprime with phi(n).
        ValueError: If `p` or `q` is smaller than 2.
        OverflowError: If the modulus does not fit in `width` bits.
    """
    if p < 2 or q < 2:
        raise ValueError("Primes must be >= 2")
    n = p * q
    if n.bit_length() > width:
        raise OverflowError(f"Modulus of {n.bit_length()} bits exceeds the {width} bit working width.")
    phi = (p - 1) * (q - 1)
    try:
        d = mod_inverse(e, phi)
    except NotInvertible as exc:
        raise KeyGenerationFailed(e, phi) from exc
    logger.debug("Generated key with %d bit modulus", n.bit_length())
    return RSAKey(public=(n, e), private=(n, d))
