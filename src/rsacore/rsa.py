"""Provides textbook RSA encryption and decryption.

No padding is applied: the message representative is raised to the key exponent as is. Callers are responsible for
keeping it in range [0, n-1], otherwise the result cannot be recovered.

Typical usage example:

    key = generate_key(1000000007, 1000000009)
    c = encrypt_text("HELLO", key.public)
    r = decrypt_text(c, key.private)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacore.arith import fast_modexp


def encrypt(message: int, public_key: tuple[int, int]) -> int:
    """Encrypts an integer message with the public key (n, e)."""
    n, e = public_key
    return fast_modexp(message, e, n)


def decrypt(cipher: int, private_key: tuple[int, int]) -> int:
    """Decrypts an integer ciphertext with the private key (n, d)."""
    n, d = private_key
    return fast_modexp(cipher, d, n)


def encrypt_text(message: str, public_key: tuple[int, int], encoding: str = "utf-8") -> int:
    """Use the public key to encrypt a short text.

    Args:
        message: The message to encrypt.
        public_key: The public key as (modulus, exponent).
        encoding: Text encoding. Defaults to utf-8.

    Returns:
        The ciphertext as an integer.

    Raises:
        ValueError: If the message does not fit under the modulus.
    """
    m = bytes_to_integer(message.encode(encoding))
    if m >= public_key[0]:
        raise ValueError("Message too long for the current key.")
    return encrypt(m, public_key)


def decrypt_text(cipher: int, private_key: tuple[int, int], encoding: str = "utf-8") -> str:
    """Use the private key to recover a text encrypted by `encrypt_text`."""
    m = decrypt(cipher, private_key)
    return integer_to_bytes(m, (m.bit_length() + 7) // 8).decode(encoding)


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an integer in accordance to preset procedures.

    Args:
        msg: The bytes (AKA Octet String) to convert.

    Returns:
        The representative integer.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int) -> bytes:
    """Converts an integer to a string, using a fixed-length byte representation.

    Args:
        msg: The integer to unmarshal.
        fixedlen: The target length of the byte string.

    Returns:
        The representative bytes. (AKA Octet String)
    """
    return msg.to_bytes(fixedlen, byteorder="big", signed=False)
