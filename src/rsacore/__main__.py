"""The Command Line Interface for the arithmetic core.

A thin host over the public API: every subcommand maps onto one library call and prints its result.

Typical usage example:

    rsacore keygen 104729 130043
    rsacore encrypt 1234 1022117 65537
    python -m rsacore jacobi 1001 9907
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys

import rsacore

number = argparse.ArgumentParser(add_help=False)
number.add_argument("value", help="Message or ciphertext. Integer, or text with --text.")
number.add_argument("modulus", type=int, help="The key modulus n.")
number.add_argument("--text", "-t", action="store_true", help="Treat the message as utf-8 text.")

corep = argparse.ArgumentParser(prog="rsacore")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsacore.__version__}")
corep.add_argument("--verbose", "-V", action="store_true", help="Print debug logging on stderr")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

keygen = commands.add_parser("keygen", help="Key generation from two primes.")
keygen.add_argument("p", type=int, help="The first prime.")
keygen.add_argument("q", type=int, help="The second prime.")
keygen.add_argument("--pub-exponent", "-e", type=int, default=rsacore.F4, help="Exponent for the public key.")
keygen.add_argument("--width", "-w", type=int, default=rsacore.WORD_BITS, help="Working width in bits.")

encrypt = commands.add_parser("encrypt", parents=[number], help="Encryption utility.")
encrypt.add_argument("exponent", type=int, help="The public exponent e.")
decrypt = commands.add_parser("decrypt", parents=[number], help="Decryption utility.")
decrypt.add_argument("exponent", type=int, help="The private exponent d.")

inverse = commands.add_parser("inverse", help="Modular inverse utility.")
inverse.add_argument("a", type=int, help="The value to invert.")
inverse.add_argument("modulus", type=int, help="The modulus.")

jacobi = commands.add_parser("jacobi", help="Jacobi symbol utility.")
jacobi.add_argument("a", type=int, help="The numerator.")
jacobi.add_argument("b", type=int, help="The denominator. Odd and positive.")


def run(args: argparse.Namespace) -> str:
    """Execute the parsed subcommand and return what is to be printed."""
    match args.subcommand:
        case "keygen":
            key = rsacore.generate_key(args.p, args.q, args.pub_exponent, args.width)
            return f"Public key: {key.public}\nPrivate key: {key.private}"
        case "encrypt":
            pub = (args.modulus, args.exponent)
            if args.text:
                return str(rsacore.encrypt_text(args.value, pub))
            return str(rsacore.encrypt(int(args.value), pub))
        case "decrypt":
            priv = (args.modulus, args.exponent)
            if args.text:
                return rsacore.decrypt_text(int(args.value), priv)
            return str(rsacore.decrypt(int(args.value), priv))
        case "inverse":
            return str(rsacore.mod_inverse(args.a, args.modulus))
        case "jacobi":
            return str(rsacore.jacobi_symbol(args.a, args.b))
    raise ValueError(f"Unknown subcommand {args.subcommand}")


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run, report core errors on stderr."""
    args = corep.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        print(run(args))
    except (rsacore.RSACoreError, ValueError, OverflowError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
