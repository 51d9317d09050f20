#!/usr/bin/env python3
"""
Passcode CLI - Command-line interface for HOTP passcodes.

Usage:
    passcode code <secret> [--counter N | --challenge HEX] [--digits D]
                           [--algorithm ALG] [--hex]
    passcode keygen [--length LENGTH]

Examples:
    # Passcode for counter 5 from a base32 secret
    passcode code JBSWY3DPEHPK3PXP --counter 5

    # 8-digit passcode from a hex secret
    passcode code 3132333435363738393031323334353637383930 --hex --digits 8

    # Generate a random base32 secret
    passcode keygen
"""

import argparse
import logging
import sys
from typing import Optional

from passcode import __version__
from passcode.generator import PasscodeGenerator, MalformedHashError, PASS_CODE_LENGTH
from passcode.keys import generate_secret, secret_to_base32, secret_from_base32
from passcode.signers import ALGORITHMS

log = logging.getLogger(__name__)


def parse_secret(value: str, is_hex: bool) -> bytes:
    """Decode secret argument as hex or base32."""
    if is_hex:
        try:
            secret = bytes.fromhex(value)
        except ValueError as e:
            raise ValueError(f"Invalid hex secret: {e}") from e
        if not secret:
            raise ValueError("Secret is empty")
        return secret
    return secret_from_base32(value)


def cmd_code(args: argparse.Namespace) -> int:
    """Print passcode for a counter or challenge."""
    try:
        secret = parse_secret(args.secret, args.hex)
        gen = PasscodeGenerator.from_key(secret, args.digits, args.algorithm)
        if args.challenge is not None:
            code = gen.generate_from_bytes(bytes.fromhex(args.challenge))
        else:
            code = gen.generate(args.counter)
    except (ValueError, TypeError, MalformedHashError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.debug("Generated %d-digit passcode", gen.code_length)
    print(code)
    return 0


def cmd_keygen(args: argparse.Namespace) -> int:
    """Generate a random base32 secret."""
    try:
        secret = generate_secret(args.length)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(secret_to_base32(secret))
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="passcode",
        description="Passcode - HOTP one-time passcodes (RFC 4226)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"passcode {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # code command
    code_parser = subparsers.add_parser("code", help="Generate a passcode")
    code_parser.add_argument("secret", help="Shared secret (base32, or hex with --hex)")
    code_parser.add_argument("--hex", action="store_true", help="Secret is hex encoded")
    state_group = code_parser.add_mutually_exclusive_group()
    state_group.add_argument("--counter", type=int, default=0, help="Counter value (default: 0)")
    state_group.add_argument("--challenge", help="Arbitrary challenge as hex")
    code_parser.add_argument(
        "--digits", type=int, default=PASS_CODE_LENGTH, help="Passcode length (1-9)"
    )
    code_parser.add_argument(
        "--algorithm", choices=sorted(ALGORITHMS), default="sha1", help="HMAC algorithm"
    )

    # keygen command
    keygen_parser = subparsers.add_parser("keygen", help="Generate random secret")
    keygen_parser.add_argument("--length", type=int, default=20, help="Secret length in bytes")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "code": cmd_code,
        "keygen": cmd_keygen,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
