"""
Passcode - HOTP one-time passcode generation (RFC 4226)

Turns a keyed hash of a counter or challenge into a short, fixed-width
decimal code. The keyed hash is injected, so key storage and algorithm
choice stay with the caller.

Usage:
    from passcode import PasscodeGenerator, HmacSigner

    gen = PasscodeGenerator(HmacSigner(secret), code_length=6)
    code = gen.generate(counter)

    # Sign an arbitrary challenge instead of a counter
    code = gen.generate_from_bytes(b"challenge")
"""

__version__ = "0.1.0"
__license__ = "CC0-1.0"

from passcode.generator import (
    PasscodeGenerator,
    MalformedHashError,
    DIGITS_POWER,
    MAX_PASSCODE_LENGTH,
    PASS_CODE_LENGTH,
)
from passcode.signers import HmacSigner
from passcode.keys import generate_secret, secret_to_base32, secret_from_base32

__all__ = [
    # Core
    "PasscodeGenerator",
    "MalformedHashError",
    "DIGITS_POWER",
    "MAX_PASSCODE_LENGTH",
    "PASS_CODE_LENGTH",
    # Signing
    "HmacSigner",
    # Secrets
    "generate_secret",
    "secret_to_base32",
    "secret_from_base32",
]
