"""
Passcode Generator - HOTP passcodes (RFC 4226).

Generates short decimal passcodes that may be used in challenge-response
protocols or as timeout passcodes that are only valid for a short period.
The keyed hash is injected as a signer, so the same generator works with
HMAC-SHA1, HMAC-SHA256 or any other MAC the caller provides.

Example:
    >>> from passcode import PasscodeGenerator
    >>> from passcode.signers import HmacSigner
    >>> gen = PasscodeGenerator(HmacSigner(b"12345678901234567890"))
    >>> gen.generate(0)
    '755224'
"""

import logging
import struct
from typing import Callable, Union

from passcode.signers import HmacSigner

log = logging.getLogger(__name__)

# Default decimal passcode length
PASS_CODE_LENGTH = 6
MAX_PASSCODE_LENGTH = 9

# Powers of 10 used to shorten the pin to the desired number of digits
#               0  1   2    3     4      5       6        7         8          9
DIGITS_POWER = (1, 10, 100, 1000, 10000, 100000, 1000000, 10000000, 100000000, 1000000000)

STATE_SIZE = 8
WINDOW_SIZE = 4

# Maps a preimage to its signature. May raise on bad key/algorithm state.
Signer = Callable[[bytes], bytes]


class MalformedHashError(Exception):
    """Signer output is too short for its own truncation offset."""


def state_to_bytes(state: int) -> bytes:
    """
    Encode a 64-bit state as 8 bytes, most significant byte first.

    Negative values are encoded as their two's complement bit pattern,
    so -1 and 2**64 - 1 produce the same preimage.

    Raises:
        TypeError: If state is not an int
        ValueError: If state does not fit in 64 bits
    """
    if isinstance(state, bool) or not isinstance(state, int):
        raise TypeError(f"State must be an int, got {type(state).__name__}")
    if not -(1 << 63) <= state < (1 << 64):
        raise ValueError(f"State does not fit in 64 bits: {state}")
    return struct.pack(">Q", state & 0xFFFFFFFFFFFFFFFF)


def hash_to_int(hash_bytes: bytes, start: int) -> int:
    """
    Read a big-endian signed 32-bit integer at the given offset.

    Raises:
        MalformedHashError: If fewer than 4 bytes remain after start
    """
    try:
        return struct.unpack_from(">i", hash_bytes, start)[0]
    except struct.error as e:
        raise MalformedHashError(
            f"Need {WINDOW_SIZE} bytes at offset {start}, hash is {len(hash_bytes)} bytes"
        ) from e


def truncate(hash_bytes: bytes) -> int:
    """
    Dynamic truncation (RFC 4226 section 5.3).

    The low nibble of the last byte selects a 4-byte window; the window
    is read big-endian with the sign bit cleared.

    Returns:
        Integer in [0, 2**31 - 1]
    """
    if not hash_bytes:
        raise MalformedHashError("Signer returned an empty hash")
    offset = hash_bytes[-1] & 0x0F
    return hash_to_int(hash_bytes, offset) & 0x7FFFFFFF


class PasscodeGenerator:
    """
    HOTP passcode generator over an injected signer.

    The generator keeps no state between calls. It is safe to share across
    threads when the signer is.
    """

    def __init__(self, signer: Signer, code_length: int = PASS_CODE_LENGTH):
        """
        Initialize generator.

        Args:
            signer: Callable mapping preimage bytes to signature bytes
            code_length: Passcode length in decimal digits (1-9, default: 6)

        Raises:
            TypeError: If signer is not callable
            ValueError: If code_length is outside 1-9
        """
        if not callable(signer):
            raise TypeError("Signer must be callable")
        if (
            isinstance(code_length, bool)
            or not isinstance(code_length, int)
            or not 1 <= code_length <= MAX_PASSCODE_LENGTH
        ):
            raise ValueError(
                f"Code length must be between 1 and {MAX_PASSCODE_LENGTH} digits, "
                f"got {code_length!r}"
            )
        self._signer = signer
        self._code_length = code_length

    @classmethod
    def from_key(
        cls,
        key: bytes,
        code_length: int = PASS_CODE_LENGTH,
        algorithm: str = "sha1",
    ) -> "PasscodeGenerator":
        """
        Create generator signing with HMAC over a raw key.

        Args:
            key: Shared secret bytes
            code_length: Passcode length in decimal digits
            algorithm: 'sha1' (RFC 4226), 'sha256' or 'sha512'

        Returns:
            PasscodeGenerator instance
        """
        return cls(HmacSigner(key, algorithm), code_length)

    @property
    def code_length(self) -> int:
        """Number of digits in generated passcodes."""
        return self._code_length

    @property
    def signer(self) -> Signer:
        """Signer used to hash each preimage."""
        return self._signer

    def generate(self, state: int) -> str:
        """
        Generate passcode for a counter or time-step value.

        Args:
            state: 64-bit integer, encoded big-endian before signing

        Returns:
            Decimal passcode of exactly code_length digits
        """
        return self.generate_from_bytes(state_to_bytes(state))

    def generate_from_bytes(self, challenge: Union[bytes, bytearray]) -> str:
        """
        Generate passcode for an arbitrary challenge.

        Args:
            challenge: Preimage handed to the signer unchanged

        Returns:
            Decimal passcode of exactly code_length digits

        Raises:
            MalformedHashError: If the signer output is not bytes or is too short
        """
        log.debug("Signing %d-byte preimage", len(challenge))
        digest = self._signer(bytes(challenge))
        if not isinstance(digest, (bytes, bytearray)):
            raise MalformedHashError(
                f"Signer must return bytes, got {type(digest).__name__}"
            )
        hash_bytes = bytes(digest)

        pin_value = truncate(hash_bytes) % DIGITS_POWER[self._code_length]
        return self._pad_output(pin_value)

    def _pad_output(self, value: int) -> str:
        return str(value).rjust(self._code_length, "0")

    def __repr__(self) -> str:
        return f"PasscodeGenerator(code_length={self._code_length})"
