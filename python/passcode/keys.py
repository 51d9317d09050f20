"""Secret helpers for provisioning passcode keys by hand."""

import base64
import binascii
import secrets


def generate_secret(length: int = 20) -> bytes:
    """
    Generate random secret.

    Args:
        length: Secret length in bytes (default: 20, the HMAC-SHA1 block output)

    Returns:
        Random secret bytes
    """
    if length < 1:
        raise ValueError(f"Secret length must be positive, got {length}")
    return secrets.token_bytes(length)


def secret_to_base32(secret: bytes) -> str:
    """Base32 encode secret without padding."""
    return base64.b32encode(secret).decode("ascii").rstrip("=")


def secret_from_base32(b32: str) -> bytes:
    """
    Parse base32 secret as shown by authenticator apps.

    Accepts lowercase, spaces and missing padding.

    Raises:
        ValueError: If the string is not valid base32
    """
    b32 = b32.replace(" ", "").upper()
    # Add padding if needed
    padding = 8 - (len(b32) % 8)
    if padding != 8:
        b32 += "=" * padding
    try:
        secret = base64.b32decode(b32)
    except binascii.Error as e:
        raise ValueError(f"Invalid base32 secret: {e}") from e
    if not secret:
        raise ValueError("Secret is empty")
    return secret
