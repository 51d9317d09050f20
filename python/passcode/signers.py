"""
Passcode Signers - HMAC signing for passcode generation.

Example:
    >>> signer = HmacSigner(b"12345678901234567890")
    >>> len(signer(b"\\x00" * 8))
    20
"""

import hmac
import hashlib

# Digest algorithms accepted by HmacSigner
ALGORITHMS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


class HmacSigner:
    """
    HMAC signer over a shared secret.

    SHA1 is what RFC 4226 and most authenticator apps expect; SHA256 and
    SHA512 are accepted for deployments that agree on them.
    """

    def __init__(self, key: bytes, algorithm: str = "sha1"):
        """
        Initialize signer.

        Args:
            key: Shared secret (typically 20 bytes)
            algorithm: 'sha1', 'sha256' or 'sha512'

        Raises:
            ValueError: If key is empty or algorithm is unsupported
        """
        if not key:
            raise ValueError("Key must not be empty")
        name = algorithm.lower()
        if name not in ALGORITHMS:
            raise ValueError(
                f"Unsupported algorithm: {algorithm} (expected one of {', '.join(ALGORITHMS)})"
            )
        self._key = bytes(key)
        self.algorithm = name
        self._digestmod = ALGORITHMS[name]

    @property
    def digest_size(self) -> int:
        """Signature length in bytes."""
        return self._digestmod().digest_size

    def sign(self, data: bytes) -> bytes:
        """
        Sign preimage.

        Args:
            data: Arbitrary bytes

        Returns:
            HMAC digest
        """
        return hmac.new(self._key, data, self._digestmod).digest()

    __call__ = sign

    def __repr__(self) -> str:
        return f"HmacSigner(algorithm={self.algorithm!r})"
