"""Tests for passcode signers and secret helpers."""

import hmac
import hashlib
import pytest
from passcode.signers import HmacSigner
from passcode.keys import generate_secret, secret_to_base32, secret_from_base32


class TestHmacSigner:
    """Test HmacSigner class."""

    def test_sha1_default(self):
        """SHA1 is the default algorithm."""
        signer = HmacSigner(b"key")
        assert signer.algorithm == "sha1"
        assert signer.digest_size == 20
        assert signer(b"data") == hmac.new(b"key", b"data", hashlib.sha1).digest()

    def test_sign_and_call_agree(self):
        """sign() and calling the signer are the same."""
        signer = HmacSigner(b"key", "sha256")
        assert signer.sign(b"data") == signer(b"data")

    @pytest.mark.parametrize("algorithm,size", [("sha256", 32), ("SHA512", 64)])
    def test_other_algorithms(self, algorithm, size):
        """SHA256 and SHA512 work, case-insensitively."""
        signer = HmacSigner(b"key", algorithm)
        assert len(signer(b"data")) == size
        assert signer.digest_size == size

    def test_unknown_algorithm(self):
        """Unknown algorithm is rejected."""
        with pytest.raises(ValueError, match="Unsupported algorithm"):
            HmacSigner(b"key", "md5")

    def test_empty_key(self):
        """Empty key is rejected."""
        with pytest.raises(ValueError):
            HmacSigner(b"")

    def test_repr_hides_key(self):
        """repr does not leak the key."""
        assert "secret" not in repr(HmacSigner(b"secret"))


class TestSecrets:
    """Test base32 secret helpers."""

    def test_generate_length(self):
        """Generated secret has requested length."""
        assert len(generate_secret()) == 20
        assert len(generate_secret(32)) == 32

    def test_generate_invalid_length(self):
        """Non-positive length is rejected."""
        with pytest.raises(ValueError):
            generate_secret(0)

    def test_base32_roundtrip(self):
        """Base32 encoding/decoding roundtrip."""
        secret = generate_secret()
        assert secret_from_base32(secret_to_base32(secret)) == secret

    def test_base32_no_padding(self):
        """Base32 output has no padding."""
        assert "=" not in secret_to_base32(generate_secret(16))

    def test_known_secret(self):
        """RFC 4226 secret decodes from its base32 form."""
        assert secret_from_base32("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ") == b"12345678901234567890"

    def test_lowercase_and_spaces(self):
        """Lowercase and grouped input is accepted."""
        assert secret_from_base32("gezd gnbv gy3t qojq") == b"1234567890"

    @pytest.mark.parametrize("value", ["!!!!", "", "A1"])
    def test_invalid_base32(self, value):
        """Invalid base32 raises ValueError."""
        with pytest.raises(ValueError):
            secret_from_base32(value)
