"""Tests for password hashing and verification."""

import random
import re

import pytest

from scryptauth import hash_password, verify_password
from scryptauth.config import ScryptConfig
from scryptauth.core.types import StoredCredential
from scryptauth.exceptions import DerivationFailed, InvalidHashFormat, InvalidHexString
from scryptauth.hasher import PasswordHasher
from scryptauth.rng import RandomSource, SystemRandomSource

_FORMAT = re.compile(r"^[0-9a-f]{32}:[0-9a-f]{128}$")


class SeededRandomSource:
    """Deterministic stand-in for the OS CSPRNG."""

    def __init__(self, seed: int = 0):
        self._rng = random.Random(seed)

    def token_bytes(self, nbytes: int) -> bytes:
        return self._rng.randbytes(nbytes)


class TestDefaults:
    """Module-level functions with the production parameters."""

    def test_format(self):
        assert _FORMAT.match(hash_password("password"))

    def test_hash_and_verify(self):
        h = hash_password("MySecretPassword123")
        assert verify_password("MySecretPassword123", h)
        assert not verify_password("wrong", h)

    def test_malformed(self):
        with pytest.raises(InvalidHashFormat):
            verify_password("password", "not-a-hash")


class TestPasswordHasher:
    def test_roundtrip(self, hasher: PasswordHasher):
        for pw in ("", "a", "correct horse battery staple", "pässü\U0001f511"):
            assert hasher.verify(pw, hasher.hash(pw))

    def test_wrong_password(self, hasher: PasswordHasher):
        h = hasher.hash("right")
        assert hasher.verify("wrong", h) is False
        assert hasher.verify("Right", h) is False

    def test_different_salts(self, hasher: PasswordHasher):
        h1 = hasher.hash("same-password")
        h2 = hasher.hash("same-password")
        assert h1.split(":")[0] != h2.split(":")[0]
        assert h1 != h2

    def test_lengths_follow_config(self):
        hasher = PasswordHasher(ScryptConfig(n=16, r=1, p=1, dklen=32, salt_length=8))
        salt_hex, key_hex = hasher.hash("pw").split(":")
        assert len(salt_hex) == 16
        assert len(key_hex) == 64

    def test_deterministic_random_source(self, fast_config: ScryptConfig):
        a = PasswordHasher(fast_config, random_source=SeededRandomSource(7))
        b = PasswordHasher(fast_config, random_source=SeededRandomSource(7))
        assert a.hash("pw") == b.hash("pw")

    def test_salt_comes_from_random_source(self, fast_config: ScryptConfig):
        class Fixed:
            def token_bytes(self, nbytes: int) -> bytes:
                return b"\xaa" * nbytes

        h = PasswordHasher(fast_config, random_source=Fixed()).hash("pw")
        assert h.startswith("aa" * 16 + ":")

    def test_system_source_is_random_source(self):
        assert isinstance(SystemRandomSource(), RandomSource)
        assert len(SystemRandomSource().token_bytes(16)) == 16

    def test_nfkc_equivalent_passwords_verify(self, hasher: PasswordHasher):
        assert hasher.verify("cafe\u0301", hasher.hash("caf\u00e9"))

    def test_uppercase_stored_hex_verifies(self, hasher: PasswordHasher):
        assert hasher.verify("pw", hasher.hash("pw").upper())

    def test_truncated_key_is_mismatch(self, hasher: PasswordHasher):
        h = hasher.hash("pw")
        assert hasher.verify("pw", h[:-2]) is False

    def test_extra_separator_is_malformed(self, hasher: PasswordHasher):
        salt_hex, key_hex = hasher.hash("pw").split(":")
        with pytest.raises(InvalidHashFormat):
            hasher.verify("pw", f"{salt_hex}:{key_hex}:00")

    @pytest.mark.parametrize(
        "stored",
        ["not-a-hash", "", ":", "abcd:", ":abcd", "abc:abcd", "abcd:zz", "ab cd:abcd"],
    )
    def test_malformed_stored_hash(self, hasher: PasswordHasher, stored: str):
        with pytest.raises(InvalidHashFormat):
            hasher.verify("password", stored)

    def test_derivation_failure_propagates_from_hash(self):
        # n=2, r=1 gives a 512-byte memory ceiling, too small for scrypt
        with pytest.raises(DerivationFailed):
            PasswordHasher(ScryptConfig(n=2, r=1, p=1)).hash("pw")

    def test_derivation_failure_propagates_from_verify(self, hasher: PasswordHasher):
        stored = hasher.hash("pw")
        with pytest.raises(DerivationFailed):
            PasswordHasher(ScryptConfig(n=2, r=1, p=1)).verify("pw", stored)

    def test_bad_hex_is_chained(self, hasher: PasswordHasher):
        with pytest.raises(InvalidHashFormat) as exc:
            hasher.verify("password", "abc:abcd")
        assert isinstance(exc.value.__cause__, InvalidHexString)


class TestStoredCredential:
    def test_parse_and_format(self):
        cred = StoredCredential.parse("00ff:abcd")
        assert cred.salt == b"\x00\xff"
        assert cred.key == b"\xab\xcd"
        assert cred.to_string() == "00ff:abcd"
        assert str(cred) == "00ff:abcd"

    def test_output_is_lowercase(self):
        assert StoredCredential.parse("00FF:ABCD").to_string() == "00ff:abcd"

    def test_missing_separator(self):
        with pytest.raises(InvalidHashFormat) as exc:
            StoredCredential.parse("00ff")
        assert "separator" in str(exc.value)
