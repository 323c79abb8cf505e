"""Password hashing and verification, the two calls the application makes."""

from __future__ import annotations

from scryptauth.config import DEFAULT_CONFIG, ScryptConfig
from scryptauth.core.compare import equal
from scryptauth.core.kdf import derive
from scryptauth.core.types import StoredCredential
from scryptauth.rng import RandomSource, SystemRandomSource


class PasswordHasher:
    """Hashes passwords into ``<salt_hex>:<key_hex>`` and verifies them.

    >>> hasher = PasswordHasher()
    >>> stored = hasher.hash("hunter2")
    >>> hasher.verify("hunter2", stored)
    True

    Holds only immutable configuration and a random source, so one instance
    can be shared across threads.
    """

    def __init__(
        self,
        config: ScryptConfig | None = None,
        *,
        random_source: RandomSource | None = None,
    ):
        self._config = config or DEFAULT_CONFIG
        self._random = random_source or SystemRandomSource()

    @property
    def config(self) -> ScryptConfig:
        return self._config

    # ------------------------------------------------------------------
    # Building blocks (used by the async wrappers)
    # ------------------------------------------------------------------

    def new_salt(self) -> bytes:
        """Draw a fresh salt from the random source."""
        return self._random.token_bytes(self._config.salt_length)

    def derive(self, password: str, salt: bytes) -> bytes:
        return derive(password, salt, self._config)

    @staticmethod
    def parse(stored: str) -> StoredCredential:
        """Parse a stored hash, raising ``InvalidHashFormat`` if malformed."""
        return StoredCredential.parse(stored)

    @staticmethod
    def matches(candidate_key: bytes, credential: StoredCredential) -> bool:
        return equal(candidate_key, credential.key)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def hash(self, password: str) -> str:
        """Hash *password* with a fresh salt. Returns ``salt_hex:key_hex``."""
        salt = self.new_salt()
        return StoredCredential(salt=salt, key=self.derive(password, salt)).to_string()

    def verify(self, password: str, stored: str) -> bool:
        """Check *password* against *stored*.

        Returns ``False`` on a wrong password. Raises ``InvalidHashFormat`` when
        *stored* is malformed, so corrupt data is never mistaken for a mismatch.
        """
        credential = self.parse(stored)
        return self.matches(self.derive(password, credential.salt), credential)


_default_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with the default parameters."""
    return _default_hasher.hash(password)


def verify_password(password: str, stored: str) -> bool:
    """Verify a password against a stored hash with the default parameters."""
    return _default_hasher.verify(password, stored)
