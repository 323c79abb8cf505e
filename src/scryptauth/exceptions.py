"""scryptauth exceptions."""


class ScryptAuthError(Exception):
    """Base exception for all scryptauth errors."""


class InvalidHexString(ScryptAuthError, ValueError):
    """Raised when text is not well-formed hexadecimal."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid hexadecimal string: {reason}")


class InvalidHashFormat(ScryptAuthError, ValueError):
    """Raised when a stored credential is not ``<salt_hex>:<key_hex>``."""

    def __init__(self, reason: str = "expected '<salt_hex>:<key_hex>'"):
        self.reason = reason
        super().__init__(f"Invalid password hash: {reason}")


class DerivationFailed(ScryptAuthError):
    """Raised when the scrypt primitive rejects its parameters or runs out of memory.

    Fatal: points at a configuration or platform defect, never retried.
    """


class ConfigError(ScryptAuthError):
    """Raised on invalid configuration."""
