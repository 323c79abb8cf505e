"""scryptauth configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scryptauth.exceptions import ConfigError

_ENV_PREFIX = "SCRYPTAUTH_"
_TRUTHY = ("1", "true", "yes")


class ScryptConfig(BaseModel):
    """Fixed scrypt parameters shared by hashing and verification."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(default=16384, gt=1)  # CPU/memory cost
    r: int = Field(default=16, ge=1)  # block size
    p: int = Field(default=1, ge=1)  # parallelization
    dklen: int = Field(default=64, ge=1)
    salt_length: int = Field(default=16, ge=1)
    # Feed the salt's hex text to scrypt instead of its raw bytes, as older
    # credential stores did.
    legacy_text_salt: bool = False

    @field_validator("n")
    @classmethod
    def _power_of_two(cls, v: int) -> int:
        if v & (v - 1):
            raise ValueError("n must be a power of two")
        return v

    @property
    def maxmem(self) -> int:
        """Memory ceiling handed to the primitive, in bytes."""
        return 128 * self.n * self.r * 2

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ScryptConfig:
        """Build a config from ``SCRYPTAUTH_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for name in ("n", "r", "p", "dklen", "salt_length"):
            raw = env.get(_ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            try:
                values[name] = int(raw)
            except ValueError as exc:
                raise ConfigError(
                    f"{_ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}"
                ) from exc
        legacy = env.get(_ENV_PREFIX + "LEGACY_TEXT_SALT")
        if legacy:
            values["legacy_text_salt"] = legacy.lower() in _TRUTHY
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


DEFAULT_CONFIG = ScryptConfig()
