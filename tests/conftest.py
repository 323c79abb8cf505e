"""Shared fixtures: cheap scrypt parameters."""

import pytest

from scryptauth.config import ScryptConfig
from scryptauth.hasher import PasswordHasher


@pytest.fixture()
def fast_config() -> ScryptConfig:
    return ScryptConfig(n=16, r=1, p=1)


@pytest.fixture()
def hasher(fast_config: ScryptConfig) -> PasswordHasher:
    return PasswordHasher(fast_config)
