"""Random sources used for salt generation."""

from scryptauth.rng.base import RandomSource
from scryptauth.rng.system import SystemRandomSource

__all__ = ["RandomSource", "SystemRandomSource"]
