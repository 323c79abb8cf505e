"""Random source protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Interface for salt generators."""

    def token_bytes(self, nbytes: int) -> bytes:
        """Return *nbytes* random bytes."""
        ...
