"""Operating-system CSPRNG (default)."""

from __future__ import annotations

import secrets


class SystemRandomSource:
    """Draws from ``secrets``, backed by the OS CSPRNG."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)
