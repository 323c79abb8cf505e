"""scryptauth core primitives."""

from scryptauth.core.compare import equal
from scryptauth.core.hexcodec import decode, encode
from scryptauth.core.kdf import derive
from scryptauth.core.types import StoredCredential

__all__ = ["StoredCredential", "decode", "derive", "encode", "equal"]
