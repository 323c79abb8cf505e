"""Constant-time byte comparison."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode()
    return bytes(value)


def equal(a: BytesLike, b: BytesLike) -> bool:
    """True iff *a* and *b* are byte-for-byte identical.

    Always walks the longer input to the end and folds the length check into
    the same accumulator, so timing does not reveal where the inputs diverge.
    """
    left = _as_bytes(a)
    right = _as_bytes(b)
    len_a = len(left)
    len_b = len(right)
    acc = len_a ^ len_b
    for i in range(max(len_a, len_b)):
        x = left[i] if i < len_a else 0
        y = right[i] if i < len_b else 0
        acc |= x ^ y
    return acc == 0
