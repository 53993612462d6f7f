"""
Digest capability used by the signature functions.

The signature scheme only needs "bytes in, hex digest out", so any callable
with that shape can be plugged in.
"""

import hashlib
from typing import Protocol, runtime_checkable


@runtime_checkable
class Digest(Protocol):
    """Protocol for a one-way digest returning a lowercase hex string."""

    def __call__(self, data: bytes) -> str: ...


def sha1_hex(data: bytes) -> str:
    """160-bit SHA-1 digest as hex."""
    return hashlib.sha1(data).hexdigest()


def md5_hex(data: bytes) -> str:
    """128-bit MD5 digest as hex."""
    return hashlib.md5(data).hexdigest()
