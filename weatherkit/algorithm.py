"""Hashing helpers."""

from __future__ import annotations

import hashlib


def sha1(data: bytes | str) -> bytes:
    """Return the raw 20-byte SHA-1 digest of data (text is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha1(data).digest()