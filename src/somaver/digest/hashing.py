"""MD5 content hashing helpers.

MD5 (128-bit, lowercase hex) is the digest format of every stored baseline.
Switching algorithms invalidates existing baselines and must be treated as a
breaking change.
"""

from __future__ import annotations

import hashlib
import re
from pathlib import Path

DIGEST_ALGORITHM = "md5"
_CHUNK_SIZE = 1024 * 1024
_HEX_DIGEST_RE = re.compile(r"^[0-9a-f]{32}$")


def md5_bytes(b: bytes) -> str:
    """Return hex-encoded md5 for bytes."""
    if not isinstance(b, (bytes, bytearray)):
        raise TypeError(f"md5_bytes: expected bytes, got {type(b).__name__}")
    return hashlib.md5(bytes(b)).hexdigest()


def md5_file(path: Path) -> str:
    """Return hex-encoded md5 for a file on disk."""
    p = Path(path)
    h = hashlib.md5()
    with p.open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            h.update(chunk)
    return h.hexdigest()


def is_hex_digest(value: object) -> bool:
    return isinstance(value, str) and _HEX_DIGEST_RE.match(value) is not None
