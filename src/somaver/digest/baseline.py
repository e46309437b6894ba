"""Persist and read the per-version md5sums baseline.

The baseline is written once a human has checked that the data of a version
is correct. It lives next to `data/`:

    <root>/<name>/<version>/md5sums_v_<version>.json

and holds a single JSON object mapping absolute file paths to md5 hex digests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from somaver.core.locator import DatasetLocator, PathLike
from somaver.errors import BaselineFormatError, BaselineNotFoundError
from somaver.logging_config import get_logger

from .collect import DigestMapping, get_md5sums
from .hashing import is_hex_digest

log = get_logger(__name__)


def write_baseline(path: Path, md5sums: DigestMapping) -> None:
    p = Path(path)
    text = json.dumps(dict(md5sums), indent=2, sort_keys=True) + "\n"
    p.write_text(text, encoding="utf-8")


def read_baseline(path: Path) -> DigestMapping:
    """Read a baseline file, validating its shape."""
    p = Path(path)
    if not p.is_file():
        raise BaselineNotFoundError(f"md5sums baseline not found: {p}")

    try:
        obj: Any = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise BaselineFormatError(f"{p}: invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise BaselineFormatError(f"{p}: expected JSON object, got {type(obj).__name__}")

    out: DigestMapping = {}
    for key, value in obj.items():
        if not is_hex_digest(value):
            raise BaselineFormatError(f"{p}: entry {key!r}: expected 32-character md5 hex digest, got {value!r}")
        out[key] = value
    return out


def save_versioned_md5sums(path: PathLike, name: str, version: str) -> DigestMapping:
    """Compute the md5sums of a version and write them as its baseline.

    Any existing baseline for the version is overwritten. Returns the mapping
    that was written.
    """
    loc = DatasetLocator.of(path, name, version)
    md5sums = get_md5sums(loc.root, loc.name, loc.version)
    write_baseline(loc.baseline_path, md5sums)
    log.info("baseline_written", dataset=str(loc), path=str(loc.baseline_path), files=len(md5sums))
    return md5sums


def read_versioned_md5sums(path: PathLike, name: str, version: str) -> DigestMapping:
    loc = DatasetLocator.of(path, name, version)
    return read_baseline(loc.baseline_path)
