"""Compute the md5sums of a version folder's `data/` directory.

Traversal policy:
- flat: only direct entries of `data/` are considered
- entries starting with "." are skipped
- regular files (and symlinks to regular files) are hashed
- any other entry, e.g. a subdirectory, raises UnexpectedEntryError

Keys are normalized absolute paths (no ".." segments, symlinks kept), ordered
by file name.
"""

from __future__ import annotations

import os
from pathlib import Path

from somaver.core.locator import DatasetLocator, PathLike
from somaver.errors import DataDirectoryNotFoundError, UnexpectedEntryError
from somaver.logging_config import get_logger

from .hashing import md5_file

DigestMapping = dict[str, str]

log = get_logger(__name__)


def list_data_files(data_dir: Path) -> list[Path]:
    """Return the hashable files of `data_dir` as absolute paths, sorted by name."""
    d = Path(data_dir)
    if not d.is_dir():
        raise DataDirectoryNotFoundError(f"data directory not found: {d}")
    # abspath collapses ".." without following symlinks
    d = Path(os.path.abspath(d))

    files: list[Path] = []
    for entry in sorted(d.iterdir(), key=lambda p: p.name):
        if entry.name.startswith("."):
            continue
        if not entry.is_file():
            raise UnexpectedEntryError(f"{d}: expected only files, found non-file entry {entry.name!r}")
        files.append(entry)
    return files


def md5sums_for_dir(data_dir: Path) -> DigestMapping:
    return {str(p): md5_file(p) for p in list_data_files(data_dir)}


def get_md5sums(path: PathLike, name: str, version: str) -> DigestMapping:
    """Return {absolute file path: md5 hex} for `<path>/<name>/<version>/data`."""
    loc = DatasetLocator.of(path, name, version)
    md5sums = md5sums_for_dir(loc.data_dir)
    log.info("md5sums_computed", dataset=str(loc), files=len(md5sums))
    return md5sums
