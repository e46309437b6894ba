"""Compare fresh md5sums against the stored baseline of a version.

Loading code must call `verify_md5sums()` (or go through
`somaver.artifacts.load_data_artifacts()`) and refuse to use the data when it
raises VerificationMismatchError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from somaver.core.locator import DatasetLocator, PathLike
from somaver.errors import VerificationMismatchError
from somaver.logging_config import get_logger

from .baseline import read_baseline
from .collect import DigestMapping, get_md5sums

log = get_logger(__name__)

MISSING = "<missing>"


@dataclass(frozen=True)
class DigestMismatch:
    path: str
    new_hash: Optional[str]  # None: file no longer present
    old_hash: Optional[str]  # None: file not in the baseline

    @property
    def kind(self) -> str:
        if self.new_hash is None:
            return "missing"
        if self.old_hash is None:
            return "unexpected"
        return "changed"


def compare_md5sums(current: Mapping[str, str], baseline: Mapping[str, str]) -> list[DigestMismatch]:
    """Return every path whose hash differs or that is present on one side only.

    Neither input is modified. Result is sorted by path.
    """
    out: list[DigestMismatch] = []
    for key in sorted(set(current) | set(baseline)):
        new = current.get(key)
        old = baseline.get(key)
        if new != old:
            out.append(DigestMismatch(path=key, new_hash=new, old_hash=old))
    return out


def format_mismatches(mismatches: Sequence[DigestMismatch]) -> str:
    """Render mismatches as a fixed-width `filename new_hash old_hash` table."""
    rows = [("filename", "new_hash", "old_hash")]
    rows += [(m.path, m.new_hash or MISSING, m.old_hash or MISSING) for m in mismatches]
    w0 = max(len(r[0]) for r in rows)
    w1 = max(len(r[1]) for r in rows)
    return "\n".join(f"{r[0]:<{w0}}  {r[1]:<{w1}}  {r[2]}".rstrip() for r in rows)


def verify_md5sums(path: PathLike, name: str, version: str) -> DigestMapping:
    """Recompute the md5sums of a version and check them against its baseline.

    Returns the fresh mapping when it equals the baseline.

    Raises:
        DataDirectoryNotFoundError: `data/` is missing.
        BaselineNotFoundError: no baseline has been saved for the version.
        VerificationMismatchError: at least one file changed, vanished or appeared.
    """
    loc = DatasetLocator.of(path, name, version)
    current = get_md5sums(loc.root, loc.name, loc.version)
    baseline = read_baseline(loc.baseline_path)

    mismatches = compare_md5sums(current, baseline)
    if mismatches:
        log.error("verification_failed", dataset=str(loc), mismatches=len(mismatches))
        raise VerificationMismatchError(mismatches)

    log.info("verification_passed", dataset=str(loc), files=len(current))
    return current
