"""somaver exception hierarchy.

Each failure mode of the versioning workflow has its own error type. Errors
that correspond to a builtin category also derive from it, so callers can keep
catching `FileNotFoundError` / `ValueError` where that is more natural.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from somaver.digest.verify import DigestMismatch


class SomaverError(Exception):
    """Base exception for all somaver failures."""


class DataDirectoryNotFoundError(SomaverError, FileNotFoundError):
    """Raised when `<root>/<name>/<version>/data` does not exist."""


class BaselineNotFoundError(SomaverError, FileNotFoundError):
    """Raised when the md5sums baseline of a version has not been written."""


class BaselineFormatError(SomaverError, ValueError):
    """Raised when a baseline file is not a JSON object of path -> md5 hex."""


class UnexpectedEntryError(SomaverError, ValueError):
    """Raised when the data directory contains something other than files."""


class LoaderResolutionError(SomaverError, ValueError):
    """Raised for a data module loader reference that cannot be imported."""


class VerificationMismatchError(SomaverError):
    """Raised when freshly computed md5sums disagree with the stored baseline.

    The message lists every mismatched file with both hashes.
    """

    def __init__(self, mismatches: Sequence["DigestMismatch"]):
        from somaver.digest.verify import format_mismatches

        self.mismatches = list(mismatches)
        super().__init__(
            "One or more files do not match the expected md5sums hashes:\n" + format_mismatches(self.mismatches)
        )
