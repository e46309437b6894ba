"""md5sums of version folders.

- compute current hashes of `data/` (collect)
- snapshot them as the version baseline (baseline)
- check fresh hashes against the baseline (verify)
"""

from __future__ import annotations

from .baseline import read_baseline, read_versioned_md5sums, save_versioned_md5sums, write_baseline
from .collect import DigestMapping, get_md5sums, list_data_files, md5sums_for_dir
from .hashing import DIGEST_ALGORITHM, md5_bytes, md5_file
from .verify import DigestMismatch, compare_md5sums, format_mismatches, verify_md5sums

__all__ = [
    "DIGEST_ALGORITHM",
    "DigestMapping",
    "DigestMismatch",
    "compare_md5sums",
    "format_mismatches",
    "get_md5sums",
    "list_data_files",
    "md5_bytes",
    "md5_file",
    "md5sums_for_dir",
    "read_baseline",
    "read_versioned_md5sums",
    "save_versioned_md5sums",
    "verify_md5sums",
    "write_baseline",
]
