"""somaver — versioned SomaScan data artifacts with md5sums checks.

Workflow for a new data version:
1. export the data module as text (outside somaver)
2. `build_data_artifacts()` pickles the data and annotation tables
3. check the data, then `save_versioned_md5sums()` locks in the baseline
4. readers call `load_data_artifacts()`, which verifies md5sums before loading
"""

from __future__ import annotations

from somaver.artifacts import DataArtifacts, build_data_artifacts, load_data_artifacts, read_data_artifacts
from somaver.core import DatasetLocator, DataModule
from somaver.digest import (
    DigestMismatch,
    compare_md5sums,
    get_md5sums,
    read_versioned_md5sums,
    save_versioned_md5sums,
    verify_md5sums,
)
from somaver.errors import SomaverError, VerificationMismatchError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DataArtifacts",
    "DataModule",
    "DatasetLocator",
    "DigestMismatch",
    "SomaverError",
    "VerificationMismatchError",
    "build_data_artifacts",
    "compare_md5sums",
    "get_md5sums",
    "load_data_artifacts",
    "read_data_artifacts",
    "read_versioned_md5sums",
    "save_versioned_md5sums",
    "verify_md5sums",
]
