"""Build and load the quick-loading table artifacts of a version folder.

`build_data_artifacts()` runs right after the text export of a new data
version: it loads the data module once and pickles its two tables under
`data/` so that later reads skip parsing. The md5sums baseline is written
separately (`somaver.digest.save_versioned_md5sums`) after the artifacts have
been checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from somaver.core.locator import DatasetLocator, PathLike
from somaver.core.module import DataModuleLoader, load_text_module
from somaver.digest.verify import verify_md5sums
from somaver.errors import DataDirectoryNotFoundError
from somaver.logging_config import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class DataArtifacts:
    data: "Any"  # pandas.DataFrame; rows: samples, columns: somamers + sample metadata
    annotations: "Any"  # pandas.DataFrame; rows: somamers, columns: somamer annotations


def _require_dataframe(df: object, *, what: str) -> "Any":
    import pandas as pd  # local import to keep module import-light

    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"{what}: expected pandas.DataFrame, got {type(df).__name__}")
    return df


def build_data_artifacts(
    path: PathLike,
    name: str,
    version: str,
    *,
    loader: Optional[DataModuleLoader] = None,
) -> tuple[Path, Path]:
    """Load the data module of a version and pickle its tables under `data/`.

    Existing artifacts are overwritten. Returns (data_path, annotations_path).
    """
    loc = DatasetLocator.of(path, name, version)
    if not loc.data_dir.is_dir():
        raise DataDirectoryNotFoundError(f"data directory not found: {loc.data_dir}")

    load = load_text_module if loader is None else loader
    module = load(name=loc.name, version=loc.version, path=loc.root)

    data = _require_dataframe(module.data(), what=f"{loc}: data()")
    annotations = _require_dataframe(module.labels(), what=f"{loc}: labels()")

    data_path = loc.artifact_path("data")
    ann_path = loc.artifact_path("annotations")
    data.to_pickle(data_path)
    annotations.to_pickle(ann_path)

    log.info(
        "artifacts_written",
        dataset=str(loc),
        data=str(data_path),
        data_shape=list(data.shape),
        annotations=str(ann_path),
        annotations_shape=list(annotations.shape),
    )
    return data_path, ann_path


def read_data_artifacts(path: PathLike, name: str, version: str) -> DataArtifacts:
    """Read both pickled tables without any md5sums check."""
    import pandas as pd

    loc = DatasetLocator.of(path, name, version)
    data = _require_dataframe(pd.read_pickle(loc.artifact_path("data")), what=f"{loc}: soma_data")
    annotations = _require_dataframe(pd.read_pickle(loc.artifact_path("annotations")), what=f"{loc}: soma_ann")
    return DataArtifacts(data=data, annotations=annotations)


def load_data_artifacts(path: PathLike, name: str, version: str, *, verify: bool = True) -> DataArtifacts:
    """Load the tables of a version, checking md5sums against the baseline first.

    With verify=True (default) nothing is unpickled unless every file in
    `data/` matches the stored baseline; VerificationMismatchError is raised
    otherwise.
    """
    loc = DatasetLocator.of(path, name, version)
    if verify:
        verify_md5sums(loc.root, loc.name, loc.version)
    else:
        log.warning("verification_skipped", dataset=str(loc))
    return read_data_artifacts(loc.root, loc.name, loc.version)
