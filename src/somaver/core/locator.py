"""Dataset locator: `(root, name, version)` -> version folder paths.

Layout of a version folder:

    <root>/<name>/<version>/data/soma_data.pkl
    <root>/<name>/<version>/data/soma_ann.pkl
    <root>/<name>/<version>/md5sums_v_<version>.json

The layout is shared with existing stored baselines and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

DATA_DIRNAME = "data"
BASELINE_PREFIX = "md5sums_v_"
BASELINE_EXT = "json"
ARTIFACT_EXT = "pkl"

# artifact kind -> file stem under data/
ARTIFACT_STEMS = {
    "data": "soma_data",
    "annotations": "soma_ann",
}

PathLike = Union[str, Path]


def _norm_component(value: str, *, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what}: expected str, got {type(value).__name__}")
    s = value
    if not s.strip():
        raise ValueError(f"{what}: must be a non-empty string")
    if s != s.strip():
        raise ValueError(f"{what}: must not have leading or trailing whitespace, got {value!r}")
    if "/" in s or "\\" in s or s in (".", ".."):
        raise ValueError(f"{what}: must be a single folder name, got {value!r}")
    return s


@dataclass(frozen=True)
class DatasetLocator:
    root: Path
    name: str
    version: str

    @classmethod
    def of(cls, path: PathLike, name: str, version: str) -> "DatasetLocator":
        return cls(
            root=Path(path),
            name=_norm_component(name, what="name"),
            version=_norm_component(version, what="version"),
        )

    @property
    def version_dir(self) -> Path:
        return self.root / self.name / self.version

    @property
    def data_dir(self) -> Path:
        return self.version_dir / DATA_DIRNAME

    @property
    def baseline_path(self) -> Path:
        return self.version_dir / f"{BASELINE_PREFIX}{self.version}.{BASELINE_EXT}"

    def artifact_path(self, kind: str) -> Path:
        try:
            stem = ARTIFACT_STEMS[kind]
        except KeyError:
            raise ValueError(f"unknown artifact kind {kind!r}; expected one of {sorted(ARTIFACT_STEMS)}") from None
        return self.data_dir / f"{stem}.{ARTIFACT_EXT}"

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"
