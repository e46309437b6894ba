"""Data module abstraction and loaders.

A data module is produced outside of somaver (for SomaScan, by the text export
step) and exposes two tables:

- `data()`: rows are samples; columns are somamers and sample metadata
- `labels()`: rows are somamers; columns are somamer annotations

Loaders are plain callables `loader(name=..., version=..., path=...)`. The CLI
refers to them by an import reference `package.module:function`.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from somaver.core.locator import DatasetLocator, PathLike
from somaver.errors import DataDirectoryNotFoundError, LoaderResolutionError

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

TEXT_DATA_FILENAME = "data.txt"
TEXT_LABELS_FILENAME = "labels.txt"


@runtime_checkable
class DataModule(Protocol):
    def data(self) -> "pd.DataFrame": ...

    def labels(self) -> "pd.DataFrame": ...


DataModuleLoader = Callable[..., DataModule]


@dataclass(frozen=True)
class TextDataModule:
    """Data module backed by the tab-separated text export in `data/`."""

    data_path: Path
    labels_path: Path

    def data(self) -> "pd.DataFrame":
        import pandas as pd  # local import to keep module import-light

        return pd.read_csv(self.data_path, sep="\t")

    def labels(self) -> "pd.DataFrame":
        import pandas as pd

        return pd.read_csv(self.labels_path, sep="\t")


def load_text_module(*, name: str, version: str, path: PathLike) -> TextDataModule:
    """Default loader: locate `data.txt` and `labels.txt` of a version folder."""
    loc = DatasetLocator.of(path, name, version)
    if not loc.data_dir.is_dir():
        raise DataDirectoryNotFoundError(f"data directory not found: {loc.data_dir}")

    data_path = loc.data_dir / TEXT_DATA_FILENAME
    labels_path = loc.data_dir / TEXT_LABELS_FILENAME
    for p in (data_path, labels_path):
        if not p.is_file():
            raise FileNotFoundError(f"{loc}: missing text export file {p}")
    return TextDataModule(data_path=data_path, labels_path=labels_path)


def resolve_loader(ref: str) -> DataModuleLoader:
    """Resolve 'package.module:function' into a loader callable."""
    if not isinstance(ref, str) or ":" not in ref:
        raise LoaderResolutionError(f"loader reference must look like 'package.module:function', got {ref!r}")
    module_name, attr = ref.split(":", 1)
    module_name = module_name.strip()
    attr = attr.strip()
    if not module_name or not attr:
        raise LoaderResolutionError(f"loader reference must look like 'package.module:function', got {ref!r}")

    try:
        mod = importlib.import_module(module_name)
    except ImportError as e:
        raise LoaderResolutionError(f"cannot import loader module {module_name!r}: {e}") from e

    obj = mod
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise LoaderResolutionError(f"loader {attr!r} not found in module {module_name!r}") from None
    if not callable(obj):
        raise LoaderResolutionError(f"loader {ref!r} is not callable")
    return obj
