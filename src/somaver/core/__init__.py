"""somaver core: dataset locator and data module abstraction.

Must not import digest/artifacts/CLI to avoid circular dependencies.
"""

from __future__ import annotations

from .locator import ARTIFACT_STEMS, DatasetLocator
from .module import DataModule, DataModuleLoader, TextDataModule, load_text_module, resolve_loader

__all__ = [
    "ARTIFACT_STEMS",
    "DatasetLocator",
    "DataModule",
    "DataModuleLoader",
    "TextDataModule",
    "load_text_module",
    "resolve_loader",
]
