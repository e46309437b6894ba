"""Quick-loading table artifacts (`soma_data.pkl`, `soma_ann.pkl`)."""

from __future__ import annotations

from .io import DataArtifacts, build_data_artifacts, load_data_artifacts, read_data_artifacts

__all__ = [
    "DataArtifacts",
    "build_data_artifacts",
    "read_data_artifacts",
    "load_data_artifacts",
]
