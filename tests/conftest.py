"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import somaver` to fail.

To keep the suite robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers for version folders
# =============================================================================


def make_data_dir(
    root: Path,
    files: dict[str, bytes] | None = None,
    *,
    name: str = "demo",
    version: str = "1.0.0",
) -> Path:
    """Create `<root>/<name>/<version>/data/` with the given files; return data/."""
    data_dir = root / name / version / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    for fname, content in (files or {}).items():
        (data_dir / fname).write_bytes(content)
    return data_dir


def make_soma_data() -> pd.DataFrame:
    """Rows: samples; columns: sample metadata + somamers."""
    return pd.DataFrame(
        {
            "SampleId": ["S1", "S2", "S3"],
            "seq.10000.28": [512.3, 498.1, 530.7],
            "seq.10001.7": [1204.0, 1188.5, 1250.2],
        }
    )


def make_soma_ann() -> pd.DataFrame:
    """Rows: somamers; columns: annotations."""
    return pd.DataFrame(
        {
            "SeqId": ["10000-28", "10001-7"],
            "Target": ["CRBB2", "c-Raf"],
            "UniProt": ["P43320", "P04049"],
        }
    )


def write_text_module(root: Path, *, name: str = "demo", version: str = "1.0.0") -> Path:
    """Write a tab-separated text export (data.txt + labels.txt); return data/."""
    data_dir = make_data_dir(root, name=name, version=version)
    make_soma_data().to_csv(data_dir / "data.txt", sep="\t", index=False)
    make_soma_ann().to_csv(data_dir / "labels.txt", sep="\t", index=False)
    return data_dir
