"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from somaver.config import Settings

ROOT_HELP = "Data root holding <name>/<version>/ folders (default: $SOMAVER_ROOT or '.')."


def resolve_root(root: Optional[str]) -> Path:
    if root:
        return Path(root)
    return Settings.from_env().root


def fail(err: Exception) -> typer.Exit:
    """Report an error on stderr and return the exit to raise."""
    typer.echo(f"error: {err}", err=True)
    return typer.Exit(code=1)
