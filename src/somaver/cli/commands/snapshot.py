"""`somaver snapshot` command: lock in the md5sums baseline of a version.

Run it only after the version's data has been checked; an existing baseline
is overwritten.
"""

from __future__ import annotations

from typing import Optional

import typer

from somaver.core.locator import DatasetLocator
from somaver.digest import save_versioned_md5sums
from somaver.errors import SomaverError

from ._common import ROOT_HELP, fail, resolve_root


def register(app: typer.Typer) -> None:
    @app.command("snapshot")
    def snapshot(
        name: str = typer.Argument(..., help="Dataset name."),
        version: str = typer.Argument(..., help="Dataset version."),
        root: Optional[str] = typer.Option(None, "--root", help=ROOT_HELP),
    ) -> None:
        """Write md5sums_v_<version>.json next to the version's data/ folder."""
        try:
            loc = DatasetLocator.of(resolve_root(root), name, version)
            save_versioned_md5sums(loc.root, loc.name, loc.version)
        except SomaverError as e:
            raise fail(e) from e
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        typer.echo(str(loc.baseline_path))
