"""`somaver hashes` command: print the current md5sums of a version."""

from __future__ import annotations

from typing import Optional

import typer

from somaver.digest import get_md5sums
from somaver.errors import SomaverError

from ._common import ROOT_HELP, fail, resolve_root


def register(app: typer.Typer) -> None:
    @app.command("hashes")
    def hashes(
        name: str = typer.Argument(..., help="Dataset name."),
        version: str = typer.Argument(..., help="Dataset version."),
        root: Optional[str] = typer.Option(None, "--root", help=ROOT_HELP),
    ) -> None:
        """Print `md5  path` for every file in the version's data/ folder."""
        try:
            md5sums = get_md5sums(resolve_root(root), name, version)
        except SomaverError as e:
            raise fail(e) from e
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        for path, digest in md5sums.items():
            typer.echo(f"{digest}  {path}")
