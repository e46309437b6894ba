"""`somaver verify` command.

Recomputes the md5sums of a version and compares them to its baseline.
Prints `OK`, or the mismatch table and exits with status 1.
"""

from __future__ import annotations

from typing import Optional

import typer

from somaver.digest import verify_md5sums
from somaver.errors import SomaverError

from ._common import ROOT_HELP, fail, resolve_root


def register(app: typer.Typer) -> None:
    @app.command("verify")
    def verify(
        name: str = typer.Argument(..., help="Dataset name."),
        version: str = typer.Argument(..., help="Dataset version."),
        root: Optional[str] = typer.Option(None, "--root", help=ROOT_HELP),
    ) -> None:
        """Check the version's data/ files against the stored md5sums baseline."""
        try:
            verify_md5sums(resolve_root(root), name, version)
        except SomaverError as e:
            raise fail(e) from e
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        typer.echo("OK")
