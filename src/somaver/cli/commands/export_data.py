"""`somaver export` command.

Loads the data module of a version and writes `data/soma_data.pkl` and
`data/soma_ann.pkl`.
"""

from __future__ import annotations

from typing import Optional

import typer

from somaver.artifacts import build_data_artifacts
from somaver.config import Settings
from somaver.core.module import resolve_loader
from somaver.errors import SomaverError

from ._common import ROOT_HELP, fail, resolve_root


def register(app: typer.Typer) -> None:
    @app.command("export")
    def export(
        name: str = typer.Argument(..., help="Dataset name (folder under the data root)."),
        version: str = typer.Argument(..., help="Dataset version (folder under <root>/<name>/)."),
        root: Optional[str] = typer.Option(None, "--root", help=ROOT_HELP),
        loader: Optional[str] = typer.Option(
            None,
            "--loader",
            help="Data module loader 'package.module:function' (default: $SOMAVER_LOADER or the text export loader).",
        ),
    ) -> None:
        """Build the quick-loading table artifacts of a version."""
        ref = loader or Settings.from_env().loader
        try:
            load = resolve_loader(ref)
        except SomaverError as e:
            raise typer.BadParameter(str(e), param_hint="--loader") from e

        try:
            data_path, ann_path = build_data_artifacts(resolve_root(root), name, version, loader=load)
        except (SomaverError, FileNotFoundError, TypeError) as e:
            raise fail(e) from e
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        typer.echo(str(data_path))
        typer.echo(str(ann_path))
