"""somaver CLI entrypoint (Typer application)."""

from __future__ import annotations

from typing import Optional

import typer

from somaver.config import ENV_LOG_LEVEL, Settings
from somaver.logging_config import configure_logging

app = typer.Typer(
    name="somaver",
    add_completion=False,
    no_args_is_help=True,
    help="Versioned SomaScan data artifacts with md5sums checks.",
)


@app.callback()
def _callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        envvar=ENV_LOG_LEVEL,
        help="Log level for structured logs on stderr (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """somaver CLI."""
    level = log_level or Settings.from_env().log_level
    try:
        configure_logging(level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command("version")
def version() -> None:
    """Print the installed somaver version."""
    from somaver import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `somaver --help` is fast.
    """
    from somaver.cli.commands import export_data as export_data_cmd
    from somaver.cli.commands import hashes as hashes_cmd
    from somaver.cli.commands import snapshot as snapshot_cmd
    from somaver.cli.commands import verify as verify_cmd

    export_data_cmd.register(app)
    hashes_cmd.register(app)
    snapshot_cmd.register(app)
    verify_cmd.register(app)


_register_commands()
