# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Typer entrypoint for File Manager."""

import os
from pathlib import Path
from typing import Mapping, Optional

import typer

from file_manager.config import initialize_config
from file_manager.core.engine import StreamingEngine
from file_manager.core.session import Session
from file_manager.exceptions import FileManagerError
from file_manager.shell.shell import Shell
from file_manager.utils.logger import configure_loggers, get_logger

USERNAME_ENV = "FILE_MANAGER_USERNAME"

logger = get_logger(__name__)

app = typer.Typer(
    help="File Manager - navigate and manage files from an interactive prompt",
    add_completion=False,
)


def resolve_username(
    explicit: Optional[str], default: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Pick the display name: option, then environment, then the configured default."""
    if explicit:
        return explicit
    value = (environ if environ is not None else os.environ).get(USERNAME_ENV)
    if value:
        return value.replace("_", " ")
    return default


def _version_callback(value: bool) -> None:
    if value:
        from file_manager import __version__

        typer.echo(f"file-manager {__version__}")
        raise typer.Exit()


@app.command()
def main(
    username: Optional[str] = typer.Option(
        None, "--username", "-u", help=f"Display name (default: ${USERNAME_ENV} or Guest)"
    ),
    home: Optional[Path] = typer.Option(
        None, "--home", help="Starting directory (default: your home directory)"
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to fm.conf (JSON)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Start an interactive File Manager session."""
    try:
        config = initialize_config(config_path=config_path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"ERROR[CONFIG]: {exc}", err=True)
        raise typer.Exit(2)
    configure_loggers(config)

    try:
        session = Session.start(str(home) if home is not None else str(Path.home()))
    except FileManagerError as exc:
        typer.echo(f"ERROR[{exc.code}]: {exc.message}", err=True)
        raise typer.Exit(2)

    shell = Shell(
        session=session,
        engine=StreamingEngine.from_config(config),
        username=resolve_username(username, config.default_username),
    )
    try:
        exit_code = shell.run()
    except KeyboardInterrupt:
        logger.debug("Interrupted")
        shell.farewell()
        exit_code = 0
    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
