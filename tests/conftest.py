# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

"""Global test fixtures"""

import io
from pathlib import Path
from typing import Generator, Tuple

import pytest
from rich.console import Console

from file_manager.config import FileManagerConfig, FileManagerConfigSingleton
from file_manager.core.engine import StreamingEngine
from file_manager.core.session import Session
from file_manager.shell.shell import Shell
from file_manager.utils.logger import configure_loggers


def make_console() -> Tuple[Console, io.StringIO]:
    """Console writing plain text into a buffer."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=False,
        color_system=None,
        highlight=False,
        soft_wrap=True,
        width=200,
    )
    return console, buffer


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Keep the config singleton and user config files out of every test"""
    monkeypatch.delenv("FILE_MANAGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(
        "file_manager.config.config_loader.CONFIG_DIR", tmp_path / "no-config"
    )
    FileManagerConfigSingleton.reset_instance()
    yield
    FileManagerConfigSingleton.reset_instance()
    # Rebind handlers a CliRunner run may have pointed at its own streams
    configure_loggers(FileManagerConfig())


@pytest.fixture(scope="function")
def engine() -> StreamingEngine:
    """Engine with a tiny chunk size so every transfer spans many chunks"""
    return StreamingEngine(chunk_size=7, list_concurrency=4)


@pytest.fixture(scope="function")
def workspace(tmp_path: Path) -> Path:
    """Create a small directory tree

    workspace/
        docs/
        notes.txt   ("hello notes\\n")
        data.bin    (binary, several chunks)
    """
    root = tmp_path / "workspace"
    root.mkdir()
    (root / "docs").mkdir()
    (root / "notes.txt").write_text("hello notes\n", encoding="utf-8")
    (root / "data.bin").write_bytes(bytes(range(256)) * 40)
    return root


@pytest.fixture(scope="function")
def session(workspace: Path) -> Session:
    return Session.start(str(workspace))


class ShellHarness:
    """Shell wired to in-memory consoles."""

    def __init__(self, session: Session, engine: StreamingEngine, stdin: str = ""):
        self.stdout, self._out = make_console()
        self.stderr, self._err = make_console()
        self.shell = Shell(
            session=session,
            engine=engine,
            username="Test User",
            stdin=io.StringIO(stdin),
            stdout=self.stdout,
            stderr=self.stderr,
        )
        self.session = session

    @property
    def out(self) -> str:
        return self._out.getvalue()

    @property
    def err(self) -> str:
        return self._err.getvalue()

    def clear(self) -> None:
        self._out.seek(0)
        self._out.truncate()
        self._err.seek(0)
        self._err.truncate()

    async def run_line(self, line: str) -> None:
        await self.shell.execute(line)


@pytest.fixture(scope="function")
def harness(session: Session, engine: StreamingEngine) -> ShellHarness:
    return ShellHarness(session, engine)
