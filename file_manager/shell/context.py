# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Per-command state handed to every command handler."""

from dataclasses import dataclass

from rich.console import Console

from file_manager.core.engine import StreamingEngine
from file_manager.core.session import Session
from file_manager.shell.parser import Command


@dataclass
class CommandContext:
    """Everything a handler may touch while running one command."""

    session: Session
    engine: StreamingEngine
    command: Command
    stdout: Console
    stderr: Console

    def arg(self, index: int) -> str:
        return self.command.arg(index)

    def resolve(self, index: int, argument: str = "path") -> str:
        """Resolve argument ``index`` against the current directory."""
        return self.session.resolve(self.arg(index), argument)
