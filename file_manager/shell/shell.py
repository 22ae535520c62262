# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Interactive read-eval loop."""

import asyncio
import sys
from typing import Optional, TextIO

from rich.console import Console

from file_manager.core.engine import StreamingEngine
from file_manager.core.session import Session
from file_manager.shell.dispatcher import Dispatcher
from file_manager.shell.output import print_current_directory, print_text
from file_manager.shell.parser import parse_line
from file_manager.utils.logger import get_logger

logger = get_logger(__name__)

PROMPT = "> "


class Shell:
    """
    Line-oriented session loop.

    One line is fully processed, including any streaming transfer, before the
    next one is read. Only ``quit`` or end of input ends the loop.
    """

    def __init__(
        self,
        session: Session,
        engine: StreamingEngine,
        username: str,
        stdin: Optional[TextIO] = None,
        stdout: Optional[Console] = None,
        stderr: Optional[Console] = None,
    ):
        self.session = session
        self.engine = engine
        self.username = username
        self._stdin = stdin
        self.console = stdout or Console(highlight=False, soft_wrap=True)
        self.error_console = stderr or Console(stderr=True, highlight=False, soft_wrap=True)
        self.dispatcher = Dispatcher(session, engine, self.console, self.error_console)

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def greet(self) -> None:
        print_text(self.console, f"Welcome to the File Manager, {self.username}!", style="bold")
        print_current_directory(self.console, self.session.current_directory)

    def farewell(self) -> None:
        print_text(self.console, f"Thank you for using File Manager, {self.username}, goodbye!")

    def _next_line(self) -> Optional[str]:
        stream = self.stdin
        if stream is sys.stdin and stream.isatty():
            try:
                return input(PROMPT)
            except EOFError:
                return None
        line = stream.readline()
        if line == "":
            return None
        return line

    def read_line(self) -> Optional[str]:
        """Next input line, or None at end of input or on an input fault."""
        try:
            return self._next_line()
        except (OSError, ValueError) as exc:
            # UnicodeDecodeError is a ValueError
            logger.warning("Input stream failed: %s", exc)
            return None

    async def execute(self, line: str) -> None:
        """Run one input line."""
        command = parse_line(line)
        if command.is_blank:
            return
        try:
            await self.dispatcher.dispatch(command)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error while running %r", line)
            print_text(self.error_console, f"Operation failed: {exc}", style="red")
        if not self.session.terminated:
            print_current_directory(self.console, self.session.current_directory)

    def run(self) -> int:
        """Run until ``quit`` or end of input; always returns 0."""
        self.greet()
        with asyncio.Runner() as runner:
            while not self.session.terminated:
                line = self.read_line()
                if line is None:
                    self.session.terminate()
                    break
                runner.run(self.execute(line))
        self.farewell()
        return 0
