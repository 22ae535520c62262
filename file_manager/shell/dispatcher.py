# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Route parsed commands to their handlers and report failures."""

from rich.console import Console

from file_manager.core.engine import StreamingEngine
from file_manager.core.session import Session
from file_manager.exceptions import FileManagerError, UnknownCommandError
from file_manager.shell.commands import get_command, load_all_commands
from file_manager.shell.context import CommandContext
from file_manager.shell.output import print_failure, print_invalid
from file_manager.shell.parser import Command, Verb
from file_manager.utils.logger import get_logger

logger = get_logger(__name__)


class Dispatcher:
    """Runs one command against the session; never lets a command error escape."""

    def __init__(
        self,
        session: Session,
        engine: StreamingEngine,
        stdout: Console,
        stderr: Console,
    ):
        load_all_commands()
        self.session = session
        self.engine = engine
        self.stdout = stdout
        self.stderr = stderr

    async def dispatch(self, command: Command) -> bool:
        """
        Execute ``command``.

        Returns:
            True if the command completed, False if it was rejected or failed
        """
        handler = get_command(command.verb) if command.verb is not Verb.UNKNOWN else None
        if handler is None:
            logger.info("Invalid input: %r", command.raw)
            print_invalid(self.stderr)
            return False

        ctx = CommandContext(
            session=self.session,
            engine=self.engine,
            command=command,
            stdout=self.stdout,
            stderr=self.stderr,
        )
        logger.debug("Dispatching %s %s", command.verb.value, list(command.arguments))
        try:
            await handler(ctx)
        except UnknownCommandError as exc:
            logger.info("Invalid input: %s", exc.message)
            print_invalid(self.stderr, exc.suggestion)
            return False
        except FileManagerError as exc:
            logger.info("%s failed [%s]: %s", command.verb.value, exc.code, exc.message)
            print_failure(self.stderr, exc)
            return False
        return True
