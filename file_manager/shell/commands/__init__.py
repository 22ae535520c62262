# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Command registry for File Manager verbs.

Each group of commands lives in its own module under this package and
registers its handlers with ``@register_command``.
"""

import importlib
from typing import Awaitable, Callable, Dict, Optional

from file_manager.shell.context import CommandContext
from file_manager.shell.parser import Verb

CommandHandler = Callable[[CommandContext], Awaitable[None]]

_COMMANDS: Dict[Verb, CommandHandler] = {}

_COMMAND_MODULES = ("navigation", "files", "transfers", "system")


def register_command(*verbs: Verb):
    """
    Decorator to register a command handler.

    Example:
        @register_command(Verb.CAT)
        async def cmd_cat(ctx: CommandContext) -> None:
            ...
    """

    def decorator(func: CommandHandler) -> CommandHandler:
        for verb in verbs:
            _COMMANDS[verb] = func
        return func

    return decorator


def get_command(verb: Verb) -> Optional[CommandHandler]:
    """Return the handler for ``verb``, or None if nothing is registered."""
    return _COMMANDS.get(verb)


def load_all_commands() -> None:
    """Import every command module so its handlers are registered."""
    for module_name in _COMMAND_MODULES:
        importlib.import_module(f".{module_name}", package=__name__)


__all__ = ["CommandHandler", "get_command", "load_all_commands", "register_command"]
