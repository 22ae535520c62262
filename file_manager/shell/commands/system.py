# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
OS command - print host facts.
"""

from file_manager.core import os_facts
from file_manager.shell.context import CommandContext
from file_manager.shell.output import format_cpus, print_text
from file_manager.shell.parser import Verb

from . import register_command


@register_command(Verb.OS)
async def cmd_os(ctx: CommandContext) -> None:
    """
    Print operating-system information

    Usage: os --EOL | --cpus | --homedir | --username | --architecture
    """
    provider = os_facts.lookup(ctx.arg(0))
    value = provider()
    if ctx.arg(0) == "cpus":
        print_text(ctx.stdout, format_cpus(value))
    else:
        print_text(ctx.stdout, str(value))
