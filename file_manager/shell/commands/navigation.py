# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Navigation commands: quit, up, cd, ls.
"""

from file_manager.shell.context import CommandContext
from file_manager.shell.output import format_entries, print_text
from file_manager.shell.parser import Verb

from . import register_command


@register_command(Verb.QUIT)
async def cmd_quit(ctx: CommandContext) -> None:
    """End the session."""
    ctx.session.terminate()


@register_command(Verb.UP)
async def cmd_up(ctx: CommandContext) -> None:
    """Go to the parent directory; nothing happens at the root."""
    ctx.session.up()


@register_command(Verb.CD)
async def cmd_cd(ctx: CommandContext) -> None:
    """
    Change directory

    Usage: cd path
    """
    await ctx.session.cd(ctx.arg(0))


@register_command(Verb.LS)
async def cmd_ls(ctx: CommandContext) -> None:
    """List the current directory, folders first."""
    entries = await ctx.engine.list(ctx.session.current_directory)
    print_text(ctx.stdout, format_entries(entries))
