# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
File commands: cat, add, rn, rm.
"""

import codecs
import os
from contextlib import aclosing

from file_manager.core.engine import run_transfer
from file_manager.core.paths import resolve_path
from file_manager.shell.context import CommandContext
from file_manager.shell.output import print_success
from file_manager.shell.parser import Verb

from . import register_command


async def _print_file(ctx: CommandContext, path: str) -> str:
    # Raw text straight to the console file, no rich rendering
    # Incremental decoding keeps multi-byte characters split across chunks intact
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    stream = ctx.stdout.file
    last = ""
    async with aclosing(ctx.engine.read(path)) as chunks:
        async for chunk in chunks:
            text = decoder.decode(chunk)
            if text:
                stream.write(text)
                stream.flush()
                last = text
    tail = decoder.decode(b"", final=True)
    if tail:
        stream.write(tail)
        last = tail
    # Keep the directory announcement on its own line
    if last and not last.endswith("\n"):
        stream.write("\n")
    stream.flush()
    return path


@register_command(Verb.CAT)
async def cmd_cat(ctx: CommandContext) -> None:
    """
    Print a file as it is read

    Usage: cat path
    """
    path = ctx.resolve(0)
    outcome = await run_transfer(_print_file(ctx, path))
    if not outcome.ok:
        raise outcome.error


@register_command(Verb.ADD)
async def cmd_add(ctx: CommandContext) -> None:
    """
    Create an empty file in the current directory

    Usage: add name
    """
    path = await ctx.engine.create(ctx.resolve(0, "file name"))
    print_success(ctx.stdout, f"Created {path}")


@register_command(Verb.RN)
async def cmd_rn(ctx: CommandContext) -> None:
    """
    Rename a file; the new name is taken relative to the file's own directory

    Usage: rn path new_name
    """
    old_path = ctx.resolve(0)
    new_path = resolve_path(os.path.dirname(old_path), ctx.arg(1), "new name")
    await ctx.engine.rename(old_path, new_path)
    print_success(ctx.stdout, f"Renamed {old_path} to {new_path}")


@register_command(Verb.RM)
async def cmd_rm(ctx: CommandContext) -> None:
    """
    Remove a single file

    Usage: rm path
    """
    path = await ctx.engine.remove(ctx.resolve(0))
    print_success(ctx.stdout, f"Removed {path}")
