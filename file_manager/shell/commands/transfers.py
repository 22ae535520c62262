# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Streaming transfer commands: cp, mv, hash, compress, decompress.

Each runs to completion before the next input line is read and reports exactly
one outcome.
"""

from typing import Awaitable, Callable, Optional

from file_manager.core.engine import TransferOutcome, run_transfer
from file_manager.shell.context import CommandContext
from file_manager.shell.output import print_success
from file_manager.shell.parser import Verb

from . import register_command


async def _report(
    ctx: CommandContext,
    operation: Awaitable[Optional[str]],
    describe: Callable[[str], str],
) -> TransferOutcome:
    outcome = await run_transfer(operation)
    if not outcome.ok:
        raise outcome.error
    print_success(ctx.stdout, describe(outcome.value))
    return outcome


@register_command(Verb.CP)
async def cmd_cp(ctx: CommandContext) -> None:
    """
    Copy a file into a directory

    Usage: cp path_to_file path_to_new_directory
    """
    source = ctx.resolve(0)
    destination_dir = ctx.resolve(1, "destination directory")
    await _report(ctx, ctx.engine.copy(source, destination_dir), lambda dest: f"Copied to {dest}")


@register_command(Verb.MV)
async def cmd_mv(ctx: CommandContext) -> None:
    """
    Move a file into a directory (copy, then delete the original)

    Usage: mv path_to_file path_to_new_directory
    """
    source = ctx.resolve(0)
    destination_dir = ctx.resolve(1, "destination directory")
    await _report(ctx, ctx.engine.move(source, destination_dir), lambda dest: f"Moved to {dest}")


@register_command(Verb.HASH)
async def cmd_hash(ctx: CommandContext) -> None:
    """
    Print the SHA-256 digest of a file

    Usage: hash path
    """
    path = ctx.resolve(0)
    await _report(ctx, ctx.engine.hash(path), lambda digest: digest)


@register_command(Verb.COMPRESS)
async def cmd_compress(ctx: CommandContext) -> None:
    """
    Brotli-compress a file into a directory

    Usage: compress path_to_file path_to_destination
    """
    source = ctx.resolve(0)
    destination_dir = ctx.resolve(1, "destination directory")
    await _report(
        ctx, ctx.engine.compress(source, destination_dir), lambda dest: f"Compressed to {dest}"
    )


@register_command(Verb.DECOMPRESS)
async def cmd_decompress(ctx: CommandContext) -> None:
    """
    Restore a Brotli-compressed file into a directory

    Usage: decompress path_to_file path_to_destination
    """
    source = ctx.resolve(0)
    destination_dir = ctx.resolve(1, "destination directory")
    await _report(
        ctx,
        ctx.engine.decompress(source, destination_dir),
        lambda dest: f"Decompressed to {dest}",
    )
