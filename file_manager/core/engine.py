# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Streaming I/O engine.

All file content moves in fixed-size chunks read and written off the event
loop, so memory use does not depend on file size. Each operation either
returns its result or raises exactly one ``FileManagerError``; ``OSError`` is
converted at this boundary.
"""

import asyncio
import os
import stat
from contextlib import aclosing, contextmanager, suppress
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, Awaitable, BinaryIO, Iterator, List, Optional

from file_manager.config import FileManagerConfig
from file_manager.core.transforms import (
    BrotliCompress,
    BrotliDecompress,
    ChunkTransform,
    Sha256Digest,
    TransformError,
)
from file_manager.exceptions import (
    AlreadyExistsError,
    FileManagerError,
    MissingArgumentError,
    MoveIncompleteError,
    OperationFailedError,
)
from file_manager.utils.logger import get_logger

logger = get_logger(__name__)


class EntryType(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """One row of an ``ls`` listing."""

    index: int
    name: str
    type: EntryType


@dataclass(frozen=True)
class TransferOutcome:
    """Single result of a streaming operation: a value or one error."""

    ok: bool
    value: Optional[str] = None
    error: Optional[FileManagerError] = None

    @classmethod
    def success(cls, value: Optional[str]) -> "TransferOutcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: FileManagerError) -> "TransferOutcome":
        return cls(ok=False, error=error)


async def run_transfer(operation: Awaitable[Optional[str]]) -> TransferOutcome:
    """Await an engine operation and fold its result into a TransferOutcome."""
    try:
        value = await operation
    except FileManagerError as exc:
        logger.info("Transfer failed: %s", exc.message)
        return TransferOutcome.failure(exc)
    return TransferOutcome.success(value)


@contextmanager
def _io_errors(action: str, path: str) -> Iterator[None]:
    """Convert OSError raised in the block into OperationFailedError."""
    try:
        yield
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise OperationFailedError(
            f"Cannot {action} {path}: {reason}", path=path, cause=exc
        ) from exc


def _sort_key(entry_type: EntryType, name: str):
    # Directories first, then case-insensitive order with lowercase ahead of
    # uppercase for names that differ only in case.
    return (entry_type is not EntryType.DIRECTORY, name.casefold(), name.swapcase())


def _classify(path: str) -> EntryType:
    try:
        mode = os.stat(path).st_mode
    except OSError:
        # Dangling symlink or entry removed after enumeration
        return EntryType.FILE
    return EntryType.DIRECTORY if stat.S_ISDIR(mode) else EntryType.FILE


class StreamingEngine:
    """Chunked, non-blocking file operations against absolute paths."""

    def __init__(
        self,
        chunk_size: int = 64 * 1024,
        compress_suffix: str = ".br",
        brotli_quality: int = 11,
        list_concurrency: int = 16,
    ):
        self.chunk_size = chunk_size
        self.compress_suffix = compress_suffix
        self.brotli_quality = brotli_quality
        self.list_concurrency = list_concurrency

    @classmethod
    def from_config(cls, config: FileManagerConfig) -> "StreamingEngine":
        return cls(
            chunk_size=config.chunk_size,
            compress_suffix=config.compress_suffix,
            brotli_quality=config.brotli_quality,
            list_concurrency=config.list_concurrency,
        )

    # ============= Listing =============

    async def list(self, directory: str) -> List[DirectoryEntry]:
        """
        List a directory, directories first, each group sorted by name.

        Raises:
            OperationFailedError: If the directory cannot be enumerated
        """
        with _io_errors("list", directory):
            names = await asyncio.to_thread(os.listdir, directory)

        semaphore = asyncio.Semaphore(self.list_concurrency)

        async def classify(name: str) -> tuple[str, EntryType]:
            async with semaphore:
                entry_type = await asyncio.to_thread(_classify, os.path.join(directory, name))
                return name, entry_type

        classified = await asyncio.gather(*(classify(name) for name in names))
        ordered = sorted(classified, key=lambda item: _sort_key(item[1], item[0]))
        logger.debug("Listed %d entries in %s", len(ordered), directory)
        return [
            DirectoryEntry(index=index, name=name, type=entry_type)
            for index, (name, entry_type) in enumerate(ordered)
        ]

    # ============= Reading =============

    async def read(self, path: str) -> AsyncIterator[bytes]:
        """
        Yield the file content chunk by chunk.

        Raises:
            OperationFailedError: On open failure or any mid-stream read fault
        """
        with _io_errors("read", path):
            stream: BinaryIO = await asyncio.to_thread(open, path, "rb")
        try:
            while True:
                with _io_errors("read", path):
                    chunk = await asyncio.to_thread(stream.read, self.chunk_size)
                if not chunk:
                    break
                yield chunk
        finally:
            await asyncio.to_thread(stream.close)

    # ============= Single-entry operations =============

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(os.path.lexists, path)

    async def create(self, path: str) -> str:
        """
        Create an empty file.

        Raises:
            AlreadyExistsError: If anything already exists at ``path``
            OperationFailedError: If the file cannot be created
        """
        if await self.exists(path):
            raise AlreadyExistsError(path)
        try:
            with _io_errors("create", path):
                stream = await asyncio.to_thread(open, path, "xb")
                await asyncio.to_thread(stream.close)
        except OperationFailedError as exc:
            # Lost the race against another writer
            if isinstance(exc.cause, FileExistsError):
                raise AlreadyExistsError(path) from exc
            raise
        logger.debug("Created %s", path)
        return path

    async def rename(self, old_path: str, new_path: str) -> str:
        """
        Rename in place.

        Raises:
            MissingArgumentError: If ``new_path`` is empty
            AlreadyExistsError: If ``new_path`` is taken
            OperationFailedError: If the source is absent or the target invalid
        """
        if not new_path:
            raise MissingArgumentError("new name")
        if not await self.exists(old_path):
            raise OperationFailedError(f"No such file or directory: {old_path}", path=old_path)
        if await self.exists(new_path):
            raise AlreadyExistsError(new_path)
        with _io_errors("rename", old_path):
            await asyncio.to_thread(os.rename, old_path, new_path)
        logger.debug("Renamed %s -> %s", old_path, new_path)
        return new_path

    async def remove(self, path: str) -> str:
        """
        Delete a single file; directories are refused.

        Raises:
            OperationFailedError: If absent, a directory, or not removable
        """
        with _io_errors("remove", path):
            mode = (await asyncio.to_thread(os.lstat, path)).st_mode
        if stat.S_ISDIR(mode):
            raise OperationFailedError(f"Cannot remove {path}: Is a directory", path=path)
        with _io_errors("remove", path):
            await asyncio.to_thread(os.remove, path)
        logger.debug("Removed %s", path)
        return path

    # ============= Streaming transfers =============

    async def _require_file(self, path: str) -> None:
        with _io_errors("read", path):
            mode = (await asyncio.to_thread(os.stat, path)).st_mode
        if not stat.S_ISREG(mode):
            raise OperationFailedError(f"Cannot read {path}: Not a regular file", path=path)

    async def _prepare_destination(self, source: str, destination_dir: str, name: str) -> str:
        """Check preconditions shared by copy, compress and decompress."""
        if not destination_dir:
            raise MissingArgumentError("destination directory")
        destination = os.path.join(destination_dir, name)
        if await self.exists(destination):
            raise AlreadyExistsError(destination)
        await self._require_file(source)
        with _io_errors("create directory", destination_dir):
            await asyncio.to_thread(os.makedirs, destination_dir, exist_ok=True)
        return destination

    async def _pipe(
        self, source: str, destination: str, transform: Optional[ChunkTransform] = None
    ) -> str:
        """
        Stream ``source`` into a new file at ``destination``.

        Success is returned only after the destination has been flushed and
        closed. On failure the partial destination is removed.
        """
        with _io_errors("write", destination):
            sink: BinaryIO = await asyncio.to_thread(open, destination, "xb")
        try:
            try:
                async with aclosing(self.read(source)) as chunks:
                    async for chunk in chunks:
                        data = transform.update(chunk) if transform else chunk
                        if data:
                            with _io_errors("write", destination):
                                await asyncio.to_thread(sink.write, data)
                tail = transform.finish() if transform else b""
                with _io_errors("write", destination):
                    if tail:
                        await asyncio.to_thread(sink.write, tail)
                    await asyncio.to_thread(sink.flush)
            finally:
                with _io_errors("write", destination):
                    await asyncio.to_thread(sink.close)
        except TransformError as exc:
            await self._discard(destination)
            raise OperationFailedError(
                f"Cannot transform {source}: {exc}", path=source, cause=exc
            ) from exc
        except FileManagerError:
            await self._discard(destination)
            raise
        return destination

    async def _discard(self, path: str) -> None:
        with suppress(OSError):
            await asyncio.to_thread(os.remove, path)
            logger.debug("Discarded partial file %s", path)

    async def copy(self, source: str, destination_dir: str) -> str:
        """
        Copy a file into ``destination_dir`` under its own name.

        Missing destination directories are created.

        Raises:
            MissingArgumentError: If ``destination_dir`` is empty
            AlreadyExistsError: If the destination file already exists
            OperationFailedError: If the source is absent or the stream faults
        """
        destination = await self._prepare_destination(
            source, destination_dir, os.path.basename(source)
        )
        await self._pipe(source, destination)
        logger.debug("Copied %s -> %s", source, destination)
        return destination

    async def move(self, source: str, destination_dir: str) -> str:
        """
        Copy then remove the source.

        Not atomic: if the remove step fails the copy is kept and
        MoveIncompleteError is raised.
        """
        destination = await self.copy(source, destination_dir)
        try:
            await self.remove(source)
        except OperationFailedError as exc:
            raise MoveIncompleteError(source, destination, cause=exc.cause or exc) from exc
        logger.debug("Moved %s -> %s", source, destination)
        return destination

    async def hash(self, path: str) -> str:
        """Return the lowercase SHA-256 hex digest of a file."""
        await self._require_file(path)
        digest = Sha256Digest()
        async with aclosing(self.read(path)) as chunks:
            async for chunk in chunks:
                digest.update(chunk)
        return digest.hexdigest()

    async def compress(self, source: str, destination_dir: str) -> str:
        """Brotli-compress ``source`` into ``destination_dir/<name><suffix>``."""
        name = os.path.basename(source) + self.compress_suffix
        destination = await self._prepare_destination(source, destination_dir, name)
        await self._pipe(source, destination, BrotliCompress(quality=self.brotli_quality))
        logger.debug("Compressed %s -> %s", source, destination)
        return destination

    async def decompress(self, source: str, destination_dir: str) -> str:
        """Restore a compressed file into ``destination_dir`` without the suffix."""
        name = os.path.basename(source)
        if not name.endswith(self.compress_suffix) or name == self.compress_suffix:
            raise OperationFailedError(
                f"Cannot decompress {source}: expected a '{self.compress_suffix}' file",
                path=source,
            )
        name = name[: -len(self.compress_suffix)]
        destination = await self._prepare_destination(source, destination_dir, name)
        await self._pipe(source, destination, BrotliDecompress())
        logger.debug("Decompressed %s -> %s", source, destination)
        return destination
