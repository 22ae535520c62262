# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Chunk transforms plugged into the streaming engine.

A transform sees every chunk in order through ``update`` and returns the bytes
to write; ``finish`` flushes whatever is still buffered once the source ends.
"""

import hashlib
from typing import Protocol

import brotli


class ChunkTransform(Protocol):
    def update(self, chunk: bytes) -> bytes: ...

    def finish(self) -> bytes: ...


class TransformError(ValueError):
    """Raised when a transform rejects its input."""


class Sha256Digest:
    """Incremental SHA-256 accumulator."""

    def __init__(self) -> None:
        self._hash = hashlib.sha256()

    def update(self, chunk: bytes) -> bytes:
        self._hash.update(chunk)
        return b""

    def finish(self) -> bytes:
        return b""

    def hexdigest(self) -> str:
        return self._hash.hexdigest()


class BrotliCompress:
    """Streaming Brotli compressor."""

    def __init__(self, quality: int = 11) -> None:
        self._compressor = brotli.Compressor(quality=quality)

    def update(self, chunk: bytes) -> bytes:
        return self._compressor.process(chunk)

    def finish(self) -> bytes:
        return self._compressor.finish()


class BrotliDecompress:
    """Streaming Brotli decompressor; rejects corrupt or truncated input."""

    def __init__(self) -> None:
        self._decompressor = brotli.Decompressor()

    def update(self, chunk: bytes) -> bytes:
        try:
            return self._decompressor.process(chunk)
        except brotli.error as exc:
            raise TransformError(f"Corrupt Brotli stream: {exc}") from exc

    def finish(self) -> bytes:
        if not self._decompressor.is_finished():
            raise TransformError("Truncated Brotli stream")
        return b""
