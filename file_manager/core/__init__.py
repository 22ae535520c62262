# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .engine import (
    DirectoryEntry,
    EntryType,
    StreamingEngine,
    TransferOutcome,
    run_transfer,
)
from .paths import resolve_path
from .session import Session

__all__ = [
    "DirectoryEntry",
    "EntryType",
    "Session",
    "StreamingEngine",
    "TransferOutcome",
    "resolve_path",
    "run_transfer",
]
