# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Resolve user-supplied path fragments against the current directory."""

import os

from file_manager.exceptions import MissingArgumentError


def resolve_path(current_directory: str, fragment: str, argument: str = "path") -> str:
    """
    Resolve a relative or absolute fragment to an absolute, normalized path.

    ``.`` and ``..`` segments are collapsed and ``..`` at the root stays at the
    root. Existence is not checked here.

    Args:
        current_directory: Absolute directory the fragment is relative to
        fragment: Path typed by the user
        argument: Argument name used in the error message

    Raises:
        MissingArgumentError: If ``fragment`` is empty
    """
    if not fragment:
        raise MissingArgumentError(argument)

    # Already absolute: os.path.join discards current_directory
    return os.path.normpath(os.path.join(current_directory, fragment))


def is_root(path: str) -> bool:
    """Return True if ``path`` is a filesystem root."""
    return os.path.dirname(path) == path
