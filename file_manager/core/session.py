# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Navigation state for one interactive run.

The session owns the current directory. It only changes through ``up`` and a
``cd`` whose target has been verified by enumerating it.
"""

import asyncio
import os
from dataclasses import dataclass

from file_manager.core.paths import is_root, resolve_path
from file_manager.exceptions import MissingArgumentError, OperationFailedError
from file_manager.utils.logger import get_logger

logger = get_logger(__name__)


def _enumerate(path: str) -> None:
    with os.scandir(path) as entries:
        next(entries, None)


@dataclass
class Session:
    """Current directory plus the terminated flag."""

    current_directory: str
    terminated: bool = False

    @classmethod
    def start(cls, home_directory: str) -> "Session":
        """Create a session rooted at an existing directory."""
        if not home_directory:
            raise MissingArgumentError("home directory")
        path = os.path.normpath(os.path.abspath(os.path.expanduser(home_directory)))
        if not os.path.isdir(path):
            raise OperationFailedError(f"Not a directory: {path}", path=path)
        logger.debug("Session started in %s", path)
        return cls(current_directory=path)

    def resolve(self, fragment: str, argument: str = "path") -> str:
        return resolve_path(self.current_directory, fragment, argument)

    def up(self) -> str:
        """Move to the parent directory; a no-op at the root."""
        if not is_root(self.current_directory):
            self.current_directory = os.path.dirname(self.current_directory)
        logger.debug("up -> %s", self.current_directory)
        return self.current_directory

    async def cd(self, fragment: str) -> str:
        """
        Enter a directory.

        The target must be an existing, readable directory. On any failure the
        current directory is left untouched.

        Raises:
            MissingArgumentError: If ``fragment`` is empty
            OperationFailedError: If the target cannot be enumerated
        """
        target = self.resolve(fragment)
        try:
            await asyncio.to_thread(_enumerate, target)
        except OSError as exc:
            raise OperationFailedError(
                f"Cannot enter {target}: {exc.strerror or exc}", path=target, cause=exc
            ) from exc
        self.current_directory = target
        logger.debug("cd -> %s", target)
        return target

    def terminate(self) -> None:
        self.terminated = True
