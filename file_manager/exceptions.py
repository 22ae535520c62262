# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Exception classes for File Manager.

Every command failure is one of four kinds: a missing argument, a destination
collision, an underlying filesystem or stream fault, or input that does not
parse as a known command.
"""

from typing import Optional


class FileManagerError(Exception):
    """Base exception for all File Manager errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class MissingArgumentError(FileManagerError):
    """A required argument is empty or absent."""

    def __init__(self, argument: str = "argument"):
        message = f"Missing required {argument}"
        super().__init__(message, code="MISSING_ARGUMENT", details={"argument": argument})


class AlreadyExistsError(FileManagerError):
    """Destination path is already taken."""

    def __init__(self, path: str):
        message = f"Already exists: {path}"
        super().__init__(message, code="ALREADY_EXISTS", details={"path": path})


class OperationFailedError(FileManagerError):
    """Underlying filesystem or stream fault."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        details = {}
        if path:
            details["path"] = path
        if cause is not None:
            details["cause"] = str(cause)
        super().__init__(message, code="IO_ERROR", details=details)
        self.cause = cause


class MoveIncompleteError(OperationFailedError):
    """Copy step of a move succeeded but the source could not be removed."""

    def __init__(self, source: str, destination: str, cause: Optional[BaseException] = None):
        message = f"Copied to {destination} but could not remove {source}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, path=source, cause=cause)
        self.details["destination"] = destination
        self.destination = destination


class UnknownCommandError(FileManagerError):
    """Input line or fact name is not recognised."""

    def __init__(self, text: str, suggestion: Optional[str] = None):
        details = {"input": text}
        if suggestion:
            details["suggestion"] = suggestion
        super().__init__(f"Unknown command: {text}", code="UNKNOWN_COMMAND", details=details)
        self.suggestion = suggestion
