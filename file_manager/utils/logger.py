# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Logging utilities for File Manager.
"""

import logging
import sys
from typing import TYPE_CHECKING, Optional, Set

if TYPE_CHECKING:
    from file_manager.config import FileManagerConfig

_configured: Set[str] = set()


def _build_handler(log_output: str, format_string: str) -> logging.Handler:
    if log_output == "stdout":
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
    elif log_output == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.FileHandler(log_output)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def get_logger(
    name: str = "file_manager",
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Get a configured logger.

    Args:
        name: Logger name
        format_string: Custom format string (overrides config)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        try:
            from file_manager.config import get_config

            config = get_config()
            level = config.log_level_value
            log_format = config.log_format
            log_output = config.log_output
        except Exception:
            level = logging.WARNING
            log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            log_output = "stderr"

        logger.addHandler(_build_handler(log_output, format_string or log_format))
        logger.propagate = False
        logger.setLevel(level)
        _configured.add(name)

    return logger


def configure_loggers(config: "FileManagerConfig") -> None:
    """Re-apply level, format and output to every logger created so far."""
    for name in sorted(_configured):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.addHandler(_build_handler(config.log_output, config.log_format))
        logger.setLevel(config.log_level_value)
