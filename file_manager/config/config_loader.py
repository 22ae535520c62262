# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Locating and reading ``fm.conf``.

The file is optional. It is looked up as:
  1. ``--config`` path
  2. ``$FILE_MANAGER_CONFIG_FILE``
  3. ``~/.file_manager/fm.conf``
A path that was named explicitly (1 or 2) must exist; the default location is
simply skipped when absent.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

CONFIG_DIR = Path.home() / ".file_manager"

CONFIG_FILENAME = "fm.conf"

CONFIG_ENV = "FILE_MANAGER_CONFIG_FILE"


def find_config_file(
    explicit_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Optional[Path]:
    """
    Return the fm.conf to load, or None to run on defaults.

    Raises:
        FileNotFoundError: If the ``--config`` path or the file named by
            ``$FILE_MANAGER_CONFIG_FILE`` does not exist
    """
    if explicit_path:
        named, origin = explicit_path, "--config"
    else:
        named = (environ if environ is not None else os.environ).get(CONFIG_ENV)
        origin = f"${CONFIG_ENV}"

    if named:
        path = Path(named).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"Config file from {origin} does not exist: {path}")
        return path

    default = CONFIG_DIR / CONFIG_FILENAME
    return default if default.is_file() else None


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Parse fm.conf as a JSON object. An empty file means all defaults.

    Raises:
        ValueError: If the content is not a JSON object
    """
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
    return data
