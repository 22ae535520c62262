# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .config_loader import (
    CONFIG_DIR,
    CONFIG_ENV,
    CONFIG_FILENAME,
    find_config_file,
    read_config_file,
)
from .settings import (
    FileManagerConfig,
    FileManagerConfigSingleton,
    get_config,
    initialize_config,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_ENV",
    "CONFIG_FILENAME",
    "FileManagerConfig",
    "FileManagerConfigSingleton",
    "find_config_file",
    "get_config",
    "initialize_config",
    "read_config_file",
]
