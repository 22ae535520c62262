# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
File Manager - an interactive shell over the local filesystem.

Navigate with a virtual current directory and run file operations
(list, read, create, rename, copy, move, delete), hashing and Brotli
compression without spawning an external shell.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
