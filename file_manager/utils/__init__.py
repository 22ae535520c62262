# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .logger import configure_loggers, get_logger

__all__ = ["configure_loggers", "get_logger"]
