# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
from .dispatcher import Dispatcher
from .parser import Command, Verb, parse_line
from .shell import Shell

__all__ = ["Command", "Dispatcher", "Shell", "Verb", "parse_line"]
