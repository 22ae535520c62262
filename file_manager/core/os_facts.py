# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Read-only host facts for the ``os`` command.

Values are computed on every call and never cached.
"""

import getpass
import json
import os
import platform
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import psutil

from file_manager.exceptions import OperationFailedError, UnknownCommandError

CPUINFO_PATH = "/proc/cpuinfo"


@dataclass(frozen=True)
class CpuInfo:
    """One logical CPU."""

    model: str
    speed_ghz: Optional[float]


def eol() -> str:
    """Line separator of the host, JSON-escaped (e.g. ``"\\n"``)."""
    return json.dumps(os.linesep)


def _cpu_models(count: int) -> List[str]:
    models: List[str] = []
    try:
        with open(CPUINFO_PATH, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                key, _, value = line.partition(":")
                if key.strip() == "model name":
                    models.append(value.strip())
    except OSError:
        # No procfs outside Linux
        pass
    fallback = platform.processor() or platform.machine() or "unknown"
    while len(models) < count:
        models.append(models[-1] if models else fallback)
    return models[:count]


def _cpu_speeds(count: int) -> List[Optional[float]]:
    try:
        freqs = psutil.cpu_freq(percpu=True) or []
    except (NotImplementedError, OSError, RuntimeError):
        freqs = []
    speeds: List[Optional[float]] = [
        round(freq.current / 1000, 2) if freq.current else None for freq in freqs
    ]
    # Some platforms only report one aggregate frequency
    while len(speeds) < count:
        speeds.append(speeds[-1] if speeds else None)
    return speeds[:count]


def cpus() -> List[CpuInfo]:
    """Model and clock speed (GHz) for every logical CPU."""
    count = psutil.cpu_count(logical=True) or os.cpu_count() or 1
    return [
        CpuInfo(model=model, speed_ghz=speed)
        for model, speed in zip(_cpu_models(count), _cpu_speeds(count))
    ]


def homedir() -> str:
    return os.path.expanduser("~")


def username() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError) as exc:
        raise OperationFailedError(f"Cannot determine user name: {exc}", cause=exc) from exc


def architecture() -> str:
    return platform.machine() or "unknown"


FACTS: Dict[str, Callable[[], object]] = {
    "EOL": eol,
    "cpus": cpus,
    "homedir": homedir,
    "username": username,
    "architecture": architecture,
}


def lookup(name: str) -> Callable[[], object]:
    """
    Return the provider for ``name``.

    Raises:
        UnknownCommandError: If the name is unknown; carries a suggestion when
            it only differs from a known name in letter case
    """
    provider = FACTS.get(name)
    if provider is not None:
        return provider
    suggestion = next((known for known in FACTS if known.lower() == name.lower()), None)
    raise UnknownCommandError(f"os --{name}", suggestion=f"--{suggestion}" if suggestion else None)
