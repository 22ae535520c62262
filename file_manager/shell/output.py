# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Console output helpers."""

from typing import Any, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from tabulate import tabulate

from file_manager.core.engine import DirectoryEntry
from file_manager.core.os_facts import CpuInfo
from file_manager.exceptions import FileManagerError

_MAX_COL_WIDTH = 256


def _truncate(val: Any) -> Any:
    """Truncate a value to _MAX_COL_WIDTH for table display."""
    s = str(val) if not isinstance(val, str) else val
    return s[: _MAX_COL_WIDTH - 3] + "..." if len(s) > _MAX_COL_WIDTH else val


def format_entries(entries: Sequence[DirectoryEntry]) -> str:
    """Render an ``ls`` listing as an indexed table."""
    rows = [
        [entry.index, _truncate(entry.name), entry.type.value.capitalize()] for entry in entries
    ]
    return tabulate(rows, headers=["(index)", "Name", "Type"], tablefmt="simple")


def format_cpus(cpus: List[CpuInfo]) -> str:
    rows = [
        [
            index,
            _truncate(cpu.model),
            f"{cpu.speed_ghz:.2f} GHz" if cpu.speed_ghz is not None else "unknown",
        ]
        for index, cpu in enumerate(cpus)
    ]
    table = tabulate(rows, headers=["(index)", "Model", "Clock rate"], tablefmt="simple")
    return f"Overall amount of CPUS: {len(cpus)}\n{table}"


def print_text(console: Console, text: str, style: Optional[str] = None) -> None:
    """Print plain text without markup or highlighting."""
    console.print(escape(text), style=style, highlight=False)


def print_success(console: Console, text: str) -> None:
    print_text(console, text, style="green")


def print_failure(console: Console, error: FileManagerError) -> None:
    print_text(console, f"Operation failed: {error.message}", style="red")


def print_invalid(console: Console, suggestion: Optional[str] = None) -> None:
    message = "Invalid input"
    if suggestion:
        message += f". Did you mean {suggestion}?"
    print_text(console, message, style="yellow")


def print_current_directory(console: Console, path: str) -> None:
    console.print(f"You are currently in [bold cyan]{escape(path)}[/bold cyan]", highlight=False)
