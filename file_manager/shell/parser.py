# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Command parser.

Turns one input line into a ``Command``. Arguments are split on single spaces
with no quoting. A known verb with too many arguments, or an ``os`` argument
without the ``--`` marker, parses as ``Verb.UNKNOWN``. Missing arguments are
passed through as empty strings so the command itself reports them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

FACT_MARKER = "--"


class Verb(str, Enum):
    QUIT = "quit"
    LS = "ls"
    UP = "up"
    CD = "cd"
    CAT = "cat"
    ADD = "add"
    RN = "rn"
    CP = "cp"
    RM = "rm"
    MV = "mv"
    OS = "os"
    HASH = "hash"
    COMPRESS = "compress"
    DECOMPRESS = "decompress"
    UNKNOWN = "unknown"


ARITY: Dict[Verb, int] = {
    Verb.QUIT: 0,
    Verb.LS: 0,
    Verb.UP: 0,
    Verb.CD: 1,
    Verb.CAT: 1,
    Verb.ADD: 1,
    Verb.RN: 2,
    Verb.CP: 2,
    Verb.RM: 1,
    Verb.MV: 2,
    Verb.OS: 1,
    Verb.HASH: 1,
    Verb.COMPRESS: 2,
    Verb.DECOMPRESS: 2,
}

_VERBS = {verb.value: verb for verb in ARITY}


@dataclass(frozen=True)
class Command:
    """One parsed input line."""

    verb: Verb
    arguments: Tuple[str, ...] = ()
    raw: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.raw.strip()

    def arg(self, index: int) -> str:
        """Positional argument, or ``""`` when it was not given."""
        return self.arguments[index] if index < len(self.arguments) else ""


def _unknown(line: str) -> Command:
    return Command(Verb.UNKNOWN, (), line)


def parse_line(line: str) -> Command:
    """Classify an input line."""
    text = line.rstrip("\r\n")
    stripped = text.strip()
    if not stripped:
        return _unknown(text)

    tokens = stripped.split(" ")
    verb = _VERBS.get(tokens[0])
    if verb is None:
        return _unknown(text)

    arguments = tokens[1:]
    arity = ARITY[verb]
    if len(arguments) > arity:
        return _unknown(text)
    arguments += [""] * (arity - len(arguments))

    if verb is Verb.OS:
        fact = arguments[0]
        if not fact.startswith(FACT_MARKER):
            return _unknown(text)
        arguments = [fact[len(FACT_MARKER):]]

    return Command(verb, tuple(arguments), text)
