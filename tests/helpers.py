"""Shared test helpers for the dice notation test suite."""

from __future__ import annotations

import re

from dicenotation.formatter import unparse
from dicenotation.parser import parse

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def roundtrip(source: str) -> str:
    """Parse source and format back to canonical text."""
    return unparse(parse(source))


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)
