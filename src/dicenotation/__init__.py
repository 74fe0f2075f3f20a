"""Parser and canonical printer for tabletop dice notation."""

from __future__ import annotations

from dicenotation.ast_nodes import ArityError, ParseNode, Terminal
from dicenotation.errors import (
    LexError,
    ParseFailure,
    TrailingInput,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from dicenotation.formatter import DiceFormatter, canonicalize, unparse
from dicenotation.parser import Parser, parse

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "DiceFormatter",
    "LexError",
    "ParseFailure",
    "ParseNode",
    "Parser",
    "Terminal",
    "TrailingInput",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "canonicalize",
    "parse",
    "unparse",
]
