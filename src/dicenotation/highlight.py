"""Pygments lexer for dice notation."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import RegexLexer
from pygments.token import Error, Keyword, Name, Number, Operator, Text


class DiceNotationLexer(RegexLexer):
    """Pygments lexer for dice notation expressions such as ``3d6r1l+2``."""

    name = "Dice notation"
    aliases = ["dice"]
    filenames = ["*.dice"]
    mimetypes = ["text/x-dice-notation"]

    tokens = {
        "root": [
            (r"\s+", Text),
            (r"[0-9]+", Number.Integer),
            (r"d", Keyword),
            (r"r", Keyword.Pseudo),
            (r"[lh]", Name.Builtin),
            (r"[+-]", Operator),
            (r".", Error),
        ],
    }


def highlight_notation(text: str, style: str = "default") -> str:
    """Return *text* colorized with ANSI escapes for a terminal."""
    # pygments appends a newline when the input lacks one
    result = highlight(text, DiceNotationLexer(), Terminal256Formatter(style=style))
    if not text.endswith("\n"):
        result = result.rstrip("\n")
    return result
