"""Lexer for dice notation.

Produces a flat list of positioned tokens from an expression such as
``15d10r3l-2d4rl+d3``. Whitespace is skipped; the first unrecognized
character aborts lexing with a :class:`LexError`.
"""

from __future__ import annotations

from dicenotation.errors import LexError
from dicenotation.tokens import SINGLE_CHAR_TOKENS, Token, TokenKind

_DIGITS = "0123456789"


class Lexer:
    """Tokenizes a dice notation expression."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

    def lex(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if ch in _DIGITS:
                self._lex_number()
            elif ch in SINGLE_CHAR_TOKENS:
                self._emit(SINGLE_CHAR_TOKENS[ch], ch, self.pos)
                self.pos += 1
            elif ch.isspace():
                self.pos += 1
            else:
                raise LexError(ch, self.pos)
        return self.tokens

    def _emit(self, kind: TokenKind, value: str | int, index: int) -> Token:
        tok = Token(kind, value, index)
        self.tokens.append(tok)
        return tok

    def _lex_number(self) -> None:
        # Python ints are unbounded: a digit run of any length is exact.
        start = self.pos
        number = 0
        while self.pos < len(self.source) and self.source[self.pos] in _DIGITS:
            number = number * 10 + _DIGITS.index(self.source[self.pos])
            self.pos += 1
        self._emit(TokenKind.INT, number, start)


def lex(source: str) -> list[Token]:
    """Tokenize *source*; shortcut for ``Lexer(source).lex()``."""
    return Lexer(source).lex()
