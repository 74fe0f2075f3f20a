"""Token kinds and token representation for the dice notation lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    DICE = auto()
    REMOVE = auto()
    DIRECTION = auto()
    OP = auto()
    INT = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str | int
    index: int

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.kind == TokenKind.INT:
            return f"integer {self.value}"
        return repr(self.value)


SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "d": TokenKind.DICE,
    "r": TokenKind.REMOVE,
    "l": TokenKind.DIRECTION,
    "h": TokenKind.DIRECTION,
    "+": TokenKind.OP,
    "-": TokenKind.OP,
}

KIND_NAMES: dict[TokenKind, str] = {
    TokenKind.DICE: "dice indicator 'd'",
    TokenKind.REMOVE: "remove indicator 'r'",
    TokenKind.DIRECTION: "direction ('l' or 'h')",
    TokenKind.OP: "operator ('+' or '-')",
    TokenKind.INT: "integer",
}
