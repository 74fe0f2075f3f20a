"""Parser for dice notation.

Transforms a token list into a :class:`ParseNode` tree by recursive descent
over the grammar::

    Expr      := Term ( Op Expr )?
    Term      := DiceOrInt ( Remove )?
    Remove    := 'r' Int? Direction
    DiceOrInt := Int ( 'd' Int )? | 'd' Int

``Expr`` groups everything after an operator as its right operand, so
chains are right-associative: ``a - b - c`` parses as ``a - (b - c)``.
Operator chains are collected in a loop and folded from the right, so their
length is not limited by the interpreter's recursion depth.
"""

from __future__ import annotations

from dicenotation import ast_nodes as nodes
from dicenotation.ast_nodes import ParseNode
from dicenotation.errors import (
    Suggestion,
    TrailingInput,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from dicenotation.formatter import unparse
from dicenotation.lexer import Lexer
from dicenotation.tokens import KIND_NAMES, Token, TokenKind

_DICE_OR_INT = "an integer or dice"
_REMOVE_COUNT_OR_DIRECTION = "a removal count or direction ('l' or 'h')"
_DIRECTION_NOTE = "use 'l' to remove the lowest dice or 'h' to remove the highest"


class Parser:
    """Parses a list of tokens into a dice notation AST."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    # ── Token access ─────────────────────────────────────────────

    def _current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _at(self, kind: TokenKind) -> bool:
        tok = self._current()
        return tok is not None and tok.kind == kind

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _last_index(self) -> int:
        """Character index of the last consumed token, 0 if none."""
        if self.pos == 0:
            return 0
        return self.tokens[self.pos - 1].index

    def _expect(
        self,
        kind: TokenKind,
        construct: str,
        *,
        notes: list[str] | None = None,
        suggestions: list[Suggestion] | None = None,
    ) -> Token:
        tok = self._current()
        expected = KIND_NAMES[kind]
        if tok is None:
            raise UnexpectedEndOfInput(
                construct, expected, self._last_index(),
                notes=notes, suggestions=suggestions,
            )
        if tok.kind != kind:
            raise UnexpectedToken(construct, expected, tok, notes=notes)
        return self._advance()

    # ── Entry point ──────────────────────────────────────────────

    def parse(self) -> ParseNode:
        """Parse the whole token list; every token must be consumed."""
        node = self._parse_expr("expression")
        tok = self._current()
        if tok is not None:
            raise TrailingInput(tok)
        return node

    # ── Grammar rules ────────────────────────────────────────────

    def _parse_expr(self, construct: str) -> ParseNode:
        terms = [self._parse_term(construct)]
        ops: list[str] = []
        while self._at(TokenKind.OP):
            op = self._advance().value
            ops.append(op)
            terms.append(self._parse_term(f"right-hand operand of {op!r}"))

        # Fold from the right: a - b - c is a - (b - c).
        node = terms.pop()
        while ops:
            op = ops.pop()
            left = terms.pop()
            if op == "+":
                node = nodes.add(left, node)
            else:
                node = nodes.subtract(left, node)
        return node

    def _parse_term(self, construct: str) -> ParseNode:
        node = self._parse_dice_or_int(construct)
        if self._at(TokenKind.REMOVE):
            return self._parse_remove(node)
        return node

    def _parse_remove(self, expr: ParseNode) -> ParseNode:
        self._advance()  # 'r'
        construct = "remove modifier"

        tok = self._current()
        if tok is None:
            raise UnexpectedEndOfInput(
                construct, _REMOVE_COUNT_OR_DIRECTION, self._last_index(),
                notes=[_DIRECTION_NOTE],
                suggestions=[self._direction_suggestion(expr, nodes.integer(1))],
            )
        if tok.kind == TokenKind.INT:
            count = nodes.integer(self._advance().value)
        elif tok.kind == TokenKind.DIRECTION:
            count = nodes.integer(1)
        else:
            raise UnexpectedToken(
                construct, _REMOVE_COUNT_OR_DIRECTION, tok, notes=[_DIRECTION_NOTE],
            )

        dir_tok = self._expect(
            TokenKind.DIRECTION, construct,
            notes=[_DIRECTION_NOTE],
            suggestions=[self._direction_suggestion(expr, count)],
        )
        return nodes.remove(expr, count, nodes.direction(dir_tok.value))

    def _parse_dice_or_int(self, construct: str) -> ParseNode:
        tok = self._current()
        if tok is None:
            raise UnexpectedEndOfInput(construct, _DICE_OR_INT, self._last_index())

        if tok.kind == TokenKind.INT:
            count = nodes.integer(self._advance().value)
            if not self._at(TokenKind.DICE):
                return count
            self._advance()
            return nodes.dice(count, self._parse_dice_size())

        if tok.kind == TokenKind.DICE:
            # bare 'd<size>' rolls a single die
            self._advance()
            return nodes.dice(nodes.integer(1), self._parse_dice_size())

        raise UnexpectedToken(construct, _DICE_OR_INT, tok)

    def _parse_dice_size(self) -> ParseNode:
        tok = self._expect(TokenKind.INT, "dice")
        return nodes.integer(tok.value)

    @staticmethod
    def _direction_suggestion(expr: ParseNode, count: ParseNode) -> Suggestion:
        lowest = nodes.remove(expr, count, nodes.lower())
        return Suggestion(message="remove the lowest dice", replacement=unparse(lowest))


def parse(text: str) -> ParseNode:
    """Lex and parse *text* into an AST.

    Raises:
        LexError: on an unrecognized character.
        UnexpectedEndOfInput: when a required token is missing.
        UnexpectedToken: when a token of the wrong kind appears.
        TrailingInput: when tokens remain after a complete expression.
    """
    tokens = Lexer(text).lex()
    return Parser(tokens).parse()
