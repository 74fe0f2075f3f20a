"""Tests for the dice notation lexer."""

from __future__ import annotations

import pytest

from dicenotation.errors import LexError
from dicenotation.lexer import Lexer, lex
from dicenotation.tokens import Token, TokenKind


def kinds(source: str) -> list[TokenKind]:
    """Helper: lex source and return just the token kinds."""
    return [t.kind for t in Lexer(source).lex()]


class TestLexerBasic:
    def test_empty_source(self):
        assert Lexer("").lex() == []

    def test_whitespace_only(self):
        assert lex(" \t\n ") == []

    def test_single_chars(self):
        assert kinds("drlh+-") == [
            TokenKind.DICE,
            TokenKind.REMOVE,
            TokenKind.DIRECTION,
            TokenKind.DIRECTION,
            TokenKind.OP,
            TokenKind.OP,
        ]

    def test_values_are_literal_chars(self):
        assert [t.value for t in lex("d r l h + -")] == ["d", "r", "l", "h", "+", "-"]

    def test_dice_expression(self):
        assert lex("3d6") == [
            Token(TokenKind.INT, 3, 0),
            Token(TokenKind.DICE, "d", 1),
            Token(TokenKind.INT, 6, 2),
        ]


class TestLexerIntegers:
    def test_multi_digit_run_is_one_token(self):
        assert lex("15d10") == [
            Token(TokenKind.INT, 15, 0),
            Token(TokenKind.DICE, "d", 2),
            Token(TokenKind.INT, 10, 3),
        ]

    def test_leading_zeros(self):
        assert lex("007") == [Token(TokenKind.INT, 7, 0)]

    def test_large_integer_is_exact(self):
        digits = "123456789012345678901234567890"
        assert lex(digits) == [Token(TokenKind.INT, int(digits), 0)]

    def test_whitespace_splits_digit_runs(self):
        assert lex("1 2") == [Token(TokenKind.INT, 1, 0), Token(TokenKind.INT, 2, 2)]


class TestLexerPositions:
    def test_indices_skip_whitespace(self):
        assert [t.index for t in lex(" 3 d  6 ")] == [1, 3, 6]

    def test_index_after_number(self):
        tokens = lex("120d4")
        assert tokens[1].index == 3
        assert tokens[2].index == 4


class TestLexerErrors:
    def test_unknown_character(self):
        with pytest.raises(LexError) as exc:
            lex("@")
        assert exc.value.char == "@"
        assert exc.value.index == 0

    def test_error_index_in_expression(self):
        with pytest.raises(LexError) as exc:
            lex("3d6 * 2")
        assert exc.value.char == "*"
        assert exc.value.index == 4

    def test_first_error_wins(self):
        with pytest.raises(LexError) as exc:
            lex("2x?")
        assert exc.value.char == "x"

    def test_uppercase_is_rejected(self):
        with pytest.raises(LexError):
            lex("2D6")

    def test_non_ascii_digit_is_rejected(self):
        with pytest.raises(LexError) as exc:
            lex("٣")
        assert exc.value.index == 0

    def test_diagnostic_code(self):
        with pytest.raises(LexError) as exc:
            lex("d%")
        assert exc.value.diagnostic.code == "E100"
        assert exc.value.diagnostic.labels[0].index == 1


class TestTokenDescribe:
    def test_int(self):
        assert Token(TokenKind.INT, 12, 0).describe() == "integer 12"

    def test_char(self):
        assert Token(TokenKind.OP, "+", 0).describe() == "'+'"
