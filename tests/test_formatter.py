"""Tests for the dice notation formatter (canonical printer)."""

from __future__ import annotations

import pytest

from dicenotation import ast_nodes as nodes
from dicenotation.ast_nodes import ArityError, ParseNode, Terminal
from dicenotation.formatter import DiceFormatter, canonicalize, unparse
from dicenotation.parser import parse
from tests.helpers import roundtrip


class TestFormatterTerms:
    @pytest.mark.parametrize("n", [0, 1, 7, 20, 100, 65536, 4294967296])
    def test_integer_roundtrip(self, n):
        assert roundtrip(str(n)) == str(n)

    def test_dice_implicit_count(self):
        assert roundtrip("d20") == "1d20"

    def test_dice_with_count(self):
        assert roundtrip("3d6") == "3d6"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("d20rl", "1d20r1l"),
            ("d20r2l", "1d20r2l"),
            ("2d20rl", "2d20r1l"),
            ("3d20r2l", "3d20r2l"),
            ("4d6rh", "4d6r1h"),
            ("5r2l", "5r2l"),
        ],
    )
    def test_remove(self, source, expected):
        assert roundtrip(source) == expected


class TestFormatterOperators:
    def test_simple_add(self):
        assert roundtrip("2 + 6") == "2 + 6"

    def test_simple_subtract(self):
        assert roundtrip("6 - 2") == "6 - 2"

    def test_spacing_is_normalized(self):
        assert roundtrip("2+6") == "2 + 6"
        assert roundtrip("  2   -6 ") == "2 - 6"

    def test_complex(self):
        source = "15d10r3l-2d4rl+d3+7d7+66-2d4"
        assert roundtrip(source) == "15d10r3l - 2d4r1l + 1d3 + 7d7 + 66 - 2d4"


class TestFormatterIdempotence:
    @pytest.mark.parametrize(
        "source",
        [
            "0",
            "d6",
            "d20rl+5",
            "4d6r1h",
            "10-4-3",
            "3 d 8 + d 4 r h",
            "15d10r3l-2d4rl+d3+7d7+66-2d4",
        ],
    )
    def test_format_is_stable(self, source):
        once = roundtrip(source)
        assert roundtrip(once) == once


class TestFormatterApi:
    def test_canonicalize(self):
        assert canonicalize("d20rl") == "1d20r1l"

    def test_str_of_node(self):
        tree = nodes.add(nodes.integer(1), nodes.dice(nodes.integer(1), nodes.integer(4)))
        assert str(tree) == "1 + 1d4"

    def test_formatter_class(self):
        tree = nodes.dice(nodes.integer(2), nodes.integer(10))
        assert DiceFormatter().format(tree) == "2d10"

    def test_direction_constructor(self):
        assert unparse(nodes.direction("l")) == "l"
        assert unparse(nodes.direction("h")) == "h"
        with pytest.raises(ValueError):
            nodes.direction("x")


class TestArity:
    def test_dice_needs_two_children(self):
        with pytest.raises(ArityError, match="dice needs 2 children"):
            ParseNode(Terminal.DICE, (nodes.integer(1),))

    def test_integer_needs_value(self):
        with pytest.raises(ArityError):
            ParseNode(Terminal.INTEGER)

    def test_non_integer_rejects_value(self):
        with pytest.raises(ArityError):
            ParseNode(Terminal.LOWER, value=3)

    def test_formatting_malformed_tree_fails(self):
        tree = nodes.dice(nodes.integer(1), nodes.integer(6))
        object.__setattr__(tree, "children", (nodes.integer(1),))
        with pytest.raises(ArityError):
            unparse(tree)

    def test_formatting_integer_without_value_fails(self):
        tree = nodes.integer(3)
        object.__setattr__(tree, "value", None)
        with pytest.raises(ArityError, match="invalid value"):
            unparse(tree)

    def test_walk_long_chain(self):
        tree = parse("+".join(["1"] * 5000))
        assert sum(1 for _ in tree.walk()) == 9999

    def test_walk_visits_every_node(self):
        tree = nodes.remove(
            nodes.dice(nodes.integer(2), nodes.integer(6)),
            nodes.integer(1),
            nodes.lower(),
        )
        entries = [n.entry for n in tree.walk()]
        assert entries == [
            Terminal.REMOVE,
            Terminal.DICE,
            Terminal.INTEGER,
            Terminal.INTEGER,
            Terminal.INTEGER,
            Terminal.LOWER,
        ]


class TestFormatterLongChains:
    def test_long_chain(self):
        source = "+".join(["d6"] * 5000)
        assert roundtrip(source) == " + ".join(["1d6"] * 5000)

    def test_long_mixed_chain_is_stable(self):
        source = "".join(f"{n}d4rl{'+-'[n % 2]}" for n in range(1, 3000)) + "7"
        once = roundtrip(source)
        assert once.startswith("1d4r1l - 2d4r1l + 3d4r1l - ")
        assert once.endswith(" 7")
        assert roundtrip(once) == once
