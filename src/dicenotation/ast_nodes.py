"""AST node definitions for dice notation.

Every node is a tagged :class:`Terminal` plus an ordered tuple of children.
The number of children is fixed per tag (see :data:`ARITY`) and checked when
the node is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class Terminal(Enum):
    INTEGER = auto()
    DICE = auto()
    REMOVE = auto()
    HIGHER = auto()
    LOWER = auto()
    ADD = auto()
    SUBTRACT = auto()


ARITY: dict[Terminal, int] = {
    Terminal.INTEGER: 0,
    Terminal.DICE: 2,        # count, size
    Terminal.REMOVE: 3,      # dice expr, count, direction
    Terminal.HIGHER: 0,
    Terminal.LOWER: 0,
    Terminal.ADD: 2,         # left, right
    Terminal.SUBTRACT: 2,    # left, right
}


class ArityError(ValueError):
    """A node does not match its tag: wrong child count, or a bad integer value."""


@dataclass(frozen=True)
class ParseNode:
    entry: Terminal
    children: tuple[ParseNode, ...] = ()
    value: int | None = None  # only for Terminal.INTEGER

    def __post_init__(self) -> None:
        check_arity(self)

    def walk(self) -> Iterator[ParseNode]:
        """Yield this node and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __str__(self) -> str:
        from dicenotation.formatter import unparse

        return unparse(self)


def check_arity(node: ParseNode) -> None:
    """Raise ArityError if *node* has the wrong child count or value for its tag."""
    expected = ARITY[node.entry]
    if len(node.children) != expected:
        raise ArityError(
            f"{node.entry.name.lower()} needs {expected} children, "
            f"got {len(node.children)}"
        )
    if (node.entry == Terminal.INTEGER) != (node.value is not None):
        raise ArityError(f"{node.entry.name} node has invalid value {node.value!r}")


# ── Constructors ─────────────────────────────────────────────────


def integer(n: int) -> ParseNode:
    return ParseNode(Terminal.INTEGER, value=n)


def dice(count: ParseNode, size: ParseNode) -> ParseNode:
    return ParseNode(Terminal.DICE, (count, size))


def remove(expr: ParseNode, count: ParseNode, direction: ParseNode) -> ParseNode:
    return ParseNode(Terminal.REMOVE, (expr, count, direction))


def higher() -> ParseNode:
    return ParseNode(Terminal.HIGHER)


def lower() -> ParseNode:
    return ParseNode(Terminal.LOWER)


def direction(char: str) -> ParseNode:
    """Build the direction node for an ``l`` or ``h`` token."""
    if char == "l":
        return lower()
    if char == "h":
        return higher()
    raise ValueError(f"unknown remove direction {char!r}")


def add(left: ParseNode, right: ParseNode) -> ParseNode:
    return ParseNode(Terminal.ADD, (left, right))


def subtract(left: ParseNode, right: ParseNode) -> ParseNode:
    return ParseNode(Terminal.SUBTRACT, (left, right))
