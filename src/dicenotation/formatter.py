"""AST-walking pretty-printer for dice notation.

Produces the canonical form of an expression: implicit counts are filled in
(``d20rl`` becomes ``1d20r1l``) and binary operators get one space on each
side. Parsing the output and formatting it again yields the same text.
"""

from __future__ import annotations

from dicenotation.ast_nodes import ParseNode, Terminal, check_arity

_OPERATORS: dict[Terminal, str] = {
    Terminal.ADD: "+",
    Terminal.SUBTRACT: "-",
}

_DIRECTIONS: dict[Terminal, str] = {
    Terminal.HIGHER: "h",
    Terminal.LOWER: "l",
}


class DiceFormatter:
    """Format a parsed dice expression back to canonical notation."""

    def format(self, node: ParseNode) -> str:
        """Format *node* and all of its children."""
        # Operator chains nest to the right; walk that spine iteratively.
        parts: list[str] = []
        while node.entry in _OPERATORS:
            check_arity(node)
            left, right = node.children
            parts.append(self.format(left))
            parts.append(_OPERATORS[node.entry])
            node = right
        parts.append(self._format_term(node))
        return " ".join(parts)

    def _format_term(self, node: ParseNode) -> str:
        # Trees built through object.__setattr__ skip __post_init__.
        check_arity(node)
        entry = node.entry

        if entry == Terminal.INTEGER:
            return str(node.value)
        if entry in _DIRECTIONS:
            return _DIRECTIONS[entry]
        if entry == Terminal.DICE:
            count, size = node.children
            return f"{self.format(count)}d{self.format(size)}"
        expr, count, direction = node.children
        return f"{self.format(expr)}r{self.format(count)}{self.format(direction)}"


def unparse(node: ParseNode) -> str:
    """Return the canonical notation for *node*."""
    return DiceFormatter().format(node)


def canonicalize(text: str) -> str:
    """Parse *text* and return its canonical notation."""
    from dicenotation.parser import parse

    return unparse(parse(text))
