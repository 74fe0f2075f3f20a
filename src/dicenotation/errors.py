"""Rust-style colored diagnostic rendering and parse failure types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dicenotation.tokens import Token


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
    Severity.NOTE: "\033[1;36m",     # bold cyan
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class DiagnosticLabel:
    """Points to a character range within the expression."""

    index: int
    length: int = 1
    message: str = ""


@dataclass(frozen=True)
class Suggestion:
    """A suggested fix."""

    message: str
    replacement: str


@dataclass
class Diagnostic:
    """A single diagnostic message with optional labels and suggestions."""

    severity: Severity
    code: str
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors."""

    def __init__(self, *, color: bool = True, source_name: str = "<expr>") -> None:
        self.color = color
        self.source_name = source_name

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def render(self, diag: Diagnostic, source: str | None = None) -> str:
        lines: list[str] = []
        sev = diag.severity
        color = _COLORS[sev]

        # Header: error[E201]: message
        lines.append(
            f"{self._c(color)}{sev.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )

        for label in diag.labels:
            loc = f"{self.source_name}:1:{label.index + 1}"
            lines.append(
                f"  {self._c(_BLUE)}-->{self._c(_RESET)} {loc}"
            )
            lines.append(f"  {self._c(_BLUE)}     |{self._c(_RESET)}")

            if source is not None:
                lines.append(
                    f"  {self._c(_BLUE)}   1 |{self._c(_RESET)} {source}"
                )
                padding = " " * label.index
                carets = "^" * max(1, label.length)
                lines.append(
                    f"  {self._c(_BLUE)}     |{self._c(_RESET)} "
                    f"{padding}{self._c(color)}{carets}{self._c(_RESET)}"
                )

            if label.message:
                lines.append(
                    f"  {self._c(_BLUE)}     |{self._c(_RESET)}   "
                    f"{self._c(color)}{label.message}{self._c(_RESET)}"
                )

        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")

        for suggestion in diag.suggestions:
            lines.append(
                f"  {self._c(_BLUE)}try:{self._c(_RESET)} {suggestion.replacement}"
            )

        return "\n".join(lines)


# ── Parse failures ───────────────────────────────────────────────


class ParseFailure(Exception):
    """Base class for every failure raised while lexing or parsing."""

    code = "E000"

    def __init__(
        self,
        message: str,
        index: int,
        *,
        length: int = 1,
        notes: list[str] | None = None,
        suggestions: list[Suggestion] | None = None,
    ) -> None:
        self.index = index
        self.diagnostic = Diagnostic(
            severity=Severity.ERROR,
            code=self.code,
            message=message,
            labels=[DiagnosticLabel(index=index, length=length)],
            suggestions=suggestions or [],
            notes=notes or [],
        )
        super().__init__(f"{message} @ index {index}")


class LexError(ParseFailure):
    """An unrecognized character was found in the input."""

    code = "E100"

    def __init__(self, char: str, index: int) -> None:
        self.char = char
        super().__init__(f"unexpected character {char!r}", index)


class UnexpectedEndOfInput(ParseFailure):
    """Input ended where a required token was expected."""

    code = "E200"

    def __init__(
        self,
        construct: str,
        expected: str,
        index: int,
        *,
        notes: list[str] | None = None,
        suggestions: list[Suggestion] | None = None,
    ) -> None:
        self.construct = construct
        self.expected = expected
        super().__init__(
            f"unexpected end of input in {construct}, expected {expected}",
            index,
            notes=notes,
            suggestions=suggestions,
        )


class UnexpectedToken(ParseFailure):
    """A token of the wrong kind appeared where a specific kind was required."""

    code = "E201"

    def __init__(
        self,
        construct: str,
        expected: str,
        found: Token,
        *,
        notes: list[str] | None = None,
    ) -> None:
        self.construct = construct
        self.expected = expected
        self.found = found
        super().__init__(
            f"unexpected {found.describe()} in {construct}, expected {expected}",
            found.index,
            length=len(str(found.value)),
            notes=notes,
        )


class TrailingInput(ParseFailure):
    """Tokens remain after a complete expression was parsed."""

    code = "E202"

    def __init__(self, found: Token) -> None:
        self.found = found
        super().__init__(
            f"expected end of input, found {found.describe()}",
            found.index,
            length=len(str(found.value)),
        )
