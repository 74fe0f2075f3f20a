"""Dice notation CLI."""

from __future__ import annotations

import sys
import tomllib

import click
from pygments.util import ClassNotFound

from dicenotation import __version__
from dicenotation.ast_nodes import ParseNode, Terminal
from dicenotation.config import DiceConfig, load_config_or_default
from dicenotation.errors import DiagnosticRenderer, ParseFailure
from dicenotation.formatter import unparse
from dicenotation.lexer import Lexer
from dicenotation.parser import parse


def _load_config() -> DiceConfig:
    """Load the nearest dice.toml, exiting with an error if it is malformed."""
    try:
        return load_config_or_default()
    except tomllib.TOMLDecodeError as e:
        click.echo(f"error: invalid dice.toml: {e}", err=True)
        raise SystemExit(1)


def _report(error: ParseFailure, source: str, config: DiceConfig) -> None:
    renderer = DiagnosticRenderer(color=config.diagnostics.color)
    click.echo(renderer.render(error.diagnostic, source), err=True)


def _parse_or_report(source: str, config: DiceConfig) -> ParseNode | None:
    """Parse source, rendering any failure to stderr. Returns None on failure."""
    try:
        return parse(source)
    except ParseFailure as e:
        _report(e, source, config)
        return None


def _read_inputs(expressions: tuple[str, ...], use_stdin: bool) -> list[str]:
    if use_stdin:
        return [line.strip() for line in sys.stdin.read().splitlines() if line.strip()]
    return list(expressions)


@click.group()
@click.version_option(__version__, prog_name="dice")
def main() -> None:
    """Parse and canonicalize tabletop dice notation."""


@main.command(name="format")
@click.argument("expressions", nargs=-1)
@click.option("--check", is_flag=True, help="Check that inputs are already canonical.")
@click.option("--stdin", "use_stdin", is_flag=True, help="Read one expression per line from stdin.")
@click.option("--highlight/--no-highlight", default=None, help="Colorize the output.")
def format_cmd(
    expressions: tuple[str, ...], check: bool, use_stdin: bool, highlight: bool | None,
) -> None:
    """Print the canonical form of dice expressions."""
    config = _load_config()
    sources = _read_inputs(expressions, use_stdin)
    if not sources:
        click.echo("error: no expression given", err=True)
        raise SystemExit(1)

    if highlight is None:
        highlight = config.format.highlight

    failed = False
    for source in sources:
        tree = _parse_or_report(source, config)
        if tree is None:
            failed = True
            continue

        formatted = unparse(tree)
        if check:
            if formatted != source:
                click.echo(f"would reformat {source!r} -> {formatted!r}", err=True)
                failed = True
            continue

        if highlight:
            from dicenotation.highlight import highlight_notation

            try:
                formatted = highlight_notation(formatted, config.format.style)
            except ClassNotFound:
                click.echo(f"error: unknown style {config.format.style!r}", err=True)
                raise SystemExit(1)
        click.echo(formatted)

    if failed:
        raise SystemExit(1)


@main.command()
@click.argument("expressions", nargs=-1, required=True)
def check(expressions: tuple[str, ...]) -> None:
    """Parse dice expressions and report errors."""
    config = _load_config()
    failed = False
    for source in expressions:
        if _parse_or_report(source, config) is None:
            failed = True
        else:
            click.echo(f"{source}: ok")
    if failed:
        raise SystemExit(1)


@main.command()
@click.argument("expression")
def view(expression: str) -> None:
    """View the AST of a dice expression."""
    config = _load_config()
    tree = _parse_or_report(expression, config)
    if tree is None:
        raise SystemExit(1)
    _dump_ast(tree, 0, config.view.indent)


@main.command()
@click.argument("expression")
def tokens(expression: str) -> None:
    """List the tokens of a dice expression."""
    config = _load_config()
    try:
        toks = Lexer(expression).lex()
    except ParseFailure as e:
        _report(e, expression, config)
        raise SystemExit(1)
    for tok in toks:
        click.echo(f"{tok.index:>4}  {tok.kind.name:<9} {tok.value}")


def _dump_ast(node: ParseNode, depth: int, width: int) -> None:
    """Print a readable AST dump."""
    stack = [(node, depth)]
    while stack:
        current, level = stack.pop()
        indent = " " * (width * level)
        name = current.entry.name.title()
        if current.entry == Terminal.INTEGER:
            click.echo(f"{indent}{name}: {current.value}")
            continue
        click.echo(f"{indent}{name}")
        stack.extend((child, level + 1) for child in reversed(current.children))
