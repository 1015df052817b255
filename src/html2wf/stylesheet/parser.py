"""Lark Transformer that converts stylesheet source into a ParsedStylesheet.

Syntax example:
    .container { width: 100%; }
    h1, .title { font-size: 2rem; color: #333; }
    @media (max-width: 768px) { .container { width: 90%; } }
    @supports (display: grid) { .grid { display: grid; } }
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from html2wf.model.rules import ConditionalRuleGroup, ParsedStylesheet, StyleRule
from html2wf.stylesheet.errors import StylesheetParseError

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "stylesheet.lark"

log = logging.getLogger("html2wf.stylesheet")

# Comments outside quoted strings; group 1 keeps a string as written.
_COMMENT_RE = re.compile(r"""("[^"]*"|'[^']*')|/\*.*?\*/""", re.DOTALL)


def _clean(raw: str) -> str:
    """Drop embedded comments and collapse runs of whitespace."""
    without_comments = _COMMENT_RE.sub(lambda m: m.group(1) or " ", raw)
    return " ".join(without_comments.split())


class _Block:
    """Intermediate rule block; source order is assigned during assembly."""

    def __init__(self, selector: str, properties: dict[str, str]):
        self.selector = selector
        self.properties = properties


class _MediaBlock:
    def __init__(self, condition: str, statements: list[object]):
        self.condition = condition
        self.statements = statements


class _GroupBlock:
    """A grouping at-rule (@supports, @layer, ...) whose rules are kept."""

    def __init__(self, name: str, prelude: str, statements: list[object]):
        self.name = name
        self.prelude = prelude
        self.statements = statements

    def __str__(self) -> str:
        return f"{self.name} {self.prelude}".strip()


class _AtRule:
    def __init__(self, name: str, prelude: str):
        self.name = name
        self.prelude = prelude

    def __str__(self) -> str:
        return f"{self.name} {self.prelude}".strip()


def _split_prelude(items: list[object]) -> tuple[str, list[object]]:
    """Separate the optional PRELUDE token from the nested statements."""
    prelude = ""
    statements: list[object] = []
    for item in items:
        if isinstance(item, Token):
            prelude = _clean(str(item))
        else:
            statements.append(item)
    return prelude, statements


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into rule blocks, media and grouping blocks."""

    def declaration(self, items: list[Token]) -> tuple[str, str]:
        prop = str(items[0])
        value = _clean(str(items[1])) if len(items) > 1 else ""
        return (prop, value)

    def declaration_list(self, items: list[tuple[str, str]]) -> dict[str, str]:
        # dict() keeps the last value for a repeated property.
        return dict(items)

    def rule(self, items: list[object]) -> _Block:
        return _Block(_clean(str(items[0])), items[1])  # type: ignore[arg-type]

    def media_block(self, items: list[object]) -> _MediaBlock:
        condition, statements = _split_prelude(items[1:])
        return _MediaBlock(condition, statements)

    def group_block(self, items: list[object]) -> _GroupBlock:
        prelude, statements = _split_prelude(items[1:])
        return _GroupBlock(str(items[0]), prelude, statements)

    def at_statement(self, items: list[Token]) -> _AtRule:
        prelude = _clean(str(items[1])) if len(items) > 1 else ""
        return _AtRule(str(items[0]), prelude)

    def at_block(self, items: list[Token]) -> _AtRule:
        prelude = ""
        for token in items[1:]:
            if token.type == "PRELUDE":
                prelude = _clean(str(token))
        return _AtRule(str(items[0]), prelude)

    def start(self, items: list[object]) -> ParsedStylesheet:
        return _assemble_stylesheet(items)


def _assemble_stylesheet(statements: list[object]) -> ParsedStylesheet:
    """Number every rule in document order and split off media groups.

    Rules inside grouping at-rules join whatever list encloses them: the
    top-level rules, or the rules of the enclosing @media group.  An @media
    reached through a grouping at-rule inside another @media is skipped,
    like any other nested @media.
    """
    stylesheet = ParsedStylesheet()
    order = 0

    def make_rule(block: _Block) -> StyleRule:
        nonlocal order
        rule = StyleRule(
            selector=block.selector,
            properties=block.properties,
            source_order=order,
        )
        order += 1
        return rule

    def visit(items: list[object], target: list[StyleRule], in_media: bool) -> None:
        for stmt in items:
            if isinstance(stmt, _Block):
                target.append(make_rule(stmt))
            elif isinstance(stmt, _MediaBlock):
                if in_media:
                    stylesheet.skipped_at_rules.append(f"@media {stmt.condition}".strip())
                    continue
                group = ConditionalRuleGroup(condition=stmt.condition)
                stylesheet.conditional_groups.append(group)
                visit(stmt.statements, group.rules, True)
            elif isinstance(stmt, _GroupBlock):
                log.debug("Keeping rules of grouping at-rule: %s", stmt)
                visit(stmt.statements, target, in_media)
            elif isinstance(stmt, _AtRule):
                stylesheet.skipped_at_rules.append(str(stmt))

    visit(statements, stylesheet.rules, False)

    for at_rule in stylesheet.skipped_at_rules:
        log.debug("Skipping unsupported at-rule: %s", at_rule)
    return stylesheet


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def _position(value: object) -> int | None:
    # Lark reports -1 when the input ended before the error.
    return value if isinstance(value, int) and value > 0 else None


def parse_stylesheet(source: str) -> ParsedStylesheet:
    """Parse stylesheet source into top-level rules and media groups.

    A comma-joined selector stays a single rule; matching splits it later.
    Rules inside grouping at-rules such as ``@supports`` are kept in the
    enclosing list.  Raises :class:`StylesheetParseError` when the source
    cannot be tokenized.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise StylesheetParseError(
            str(e),
            line=_position(getattr(e, "line", None)),
            column=_position(getattr(e, "column", None)),
        ) from e
    return StylesheetTransformer().transform(tree)
