"""CLI command: html2wf rules -- display the parsed rule set."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from html2wf.model.rules import StyleRule
from html2wf.stylesheet import StylesheetParseError, parse_stylesheet


def _describe(rule: StyleRule) -> str:
    props = "; ".join(f"{k}: {v}" for k, v in rule.properties.items())
    return f"  [{rule.source_order}] {rule.selector}  specificity={rule.specificity}  {{{props}}}"


@click.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
def rules(css_file: str) -> None:
    """Parse a stylesheet and list its rules with their specificity.

    Top-level rules come first, then one section per @media condition.
    """
    try:
        stylesheet = parse_stylesheet(Path(css_file).read_text(encoding="utf-8"))
    except StylesheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    for rule in stylesheet.rules:
        click.echo(_describe(rule))

    for group in stylesheet.conditional_groups:
        click.echo()
        click.echo(f"@media {group.condition} ({len(group.rules)} rule(s))")
        for rule in group.rules:
            click.echo(_describe(rule))

    if stylesheet.skipped_at_rules:
        click.echo()
        click.echo("Skipped at-rules:")
        for at_rule in stylesheet.skipped_at_rules:
            click.echo(f"  {at_rule}")
