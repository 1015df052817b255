"""CLI commands: html2wf convert / html2wf classes."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from html2wf.config import ConversionConfig
from html2wf.converter import ConversionError, Converter
from html2wf.model.result import ConversionResult
from html2wf.naming.registry import DEFAULT_PREFIX
from html2wf.stylesheet.errors import StylesheetParseError


def _run_conversion(
    markup_file: str,
    css_file: str | None,
    config: ConversionConfig,
    show_progress: bool = False,
) -> ConversionResult:
    """Read the input files and convert them, exiting with status 1 on failure."""
    markup = Path(markup_file).read_text(encoding="utf-8")
    stylesheet = Path(css_file).read_text(encoding="utf-8") if css_file else ""

    converter = Converter(config)
    if show_progress:
        converter.event_bus.on_progress(
            lambda status, progress: click.echo(f"[{progress:3d}%] {status}", err=True)
        )

    try:
        return converter.convert(markup, stylesheet)
    except StylesheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except ConversionError as exc:
        click.echo(f"Conversion failed: {exc}", err=True)
        sys.exit(1)


def _build_config(prefix: str, media: bool = True, inline: bool = True) -> ConversionConfig:
    try:
        return ConversionConfig(prefix=prefix, resolve_conditional=media, include_inline_styles=inline)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--prefix") from exc


@click.command()
@click.argument("markup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--css", "css_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Stylesheet to apply")
@click.option("--prefix", default=DEFAULT_PREFIX, show_default=True,
              help="Prefix for every generated class name")
@click.option("--media/--no-media", default=True, help="Resolve @media groups per element")
@click.option("--inline/--no-inline", default=True, help="Apply style=\"\" attributes over the cascade")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Write the JSON result here instead of stdout")
@click.option("--progress", is_flag=True, help="Print progress lines to stderr")
def convert(
    markup_file: str,
    css_file: str | None,
    prefix: str,
    media: bool,
    inline: bool,
    output: str | None,
    progress: bool,
) -> None:
    """Convert an HTML file (and optional stylesheet) to a JSON element tree.

    The result holds the class map, the resolved style of every element,
    per-media-condition styles, and the mapped element tree.
    """
    config = _build_config(prefix, media=media, inline=inline)
    result = _run_conversion(markup_file, css_file, config, show_progress=progress)

    payload = json.dumps(result.to_dict(), indent=2)
    if output:
        Path(output).write_text(payload + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(payload)


@click.command()
@click.argument("markup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--css", "css_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Stylesheet whose classes are registered too")
@click.option("--prefix", default=DEFAULT_PREFIX, show_default=True,
              help="Prefix for every generated class name")
def classes(markup_file: str, css_file: str | None, prefix: str) -> None:
    """Print the original -> generated class name table.

    Markup classes come first, in document order, followed by classes that
    only the stylesheet mentions.
    """
    config = _build_config(prefix)
    result = _run_conversion(markup_file, css_file, config)

    if not result.class_map:
        click.echo("No classes found")
        return
    width = max(len(name) for name in result.class_map)
    for original, generated in result.class_map.items():
        click.echo(f"{original.ljust(width)} -> {generated}")
