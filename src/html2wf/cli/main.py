"""html2wf CLI entry point: Click group with subcommands."""

import logging

import click

from html2wf import __version__


@click.group()
@click.version_option(version=__version__, prog_name="html2wf")
@click.option("-v", "--verbose", count=True, help="Log progress (-v) or debug detail (-vv)")
def cli(verbose: int) -> None:
    """html2wf - convert HTML/CSS into design-tool elements with collision-free class names."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from html2wf.cli.convert import classes, convert  # noqa: E402
from html2wf.cli.rules import rules  # noqa: E402

cli.add_command(convert)
cli.add_command(classes)
cli.add_command(rules)
