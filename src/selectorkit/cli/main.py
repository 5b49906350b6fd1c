"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """selectorkit - build CSS selectors from their parts."""
    if verbose:
        # basicConfig is a no-op once the root logger has handlers.
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("selectorkit").setLevel(logging.DEBUG)


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402

cli.add_command(build)
