"""variantkit CLI entry point: Click group with subcommands."""

import logging

import click

from variantkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="variantkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """variantkit - resolve widget configurations into class strings and elements."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from variantkit.cli.resolve import resolve  # noqa: E402
from variantkit.cli.validate import validate  # noqa: E402
from variantkit.cli.inspect import inspect  # noqa: E402
from variantkit.cli.serve import serve  # noqa: E402

cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(serve)
