# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from kgadget_lib.core.click_format import HELP_COLOR
from kgadget_lib.process_collector.cli import process_collector
from kgadget_lib.socket_collector.cli import socket_collector

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_options_color=HELP_COLOR,
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of kgadget and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any kgadget command.

    kgadget gathers the results of collector gadgets from all traced cluster nodes
    and presents them as a single, deterministically ordered report.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(process_collector)
cli.add_command(socket_collector)
