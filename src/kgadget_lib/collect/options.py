# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable

import click
from click_option_group import optgroup

from kgadget_lib.core.config import CFG

from .output_mode import OutputMode


def _common_options() -> list[Callable]:
    """
    Create the decorators of the options shared by all collector commands.

    A fresh set is created for every command, since option groups are bound
    to the command they decorate.
    """
    # each optgroup header must precede its options
    return [
        optgroup.group(f"{click.style('Output settings', fg='yellow')}"),
        optgroup.option(
            "-o",
            "--output",
            type=click.Choice(OutputMode.choices(), case_sensitive=False),
            default=CFG.collector_presenter.default_output,
            show_default=True,
            help="Output mode: a human-readable table ('columns') or a structured document ('json', 'yaml').",
        ),
        optgroup.group(f"{click.style('Trace settings', fg='yellow')}"),
        optgroup.option(
            "-i",
            "--input",
            type=str,
            default=None,
            help=(
                "Read the trace results from a file (JSON or YAML) instead of the cluster.\n"
                "Use '-' to read from standard input."
            ),
        ),
        optgroup.option(
            "-n",
            "--namespace",
            type=str,
            default=None,
            help=f"Namespace of the trace resources. Defaults to '{CFG.trace_source.namespace}'.",
        ),
    ]


def add_common_options(command: Callable) -> Callable:
    """
    Decorate a collector command with the options shared by all collector commands.
    """
    for decorator in reversed(_common_options()):
        command = decorator(command)
    return command
