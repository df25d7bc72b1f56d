# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the kgadget command-line tool.

This package aggregates the per-node results of collector gadgets (processes,
sockets) into a single report. It defines the result records, the decoding,
aggregation and sorting pipeline, the presenters producing tabular or
structured output, and the sources from which per-node results are read.
"""

from .kgadget import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "collect",
    "core",
    "process_collector",
    "records",
    "socket_collector",
    "trace",
]
