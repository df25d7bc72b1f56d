# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout kgadget.

Recoverable errors derive from `GadgetError`. `DecodeError` marks a single
node's malformed result fragment and is handled per node, so the remaining
nodes still contribute to the report. `SerializationError` is fatal for the
invocation. Each exception carries the exit code reported by the commands.
"""

from .config import CFG


class GadgetError(Exception):
    """Common exception type for all recoverable kgadget errors."""

    exit_code = CFG.exit_codes.default


class DecodeError(GadgetError):
    """Raised when a node's result fragment cannot be decoded into records."""

    def __init__(self, node: str, reason: str):
        super().__init__(f"Could not decode results from node '{node}': {reason}")
        self.node = node
        self.reason = reason


class SerializationError(Exception):
    """
    Raised when collected records cannot be serialized into a structured document.

    Signals a broken internal invariant, never bad input.
    """

    exit_code = CFG.exit_codes.serialization
