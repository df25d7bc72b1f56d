# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Access to per-node results of gadget traces.

Trace orchestration (discovering nodes, running the tracing programs) happens
elsewhere. This package only reads the per-node results it produced, either
from the cluster via kubectl (`KubectlTraceSource`) or from a dumped trace list
(`FileTraceSource`), and exposes them as `NodeResult` objects.
"""

from pathlib import Path

from .file import FileTraceSource
from .interface import NodeResult, TraceSourceInterface
from .kubectl import KubectlTraceSource


def get_trace_source(
    input: str | Path | None, namespace: str | None = None
) -> TraceSourceInterface:
    """
    Select the trace source to read node results from.

    Args:
        input (str | Path | None): Path to a dumped trace list (`-` for standard input).
            If not provided, the results are read from the cluster.
        namespace (str | None): Namespace of the trace resources in the cluster.

    Returns:
        TraceSourceInterface: The selected trace source.
    """
    if input:
        return FileTraceSource(input)
    return KubectlTraceSource(namespace)


__all__ = [
    "FileTraceSource",
    "KubectlTraceSource",
    "NodeResult",
    "TraceSourceInterface",
    "get_trace_source",
]
