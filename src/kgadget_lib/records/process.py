# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass

from .record import Record, wire_field


@dataclass(frozen=True)
class ProcessRecord(Record):
    """
    A single OS thread reported by the process-collector gadget.

    The thread with `tid == tgid` is the main thread of its process.
    """

    # Thread group (process) identifier.
    tgid: int = wire_field("tgid", int)

    # Thread identifier.
    tid: int = wire_field("pid", int)

    # Name of the process.
    command: str = wire_field("comm", str)

    # Kubernetes namespace of the owning pod.
    namespace: str = wire_field("namespace", str)

    # Kubernetes pod running the process.
    pod: str = wire_field("pod", str)

    # Kubernetes container running the process.
    container: str = wire_field("container", str)

    def isMainThread(self) -> bool:
        """Check whether this record represents the main thread of its process."""
        return self.tid == self.tgid
