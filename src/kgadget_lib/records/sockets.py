# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass

from .record import Record, wire_field

# Valid range of TCP/UDP port numbers.
MIN_PORT = 0
MAX_PORT = 65535


@dataclass(frozen=True)
class SocketRecord(Record):
    """
    A single network socket reported by the socket-collector gadget.
    """

    # Name of the node the socket was found on.
    node: str = wire_field("node", str)

    # Kubernetes namespace of the owning pod.
    namespace: str = wire_field("namespace", str)

    # Kubernetes pod owning the socket.
    pod: str = wire_field("pod", str)

    # Transport protocol, e.g. TCP or UDP.
    protocol: str = wire_field("protocol", str)

    local_address: str = wire_field("local_address", str)
    local_port: int = wire_field("local_port", int, MIN_PORT, MAX_PORT)
    remote_address: str = wire_field("remote_address", str)
    remote_port: int = wire_field("remote_port", int, MIN_PORT, MAX_PORT)

    # Connection state, e.g. LISTEN or ESTABLISHED.
    status: str = wire_field("status", str)

    def getLocalEndpoint(self) -> str:
        """Return the local endpoint formatted as `address:port`."""
        return f"{self.local_address}:{self.local_port}"

    def getRemoteEndpoint(self) -> str:
        """Return the remote endpoint formatted as `address:port`."""
        return f"{self.remote_address}:{self.remote_port}"
