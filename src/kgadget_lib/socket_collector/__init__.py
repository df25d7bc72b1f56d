# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Report of the network sockets open on the cluster nodes.

Results of the socket-collector gadget are aggregated across nodes, sorted,
and rendered by `SocketPresenter`.
"""

from .presenter import SocketPresenter

__all__ = ["SocketPresenter"]
