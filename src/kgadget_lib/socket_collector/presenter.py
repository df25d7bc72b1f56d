# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from kgadget_lib.collect.presenter import CollectorPresenter
from kgadget_lib.records import SocketRecord


class SocketPresenter(CollectorPresenter):
    """
    Present network sockets collected from the cluster nodes.
    """

    def _getHeaders(self) -> list[str]:
        return ["NODE", "NAMESPACE", "POD", "PROTOCOL", "LOCAL", "REMOTE", "STATUS"]

    def _createRow(self, record: SocketRecord) -> list[str]:
        return [
            record.node,
            record.namespace,
            record.pod,
            record.protocol,
            record.getLocalEndpoint(),
            record.getRemoteEndpoint(),
            record.status,
        ]
