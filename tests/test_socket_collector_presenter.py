# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import json

from kgadget_lib.records import SocketRecord
from kgadget_lib.socket_collector.presenter import SocketPresenter


def _socket(**kwargs) -> SocketRecord:
    defaults = {
        "node": "worker-1",
        "namespace": "default",
        "pod": "web",
        "protocol": "TCP",
        "local_address": "10.0.0.1",
        "local_port": 80,
        "remote_address": "0.0.0.0",
        "remote_port": 0,
        "status": "LISTEN",
    }
    return SocketRecord(**(defaults | kwargs))


def test_headers():
    assert SocketPresenter([])._getHeaders() == [
        "NODE",
        "NAMESPACE",
        "POD",
        "PROTOCOL",
        "LOCAL",
        "REMOTE",
        "STATUS",
    ]


def test_row_renders_endpoints_as_address_and_port():
    assert SocketPresenter([])._createRow(_socket()) == [
        "worker-1",
        "default",
        "web",
        "TCP",
        "10.0.0.1:80",
        "0.0.0.0:0",
        "LISTEN",
    ]


def test_create_table():
    records = [_socket(status="ESTABLISHED", remote_port=443), _socket()]

    lines = SocketPresenter(records).createTable().splitlines()

    assert [line.split() for line in lines] == [
        ["NODE", "NAMESPACE", "POD", "PROTOCOL", "LOCAL", "REMOTE", "STATUS"],
        ["worker-1", "default", "web", "TCP", "10.0.0.1:80", "0.0.0.0:443", "ESTABLISHED"],
        ["worker-1", "default", "web", "TCP", "10.0.0.1:80", "0.0.0.0:0", "LISTEN"],
    ]


def test_to_json_omits_zero_ports():
    output = SocketPresenter([_socket()]).toJson()

    assert json.loads(output) == [
        {
            "node": "worker-1",
            "namespace": "default",
            "pod": "web",
            "protocol": "TCP",
            "local_address": "10.0.0.1",
            "local_port": 80,
            "remote_address": "0.0.0.0",
            "status": "LISTEN",
        }
    ]


def test_to_json_round_trip():
    records = [_socket(), _socket(node="worker-2", local_port=22, remote_port=5000)]

    decoded = json.loads(SocketPresenter(records).toJson())

    assert [SocketRecord.fromDict(item) for item in decoded] == records
