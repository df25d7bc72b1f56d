# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import FrozenInstanceError

import pytest

from kgadget_lib.records import ProcessRecord, SocketRecord, is_empty_value, wire_field


@pytest.mark.parametrize(
    "kind,value,expected",
    [
        (int, 0, True),
        (int, 1, False),
        (int, -1, False),
        (str, "", True),
        (str, "0", False),
        (str, " ", False),
    ],
)
def test_is_empty_value(kind, value, expected):
    assert is_empty_value(kind, value) is expected


def test_is_empty_value_unsupported_kind():
    with pytest.raises(TypeError):
        is_empty_value(float, 0.0)


def test_wire_field_unsupported_kind():
    with pytest.raises(TypeError):
        wire_field("ratio", float)


def test_process_record_from_dict_maps_wire_keys():
    record = ProcessRecord.fromDict(
        {
            "tgid": 10,
            "pid": 11,
            "comm": "nginx",
            "namespace": "default",
            "pod": "web",
            "container": "nginx",
        }
    )

    assert record == ProcessRecord(
        tgid=10,
        tid=11,
        command="nginx",
        namespace="default",
        pod="web",
        container="nginx",
    )


def test_process_record_from_dict_missing_and_null_fields_default_to_zero():
    record = ProcessRecord.fromDict({"pid": 3, "comm": None})

    assert record.tid == 3
    assert record.tgid == 0
    assert record.command == ""
    assert record.namespace == ""


def test_process_record_from_dict_ignores_unknown_keys():
    record = ProcessRecord.fromDict({"pid": 1, "tgid": 1, "uid": 1000})

    assert record == ProcessRecord(tgid=1, tid=1)


@pytest.mark.parametrize(
    "data,message",
    [
        ({"pid": "1"}, "field 'pid' must be an integer, got a string"),
        ({"pid": True}, "field 'pid' must be an integer, got a boolean"),
        ({"pid": 1.5}, "field 'pid' must be an integer, got a number"),
        ({"comm": 7}, "field 'comm' must be a string, got an integer"),
        ({"pod": ["a"]}, "field 'pod' must be a string, got an array"),
    ],
)
def test_process_record_from_dict_rejects_wrong_types(data, message):
    with pytest.raises(ValueError, match=message):
        ProcessRecord.fromDict(data)


@pytest.mark.parametrize("data", [[], "process", 5, None])
def test_record_from_dict_rejects_non_objects(data):
    with pytest.raises(ValueError, match="expected an object"):
        ProcessRecord.fromDict(data)


def test_process_record_main_thread():
    assert ProcessRecord(tgid=5, tid=5).isMainThread()
    assert not ProcessRecord(tgid=5, tid=6).isMainThread()


def test_record_is_immutable():
    record = ProcessRecord(tgid=1, tid=1)

    with pytest.raises(FrozenInstanceError):
        record.tid = 2  # ty: ignore[invalid-assignment]


def test_process_record_to_dict_omits_empty_fields():
    record = ProcessRecord(tgid=0, tid=7, command="sleep", namespace="", pod="p")

    assert record.toDict() == {"pid": 7, "comm": "sleep", "pod": "p"}


def test_process_record_to_dict_preserves_field_order():
    record = ProcessRecord(
        tgid=1, tid=2, command="c", namespace="ns", pod="p", container="ct"
    )

    assert list(record.toDict()) == [
        "tgid",
        "pid",
        "comm",
        "namespace",
        "pod",
        "container",
    ]


def test_socket_record_from_dict_and_back():
    data = {
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

    record = SocketRecord.fromDict(data)

    assert record.local_port == 80
    assert record.remote_port == 0
    # remote port is zero and therefore omitted
    assert record.toDict() == {k: v for k, v in data.items() if k != "remote_port"}


@pytest.mark.parametrize("port", [-1, 65536, 100000])
def test_socket_record_rejects_ports_out_of_range(port):
    with pytest.raises(ValueError, match="out of range"):
        SocketRecord.fromDict({"local_port": port})


@pytest.mark.parametrize("port", [0, 1, 65535])
def test_socket_record_accepts_ports_in_range(port):
    assert SocketRecord.fromDict({"remote_port": port}).remote_port == port


def test_socket_record_endpoints():
    record = SocketRecord(
        local_address="10.0.0.1",
        local_port=8080,
        remote_address="10.0.0.2",
        remote_port=443,
    )

    assert record.getLocalEndpoint() == "10.0.0.1:8080"
    assert record.getRemoteEndpoint() == "10.0.0.2:443"
