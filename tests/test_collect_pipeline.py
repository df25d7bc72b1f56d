# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import json
from functools import partial
from unittest.mock import patch

import pytest

from kgadget_lib.collect.pipeline import collect_sorted_records, warn_if_partial
from kgadget_lib.core.error import GadgetError
from kgadget_lib.process_collector.filter import filter_threads
from kgadget_lib.records import ProcessRecord, SocketRecord
from kgadget_lib.trace import NodeResult


def test_collect_sorted_records_filters_and_sorts():
    results = [
        NodeResult(
            "n1",
            json.dumps(
                [
                    {"tgid": 1, "pid": 1, "comm": "init", "namespace": "kube-system"},
                    {"tgid": 1, "pid": 4, "comm": "init", "namespace": "kube-system"},
                ]
            ),
        ),
        NodeResult(
            "n2",
            json.dumps([{"tgid": 2, "pid": 2, "comm": "sleep", "namespace": "default"}]),
        ),
    ]

    records, collector = collect_sorted_records(
        results, ProcessRecord, partial(filter_threads, all_threads=False)
    )

    assert [(r.namespace, r.tid) for r in records] == [
        ("default", 2),
        ("kube-system", 1),
    ]
    assert not collector.isPartial()


def test_collect_sorted_records_without_filter_keeps_everything():
    fragment = json.dumps([{"tgid": 1, "pid": 2}, {"tgid": 1, "pid": 1}])

    records, _ = collect_sorted_records([NodeResult("n1", fragment)], ProcessRecord)

    assert [r.tid for r in records] == [1, 2]


def test_collect_sorted_records_all_failed_raises():
    with pytest.raises(GadgetError, match="Could not decode results from any"):
        collect_sorted_records(
            [NodeResult("n1", "garbage"), NodeResult("n2", "{")], SocketRecord
        )


def test_collect_sorted_records_no_results_logs_info():
    with patch("kgadget_lib.collect.pipeline.logger") as mock_logger:
        records, _ = collect_sorted_records([], SocketRecord)

    assert records == []
    mock_logger.info.assert_called_once_with("No results found.")


def test_warn_if_partial_lists_skipped_nodes():
    _, collector = collect_sorted_records(
        [NodeResult("n1", "garbage"), NodeResult("n2", "[]")], SocketRecord
    )

    with patch("kgadget_lib.collect.pipeline.logger") as mock_logger:
        warn_if_partial(collector)

    mock_logger.warning.assert_called_once()
    assert "'n1'" in mock_logger.warning.call_args.args[0]


def test_warn_if_partial_silent_for_complete_results():
    _, collector = collect_sorted_records([NodeResult("n1", "[]")], SocketRecord)

    with patch("kgadget_lib.collect.pipeline.logger") as mock_logger:
        warn_if_partial(collector)

    mock_logger.warning.assert_not_called()


def test_collect_sorted_records_unnamed_nodes_all_failed_raises():
    results = [NodeResult("", "garbage"), NodeResult("", "{")]

    with pytest.raises(GadgetError, match="Could not decode results from any"):
        collect_sorted_records(results, SocketRecord)


def test_warn_if_partial_counts_every_skipped_node():
    _, collector = collect_sorted_records(
        [
            NodeResult("worker", "garbage"),
            NodeResult("worker", "{"),
            NodeResult("ok", '[{"node": "ok"}]'),
        ],
        SocketRecord,
    )

    with patch("kgadget_lib.collect.pipeline.logger") as mock_logger:
        warn_if_partial(collector)

    message = mock_logger.warning.call_args.args[0]
    assert "skipped 2 nodes" in message
    assert "('worker', 'worker')" in message
