# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Aggregation and presentation of collector gadget results.

Per-node output fragments are decoded into records (`decode_fragment`),
concatenated across nodes (`Collector`), optionally filtered, sorted in a
deterministic order (`sort_records`), and rendered by a `CollectorPresenter`
either as a table or as a JSON/YAML document.
"""

from .collector import Collector
from .decoder import decode_fragment
from .output_mode import OutputMode
from .pipeline import collect_sorted_records, warn_if_partial
from .presenter import CollectorPresenter
from .sorter import (
    PROCESS_SORT_KEYS,
    SOCKET_SORT_KEYS,
    SortKey,
    compare,
    get_sort_keys,
    sort_key,
    sort_records,
)

__all__ = [
    "PROCESS_SORT_KEYS",
    "SOCKET_SORT_KEYS",
    "Collector",
    "CollectorPresenter",
    "OutputMode",
    "SortKey",
    "collect_sorted_records",
    "compare",
    "decode_fragment",
    "get_sort_keys",
    "sort_key",
    "sort_records",
    "warn_if_partial",
]
