# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from kgadget_lib.records import ProcessRecord


def filter_threads(
    records: list[ProcessRecord], all_threads: bool
) -> list[ProcessRecord]:
    """
    Select the process records to report.

    Args:
        records (list[ProcessRecord]): Aggregated records of all nodes.
        all_threads (bool): Keep every thread instead of one row per process.

    Returns:
        list[ProcessRecord]: A new list with all records if `all_threads` is set,
        otherwise only the main thread of each process.
    """
    if all_threads:
        return list(records)

    return [record for record in records if record.isMainThread()]
