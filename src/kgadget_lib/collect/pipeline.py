# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable

from kgadget_lib.core.common import pluralize
from kgadget_lib.core.error import GadgetError
from kgadget_lib.core.logger import get_logger
from kgadget_lib.records import Record
from kgadget_lib.trace import NodeResult

from .collector import Collector
from .sorter import get_sort_keys, sort_records

logger = get_logger(__name__)


def collect_sorted_records(
    results: list[NodeResult],
    record_type: type[Record],
    record_filter: Callable[[list[Record]], list[Record]] | None = None,
) -> tuple[list[Record], Collector]:
    """
    Aggregate, filter, and sort the records reported by all nodes.

    Args:
        results (list[NodeResult]): Per-node results of a gadget trace.
        record_type (type[Record]): Type of the records the gadget produces.
        record_filter (Callable | None): Optional function selecting the records to keep.

    Returns:
        tuple[list[Record], Collector]: The sorted records and the collector
        holding information about nodes that could not be decoded.

    Raises:
        GadgetError: If the output of every node failed to decode.
    """
    collector = Collector(results, record_type)
    records = collector.collect()

    if collector.allFailed():
        raise GadgetError(
            f"Could not decode results from any of the {pluralize(len(results), 'node')}."
        )

    if not results:
        logger.info("No results found.")

    if record_filter:
        records = record_filter(records)

    return sort_records(records, get_sort_keys(record_type)), collector


def warn_if_partial(collector: Collector) -> None:
    """
    Log a warning listing the nodes whose results are missing from the report.
    """
    if not collector.isPartial():
        return

    nodes = ", ".join(f"'{result.node}'" for result, _ in collector.failures)
    logger.warning(
        f"Results are incomplete: skipped {pluralize(len(collector.failures), 'node')} ({nodes})."
    )
