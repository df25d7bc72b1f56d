# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from kgadget_lib.core.error import DecodeError
from kgadget_lib.core.error_handlers import handle_decode_error
from kgadget_lib.core.logger import get_logger
from kgadget_lib.core.repeater import Repeater
from kgadget_lib.records import Record
from kgadget_lib.trace import NodeResult

from .decoder import decode_fragment

logger = get_logger(__name__)


class Collector:
    """
    Aggregate the records reported by individual nodes into a single list.

    Records are concatenated in the order of the node results. A node whose
    output cannot be decoded is reported and skipped; the other nodes still
    contribute their records.

    Attributes:
        records (list[Record]): All successfully decoded records.
        failures (list[tuple[NodeResult, DecodeError]]): Node results that could not
            be decoded, paired with their errors, in node-iteration order.
    """

    def __init__(self, results: list[NodeResult], record_type: type[Record]):
        """
        Initialize the collector.

        Args:
            results (list[NodeResult]): Per-node results of a gadget trace.
            record_type (type[Record]): Type of the records the gadget produces.
        """
        # operate on a private copy of the input
        self._results = list(results)
        self._record_type = record_type

        self.records: list[Record] = []
        self.failures: list[tuple[NodeResult, DecodeError]] = []

    def collect(self) -> list[Record]:
        """
        Decode the output of every node and concatenate the records.

        Returns:
            list[Record]: The aggregated records, in node-iteration order.
        """
        self.records = []
        self.failures = []

        repeater = Repeater(self._results, self._collectNode)
        repeater.onException(DecodeError, handle_decode_error)
        repeater.run()

        for i, error in repeater.encountered_errors.items():
            self.failures.append((self._results[i], error))

        logger.debug(
            f"Collected {len(self.records)} record(s) from {len(self._results)} node(s)."
        )
        return self.records

    def isPartial(self) -> bool:
        """
        Check whether the results of at least one node had to be skipped.
        """
        return bool(self.failures)

    def allFailed(self) -> bool:
        """
        Check whether every node that produced output failed to decode.

        Returns False if no node produced any output.
        """
        with_output = [r for r in self._results if r.output and r.output.strip()]
        return bool(with_output) and len(self.failures) == len(with_output)

    def _collectNode(self, result: NodeResult) -> None:
        """
        Decode the output of a single node and append its records.
        """
        if result.operation_error:
            logger.warning(
                f"Gadget reported an error on node '{result.node}': {result.operation_error}"
            )
        if result.operation_warning:
            logger.info(
                f"Gadget reported a warning on node '{result.node}': {result.operation_warning}"
            )

        self.records.extend(
            decode_fragment(result.output, self._record_type, result.node)
        )
