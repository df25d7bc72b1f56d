# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self

from kgadget_lib.core.error import GadgetError
from kgadget_lib.core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NodeResult:
    """
    Status of a gadget trace on a single node.
    """

    # Name of the node the trace ran on.
    node: str

    # Raw output produced by the gadget on the node.
    output: str = ""

    # Error reported while operating the trace on the node.
    operation_error: str | None = None

    # Warning reported while operating the trace on the node.
    operation_warning: str | None = None

    @classmethod
    def fromTraceItem(cls, item: object) -> Self:
        """
        Construct a NodeResult from a single item of a trace list.

        The item is expected to follow the layout of the trace resource, i.e.
        `spec.node` and `status.{output,operationError,operationWarning}`.

        Raises:
            GadgetError: If the item does not have the expected layout.
        """
        if not isinstance(item, dict):
            raise GadgetError(f"Invalid trace item: expected a mapping, got '{item}'.")

        spec = item.get("spec") or {}
        status = item.get("status") or {}
        if not isinstance(spec, dict) or not isinstance(status, dict):
            raise GadgetError(
                "Invalid trace item: 'spec' and 'status' must be mappings."
            )

        node = spec.get("node") or ""
        output = status.get("output") or ""
        if not isinstance(output, str):
            raise GadgetError(
                f"Invalid trace item for node '{node}': output must be a string."
            )

        return cls(
            node=str(node),
            output=output,
            operation_error=status.get("operationError") or None,
            operation_warning=status.get("operationWarning") or None,
        )

    @staticmethod
    def gadgetOf(item: object) -> str | None:
        """
        Return the name of the gadget a trace item belongs to, if specified.
        """
        if isinstance(item, dict) and isinstance(spec := item.get("spec"), dict):
            return spec.get("gadget") or None
        return None


class TraceSourceInterface(ABC):
    """
    Abstract base class for obtaining per-node results of a gadget trace.

    Implementations only read results that the trace orchestration has
    already produced. They never start, stop, or delete traces.
    """

    @abstractmethod
    def getNodeResults(self, gadget: str) -> list[NodeResult]:
        """
        Retrieve the results of the given gadget from all traced nodes.

        Args:
            gadget (str): Name of the gadget, e.g. `process-collector`.

        Returns:
            list[NodeResult]: One result per node, in the order reported by the source.

        Raises:
            GadgetError: If the results cannot be obtained.
        """
        pass

    @staticmethod
    def _parseTraceList(document: object, gadget: str) -> list[NodeResult]:
        """
        Convert a decoded trace list document into node results for `gadget`.

        The document is either a mapping with an `items` list or a bare list of items.
        Items that belong to a different gadget are skipped.

        Raises:
            GadgetError: If the document does not have the expected layout.
        """
        if document is None:
            return []

        if isinstance(document, dict):
            items = document.get("items") or []
        else:
            items = document

        if not isinstance(items, list):
            raise GadgetError("Invalid trace list: expected a list of trace items.")

        results = []
        for item in items:
            if (item_gadget := NodeResult.gadgetOf(item)) and item_gadget != gadget:
                logger.debug(f"Skipping trace item of gadget '{item_gadget}'.")
                continue
            results.append(NodeResult.fromTraceItem(item))

        logger.debug(f"Loaded results of '{gadget}' from {len(results)} node(s).")
        return results
