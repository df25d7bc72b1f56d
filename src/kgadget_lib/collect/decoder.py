# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import json

from kgadget_lib.core.error import DecodeError
from kgadget_lib.core.logger import get_logger
from kgadget_lib.records import Record

logger = get_logger(__name__)


def decode_fragment(
    fragment: str | None, record_type: type[Record], node: str = "unknown"
) -> list[Record]:
    """
    Decode a single node's output into a list of records.

    The fragment holds a JSON array of objects. An empty fragment or `null`
    means the node produced no results.

    Args:
        fragment (str | None): Raw output of the gadget on the node.
        record_type (type[Record]): Type of the records to decode.
        node (str): Name of the node, used in error messages.

    Returns:
        list[Record]: Decoded records in the order they appear in the fragment.

    Raises:
        DecodeError: If the fragment is not a JSON array of valid records.
    """
    if fragment is None or not fragment.strip():
        logger.debug(f"Node '{node}' produced no output.")
        return []

    try:
        data = json.loads(fragment)
    except json.JSONDecodeError as e:
        raise DecodeError(node, f"invalid JSON: {e}") from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise DecodeError(node, "expected an array of records")

    records = []
    for i, item in enumerate(data):
        try:
            records.append(record_type.fromDict(item))
        except ValueError as e:
            raise DecodeError(node, f"record {i}: {e}") from e

    logger.debug(f"Decoded {len(records)} record(s) from node '{node}'.")
    return records
