# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Typed records decoded from the output of collector gadgets.

`ProcessRecord` describes one OS thread seen by the process-collector gadget,
`SocketRecord` one socket seen by the socket-collector gadget. Both derive from
`Record`, which maps fields to their serialized keys and omits empty values
when converting records back into dictionaries.
"""

from .process import ProcessRecord
from .record import Record, is_empty_value, wire_field
from .sockets import SocketRecord

__all__ = [
    "ProcessRecord",
    "Record",
    "SocketRecord",
    "is_empty_value",
    "wire_field",
]
