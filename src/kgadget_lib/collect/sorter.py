# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Deterministic ordering of collected records.

Each record type has an explicit, ordered tuple of sort keys. Keys are compared
left to right; a later key only decides when all earlier keys are equal.
Strings are compared byte-wise (as UTF-8), integers numerically.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kgadget_lib.records import ProcessRecord, Record, SocketRecord


@dataclass(frozen=True)
class SortKey:
    """
    A single named component of a record's sort order.
    """

    # Name of the key, used for diagnostics.
    name: str

    # Function extracting the compared value from a record.
    extract: Callable[[Record], int | str]

    def value(self, record: Record) -> int | bytes:
        """
        Return the comparable value of this key for `record`.
        """
        value = self.extract(record)
        if isinstance(value, str):
            return value.encode("utf-8", errors="surrogatepass")
        return value

    def compare(self, a: Record, b: Record) -> int:
        """
        Compare two records by this key.

        Returns:
            int: Negative if `a` sorts first, positive if `b` sorts first, zero if equal.
        """
        va, vb = self.value(a), self.value(b)
        return (va > vb) - (va < vb)


def _attribute(name: str) -> SortKey:
    return SortKey(name, lambda record: getattr(record, name))


# Sort order of process records.
PROCESS_SORT_KEYS: tuple[SortKey, ...] = (
    _attribute("namespace"),
    _attribute("pod"),
    _attribute("container"),
    _attribute("command"),
    _attribute("tgid"),
    _attribute("tid"),
)

# Sort order of socket records.
# Status intentionally precedes the addresses and ports.
SOCKET_SORT_KEYS: tuple[SortKey, ...] = (
    _attribute("node"),
    _attribute("namespace"),
    _attribute("pod"),
    _attribute("protocol"),
    _attribute("status"),
    _attribute("local_address"),
    _attribute("remote_address"),
    _attribute("local_port"),
    _attribute("remote_port"),
)

_SORT_KEYS_BY_TYPE: dict[type[Record], tuple[SortKey, ...]] = {
    ProcessRecord: PROCESS_SORT_KEYS,
    SocketRecord: SOCKET_SORT_KEYS,
}


def get_sort_keys(record_type: type[Record]) -> tuple[SortKey, ...]:
    """
    Return the sort keys defined for the given record type.

    Raises:
        KeyError: If no sort order is defined for `record_type`.
    """
    return _SORT_KEYS_BY_TYPE[record_type]


def compare(a: Record, b: Record, keys: Iterable[SortKey]) -> int:
    """
    Compare two records by folding `keys` from left to right.

    Returns:
        int: Result of the first key that distinguishes the records, or zero.
    """
    for key in keys:
        if result := key.compare(a, b):
            return result
    return 0


def sort_key(record: Record, keys: Iterable[SortKey]) -> tuple[int | bytes, ...]:
    """
    Build the tuple of key values for `record`.

    Ordering records by this tuple is equivalent to ordering them using `compare`.
    """
    return tuple(key.value(record) for key in keys)


def sort_records(records: Iterable[Record], keys: Iterable[SortKey]) -> list[Record]:
    """
    Return a new list containing `records` in the order defined by `keys`.
    """
    keys = tuple(keys)
    return sorted(records, key=lambda record: sort_key(record, keys))
