# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Common machinery shared by all gadget result records.

Every record field is declared through `wire_field`, which attaches the key used
in the gadget's JSON output, the value type, and optional bounds. Decoding,
serialization, and the "empty value" predicate are all driven by this table.
"""

from dataclasses import Field, dataclass, field, fields
from typing import Any, Self

# Value types a record field may hold.
FIELD_KINDS = (int, str)


def wire_field(
    key: str, kind: type, minimum: int | None = None, maximum: int | None = None
) -> Any:
    """
    Declare a record field stored under `key` in the gadget output.

    Args:
        key (str): Name of the field in the serialized representation.
        kind (type): Value type of the field (`int` or `str`).
        minimum (int | None): Lowest accepted value of an integer field.
        maximum (int | None): Highest accepted value of an integer field.

    Returns:
        A dataclass field defaulting to the zero value of `kind`.
    """
    if kind not in FIELD_KINDS:
        raise TypeError(f"Unsupported record field type '{kind.__name__}'.")

    return field(
        default=kind(),
        metadata={"key": key, "kind": kind, "minimum": minimum, "maximum": maximum},
    )


def is_empty_value(kind: type, value: object) -> bool:
    """
    Check whether `value` is the empty value of a field of type `kind`.

    Integer zero and the empty string are empty; empty fields are omitted
    from the serialized representation of a record.
    """
    if kind is int:
        return value == 0
    if kind is str:
        return value == ""

    raise TypeError(f"Unsupported record field type '{kind.__name__}'.")


@dataclass(frozen=True)
class Record:
    """
    Base class for immutable records decoded from gadget output.
    """

    @classmethod
    def fromDict(cls, data: object) -> Self:
        """
        Construct a record from one decoded element of a gadget's output.

        Missing keys and `null` values take the zero value of the field,
        unknown keys are ignored.

        Args:
            data (object): The decoded element.

        Returns:
            Self: The constructed record.

        Raises:
            ValueError: If `data` is not a mapping or a value does not match
                the type or bounds of its field.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {_describe_type(data)}")

        init_kwargs = {}
        for f in fields(cls):
            key = f.metadata["key"]
            value = data.get(key)
            if value is None:
                continue

            init_kwargs[f.name] = _check_value(f, value)

        return cls(**init_kwargs)

    def toDict(self) -> dict[str, object]:
        """
        Convert the record into a dictionary keyed by the wire names.
        Fields holding their empty value are left out.

        Returns:
            dict[str, object]: Dictionary of the non-empty fields in declaration order.
        """
        result: dict[str, object] = {}

        for f in fields(self):
            value = getattr(self, f.name)
            if is_empty_value(f.metadata["kind"], value):
                continue
            result[f.metadata["key"]] = value

        return result


def _check_value(f: Field, value: object) -> object:
    """
    Validate a decoded value against its field declaration.
    """
    kind = f.metadata["kind"]
    key = f.metadata["key"]

    # bool is a subclass of int but never a valid integer field
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(
            f"field '{key}' must be {_describe_kind(kind)}, got {_describe_type(value)}"
        )

    if kind is int:
        minimum, maximum = f.metadata["minimum"], f.metadata["maximum"]
        if (minimum is not None and value < minimum) or (
            maximum is not None and value > maximum
        ):
            raise ValueError(
                f"field '{key}' is out of range [{minimum}, {maximum}]: {value}"
            )

    return value


def _describe_kind(kind: type) -> str:
    return "an integer" if kind is int else "a string"


def _describe_type(value: object) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "a boolean"
        case int():
            return "an integer"
        case float():
            return "a number"
        case str():
            return "a string"
        case list():
            return "an array"
        case dict():
            return "an object"

    return type(value).__name__
