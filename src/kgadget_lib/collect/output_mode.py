# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Enumeration of the supported report output modes.
"""

from enum import Enum
from typing import Self

from kgadget_lib.core.error import GadgetError


class OutputMode(Enum):
    """
    Format of the rendered report.
    """

    # Human-readable table.
    COLUMNS = 1
    # Indented JSON document.
    JSON = 2
    # YAML document.
    YAML = 3

    def __str__(self):
        return self.name.lower()

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding OutputMode enum variant.

        Args:
            s (str): String representation of the output mode (case-insensitive).

        Returns:
            OutputMode variant.

        Raises:
            GadgetError if the string corresponds to no OutputMode.
        """
        try:
            return cls[s.upper()]
        except KeyError:
            raise GadgetError(f"Could not recognize an output mode '{s}'.")

    @classmethod
    def choices(cls) -> list[str]:
        """Return the string representations of all output modes."""
        return [str(mode) for mode in cls]
