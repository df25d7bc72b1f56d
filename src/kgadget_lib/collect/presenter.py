# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import json
from abc import ABC, abstractmethod

import tabulate as tabulate_module
import yaml
from tabulate import Line, TableFormat, tabulate

from kgadget_lib.core.common import load_yaml_dumper
from kgadget_lib.core.config import CFG
from kgadget_lib.core.error import SerializationError
from kgadget_lib.core.logger import get_logger
from kgadget_lib.records import Record

from .output_mode import OutputMode

logger = get_logger(__name__)

Dumper: type[yaml.Dumper] = load_yaml_dumper()


class CollectorPresenter(ABC):
    """
    Present a sorted collection of gadget records as a table or a structured document.

    Subclasses define the columns of the table.
    """

    def __init__(self, records: list[Record]):
        """
        Initialize the presenter.

        Args:
            records (list[Record]): Records to present, already sorted.
        """
        self._records = records

    def dump(self, mode: OutputMode) -> None:
        """
        Render the records and write them to stdout in a single write.

        Raises:
            SerializationError: If a structured document cannot be created.
                Nothing is written in that case.
        """
        print(self.render(mode), end="")

    def render(self, mode: OutputMode) -> str:
        """
        Render the records using the given output mode.

        Returns:
            str: The complete report, terminated by a newline.
        """
        match mode:
            case OutputMode.JSON:
                return self.toJson()
            case OutputMode.YAML:
                return self.toYaml()
            case OutputMode.COLUMNS:
                return self.createTable()

        raise ValueError(f"Unsupported output mode '{mode}'.")

    def toJson(self) -> str:
        """
        Serialize the records into an indented JSON array.

        Raises:
            SerializationError: If the records cannot be serialized.
        """
        try:
            document = json.dumps(
                self._toDicts(),
                indent=CFG.collector_presenter.json_indent,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Error marshalling results: {e}") from e

        return document + "\n"

    def toYaml(self) -> str:
        """
        Serialize the records into a YAML sequence.

        Raises:
            SerializationError: If the records cannot be serialized.
        """
        try:
            return yaml.dump(
                self._toDicts(),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                indent=CFG.collector_presenter.yaml_indent,
                Dumper=Dumper,
            )
        except yaml.YAMLError as e:
            raise SerializationError(f"Error marshalling results: {e}") from e

    def createTable(self) -> str:
        """
        Build the tabular report: a header row followed by one row per record.

        Notes:
            - Uses `tabulate` with a compact, borderless format
              separated by `column_padding` spaces.
            - All cells are treated as strings; no number parsing is performed.
            - Leading and trailing whitespace inside cells is kept, except
              at the end of a line, which is stripped together with the padding.
        """
        rows = [self._createRow(record) for record in self._records]

        preserve_whitespace = tabulate_module.PRESERVE_WHITESPACE
        tabulate_module.PRESERVE_WHITESPACE = True
        try:
            table = tabulate(
                rows,
                headers=self._getHeaders(),
                tablefmt=CollectorPresenter._compactTableFormat(),
                stralign="left",
                disable_numparse=True,
            )
        finally:
            tabulate_module.PRESERVE_WHITESPACE = preserve_whitespace

        return "\n".join(line.rstrip() for line in table.splitlines()) + "\n"

    @abstractmethod
    def _getHeaders(self) -> list[str]:
        """
        Get the column headers of the table.
        """
        pass

    @abstractmethod
    def _createRow(self, record: Record) -> list[str]:
        """
        Create a single row of the table.

        Args:
            record (Record): Record to show information for.

        Returns:
            list[str]: Cell values, one per header.
        """
        pass

    def _toDicts(self) -> list[dict[str, object]]:
        return [record.toDict() for record in self._records]

    @staticmethod
    def _compactTableFormat() -> TableFormat:
        """
        Table format without borders, columns separated by configured padding.
        """
        separator = " " * CFG.collector_presenter.column_padding
        return TableFormat(
            lineabove=Line("", "", "", ""),
            linebelowheader="",
            linebetweenrows="",
            linebelow=Line("", "", "", ""),
            headerrow=("", separator, ""),
            datarow=("", separator, ""),
            padding=0,
            with_header_hide=["lineabove", "linebelow"],
        )
