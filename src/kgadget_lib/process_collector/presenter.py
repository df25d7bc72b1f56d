# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from kgadget_lib.collect.presenter import CollectorPresenter
from kgadget_lib.records import ProcessRecord


class ProcessPresenter(CollectorPresenter):
    """
    Present processes (or threads) collected from the cluster nodes.
    """

    def __init__(self, records: list[ProcessRecord], all_threads: bool):
        """
        Initialize the presenter.

        Args:
            records (list[ProcessRecord]): Sorted records to present.
            all_threads (bool): Show the thread group ID column for per-thread rows.
        """
        super().__init__(records)
        self._all_threads = all_threads

    def _getHeaders(self) -> list[str]:
        if self._all_threads:
            return ["NAMESPACE", "POD", "CONTAINER", "COMM", "TGID", "PID"]
        return ["NAMESPACE", "POD", "CONTAINER", "COMM", "PID"]

    def _createRow(self, record: ProcessRecord) -> list[str]:
        row = [record.namespace, record.pod, record.container, record.command]
        if self._all_threads:
            row.append(str(record.tgid))
        row.append(str(record.tid))

        return row
