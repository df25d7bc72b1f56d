# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Report of the processes running on the cluster nodes.

Results of the process-collector gadget are aggregated across nodes, reduced
to one row per process unless all threads are requested, sorted, and rendered
by `ProcessPresenter`.
"""

from .filter import filter_threads
from .presenter import ProcessPresenter

__all__ = ["ProcessPresenter", "filter_threads"]
