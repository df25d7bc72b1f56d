# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import json
import subprocess

from kgadget_lib.core.config import CFG
from kgadget_lib.core.error import GadgetError
from kgadget_lib.core.logger import get_logger

from .interface import NodeResult, TraceSourceInterface

logger = get_logger(__name__)


class KubectlTraceSource(TraceSourceInterface):
    """
    Implementation of TraceSourceInterface querying the cluster using kubectl.

    Reads the trace resources of a gadget from the configured namespace.
    """

    def __init__(self, namespace: str | None = None):
        self._namespace = namespace or CFG.trace_source.namespace

    def getNodeResults(self, gadget: str) -> list[NodeResult]:
        command = self._buildCommand(gadget)
        logger.debug(" ".join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=CFG.timeouts.kubectl,
            )
        except FileNotFoundError as e:
            raise GadgetError(
                f"Could not run '{CFG.trace_source.kubectl_binary}': command not found."
            ) from e
        except subprocess.TimeoutExpired as e:
            raise GadgetError(
                f"Could not get traces of '{gadget}': kubectl timed out after {CFG.timeouts.kubectl} seconds."
            ) from e

        if result.returncode != 0:
            raise GadgetError(
                f"Could not get traces of '{gadget}': {result.stderr.strip()}."
            )

        try:
            document = json.loads(result.stdout) if result.stdout.strip() else None
        except json.JSONDecodeError as e:
            raise GadgetError(
                f"Could not parse the output of kubectl for '{gadget}': {e}."
            ) from e

        return TraceSourceInterface._parseTraceList(document, gadget)

    def _buildCommand(self, gadget: str) -> list[str]:
        """
        Assemble the kubectl command listing the traces of `gadget`.
        """
        return [
            CFG.trace_source.kubectl_binary,
            "get",
            CFG.trace_source.resource,
            "--namespace",
            self._namespace,
            "--selector",
            f"{CFG.trace_source.gadget_label}={gadget}",
            "--output",
            "json",
        ]
