# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path

import yaml

from kgadget_lib.core.common import load_yaml_loader
from kgadget_lib.core.error import GadgetError
from kgadget_lib.core.logger import get_logger

from .interface import NodeResult, TraceSourceInterface

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()

# Path denoting standard input.
STDIN_PATH = "-"


class FileTraceSource(TraceSourceInterface):
    """
    Implementation of TraceSourceInterface reading a dumped trace list.

    The dump may be JSON (e.g. `kubectl get traces -o json`) or YAML
    and is read from a file or from standard input.
    """

    def __init__(self, path: str | Path):
        self._path = str(path)

    def getNodeResults(self, gadget: str) -> list[NodeResult]:
        content = self._read()

        try:
            document = yaml.load(content, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise GadgetError(
                f"Could not parse trace list from '{self._describe()}': {e}"
            ) from e

        return TraceSourceInterface._parseTraceList(document, gadget)

    def _read(self) -> str:
        """
        Read the raw trace list.

        Raises:
            GadgetError: If the file cannot be read.
        """
        if self._path == STDIN_PATH:
            logger.debug("Reading trace list from standard input.")
            return sys.stdin.read()

        logger.debug(f"Reading trace list from '{self._path}'.")
        try:
            return Path(self._path).read_text()
        except OSError as e:
            raise GadgetError(f"Could not read trace list '{self._path}': {e}.") from e

    def _describe(self) -> str:
        return "standard input" if self._path == STDIN_PATH else self._path
