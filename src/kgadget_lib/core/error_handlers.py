# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from .logger import get_logger
from .repeater import Repeater

logger = get_logger(__name__)


def handle_decode_error(
    exception: BaseException,
    metadata: Repeater,
) -> None:
    """
    Report a node whose results could not be decoded and continue with the others.
    """
    logger.warning(exception)
    logger.debug(
        f"Decoding failed for {len(metadata.encountered_errors)} of {len(metadata.items)} node(s) so far."
    )
