# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import NoReturn

import click

from kgadget_lib.collect import OutputMode, collect_sorted_records, warn_if_partial
from kgadget_lib.collect.options import add_common_options
from kgadget_lib.core.click_format import GNUHelpColorsCommand
from kgadget_lib.core.config import CFG
from kgadget_lib.core.error import GadgetError, SerializationError
from kgadget_lib.core.logger import get_logger
from kgadget_lib.records import SocketRecord
from kgadget_lib.socket_collector.presenter import SocketPresenter
from kgadget_lib.trace import get_trace_source

logger = get_logger(__name__)

# Name of the gadget producing the results.
GADGET = "socket-collector"


@click.command(
    "socket-collector",
    short_help="Gather information about network sockets.",
    help="Gather information about the network sockets open on the cluster nodes.",
    cls=GNUHelpColorsCommand,
)
@add_common_options
def socket_collector(output: str, input: str | None, namespace: str | None) -> NoReturn:
    try:
        mode = OutputMode.fromStr(output)
        results = get_trace_source(input, namespace).getNodeResults(GADGET)

        records, collector = collect_sorted_records(results, SocketRecord)

        SocketPresenter(records).dump(mode)
        warn_if_partial(collector)
        sys.exit(0)
    except GadgetError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except SerializationError as e:
        logger.critical(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
