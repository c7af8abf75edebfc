from __future__ import annotations

import logging
import sys

from enigma.core.trace import TraceEvent

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

trace_log = logging.getLogger("enigma.trace")


class _CliHandler(logging.StreamHandler):
    """Marks the handler configure_logging() owns."""


def configure_logging(verbose: bool = False) -> None:
    """
    Send `enigma` loggers to the current stderr, at DEBUG when verbose and
    WARNING otherwise. Calling it again replaces the previous handler.
    """
    logger = logging.getLogger("enigma")
    for h in list(logger.handlers):
        if isinstance(h, _CliHandler):
            logger.removeHandler(h)

    handler = _CliHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def log_trace(event: TraceEvent) -> None:
    """Trace sink that writes one DEBUG line per converted character."""
    trace_log.debug("%s", event.format())
