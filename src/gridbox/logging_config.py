"""Logging setup for applications built on gridbox.

Library modules only create loggers under the ``gridbox`` namespace; handlers
are attached here, on request, never on import.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Route gridbox log records to a stream and optionally a file.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Threshold for the ``gridbox`` logger and its handlers
        log_file: Optional path; the file is truncated on setup
        stream: Console stream, stdout when omitted

    Returns:
        The configured ``gridbox`` logger
    """
    logger = logging.getLogger("gridbox")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [
        logging.StreamHandler(stream if stream is not None else sys.stdout)
    ]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}")
    return logger
