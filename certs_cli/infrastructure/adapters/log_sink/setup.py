"""Logging configuration for the command line."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import SysLogHandler
from typing import TextIO

APP_LOGGER_NAME = "certs_cli"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(funcName)s - %(levelname).4s %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
SYSLOG_ADDRESS = "/dev/log"

logger = logging.getLogger(__name__)


def _create_syslog_handler(ident: str) -> logging.Handler | None:
    """Create a handler for the local syslog daemon, or None if unavailable."""
    # SysLogHandler swallows connection errors, so check the socket first
    if sys.platform == "win32" or not os.path.exists(SYSLOG_ADDRESS):
        return None

    try:
        handler = SysLogHandler(address=SYSLOG_ADDRESS)
    except OSError:
        return None

    handler.ident = f"{ident}: "
    return handler


def configure_logging(
    *,
    debug: bool = False,
    syslog_ident: str = "openshift-monitoring-cli",
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the application logger.

    Lines always go to stdout. In debug mode the level drops to DEBUG and
    output is mirrored to syslog when it can be opened. Calling this again
    replaces the previously installed handlers.

    Args:
        debug: Enable debug-level output and syslog mirroring.
        syslog_ident: Identifier prefixed to syslog messages.
        stream: Stream for the console handler, stdout by default.

    Returns:
        The configured application logger.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(stream or sys.stdout)
    console.setFormatter(formatter)
    app_logger.addHandler(console)
    app_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if debug:
        syslog = _create_syslog_handler(syslog_ident)
        if syslog is None:
            logger.warning("Wasn't able to initialize syslog, logging to stdout only.")
        else:
            syslog.setFormatter(formatter)
            app_logger.addHandler(syslog)

    return app_logger
