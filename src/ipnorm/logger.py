"""Logging utilities for ipnorm.

Usage:
    from ipnorm.logger import get_logger
    get_logger("DEBUG").debug("message")

The level comes from resolved settings (--log-level or IPNORM_LOG).
The parser itself never logs; only the CLI does.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to the current sys.stderr at emit time.

    A plain StreamHandler keeps the stream it was created with. Click's
    CliRunner and pytest's capsys replace sys.stderr per invocation, so
    the stream is looked up on every emit and assignments are ignored.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(level: str = "WARNING") -> logging.Logger:
    """Returns the "ipnorm" logger set to level, writing to stderr.

    Safe to call repeatedly; the handler is installed once.
    """
    logger = logging.getLogger("ipnorm")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not any(isinstance(h, StderrHandler) for h in logger.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
