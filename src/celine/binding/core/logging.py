# celine/binding/core/logging.py
"""
Logging setup for the binding runtime.

Installs one stdout handler on the root logger, emitting JSON lines by
default.
"""
from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO", *, json: bool = True) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if json:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(_FORMAT)
    else:
        formatter = logging.Formatter(_FORMAT)
    handler.setFormatter(formatter)

    # Avoid duplicate handlers in reload
    root.handlers = [handler]
