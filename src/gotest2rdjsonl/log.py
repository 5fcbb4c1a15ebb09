"""Logging setup.

stdout carries the rdjsonl stream, so every log record goes to stderr.
"""

from __future__ import annotations

import logging
import sys

from .config import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
