#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/utils/timing.py
"""Timing helpers for debug logging."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the wrapped block took, at DEBUG level.

    Nothing is measured when ``logger`` is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Parsing (wikitext)"):
        ...     root = parser.parse(document)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.3f}s")
