"""
Logging configuration for cachematrix.

The package logs through loguru but is disabled on import, so cache hit and
miss records stay silent inside applications that never ask for them.
``setup_logging`` turns them back on and routes them to stderr and,
optionally, a file. Hits are reported at INFO, misses at DEBUG.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger


PACKAGE = "cachematrix"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    show_time: bool = True,
    show_level: bool = True,
) -> Any:
    """
    Enable cachematrix log records and send them to stderr.

    Existing handlers are replaced. The new sinks only accept records
    emitted from inside the package.

    Parameters
    ----------
    level : str, default="INFO"
        Logging level: DEBUG shows cache misses, INFO shows only hits
    log_file : Path | None, default=None
        If provided, also log to this file
    show_time : bool, default=True
        Whether to show timestamp in logs
    show_level : bool, default=True
        Whether to show log level in logs

    Returns
    -------
    logger
        Configured loguru logger instance

    Examples
    --------
    >>> from cachematrix import CacheMatrix, cache_solve, setup_logging
    >>> setup_logging(level="DEBUG")
    >>> cell = CacheMatrix([[2.0, 0.0], [0.0, 2.0]])
    >>> _ = cache_solve(cell)  # DEBUG | Cache miss: ...
    >>> _ = cache_solve(cell)  # INFO | getting cached data
    """
    logger.enable(PACKAGE)
    logger.remove()

    format_parts = []
    if show_time:
        format_parts.append("<green>{time:YYYY-MM-DD HH:mm:ss}</green>")
    if show_level:
        format_parts.append("<level>{level: <8}</level>")
    format_parts.append("<level>{message}</level>")

    format_str = " | ".join(format_parts)

    logger.add(
        sys.stderr,
        format=format_str,
        level=level,
        filter=PACKAGE,
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            format=format_str,
            level=level,
            filter=PACKAGE,
            rotation="10 MB",
            retention="7 days",
        )

    return logger
