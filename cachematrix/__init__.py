"""cachematrix: memoized inverses of square matrices"""

from __future__ import annotations

from loguru import logger


__version__ = "0.1.0"

from cachematrix.cache import CacheMatrix, CacheState
from cachematrix.solve import CACHE_HIT_MESSAGE, cache_solve
from cachematrix.types import Inverter, Matrix
from cachematrix.utils.logging_config import setup_logging


# Silent until the application opts in via setup_logging() or logger.enable()
logger.disable("cachematrix")


__all__ = [
    "CacheMatrix",
    "CacheState",
    "cache_solve",
    "CACHE_HIT_MESSAGE",
    "Inverter",
    "Matrix",
    "setup_logging",
    "__version__",
]
