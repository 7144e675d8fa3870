"""
Cache-aware matrix inversion.

``cache_solve`` returns the inverse held by a CacheMatrix when one is
cached, and otherwise computes it with a dense-matrix inversion routine
and stores it in the cell.

Typical usage:
    >>> cell = CacheMatrix([[1.0, 3.0], [2.0, 4.0]])
    >>> cache_solve(cell)  # computes and caches
    array([[-2. ,  1.5],
           [ 1. , -0.5]])
    >>> cache_solve(cell)  # logs "getting cached data"
    array([[-2. ,  1.5],
           [ 1. , -0.5]])
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger
from scipy import linalg

from cachematrix.cache import CacheMatrix
from cachematrix.types import Inverter, Matrix


CACHE_HIT_MESSAGE = "getting cached data"


def cache_solve(
    cell: CacheMatrix,
    *args: Any,
    inverter: Optional[Inverter] = None,
    **options: Any,
) -> Matrix:
    """
    Return the inverse of the matrix held by ``cell``, computing it at most once.

    Parameters
    ----------
    cell : CacheMatrix
        Cell holding the matrix and its (possibly absent) cached inverse
    *args : Any
        Extra positional arguments passed to ``inverter`` on a cache miss
    inverter : Inverter | None, default=None
        Inversion routine. Defaults to ``scipy.linalg.inv``
    **options : Any
        Extra keyword arguments passed to ``inverter`` on a cache miss,
        e.g. ``check_finite=False`` for ``scipy.linalg.inv``

    Returns
    -------
    np.ndarray
        Inverse of the held matrix (read-only)

    Raises
    ------
    Exception
        Whatever ``inverter`` raises for a non-square or singular matrix
        (``LinAlgError``, ``ValueError``). The error is not translated and
        the cell keeps no cached inverse.

    Notes
    -----
    On a hit the cell is not modified and ``args``/``options`` are ignored.
    """
    inverse = cell.get_cached_inverse()
    if inverse is not None:
        logger.info(CACHE_HIT_MESSAGE)
        return inverse

    if inverter is None:
        inverter = linalg.inv

    matrix = cell.get_matrix()
    logger.debug(f"Cache miss: inverting matrix of shape {matrix.shape}")
    cell.set_cached_inverse(inverter(matrix, *args, **options))
    return cell.get_cached_inverse()
