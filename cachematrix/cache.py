"""
Cache cell holding a matrix and its memoized inverse.

This module provides CacheMatrix, a small stateful object that owns a
square matrix together with a cached copy of its inverse. Replacing the
matrix always drops the cached inverse, so a stored inverse always belongs
to the matrix currently held.

The inverse itself is never computed here; see ``cachematrix.solve``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from cachematrix.types import Matrix, MatrixLike


class CacheState(Enum):
    """State of a cache cell."""

    INVALID = "invalid"  # no cached inverse
    VALID = "valid"  # cached inverse matches the current matrix


def _frozen_copy(value: MatrixLike) -> Matrix:
    """Copy ``value`` into a fresh array and mark it read-only."""
    array = np.array(value, copy=True)
    array.flags.writeable = False
    return array


class CacheMatrix:
    """
    Matrix wrapper that can cache its inverse.

    The cell holds exactly one matrix and at most one inverse. Values are
    copied on the way in and handed out as read-only arrays, so the only
    way to change the matrix is ``set_matrix``, which invalidates the
    cached inverse.

    No shape or invertibility checks are made. A non-square or singular
    matrix is only rejected later by the inversion routine.

    Attributes:
        state (CacheState): INVALID until an inverse is stored, VALID after
        is_cached (bool): Whether an inverse is currently stored
        shape (tuple): Shape of the held matrix

    Example:
        >>> cell = CacheMatrix([[1.0, 3.0], [2.0, 4.0]])
        >>> cell.state
        <CacheState.INVALID: 'invalid'>
        >>> cell.set_cached_inverse([[-2.0, 1.5], [1.0, -0.5]])
        >>> cell.is_cached
        True
        >>> cell.set_matrix([[1.0, 0.0], [0.0, 1.0]])
        >>> cell.get_cached_inverse() is None
        True
    """

    def __init__(self, initial: Optional[MatrixLike] = None) -> None:
        """
        Initialize cache cell.

        Args:
            initial: Matrix to hold. Defaults to an empty 0 x 0 matrix.
        """
        if initial is None:
            initial = np.empty((0, 0))
        self._matrix: Matrix = _frozen_copy(initial)
        self._inverse: Optional[Matrix] = None

    def set_matrix(self, value: MatrixLike) -> None:
        """
        Replace the held matrix and drop the cached inverse.

        The cache is cleared even when ``value`` equals the current matrix.
        """
        self._matrix = _frozen_copy(value)
        self._inverse = None

    def get_matrix(self) -> Matrix:
        """Return a read-only view of the held matrix.

        A view of a read-only array cannot be made writeable again, so the
        caller has no way to change the matrix behind ``set_matrix``.
        """
        return self._matrix.view()

    def set_cached_inverse(self, inverse: MatrixLike) -> None:
        """
        Store ``inverse`` as the cached inverse of the current matrix.

        The value is trusted; it is not checked against the held matrix.
        """
        self._inverse = _frozen_copy(inverse)

    def get_cached_inverse(self) -> Optional[Matrix]:
        """Return a read-only view of the cached inverse, or None if not computed."""
        if self._inverse is None:
            return None
        return self._inverse.view()

    @property
    def state(self) -> CacheState:
        """Whether the cell currently holds an inverse of its matrix."""
        if self._inverse is None:
            return CacheState.INVALID
        return CacheState.VALID

    @property
    def is_cached(self) -> bool:
        """True when an inverse is stored."""
        return self.state is CacheState.VALID

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the held matrix."""
        return self._matrix.shape

    def __repr__(self) -> str:
        return f"CacheMatrix(shape={self.shape}, state={self.state.value})"
