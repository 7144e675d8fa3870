"""Type definitions for cachematrix.

Type aliases:
    - Matrix: two-dimensional numeric array

Protocols:
    - Inverter: interface of the dense-matrix inversion routine that
      ``cache_solve`` delegates to
"""

from __future__ import annotations

from typing import Any, Protocol, TypeAlias, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike


# ============================================================================
# Array Type Aliases
# ============================================================================

Matrix: TypeAlias = np.ndarray  # [N, N] - square numeric matrix
MatrixLike: TypeAlias = ArrayLike  # Anything np.asarray turns into a Matrix


# ============================================================================
# Protocols
# ============================================================================


@runtime_checkable
class Inverter(Protocol):
    """Protocol for dense-matrix inversion routines.

    Any callable taking a square matrix (plus optional method parameters)
    and returning its inverse satisfies this protocol, e.g.
    ``scipy.linalg.inv`` or ``numpy.linalg.inv``.

    Implementations raise for non-square or singular input; callers must
    not catch or translate those errors.

    Example:
        >>> import scipy.linalg
        >>> isinstance(scipy.linalg.inv, Inverter)
        True
    """

    def __call__(self, matrix: Matrix, *args: Any, **kwargs: Any) -> Matrix:
        """Return the inverse of ``matrix``."""
        ...


__all__ = [
    "Matrix",
    "MatrixLike",
    "Inverter",
]
