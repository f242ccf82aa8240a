"""Exceptions raised by the solve routine.

``cache_solve`` never raises these itself; they come out of ``solve`` and
propagate untouched.
"""
from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for cachematrix errors."""


class InvalidInputError(CacheMatrixError, ValueError):
    """The stored value is not a well-formed square numeric matrix."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix is exactly or computationally singular.

    ``rcond`` holds the reciprocal 1-norm condition number when it was
    estimated, and ``None`` when LAPACK hit an exact zero pivot.
    """

    def __init__(self, message: str, *, rcond: float | None = None) -> None:
        super().__init__(message)
        self.rcond = rcond
