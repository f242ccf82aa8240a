from __future__ import annotations

from logging import getLogger
from typing import Any

import numpy as np

from .coercion import coerce_rhs, coerce_square_matrix
from .errors import SingularMatrixError
from .runtime import get_default_tol

logger = getLogger(__name__)


def reciprocal_condition(matrix: np.ndarray, inverse: np.ndarray | None = None) -> float:
    """Reciprocal 1-norm condition number, 0.0 when it overflows.

    Pass ``inverse`` when it is already known to skip refactorizing ``matrix``.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        if inverse is None:
            cond = float(np.linalg.cond(matrix, 1))
        else:
            cond = float(np.linalg.norm(matrix, 1)) * float(np.linalg.norm(inverse, 1))
    if not np.isfinite(cond) or cond == 0.0:
        return 0.0
    return 1.0 / cond


def solve(a: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Solve ``a @ x = b`` for ``x``; with ``b`` omitted this is the inverse of ``a``.

    ``a`` may be anything the coercion layer accepts (NumPy array, nested
    sequences, matrix-like object). ``b`` may be a length-n vector or an
    n x k matrix. When the reciprocal condition number of ``a`` falls below
    ``tol`` (default: ``get_default_tol()``) the system is treated as
    computationally singular; ``tol <= 0`` disables that check.

    Raises ``InvalidInputError`` for malformed operands and
    ``SingularMatrixError`` for singular ``a``. The result is read-only.
    """

    matrix = coerce_square_matrix(a)
    n = matrix.shape[0]
    rhs = coerce_rhs(b, n, dtype=matrix.dtype)
    if tol is None:
        tol = get_default_tol()

    logger.debug("Solving %dx%d system against rhs of shape %s", n, n, rhs.shape)
    try:
        x = np.linalg.solve(matrix, rhs)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"Matrix is exactly singular: {exc}") from exc

    if tol > 0:
        rcond = reciprocal_condition(matrix, x if b is None else None)
        if rcond < tol:
            raise SingularMatrixError(
                f"System is computationally singular: reciprocal condition number = {rcond:g}",
                rcond=rcond,
            )

    x.flags.writeable = False
    return x
