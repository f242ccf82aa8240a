from __future__ import annotations

from typing import Any

import numpy as np

from .errors import InvalidInputError

_REAL_KINDS = "biuf"
_COMPLEX_KINDS = "c"


def _rows_from_matrix_like(candidate: Any) -> list[list[Any]] | None:
    rows_attr: Any = getattr(candidate, "rows", None)
    cols_attr: Any = getattr(candidate, "cols", None)
    get_attr: Any = getattr(candidate, "get", None)
    if not (callable(rows_attr) and callable(cols_attr) and callable(get_attr)):
        return None
    try:
        n_rows = int(rows_attr())
        n_cols = int(cols_attr())
        return [[get_attr(i, j) for j in range(n_cols)] for i in range(n_rows)]
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise InvalidInputError(f"Matrix-like object could not be read: {exc}") from exc


def _to_numeric_array(candidate: Any, *, what: str) -> np.ndarray:
    if isinstance(candidate, (str, bytes, bytearray)):
        raise InvalidInputError(f"{what} must be numeric, got {type(candidate).__name__}.")

    matrix_rows = _rows_from_matrix_like(candidate)
    if matrix_rows is not None:
        candidate = matrix_rows

    try:
        array = np.asarray(candidate)
    except (TypeError, ValueError) as exc:
        # Ragged nested sequences land here.
        raise InvalidInputError(f"{what} must be a rectangular numeric array: {exc}") from exc

    kind = array.dtype.kind
    if kind in _REAL_KINDS:
        return array.astype(np.float64)
    if kind in _COMPLEX_KINDS:
        return array.astype(np.complex128)
    if kind == "O":
        try:
            return array.astype(np.float64)
        except (TypeError, ValueError, OverflowError):
            # Python ints beyond float range overflow here.
            try:
                return array.astype(np.complex128)
            except (TypeError, ValueError, OverflowError) as exc:
                raise InvalidInputError(f"{what} contains non-numeric or out-of-range entries.") from exc
    raise InvalidInputError(f"{what} must be numeric, got dtype {array.dtype}.")


def _require_finite(array: np.ndarray, *, what: str) -> None:
    if not np.isfinite(array).all():
        raise InvalidInputError(f"{what} contains NaN or infinite entries.")


def coerce_square_matrix(candidate: Any) -> np.ndarray:
    """Validate ``candidate`` and return it as a fresh square float/complex array.

    Accepts NumPy arrays, nested sequences, and matrix-like objects exposing
    ``rows()``, ``cols()`` and ``get(i, j)``. Anything else, including the
    ``None`` placeholder of an empty cell, raises ``InvalidInputError``.
    """

    if candidate is None:
        raise InvalidInputError("No matrix has been set (got None).")

    array = _to_numeric_array(candidate, what="Matrix")
    if array.ndim != 2:
        raise InvalidInputError(f"Matrix must be 2-dimensional, got {array.ndim} dimension(s).")
    if array.size == 0:
        raise InvalidInputError("Matrix must not be empty.")
    if array.shape[0] != array.shape[1]:
        raise InvalidInputError(
            f"Matrix must be square (rows == columns), got shape {array.shape}."
        )
    _require_finite(array, what="Matrix")
    return array


def coerce_rhs(candidate: Any, n: int, *, dtype: Any = np.float64) -> np.ndarray:
    """Right-hand side for ``A @ X = B``; ``None`` means the n x n identity."""

    if candidate is None:
        return np.eye(n, dtype=dtype)

    array = _to_numeric_array(candidate, what="Right-hand side")
    if array.ndim not in (1, 2):
        raise InvalidInputError(
            f"Right-hand side must be a vector or a matrix, got {array.ndim} dimension(s)."
        )
    if array.shape[0] != n:
        raise InvalidInputError(
            f"Right-hand side has {array.shape[0]} row(s); expected {n} to match the matrix."
        )
    _require_finite(array, what="Right-hand side")
    return array
