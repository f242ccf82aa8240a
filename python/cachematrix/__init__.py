"""Matrices that cache their own inverse."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version
from logging import NullHandler, getLogger
from typing import Any

from ._internal.cell import CacheMatrix
from ._internal.errors import (
    CacheMatrixError,
    InvalidInputError,
    SingularMatrixError,
)
from ._internal.linalg_cache import cache_solve
from ._internal.runtime import get_default_tol, set_default_tol
from ._internal.solve import solve
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixOptionsWarning,
)

try:
    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "unknown"

getLogger(__name__).addHandler(NullHandler())


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Create a ``CacheMatrix`` holding ``x`` (``None`` leaves it unset)."""
    return CacheMatrix(x)


__all__ = [
    "CacheMatrix",
    "CacheMatrixError",
    "CacheMatrixOptionsWarning",
    "CacheMatrixWarning",
    "InvalidInputError",
    "SingularMatrixError",
    "cache_solve",
    "get_default_tol",
    "make_cache_matrix",
    "set_default_tol",
    "solve",
]
