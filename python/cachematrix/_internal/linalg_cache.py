from __future__ import annotations

import warnings
from logging import getLogger
from typing import Any

from .cell import CacheMatrix
from .solve import solve
from .warnings import CacheMatrixOptionsWarning

logger = getLogger(__name__)

CACHE_HIT_MESSAGE = "getting cached data"


def cache_solve(cell: CacheMatrix, *args: Any, **kwargs: Any) -> Any:
    """Return the inverse of the matrix held by ``cell``, computing it at most once.

    On a cache hit the stored result is returned unchanged and a
    ``"getting cached data"`` record is logged at INFO. Otherwise the current
    matrix is passed to ``solve`` together with ``args``/``kwargs`` and the
    result is cached on the cell before being returned.

    The package only installs a ``NullHandler``, so the cache-hit record is
    silent until the caller configures ``logging`` (for example
    ``logging.basicConfig(level=logging.INFO)``). Use
    ``cell.has_cached_inverse()`` to tell a hit from a miss without logging.

    The cache is not keyed on solve options: options given on a cache hit are
    not applied, and a ``CacheMatrixOptionsWarning`` says so.

    Errors raised by ``solve`` (``InvalidInputError``, ``SingularMatrixError``)
    propagate unchanged and leave the cell's cache empty.
    """

    inverse = cell.get_cached_inverse()
    if inverse is not None:
        logger.info(CACHE_HIT_MESSAGE)
        if args or kwargs:
            warnings.warn(
                "solve options ignored: returning the result cached for this matrix",
                CacheMatrixOptionsWarning,
                stacklevel=2,
            )
        return inverse

    matrix = cell.get_matrix()
    inverse = solve(matrix, *args, **kwargs)
    cell.set_cached_inverse(inverse)
    return inverse
