from __future__ import annotations

from logging import getLogger
from typing import Any

logger = getLogger(__name__)


def _describe_shape(value: Any) -> str:
    shape = getattr(value, "shape", None)
    if isinstance(shape, tuple):
        return "x".join(str(int(d)) for d in shape) or "scalar"
    if value is None:
        return "unset"
    try:
        return f"{len(value)} row(s)"
    except TypeError:
        return type(value).__name__


class CacheMatrix:
    """A matrix value that can hold its own cached inverse.

    The cell stores whatever it is given; validation happens when the inverse
    is requested. Replacing the matrix through ``set_matrix`` (or the
    ``matrix`` property) always drops the cached inverse.
    """

    __slots__ = ("_matrix", "_inverse")

    def __init__(self, x: Any = None) -> None:
        self._matrix = x
        self._inverse: Any = None

    def set_matrix(self, value: Any) -> None:
        self._matrix = value
        if self._inverse is not None:
            logger.debug("Matrix replaced; dropping cached inverse")
        self._inverse = None

    def get_matrix(self) -> Any:
        return self._matrix

    def set_cached_inverse(self, inverse: Any) -> None:
        # Must only be given the inverse of the matrix currently stored.
        self._inverse = inverse

    def get_cached_inverse(self) -> Any:
        """Return the cached inverse, or ``None`` when none is stored."""
        return self._inverse

    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def matrix(self) -> Any:
        return self.get_matrix()

    @matrix.setter
    def matrix(self, value: Any) -> None:
        self.set_matrix(value)

    def __repr__(self) -> str:
        cached = "cached" if self.has_cached_inverse() else "not cached"
        return f"CacheMatrix(matrix={_describe_shape(self._matrix)}, inverse {cached})"
