from __future__ import annotations

import os
from logging import getLogger

import numpy as np

logger = getLogger(__name__)


class Runtime:
    def __init__(self, *, env_var: str = "CACHEMATRIX_SOLVE_TOL") -> None:
        self._env_var = env_var
        self._default_tol_cache: float | None = None

    def default_tol(self) -> float:
        if self._default_tol_cache is not None:
            return self._default_tol_cache

        tol = float(np.finfo(np.float64).eps)
        env = os.environ.get(self._env_var)
        if env:
            try:
                tol = float(env)
            except ValueError:
                logger.warning("Ignoring %s=%r: not a number", self._env_var, env)

        self._default_tol_cache = tol
        return tol

    def set_default_tol(self, value: float | None) -> None:
        # None re-reads the environment on next use.
        self._default_tol_cache = None if value is None else float(value)


_runtime = Runtime()


def get_default_tol() -> float:
    """Tolerance used by ``solve`` when the caller does not pass ``tol``."""
    return _runtime.default_tol()


def set_default_tol(value: float | None) -> None:
    """Override the process-wide default tolerance (``None`` resets it)."""
    _runtime.set_default_tol(value)
