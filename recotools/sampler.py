"""Bounds-checked, zero-padded access to a 2D grid.

Every interpolation tap and every ray sample goes through a `Sampler`. Indices
outside the grid read as ``0.0`` instead of raising or clamping, so rays that
leave the image simply stop contributing.
"""

import math

from .utils import as_grid


class Sampler:
    """Read-only view of a grid with an optional logical transpose.

    Parameters
    ----------
    grid : array-like
        Rectangular 2D grid. Validated with :func:`recotools.utils.as_grid`.
    transpose : bool, optional
        If True, ``get(a, b)`` reads ``grid[b][a]`` (default: False).

    Examples
    --------
    >>> s = Sampler([[1, 2], [3, 4]], transpose=True)
    >>> s.get(0, 1)
    3.0
    >>> s.get(3, 3)
    0.0
    """

    __slots__ = ("_grid", "_n_rows", "_n_cols", "transpose")

    def __init__(self, grid, transpose=False):
        self._grid = as_grid(grid)
        self._n_rows, self._n_cols = self._grid.shape
        self.transpose = bool(transpose)

    @property
    def grid(self):
        """The underlying (non-transposed) grid."""
        return self._grid

    @property
    def shape(self):
        """Logical shape as seen through ``get``."""
        if self.transpose:
            return self._n_cols, self._n_rows
        return self._n_rows, self._n_cols

    def get(self, a, b):
        """Return the value at logical index ``(a, b)`` or ``0.0`` outside the grid.

        Float indices are floored, so ``1.0`` reads index 1 and ``-0.5`` stays
        out of range. Non-finite indices read as ``0.0``.
        """
        if not (math.isfinite(a) and math.isfinite(b)):
            return 0.0
        a, b = math.floor(a), math.floor(b)
        if self.transpose:
            a, b = b, a
        if 0 <= a < self._n_rows and 0 <= b < self._n_cols:
            return float(self._grid[a, b])
        return 0.0

    __call__ = get

    def __repr__(self):
        return f"Sampler(shape={self.shape}, transpose={self.transpose})"


def make_sampler(grid, transpose=False):
    """Create a :class:`Sampler` bound to `grid`."""
    return Sampler(grid, transpose=transpose)
