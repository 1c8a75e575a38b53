"""Numba kernels for 2D parallel beam sinogram synthesis.

This module contains the compiled sampling taps (zero-padded lookup, nearest
neighbour and linear interpolation) and the Joseph-style sweep kernel that
accumulates them along parallel rays.
"""

import math
from numba import prange

from ..constants import _JIT_DECORATOR, _PARALLEL_DECORATOR

# Interpolation modes understood by the kernels
NEAREST_MODE = 0
LINEAR_MODE = 1


# ============================================================================
# Sampling Taps
# ============================================================================

@_JIT_DECORATOR
def _sample(grid, transpose, a, b):
    """Zero-padded lookup of ``grid[a, b]`` (``grid[b, a]`` when transposed)."""
    n_rows, n_cols = grid.shape
    if transpose:
        a, b = b, a
    if 0 <= a < n_rows and 0 <= b < n_cols:
        return grid[a, b]
    return 0.0


@_JIT_DECORATOR
def _nearest_tap(grid, transpose, i, j):
    """Nearest neighbour along the second index, rounding halves up."""
    j0 = math.floor(j)
    if j - j0 >= 0.5:
        j0 += 1
    return _sample(grid, transpose, i, int(j0))


@_JIT_DECORATOR
def _linear_tap(grid, transpose, i, j):
    """Linear interpolation along the second index."""
    j0 = math.floor(j)
    frac = j - j0
    lo = int(j0)
    return _sample(grid, transpose, i, lo) * (1.0 - frac) + _sample(grid, transpose, i, lo + 1) * frac


@_JIT_DECORATOR
def _tap(grid, transpose, i, j, mode):
    if mode == NEAREST_MODE:
        return _nearest_tap(grid, transpose, i, j)
    return _linear_tap(grid, transpose, i, j)


# ============================================================================
# Single Ray Accumulation
# ============================================================================

@_JIT_DECORATOR
def _ray_sum(image, cos_a, sin_a, t, mode):
    """Sum interpolated samples along one parallel ray.

    Parameters
    ----------
    image : numpy.ndarray
        Emission image, shape (rows, cols).
    cos_a, sin_a : float
        Cosine and sine of the view angle.
    t : float
        Signed ray offset along the detector axis ``(cos_a, sin_a)``, in pixels.
    mode : int
        `NEAREST_MODE` or `LINEAR_MODE`.

    Returns
    -------
    float
        Sum of one sample per crossed row (or column).

    Notes
    -----
    The ray is ``p(s) = t * (cos_a, sin_a) + s * (-sin_a, cos_a)`` in
    coordinates centred on the middle of the pixel grid. It is stepped one
    pixel at a time along whichever image axis it is closer to:

      - ``|cos_a| >= |sin_a|``: one sample per row ``r``, at the fractional
        column ``c = (t - y * sin_a) / cos_a + cx``, read through the plain
        grid as ``(r, c)``.
      - otherwise: one sample per column ``c``, at the fractional row
        ``r = (t - x * cos_a) / sin_a + cy``, read through the transposed grid
        as ``(c, r)``.

    Interpolation therefore only ever runs along the second index.
    """
    n_rows, n_cols = image.shape
    cy = (n_rows - 1) * 0.5
    cx = (n_cols - 1) * 0.5
    accum = 0.0
    if abs(cos_a) >= abs(sin_a):
        for row in range(n_rows):
            y = row - cy
            col_f = (t - y * sin_a) / cos_a + cx
            accum += _tap(image, False, row, col_f, mode)
    else:
        for col in range(n_cols):
            x = col - cx
            row_f = (t - x * cos_a) / sin_a + cy
            accum += _tap(image, True, col, row_f, mode)
    return accum


# ============================================================================
# 2D Parallel Beam Sinogram Kernel
# ============================================================================

@_PARALLEL_DECORATOR
def _parallel_2d_sinogram_kernel(image, d_cos, d_sin, offsets, mode, sino):
    """Fill ``sino[view, scan]`` with ray sums for every view and offset.

    Parameters
    ----------
    image : numpy.ndarray
        Emission image, shape (rows, cols). Read only.
    d_cos, d_sin : numpy.ndarray
        Precomputed cosine and sine of each view angle, shape (n_views,).
    offsets : numpy.ndarray
        Ray offsets along the detector axis, shape (n_scans,).
    mode : int
        `NEAREST_MODE` or `LINEAR_MODE`.
    sino : numpy.ndarray
        Output array, shape (n_views, n_scans). Each view writes its own row.
    """
    n_views = d_cos.shape[0]
    n_scans = offsets.shape[0]
    for iview in prange(n_views):
        cos_a = d_cos[iview]
        sin_a = d_sin[iview]
        for iscan in range(n_scans):
            sino[iview, iscan] = _ray_sum(image, cos_a, sin_a, offsets[iscan], mode)
