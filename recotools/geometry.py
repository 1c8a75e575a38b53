"""Parallel beam acquisition geometry.

This module provides the view angles and ray offsets swept by the sinogram
generator. Angles are in degrees; offsets are in pixels, centred on the
middle of the detector.
"""

import numpy as np

from .constants import _DTYPE, DEFAULT_SCAN_SPACING
from .utils import _validate_count


def view_angles(n_views, angle_start, angle_stop, dtype=_DTYPE):
    """Generate equally spaced view angles over ``[angle_start, angle_stop)``.

    Parameters
    ----------
    n_views : int
        Number of projection views.
    angle_start : float
        First angle, in degrees.
    angle_stop : float
        Exclusive end angle, in degrees.
    dtype : numpy.dtype, optional
        Output data type (default: float64).

    Returns
    -------
    numpy.ndarray
        Angles in degrees, shape (n_views,).

    Raises
    ------
    DimensionError
        If `n_views` is not a positive integer.

    Examples
    --------
    >>> view_angles(4, 0, 180)
    array([  0.,  45.,  90., 135.])
    """
    n_views = _validate_count(n_views, "n_views")
    # Equivalent to linspace with endpoint=False
    step = (float(angle_stop) - float(angle_start)) / n_views
    return float(angle_start) + np.arange(n_views, dtype=dtype) * step


def scan_offsets(n_scans, scan_spacing=DEFAULT_SCAN_SPACING, dtype=_DTYPE):
    """Generate ray offsets along the detector axis.

    Offsets are ``(k - (n_scans - 1) / 2) * scan_spacing`` for
    ``k = 0 .. n_scans - 1``, so the middle ray passes through the rotation
    centre when `n_scans` is odd.

    Parameters
    ----------
    n_scans : int
        Number of parallel rays per view.
    scan_spacing : float, optional
        Distance between neighbouring rays, in pixels (default: 1.0).
    dtype : numpy.dtype, optional
        Output data type (default: float64).

    Returns
    -------
    numpy.ndarray
        Offsets in pixels, shape (n_scans,).

    Raises
    ------
    DimensionError
        If `n_scans` is not a positive integer.
    ValueError
        If `scan_spacing` is not positive.

    Examples
    --------
    >>> scan_offsets(3)
    array([-1.,  0.,  1.])
    """
    n_scans = _validate_count(n_scans, "n_scans")
    scan_spacing = float(scan_spacing)
    if not scan_spacing > 0:
        raise ValueError(f"scan_spacing must be positive, got {scan_spacing}")
    return (np.arange(n_scans, dtype=dtype) - (n_scans - 1) * 0.5) * scan_spacing


def rotation_centre(shape):
    """Return ``(cx, cy)``, the geometric centre of a grid in pixel-centre coordinates."""
    n_rows, n_cols = shape
    return (n_cols - 1) * 0.5, (n_rows - 1) * 0.5
