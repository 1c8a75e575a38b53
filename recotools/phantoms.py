"""Synthetic emission images for demos and tests."""

import numpy as np

from .constants import _DTYPE

# (x0, y0, a, b, angle in degrees, amplitude), in normalized [-1, 1] coordinates
SHEPP_LOGAN_ELLIPSES = [
    (0.0, 0.0, 0.69, 0.92, 0, 1.0),
    (0.0, -0.0184, 0.6624, 0.8740, 0, -0.8),
    (0.22, 0.0, 0.11, 0.31, -18.0, -0.8),
    (-0.22, 0.0, 0.16, 0.41, 18.0, -0.8),
    (0.0, 0.35, 0.21, 0.25, 0, 0.7),
]


def shepp_logan_2d(n_rows, n_cols=None, ellipses=None):
    """Render a Shepp-Logan style phantom.

    Parameters
    ----------
    n_rows : int
        Image height.
    n_cols : int, optional
        Image width (default: `n_rows`).
    ellipses : list of tuple, optional
        ``(x0, y0, a, b, angle_deg, amplitude)`` entries (default:
        `SHEPP_LOGAN_ELLIPSES`).

    Returns
    -------
    numpy.ndarray
        Phantom of shape (n_rows, n_cols), clipped to ``[0, 1]``.

    Examples
    --------
    >>> shepp_logan_2d(64).shape
    (64, 64)
    """
    n_rows = int(n_rows)
    n_cols = n_rows if n_cols is None else int(n_cols)
    ellipses = SHEPP_LOGAN_ELLIPSES if ellipses is None else ellipses

    cy = (n_rows - 1) / 2
    cx = (n_cols - 1) / 2
    ynorm, xnorm = np.meshgrid(
        (np.arange(n_rows) - cy) / (n_rows / 2),
        (np.arange(n_cols) - cx) / (n_cols / 2),
        indexing="ij",
    )
    phantom = np.zeros((n_rows, n_cols), dtype=_DTYPE)
    for (x0, y0, a, b, angdeg, ampl) in ellipses:
        th = np.deg2rad(angdeg)
        xprime = (xnorm - x0) * np.cos(th) + (ynorm - y0) * np.sin(th)
        yprime = -(xnorm - x0) * np.sin(th) + (ynorm - y0) * np.cos(th)
        inside = xprime * xprime / (a * a) + yprime * yprime / (b * b) <= 1.0
        phantom[inside] += ampl
    return np.clip(phantom, 0.0, 1.0)
