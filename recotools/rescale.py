"""Range normalization of grids and sinograms."""

from dataclasses import dataclass

import numpy as np

from .constants import DEFAULT_MIN_CUTOFF, DEFAULT_TARGET_SCALE
from .utils import as_grid, TorchNumpyBridge


@dataclass(frozen=True)
class RescaleStats:
    """Diagnostic returned alongside a rescaled grid.

    Attributes
    ----------
    floor : float
        Minimum of the clamped values.
    peak : float
        Maximum of the clamped values.
    degenerate : bool
        True when ``peak == floor`` and the result was set to all zeros.
    """

    floor: float
    peak: float
    degenerate: bool

    @property
    def span(self):
        return self.peak - self.floor


def _rescale_array(values, min_cutoff, target_scale):
    clamped = np.maximum(values, min_cutoff)
    floor = float(clamped.min())
    peak = float(clamped.max())
    span = peak - floor
    if span > 0:
        out = (clamped - floor) / span * target_scale
    else:
        # A uniform field carries no contrast to stretch
        out = np.zeros_like(clamped)
    return out, RescaleStats(floor=floor, peak=peak, degenerate=not span > 0)


def rescale_with_stats(grid, min_cutoff=DEFAULT_MIN_CUTOFF, target_scale=DEFAULT_TARGET_SCALE):
    """Rescale `grid` and report the clamped range it was stretched from.

    Parameters
    ----------
    grid : array-like or torch.Tensor
        Rectangular 2D grid.
    min_cutoff : float, optional
        Values below this are raised to it before normalization (default: 0).
    target_scale : float, optional
        Value assigned to the peak (default: 255).

    Returns
    -------
    out : numpy.ndarray or torch.Tensor
        Normalized grid, same shape and container type as `grid`.
    stats : RescaleStats
        Floor, peak and whether the zero-range branch was taken.

    Examples
    --------
    >>> out, stats = rescale_with_stats([[5, 3], [1, 2]], min_cutoff=2, target_scale=8)
    >>> stats
    RescaleStats(floor=2.0, peak=5.0, degenerate=False)
    """
    out, stats = _rescale_array(as_grid(grid), float(min_cutoff), float(target_scale))
    return TorchNumpyBridge.array_like(out, grid), stats


def rescale(grid, min_cutoff=DEFAULT_MIN_CUTOFF, target_scale=DEFAULT_TARGET_SCALE):
    """Clamp at `min_cutoff` and stretch the value range onto ``[0, target_scale]``.

    Every element ``e`` becomes ``e' = max(e, min_cutoff)``; with
    ``floor = min(e')`` and ``peak = max(e')`` the result is
    ``(e' - floor) / (peak - floor) * target_scale``. If all clamped values are
    equal the result is all zeros. The input is not modified.

    Parameters
    ----------
    grid : array-like or torch.Tensor
        Rectangular 2D grid.
    min_cutoff : float, optional
        Lower clamp (default: 0).
    target_scale : float, optional
        Output maximum (default: 255).

    Returns
    -------
    numpy.ndarray or torch.Tensor
        Normalized grid of the same shape.

    Examples
    --------
    >>> rescale([[3, 0], [0, 0]], 0, 5)
    array([[5., 0.],
           [0., 0.]])
    """
    return rescale_with_stats(grid, min_cutoff, target_scale)[0]


def no_rescale(grid, min_cutoff=DEFAULT_MIN_CUTOFF, target_scale=DEFAULT_TARGET_SCALE):
    """Return `grid` unchanged (as a float64 copy).

    Accepts the rescaler signature so it can be passed wherever
    :func:`rescale` is, leaving raw ray sums in the output.
    """
    out = as_grid(grid).copy()
    return TorchNumpyBridge.array_like(out, grid)
