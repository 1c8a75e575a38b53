"""Utility classes and helper functions for RecoTools package.

This module provides grid validation, PyTorch-NumPy bridging and
trigonometric table generation shared by the sampling,
rescaling and projection modules.
"""

import warnings
import numpy as np
import torch

from .constants import _DTYPE, _EPSILON
from .exceptions import DimensionError


# ============================================================================
# PyTorch-NumPy Bridge
# ============================================================================

class TorchNumpyBridge:
    """Bridge between PyTorch tensors and the NumPy arrays used by the kernels."""

    @staticmethod
    def tensor_to_array(tensor):
        """Convert a PyTorch tensor to a host NumPy array.

        The compiled kernels run on the CPU, so tensors living on a CUDA device
        are copied to host memory first. A ``UserWarning`` flags that copy.

        Parameters
        ----------
        tensor : torch.Tensor
            Tensor on any device.

        Returns
        -------
        numpy.ndarray
            Host array holding the tensor values.

        Examples
        --------
        >>> TorchNumpyBridge.tensor_to_array(torch.ones(2, 2)).shape
        (2, 2)
        """
        if tensor.is_cuda:
            warnings.warn(
                "Copying CUDA tensor to host memory; projection kernels run on the CPU.",
                UserWarning,
                stacklevel=3,
            )
        return tensor.detach().cpu().numpy()

    @staticmethod
    def array_like(array, reference):
        """Return `array` in the container type of `reference`.

        Parameters
        ----------
        array : numpy.ndarray
            Result computed by the kernels.
        reference : object
            Original caller input. If it is a tensor, the result is returned as
            a tensor on the same device, keeping a floating dtype or promoting
            integer inputs to float64.

        Returns
        -------
        numpy.ndarray or torch.Tensor
        """
        if not isinstance(reference, torch.Tensor):
            return array
        dtype = reference.dtype if reference.is_floating_point() else torch.float64
        out = torch.from_numpy(np.ascontiguousarray(array)).to(dtype=dtype)
        return out.to(device=reference.device)


# ============================================================================
# Grid Validation
# ============================================================================

def as_grid(data, name="grid"):
    """Validate `data` as a rectangular 2D grid of reals.

    Parameters
    ----------
    data : array-like or torch.Tensor
        Nested row sequences, a 2D NumPy array or a 2D tensor.
    name : str, optional
        Name used in error messages (default: ``"grid"``).

    Returns
    -------
    numpy.ndarray
        C-contiguous float64 array of shape (rows, cols).

    Raises
    ------
    DimensionError
        If rows have unequal length, the input is not 2D, or a dimension is empty.

    Examples
    --------
    >>> as_grid([[1, 2], [3, 4]]).shape
    (2, 2)
    """
    if isinstance(data, torch.Tensor):
        data = TorchNumpyBridge.tensor_to_array(data)
    if not isinstance(data, np.ndarray) or data.dtype == object:
        try:
            rows = [list(row) for row in data]
        except TypeError:
            raise DimensionError(f"{name} must be a sequence of rows") from None
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise DimensionError(
                f"{name} rows have unequal lengths {sorted(widths)}; expected a rectangular grid"
            )
        data = rows
    arr = np.asarray(data, dtype=_DTYPE)
    if arr.ndim != 2:
        raise DimensionError(f"{name} must be 2D, got {arr.ndim}D with shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise DimensionError(f"{name} must not be empty, got shape {arr.shape}")
    return np.ascontiguousarray(arr)


def _validate_count(value, name):
    """Check that a view or scan count is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DimensionError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise DimensionError(f"{name} must be positive, got {value}")
    return int(value)


# ============================================================================
# Trigonometric Table Generation
# ============================================================================

def _trig_tables(angles_deg, dtype=_DTYPE):
    """Compute cosine and sine tables for view angles given in degrees.

    Values whose magnitude falls below `_EPSILON` are snapped to zero so that
    axis-aligned views (0, 90, 180 degrees, ...) sample exactly on pixel
    centres.

    Parameters
    ----------
    angles_deg : array-like
        View angles in degrees.
    dtype : numpy.dtype, optional
        Desired data type for output tables. Default is `_DTYPE`.

    Returns
    -------
    cos : numpy.ndarray
        Cosine values of `angles_deg`.
    sin : numpy.ndarray
        Sine values of `angles_deg`.

    Examples
    --------
    >>> cos, sin = _trig_tables([0.0, 90.0])
    >>> cos
    array([1., 0.])
    """
    radians = np.deg2rad(np.asarray(angles_deg, dtype=dtype))
    cos = np.cos(radians).astype(dtype)
    sin = np.sin(radians).astype(dtype)
    cos[np.abs(cos) < _EPSILON] = 0.0
    sin[np.abs(sin) < _EPSILON] = 0.0
    return cos, sin
