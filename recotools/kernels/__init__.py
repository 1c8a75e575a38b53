"""Numba kernels for sinogram synthesis.

This subpackage contains the compiled sampling taps and the 2D parallel beam
sweep kernel.
"""

from .parallel_beam import (
    NEAREST_MODE,
    LINEAR_MODE,
    _sample,
    _nearest_tap,
    _linear_tap,
    _ray_sum,
    _parallel_2d_sinogram_kernel,
)

__all__ = [
    'NEAREST_MODE',
    'LINEAR_MODE',
    '_sample',
    '_nearest_tap',
    '_linear_tap',
    '_ray_sum',
    '_parallel_2d_sinogram_kernel',
]
