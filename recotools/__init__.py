"""RecoTools - Sinogram Synthesis for Tomographic Reconstruction.

A small NumPy/Numba toolkit for zero-padded grid sampling, interpolation,
range normalization and parallel beam sinogram generation from emission
images. PyTorch tensors are accepted wherever a grid is.
"""

from .exceptions import DimensionError

from .sampler import Sampler, make_sampler

from .interpolation import Interpolation, nearest_neighbour, linear

from .rescale import RescaleStats, rescale, rescale_with_stats, no_rescale

from .geometry import view_angles, scan_offsets

from .projectors import SinogramGenerator, sinogram, calculate_projection

from .phantoms import shepp_logan_2d

from .utils import as_grid

__version__ = '0.1.0'

__all__ = [
    'DimensionError',
    'Sampler',
    'make_sampler',
    'Interpolation',
    'nearest_neighbour',
    'linear',
    'RescaleStats',
    'rescale',
    'rescale_with_stats',
    'no_rescale',
    'view_angles',
    'scan_offsets',
    'SinogramGenerator',
    'sinogram',
    'calculate_projection',
    'shepp_logan_2d',
    'as_grid',
]
