"""Global constants and configuration for RecoTools package.

This module defines core constants used throughout the RecoTools package,
including data types, numba JIT decorators, numerical precision parameters
and the default acquisition and normalization settings.
"""

import numpy as np
from numba import njit

# ---------------------------------------------------------------------------
# Data Types and Numerical Constants
# ---------------------------------------------------------------------------

_DTYPE = np.float64
"""Default data type for grids and sinograms (numpy.float64)."""

_EPSILON = 1e-12
"""Trigonometric values below this magnitude are snapped to exactly zero."""

# ---------------------------------------------------------------------------
# Numba JIT Decorators
# ---------------------------------------------------------------------------

# Scalar helpers (sampling taps) are compiled once and cached on disk.
# fastmath is left off so both interpolation taps stay exact at integer
# coordinates.
_JIT_DECORATOR = njit(cache=True)
"""Numba JIT decorator for scalar sampling and interpolation helpers."""

# The sweep kernel distributes views over threads with numba.prange
_PARALLEL_DECORATOR = njit(cache=True, parallel=True)
"""Numba JIT decorator with automatic parallelization for the sweep kernel."""

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_MIN_CUTOFF = 0.0
"""Lower clamp applied before range normalization."""

DEFAULT_TARGET_SCALE = 255.0
"""Upper bound of normalized values, matching 8-bit grayscale output."""

DEFAULT_SCAN_SPACING = 1.0
"""Distance between parallel rays, in pixels."""

DEFAULT_ANGLE_START = 0.0
"""First view angle, in degrees."""

DEFAULT_ANGLE_STOP = 180.0
"""Exclusive upper bound of the view angles, in degrees."""
