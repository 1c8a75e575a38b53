"""Interpolation strategies for sampling fractional grid coordinates.

Both strategies interpolate along the second index only and read every tap
through a :class:`~recotools.sampler.Sampler`, so edge taps outside the grid
contribute zero.
"""

import enum
import math

from .kernels import NEAREST_MODE, LINEAR_MODE


def nearest_neighbour(i, j, sampler):
    """Sample ``(i, j)`` at the nearest integer column, rounding halves up.

    Parameters
    ----------
    i : int
        Row index, passed through unchanged.
    j : float
        Fractional column coordinate.
    sampler : Sampler
        Zero-padded grid accessor.

    Returns
    -------
    float

    Examples
    --------
    >>> s = Sampler([[1, 2], [3, 4]])
    >>> nearest_neighbour(0, 0.6, s)
    2.0
    """
    j0 = math.floor(j)
    if j - j0 >= 0.5:
        j0 += 1
    return sampler.get(i, j0)


def linear(i, j, sampler):
    """Linearly interpolate between columns ``floor(j)`` and ``floor(j) + 1``.

    Parameters
    ----------
    i : int
        Row index, passed through unchanged.
    j : float
        Fractional column coordinate.
    sampler : Sampler
        Zero-padded grid accessor.

    Returns
    -------
    float
        ``get(i, j0) * (1 - frac) + get(i, j0 + 1) * frac``. Equal to
        ``get(i, j)`` when `j` is an integer.

    Examples
    --------
    >>> s = Sampler([[1, 2], [3, 4]])
    >>> linear(0, 0.4, s)
    1.4
    """
    j0 = math.floor(j)
    frac = j - j0
    return sampler.get(i, j0) * (1.0 - frac) + sampler.get(i, j0 + 1) * frac


class Interpolation(enum.Enum):
    """Closed set of interpolation strategies.

    Members are callable with the ``(i, j, sampler)`` signature and carry the
    integer mode used by the compiled kernels.
    """

    NEAREST = NEAREST_MODE
    LINEAR = LINEAR_MODE

    def __call__(self, i, j, sampler):
        if self is Interpolation.NEAREST:
            return nearest_neighbour(i, j, sampler)
        return linear(i, j, sampler)

    @property
    def mode(self):
        """Integer mode passed to the numba kernels."""
        return self.value

    @classmethod
    def from_any(cls, value):
        """Resolve an enum member, strategy function or name to a member.

        Returns None for any other callable, which callers run through the
        pure-Python path.

        Raises
        ------
        ValueError
            If `value` is a string that names no strategy.
        TypeError
            If `value` is neither a known strategy nor callable.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key not in _NAMES:
                raise ValueError(
                    f"Unknown interpolation '{value}', expected one of {sorted(_NAMES)}"
                )
            return _NAMES[key]
        if value is nearest_neighbour:
            return cls.NEAREST
        if value is linear:
            return cls.LINEAR
        if callable(value):
            return None
        raise TypeError(f"interpolation must be callable, got {type(value).__name__}")


_NAMES = {
    "nearest": Interpolation.NEAREST,
    "nearest_neighbour": Interpolation.NEAREST,
    "nearest_neighbor": Interpolation.NEAREST,
    "linear": Interpolation.LINEAR,
}
