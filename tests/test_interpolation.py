import math

import numpy as np
import pytest

from recotools import Interpolation, Sampler, linear, nearest_neighbour
from recotools.kernels import _linear_tap, _nearest_tap

MATRIX = [[1, 2], [3, 4]]


@pytest.fixture
def getter():
    return Sampler(MATRIX, transpose=False)


@pytest.fixture
def getter_t():
    return Sampler(MATRIX, transpose=True)


def test_nearest_neighbour(getter):
    assert nearest_neighbour(0, 0, getter) == pytest.approx(1)
    assert nearest_neighbour(1, 0, getter) == pytest.approx(3)
    assert nearest_neighbour(0, 0.6, getter) == pytest.approx(2)
    assert nearest_neighbour(0, 0.4, getter) == pytest.approx(1)
    assert nearest_neighbour(1, 0.4, getter) == pytest.approx(3)
    assert nearest_neighbour(1, 0.8, getter) == pytest.approx(4)


def test_nearest_neighbour_transposed(getter_t):
    assert nearest_neighbour(0, 0, getter_t) == pytest.approx(1)
    assert nearest_neighbour(1, 0, getter_t) == pytest.approx(2)
    assert nearest_neighbour(0, 0.6, getter_t) == pytest.approx(3)
    assert nearest_neighbour(0, 0.4, getter_t) == pytest.approx(1)
    assert nearest_neighbour(1, 0.4, getter_t) == pytest.approx(2)
    assert nearest_neighbour(1, 0.8, getter_t) == pytest.approx(4)


def test_nearest_neighbour_rounds_half_up(getter):
    assert nearest_neighbour(0, 0.5, getter) == pytest.approx(2)
    assert nearest_neighbour(0, 0.49, getter) == pytest.approx(1)
    assert nearest_neighbour(0, -0.5, getter) == pytest.approx(1)
    assert nearest_neighbour(0, -0.6, getter) == 0.0
    assert nearest_neighbour(0, 1.5, getter) == 0.0


def test_linear(getter):
    assert linear(0, 0, getter) == pytest.approx(1)
    assert linear(0, 1, getter) == pytest.approx(2)
    assert linear(0, 0.9, getter) == pytest.approx(1.9)
    assert linear(1, 0, getter) == pytest.approx(3)
    assert linear(0, 0.4, getter) == pytest.approx(1.4)
    assert linear(1, 0.4, getter) == pytest.approx(3.4)


def test_linear_transposed(getter_t):
    assert linear(0, 0, getter_t) == pytest.approx(1)
    assert linear(1, 0, getter_t) == pytest.approx(2)
    assert linear(0, 0.6, getter_t) == pytest.approx(2.2)


def test_linear_edge_taps_are_zero_padded(getter):
    assert linear(0, 1.5, getter) == pytest.approx(1.0)
    assert linear(0, -0.5, getter) == pytest.approx(0.5)
    assert linear(5, 0.5, getter) == 0.0


def test_linear_exact_at_integer_columns():
    grid = np.random.default_rng(3).normal(size=(4, 5))
    s = Sampler(grid)
    for i in range(4):
        for j in range(5):
            assert linear(i, float(j), s) == grid[i, j]


def test_enum_members_dispatch(getter):
    assert Interpolation.NEAREST(0, 0.6, getter) == nearest_neighbour(0, 0.6, getter)
    assert Interpolation.LINEAR(0, 0.9, getter) == linear(0, 0.9, getter)


@pytest.mark.parametrize("value, expected", [
    (Interpolation.NEAREST, Interpolation.NEAREST),
    (Interpolation.LINEAR, Interpolation.LINEAR),
    (nearest_neighbour, Interpolation.NEAREST),
    (linear, Interpolation.LINEAR),
    ("nearest", Interpolation.NEAREST),
    (" Linear ", Interpolation.LINEAR),
    ("nearest_neighbor", Interpolation.NEAREST),
])
def test_from_any(value, expected):
    assert Interpolation.from_any(value) is expected


def test_from_any_custom_callable_and_errors():
    assert Interpolation.from_any(lambda i, j, s: 0.0) is None
    with pytest.raises(ValueError):
        Interpolation.from_any("cubic")
    with pytest.raises(TypeError):
        Interpolation.from_any(42)


def test_compiled_taps_match_python():
    grid = np.random.default_rng(0).uniform(size=(5, 6))
    coords = np.linspace(-1.75, 7.25, 37)
    for transpose in (False, True):
        s = Sampler(grid, transpose)
        for i in range(-1, 7):
            for j in coords:
                assert _nearest_tap(grid, transpose, i, j) == nearest_neighbour(i, j, s)
                assert _linear_tap(grid, transpose, i, j) == pytest.approx(linear(i, j, s), abs=1e-12)


def test_strategies_do_not_touch_row_index(getter):
    # the row index is used as-is; only the column is interpolated
    assert nearest_neighbour(1, 0.2, getter) == getter.get(1, math.floor(0.2))
