import numpy as np
import pytest

from recotools import DimensionError, scan_offsets, view_angles
from recotools.geometry import rotation_centre
from recotools.utils import _trig_tables


def test_view_angles_exclude_stop():
    np.testing.assert_allclose(view_angles(4, 0, 180), [0.0, 45.0, 90.0, 135.0])
    np.testing.assert_allclose(view_angles(3, 10, 40), [10.0, 20.0, 30.0])
    np.testing.assert_allclose(view_angles(1, 30, 90), [30.0])


def test_scan_offsets_are_centred():
    np.testing.assert_allclose(scan_offsets(3), [-1.0, 0.0, 1.0])
    np.testing.assert_allclose(scan_offsets(2), [-0.5, 0.5])
    np.testing.assert_allclose(scan_offsets(2, 2.0), [-1.0, 1.0])
    np.testing.assert_allclose(scan_offsets(1), [0.0])


@pytest.mark.parametrize("count", [0, -3, 2.5, True, "4"])
def test_counts_must_be_positive_integers(count):
    with pytest.raises(DimensionError):
        view_angles(count, 0, 180)
    with pytest.raises(DimensionError):
        scan_offsets(count)


def test_counts_accept_numpy_integers():
    assert view_angles(np.int64(2), 0, 180).shape == (2,)


@pytest.mark.parametrize("spacing", [0.0, -1.0])
def test_scan_spacing_must_be_positive(spacing):
    with pytest.raises(ValueError):
        scan_offsets(3, spacing)


def test_rotation_centre_is_pixel_grid_middle():
    assert rotation_centre((3, 3)) == (1.0, 1.0)
    assert rotation_centre((2, 5)) == (2.0, 0.5)


def test_trig_tables_snap_axis_angles():
    cos, sin = _trig_tables([0.0, 90.0, 180.0, 270.0])
    np.testing.assert_array_equal(cos, [1.0, 0.0, -1.0, 0.0])
    np.testing.assert_array_equal(sin, [0.0, 1.0, 0.0, -1.0])
