import numpy as np
import pytest
import torch

from recotools import DimensionError, RescaleStats, no_rescale, rescale, rescale_with_stats

EPS = 1e-5


def test_rescale_single_peak():
    out = rescale([[3, 0], [0, 0]], 0, 5)
    np.testing.assert_allclose(out, [[5, 0], [0, 0]], atol=EPS)


def test_rescale_background_to_zero():
    out = rescale([[2, 1], [1, 1]], 0, 2)
    np.testing.assert_allclose(out, [[2, 0], [0, 0]], atol=EPS)


def test_rescale_intermediate_values():
    out = rescale([[5, 2], [1, 2]], 0, 2)
    np.testing.assert_allclose(out, [[2, 0.5], [0, 0.5]], atol=EPS)


def test_rescale_with_cutoff():
    # clamped: 5, 3, 2, 2 -> background subtracted: 3, 1, 0, 0
    out = rescale([[5, 3], [1, 2]], 2, 8)
    np.testing.assert_allclose(out, [[8, 8.0 / 3.0], [0, 0]], atol=EPS)


def test_degenerate_range_gives_zeros():
    out, stats = rescale_with_stats([[2, 2], [2, 2]], 0, 255)
    np.testing.assert_array_equal(out, np.zeros((2, 2)))
    assert stats == RescaleStats(floor=2.0, peak=2.0, degenerate=True)
    assert stats.span == 0.0


def test_cutoff_above_everything_is_degenerate():
    out, stats = rescale_with_stats([[1, 0], [0, 0]], 5, 10)
    np.testing.assert_array_equal(out, np.zeros((2, 2)))
    assert stats.degenerate
    assert stats.floor == stats.peak == 5.0


def test_stats_report_clamped_range():
    _, stats = rescale_with_stats([[5, 3], [1, 2]], min_cutoff=2, target_scale=8)
    assert stats == RescaleStats(floor=2.0, peak=5.0, degenerate=False)


def test_output_spans_zero_to_scale_and_is_monotonic():
    rng = np.random.default_rng(7)
    grid = rng.normal(loc=3.0, scale=2.0, size=(9, 11))
    out = rescale(grid, min_cutoff=1.0, target_scale=100.0)
    assert out.shape == grid.shape
    assert out.min() == pytest.approx(0.0)
    assert out.max() == pytest.approx(100.0)
    order = np.argsort(grid, axis=None)
    assert np.all(np.diff(out.ravel()[order]) >= 0)


def test_input_is_not_modified():
    grid = np.array([[5.0, 3.0], [1.0, 2.0]])
    before = grid.copy()
    rescale(grid, 2, 8)
    np.testing.assert_array_equal(grid, before)


def test_default_scale_is_255():
    out = rescale([[0, 1], [2, 4]])
    assert out.max() == pytest.approx(255.0)


def test_no_rescale_returns_copy():
    grid = np.array([[5.0, -3.0], [1.0, 2.0]])
    out = no_rescale(grid, 0, 255)
    np.testing.assert_array_equal(out, grid)
    assert not np.shares_memory(out, grid)


def test_tensor_in_tensor_out():
    grid = torch.tensor([[3.0, 0.0], [0.0, 0.0]], dtype=torch.float32)
    out = rescale(grid, 0, 5)
    assert isinstance(out, torch.Tensor)
    assert out.dtype == torch.float32
    torch.testing.assert_close(out, torch.tensor([[5.0, 0.0], [0.0, 0.0]]))


def test_ragged_grid_rejected():
    with pytest.raises(DimensionError):
        rescale([[1, 2, 3], [4, 5]])
