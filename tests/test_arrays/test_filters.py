"""
Unit tests for the in-place spectral filters and greedy merge.
"""

import math

import numpy as np
import pytest

from nft_spectral.arrays.filters import (
    BoundingBox,
    DEFAULT_BOX,
    SpectralArray,
    filter_inside,
    filter_outside,
    filter_reject_near_real_axis,
    merge_close,
)
from nft_spectral.errors import InvalidArgumentError


BOX = BoundingBox(-2.0, 2.0, -2.0, 2.0)
NAN = float("nan")


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


class TestBoundingBox:
    """Tests for BoundingBox construction and validation."""

    def test_from_sequence(self):
        """Four bounds in (re_min, re_max, im_min, im_max) order."""
        box = BoundingBox.from_sequence([-1, 1, 0, 3])
        assert box == BoundingBox(-1.0, 1.0, 0.0, 3.0)
        assert box.as_tuple() == (-1.0, 1.0, 0.0, 3.0)

    def test_wrong_length(self):
        """Anything but four bounds is rejected."""
        with pytest.raises(InvalidArgumentError):
            BoundingBox.from_sequence([0, 1, 2])

    def test_validity(self):
        """Inverted and NaN bounds are invalid, degenerate boxes are fine."""
        assert BoundingBox(0, 0, 1, 1).is_valid()
        assert not BoundingBox(1, 0, 0, 1).is_valid()
        assert not BoundingBox(0, 1, 1, 0).is_valid()
        assert not BoundingBox(NAN, 1, 0, 1).is_valid()

    def test_default_box(self):
        """Default box is the closed upper half-plane."""
        assert DEFAULT_BOX.as_tuple() == (-math.inf, math.inf, 0.0, math.inf)


class TestFilterInside:
    """Tests for filter_inside."""

    def test_concrete_scenario(self):
        """[(0,0), (5,5), (-1,-1)] in [-2,2]x[-2,2] -> [(0,0), (-1,-1)]."""
        values = np.array([0 + 0j, 5 + 5j, -1 - 1j])
        n = filter_inside(values, (-2, 2, -2, 2))
        assert n == 2
        np.testing.assert_array_equal(values[:n], [0 + 0j, -1 - 1j])

    def test_boundary_inclusive(self):
        """Points on the box edges and corners are kept."""
        values = np.array([2 + 0j, -2 + 2j, 0 - 2j, 2.0001 + 0j])
        n = filter_inside(values, BOX)
        assert n == 3
        np.testing.assert_array_equal(values[:n], [2 + 0j, -2 + 2j, 0 - 2j])

    def test_nan_dropped(self):
        """NaN in either coordinate never passes the box test."""
        values = np.array([complex(NAN, 0), complex(0, NAN), 1 + 1j])
        n = filter_inside(values, BOX)
        assert n == 1
        assert values[0] == 1 + 1j

    def test_companion_follows(self):
        """Companion entries move with their primary entries."""
        values = np.array([5 + 0j, 1 + 0j, 9j, -1j])
        companion = np.array([10.0, 11.0, 12.0, 13.0]) + 0j
        n = filter_inside(values, BOX, companion=companion)
        assert n == 2
        np.testing.assert_array_equal(values[:n], [1 + 0j, -1j])
        np.testing.assert_array_equal(companion[:n], [11.0, 13.0])

    def test_idempotent(self):
        """Filtering twice gives the same survivors in the same order."""
        rng = np.random.default_rng(0)
        values = 4 * (rng.normal(size=50) + 1j * rng.normal(size=50))
        n1 = filter_inside(values, BOX)
        once = values[:n1].copy()
        n2 = filter_inside(values, BOX, n=n1)
        assert n2 == n1
        np.testing.assert_array_equal(values[:n2], once)

    def test_order_preserved(self):
        """Survivors appear in their original relative order."""
        rng = np.random.default_rng(1)
        original = 3 * (rng.normal(size=40) + 1j * rng.normal(size=40))
        values = original.copy()
        n = filter_inside(values, BOX)
        assert _is_subsequence(list(values[:n]), list(original))

    def test_length_argument(self):
        """Only values[:n] are considered; values[n:] are left alone."""
        values = np.array([1j, 7 + 0j, 1 + 0j, 0j])
        n = filter_inside(values, BOX, n=2)
        assert n == 1
        assert values[0] == 1j
        np.testing.assert_array_equal(values[2:], [1 + 0j, 0j])

    def test_zero_survivors(self):
        """No survivors is a valid outcome."""
        values = np.array([10 + 10j, -10j])
        assert filter_inside(values, BOX) == 0

    def test_empty(self):
        """Empty arrays are fine."""
        assert filter_inside(np.array([], dtype=complex), BOX) == 0

    def test_default_box(self):
        """Default keeps the closed upper half-plane."""
        values = np.array([1 + 1j, 1 - 1j, 2 + 0j])
        n = filter_inside(values)
        np.testing.assert_array_equal(values[:n], [1 + 1j, 2 + 0j])

    def test_inverted_box_raises_without_mutation(self):
        """Inverted bounds are rejected before anything is touched."""
        values = np.array([5 + 5j, 0j])
        before = values.copy()
        with pytest.raises(InvalidArgumentError):
            filter_inside(values, (2, -2, -2, 2))
        np.testing.assert_array_equal(values, before)

    def test_nan_bound_raises(self):
        """NaN bounds are malformed."""
        with pytest.raises(InvalidArgumentError):
            filter_inside(np.array([0j]), (NAN, 1, 0, 1))

    def test_none_values_raises(self):
        """A missing buffer is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            filter_inside(None, BOX)

    def test_list_raises(self):
        """Plain lists cannot be compacted in place."""
        with pytest.raises(InvalidArgumentError):
            filter_inside([0j, 1j], BOX)

    def test_none_box_raises(self):
        """A missing box is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            filter_inside(np.array([0j]), None)

    def test_length_out_of_range(self):
        """n must lie in [0, len(values)]."""
        values = np.array([0j, 1j])
        with pytest.raises(InvalidArgumentError):
            filter_inside(values, BOX, n=3)
        with pytest.raises(InvalidArgumentError):
            filter_inside(values, BOX, n=-1)

    def test_short_companion_raises(self):
        """Companion must cover all live entries."""
        with pytest.raises(InvalidArgumentError):
            filter_inside(np.array([0j, 1j]), BOX, companion=np.array([0j]))

    def test_verbose(self, capsys):
        """verbose prints a one-line summary."""
        filter_inside(np.array([0j, 5 + 5j]), BOX, verbose=True)
        assert "kept 1/2" in capsys.readouterr().out


class TestFilterOutside:
    """Tests for filter_outside."""

    def test_basic(self):
        """Keeps only the points outside the box."""
        values = np.array([0 + 0j, 5 + 5j, -1 - 1j, -3 + 0j])
        n = filter_outside(values, BOX)
        assert n == 2
        np.testing.assert_array_equal(values[:n], [5 + 5j, -3 + 0j])

    def test_boundary_kept(self):
        """Points on the edge are not strictly inside, so they are kept."""
        values = np.array([2 + 0j, 0 + 0j])
        n = filter_outside(values, BOX)
        assert n == 1
        assert values[0] == 2 + 0j

    def test_nan_kept(self):
        """A NaN coordinate counts as outside."""
        values = np.array([complex(NAN, 0), complex(0, NAN), 0j])
        n = filter_outside(values, BOX)
        assert n == 2
        assert np.isnan(values[0].real)
        assert np.isnan(values[1].imag)

    def test_nan_with_outside_coordinate_kept_by_both(self):
        """NaN handling is per axis, so neither filter is the other's negation."""
        a = np.array([complex(NAN, 5.0)])
        b = a.copy()
        assert filter_inside(a, BOX) == 0
        assert filter_outside(b, BOX) == 1

    def test_complementary_off_boundary(self):
        """Off the boundary, exactly one of the two filters keeps a value."""
        rng = np.random.default_rng(4)
        values = 4 * (rng.normal(size=200) + 1j * rng.normal(size=200))
        for v in values:
            kept_inside = filter_inside(np.array([v]), BOX)
            kept_outside = filter_outside(np.array([v]), BOX)
            assert kept_inside + kept_outside == 1

    def test_companion_follows(self):
        """Companion entries move with their primary entries."""
        values = np.array([0j, 3 + 0j, 1j, -5j])
        companion = np.arange(4, dtype=complex)
        n = filter_outside(values, BOX, companion=companion)
        np.testing.assert_array_equal(companion[:n], [1, 3])

    def test_order_preserved(self):
        """Survivors appear in their original relative order."""
        rng = np.random.default_rng(5)
        original = 3 * (rng.normal(size=40) + 1j * rng.normal(size=40))
        values = original.copy()
        n = filter_outside(values, BOX)
        assert _is_subsequence(list(values[:n]), list(original))

    def test_inverted_box_raises(self):
        """Same validation as filter_inside."""
        with pytest.raises(InvalidArgumentError):
            filter_outside(np.array([0j]), (0, 1, 1, 0))


class TestFilterRejectNearRealAxis:
    """Tests for filter_reject_near_real_axis."""

    def test_basic(self):
        """Values with |Im| <= tol are discarded."""
        values = np.array([1 + 0j, 1 + 1e-12j, 2 + 1j, 3 - 2j])
        n = filter_reject_near_real_axis(values, 1e-10)
        assert n == 2
        np.testing.assert_array_equal(values[:n], [2 + 1j, 3 - 2j])

    def test_strict_inequality(self):
        """|Im| == tol is rejected."""
        values = np.array([1 + 1j, 1 - 1j, 1 + 1.5j])
        n = filter_reject_near_real_axis(values, 1.0)
        assert n == 1
        assert values[0] == 1 + 1.5j

    def test_zero_tolerance(self):
        """tol = 0 only removes exactly real values."""
        values = np.array([5 + 0j, 1e-300j, -1e-300j])
        assert filter_reject_near_real_axis(values, 0.0) == 2

    def test_nan_imaginary_dropped(self):
        """NaN fails |Im| > tol."""
        values = np.array([complex(0, NAN), 1j])
        assert filter_reject_near_real_axis(values, 0.0) == 1

    def test_companion_follows(self):
        """Companion entries move with their primary entries."""
        values = np.array([1 + 0j, 2j, 3 + 0j, -4j])
        companion = np.array([0.0, 1.0, 2.0, 3.0])
        n = filter_reject_near_real_axis(values, 0.5, companion=companion)
        np.testing.assert_array_equal(companion[:n], [1.0, 3.0])

    def test_negative_tolerance_raises(self):
        """tol_im must be >= 0."""
        values = np.array([1j])
        with pytest.raises(InvalidArgumentError):
            filter_reject_near_real_axis(values, -1e-3)
        assert values[0] == 1j

    def test_nan_tolerance_raises(self):
        """NaN tolerance is rejected."""
        with pytest.raises(InvalidArgumentError):
            filter_reject_near_real_axis(np.array([1j]), NAN)


class TestMergeClose:
    """Tests for merge_close."""

    def test_zero_tolerance_keeps_distinct(self):
        """tol = 0 is a no-op for distinct values."""
        values = np.array([0j, 1e-15 + 0j, 1j, 2 + 2j])
        before = values.copy()
        n = merge_close(values, 0.0)
        assert n == 4
        np.testing.assert_array_equal(values, before)

    def test_nan_entries_survive(self):
        """A NaN distance is never below tol, so NaN values are kept."""
        values = np.array([0j, complex(NAN, 0), 5j])
        n = merge_close(values, 0.0)
        assert n == 3
        assert values[0] == 0j
        assert np.isnan(values[1].real)
        assert values[2] == 5j

    def test_nan_entries_survive_positive_tolerance(self):
        """NaN values are kept and do not shadow later values."""
        values = np.array([1j, complex(0, NAN), 1j + 1e-9, 4 + 0j])
        n = merge_close(values, 1e-6)
        assert n == 3
        assert np.isnan(values[1].imag)
        assert values[2] == 4 + 0j

    def test_infinite_tolerance_keeps_first(self):
        """tol = inf leaves exactly the first value."""
        values = np.array([3 + 1j, 0j, 100j])
        n = merge_close(values, math.inf)
        assert n == 1
        assert values[0] == 3 + 1j

    def test_duplicates_removed(self):
        """Exact and near duplicates collapse onto the first occurrence."""
        values = np.array([1 + 1j, 1 + 1j, 2j, 1 + 1.0001j, 2.00001j])
        n = merge_close(values, 1e-3)
        assert n == 2
        np.testing.assert_array_equal(values[:n], [1 + 1j, 2j])

    def test_compares_against_kept_values_only(self):
        """A dropped value does not shadow later ones."""
        values = np.array([0j, 0.6 + 0j, 1.2 + 0j])
        n = merge_close(values, 1.0)
        assert n == 2
        np.testing.assert_array_equal(values[:n], [0j, 1.2 + 0j])

    def test_order_dependent(self):
        """Which near-duplicate survives depends on scan order."""
        forward = np.array([0j, 0.6 + 0j, 1.2 + 0j])
        backward = forward[::-1].copy()
        n_f = merge_close(forward, 1.0)
        n_b = merge_close(backward, 1.0)
        np.testing.assert_array_equal(forward[:n_f], [0j, 1.2 + 0j])
        np.testing.assert_array_equal(backward[:n_b], [1.2 + 0j, 0j])

    def test_empty(self):
        """Nothing to merge."""
        assert merge_close(np.array([], dtype=complex), 1.0) == 0

    def test_companion_follows(self):
        """Companion entries move with their primary entries."""
        values = np.array([0j, 1e-9 + 0j, 1j])
        companion = np.array([7.0, 8.0, 9.0])
        n = merge_close(values, 1e-6, companion=companion)
        np.testing.assert_array_equal(companion[:n], [7.0, 9.0])

    def test_negative_tolerance_raises(self):
        """tol must be >= 0."""
        with pytest.raises(InvalidArgumentError):
            merge_close(np.array([0j, 1j]), -1.0)


class TestSpectralArray:
    """Tests for the SpectralArray wrapper."""

    def test_chained_filters(self):
        """Filters update n and keep the buffer."""
        buffer = np.array([1 + 1j, 1 + 1.0000001j, 50j, 3 + 0j, -1 + 0.5j])
        arr = SpectralArray(buffer)
        arr.filter_inside(BOX).reject_near_real_axis(1e-9).merge_close(1e-3)
        assert arr.buffer is buffer
        assert len(arr) == 2
        np.testing.assert_array_equal(arr.values, [1 + 1j, -1 + 0.5j])

    def test_companion_tracked(self):
        """The companion is permuted by every method."""
        buffer = np.array([10j, 1j, -1j, 1.5j])
        companion = np.array([0.0, 1.0, 2.0, 3.0])
        arr = SpectralArray(buffer, companion=companion)
        arr.filter_inside(BOX).filter_inside()
        np.testing.assert_array_equal(companion[:arr.n], [1.0, 3.0])

    def test_filter_outside(self):
        """filter_outside is exposed as well."""
        arr = SpectralArray(np.array([0j, 5j]))
        arr.filter_outside(BOX)
        np.testing.assert_array_equal(arr.values, [5j])

    def test_invalid_length(self):
        """n beyond capacity is rejected at construction."""
        with pytest.raises(InvalidArgumentError):
            SpectralArray(np.zeros(2, dtype=complex), n=5)
