"""Tests for horizontal and vertical convolution of planar images."""

import numpy as np
import pytest

from sepconv import (
    box_kernel, convolve_horizontal_planar, convolve_vertical_planar,
)
from sepconv.layout import planar_view


def _reference(kernel, plane, axis):
    """Loop-based interior convolution of one (H, W) plane; NaN on borders."""
    kernel = np.asarray(kernel, dtype=np.float64)
    c = len(kernel) // 2
    h, w = plane.shape
    out = np.full((h, w), np.nan)
    for r in range(h):
        for col in range(w):
            pos = col if axis == 1 else r
            length = w if axis == 1 else h
            if pos < c or pos >= length - c:
                continue
            acc = 0.0
            for k in range(len(kernel)):
                if axis == 1:
                    acc += kernel[k] * plane[r, col - c + k]
                else:
                    acc += kernel[k] * plane[r - c + k, col]
            out[r, col] = acc
    return out


SENTINEL = -7.0


class TestHorizontalPlanar:

    def test_interior_matches_reference(self, rng):
        """Interior columns equal the loop-based reference."""
        h, w, ch_count = 6, 9, 3
        image = rng.random(h * w * ch_count).astype(np.float32)
        kernel = [0.1, 0.2, 0.4, 0.2, 0.1]
        result = np.full_like(image, SENTINEL)

        assert convolve_horizontal_planar(kernel, image, h, w, ch_count, 1, result)

        got = planar_view(result, h, w, ch_count)[1]
        expected = _reference(kernel, planar_view(image, h, w, ch_count)[1], axis=1)
        np.testing.assert_allclose(got[:, 2:-2], expected[:, 2:-2], atol=1e-5)

    def test_border_columns_untouched(self, rng):
        """Columns within the kernel radius keep their prior value."""
        h, w, ch_count = 4, 7, 2
        image = rng.random(h * w * ch_count).astype(np.float32)
        result = np.full_like(image, SENTINEL)

        assert convolve_horizontal_planar(box_kernel(5), image, h, w, ch_count, 0, result)

        plane = planar_view(result, h, w, ch_count)[0]
        assert np.all(plane[:, :2] == SENTINEL)
        assert np.all(plane[:, -2:] == SENTINEL)
        assert not np.any(plane[:, 2:-2] == SENTINEL)

    def test_other_channels_untouched(self, rng):
        """Channels other than the selected one are never written."""
        h, w, ch_count = 5, 5, 3
        image = rng.random(h * w * ch_count).astype(np.float32)
        result = np.full_like(image, SENTINEL)

        assert convolve_horizontal_planar(box_kernel(3), image, h, w, ch_count, 2, result)

        planes = planar_view(result, h, w, ch_count)
        assert np.all(planes[0] == SENTINEL)
        assert np.all(planes[1] == SENTINEL)

    def test_single_tap_kernel_copies_channel(self, rng):
        """A one-tap identity kernel copies the channel exactly."""
        h, w = 3, 4
        image = rng.random(h * w * 2).astype(np.float32)
        result = np.zeros_like(image)
        assert convolve_horizontal_planar([1.0], image, h, w, 2, 1, result)
        np.testing.assert_array_equal(result[h * w:], image[h * w:])
        assert np.all(result[:h * w] == 0)

    def test_accepts_python_lists_as_source(self):
        """Source may be a plain Python list."""
        image = [1.0, 2.0, 3.0, 4.0, 5.0]
        result = np.zeros(5)
        assert convolve_horizontal_planar([1, 1, 1], image, 1, 5, 1, 0, result)
        np.testing.assert_array_equal(result, [0, 6, 9, 12, 0])

    def test_longer_result_buffer_keeps_tail(self):
        """Samples past the image in a longer result buffer are untouched."""
        image = np.arange(6, dtype=np.float64)
        result = np.full(10, SENTINEL)
        assert convolve_horizontal_planar([0, 1, 0], image, 2, 3, 1, 0, result)
        np.testing.assert_array_equal(result[:6], [SENTINEL, 1, SENTINEL,
                                                   SENTINEL, 4, SENTINEL])
        assert np.all(result[6:] == SENTINEL)

    def test_image_narrower_than_kernel_writes_nothing(self):
        """Fewer columns than taps: nothing to compute, nothing written."""
        image = np.ones(2 * 2, dtype=np.float32)
        result = np.full_like(image, SENTINEL)
        assert convolve_horizontal_planar(box_kernel(5), image, 2, 2, 1, 0, result)
        assert np.all(result == SENTINEL)

    def test_list_result_raises_type_error(self):
        """A list result cannot receive writes and raises TypeError."""
        with pytest.raises(TypeError, match="numpy array"):
            convolve_horizontal_planar([1, 1, 1], [1.0] * 9, 3, 3, 1, 0, [0.0] * 9)

    def test_integer_result_raises_type_error(self):
        """An integer result cannot hold the weighted sums; the dtype is named."""
        result = np.zeros(9, dtype=np.int32)
        with pytest.raises(TypeError, match="int32"):
            convolve_horizontal_planar([1, 1, 1], np.ones(9), 3, 3, 1, 0, result)
        assert np.all(result == 0)


class TestVerticalPlanar:

    def test_interior_matches_reference(self, rng):
        """Interior rows equal the loop-based reference; border rows untouched."""
        h, w, ch_count = 8, 5, 2
        image = rng.random(h * w * ch_count).astype(np.float32)
        kernel = [0.25, 0.5, 0.25]
        result = np.full_like(image, SENTINEL)

        assert convolve_vertical_planar(kernel, image, h, w, ch_count, 0, result)

        got = planar_view(result, h, w, ch_count)[0]
        expected = _reference(kernel, planar_view(image, h, w, ch_count)[0], axis=0)
        np.testing.assert_allclose(got[1:-1], expected[1:-1], atol=1e-5)
        assert np.all(got[0] == SENTINEL)
        assert np.all(got[-1] == SENTINEL)

    def test_three_channel_5x5_only_rows_1_to_3_of_channel_1(self, rng):
        """Vertical pass on channel 1 of a pre-zeroed result writes rows 1-3 only."""
        h, w, ch_count = 5, 5, 3
        image = rng.random(h * w * ch_count).astype(np.float32) + 1.0
        result = np.zeros_like(image)

        assert convolve_vertical_planar(box_kernel(3), image, h, w, ch_count, 1, result)

        planes = planar_view(result, h, w, ch_count)
        assert np.all(planes[0] == 0)
        assert np.all(planes[2] == 0)
        assert np.all(planes[1][0] == 0)
        assert np.all(planes[1][4] == 0)
        assert np.all(planes[1][1:4] > 0)

    def test_constant_image_is_preserved_by_normalized_kernel(self):
        """A normalized kernel leaves a constant image unchanged."""
        h, w = 6, 4
        image = np.full(h * w, 3.0, dtype=np.float64)
        result = np.zeros_like(image)
        assert convolve_vertical_planar([0.25, 0.5, 0.25], image, h, w, 1, 0, result)
        plane = result.reshape(h, w)
        np.testing.assert_allclose(plane[1:-1], 3.0)
        assert np.all(plane[0] == 0) and np.all(plane[-1] == 0)

    def test_source_not_modified(self, rng):
        """The source image is read-only to the routine."""
        image = rng.random(4 * 4).astype(np.float32)
        before = image.copy()
        result = np.zeros_like(image)
        assert convolve_vertical_planar(box_kernel(3), image, 4, 4, 1, 0, result)
        np.testing.assert_array_equal(image, before)
