"""1D convolution of one channel of a planar image.

A planar image stores each channel as a contiguous ``height * width``
block, rows back to back (stride == width, no padding between channels)::

    index(c, r, w) = c * height * width + r * width + w

Only the interior of the selected channel is written: columns (horizontal
pass) or rows (vertical pass) within ``len(kernel) // 2`` of the image edge
keep whatever the result buffer held before the call, as do all other
channels.

Usage::

    result = np.zeros_like(image)
    ok = convolve_horizontal_planar(box_kernel(3), image, h, w, c, 0, result)
"""

import numpy as np

from ._validation import convolution_failure, flat_source, flat_result
from ._window import convolve_axis
from .kernel import as_weights

__all__ = ["convolve_horizontal_planar", "convolve_vertical_planar"]


def _convolve_planar(kernel, image, height, width, num_channels,
                     channel_index, result, axis):
    source = flat_source(image)
    if convolution_failure(len(kernel), source.size, np.size(result),
                           height, width, num_channels,
                           channel_index) is not None:
        return False

    # the selected channel is one contiguous block
    start = height * width * channel_index
    stop = start + height * width
    src = source[start:stop].reshape(height, width)
    dst = flat_result(result)[start:stop].reshape(height, width)
    convolve_axis(as_weights(kernel, dst.dtype), src, dst, axis)
    return True


def convolve_horizontal_planar(kernel, image, height: int, width: int,
                               num_channels: int, channel_index: int,
                               result) -> bool:
    """Convolve every row of one channel of a planar image with *kernel*.

    Args:
        kernel: 1D kernel (any sequence with ``len`` and indexing).  Must
            have odd length.
        image: Flat planar image of at least ``height * width * num_channels``
            samples.
        height: Image height.
        width: Image width.
        num_channels: Number of channels in *image*.
        channel_index: Channel to convolve (0-based).
        result: Caller-allocated numpy array, at least as long as *image*.
            Receives the interior samples of the selected channel.

    Returns:
        True if the convolution was written, False if a precondition
        failed (in which case *result* is untouched).
    """
    return _convolve_planar(kernel, image, height, width, num_channels,
                            channel_index, result, axis=1)


def convolve_vertical_planar(kernel, image, height: int, width: int,
                             num_channels: int, channel_index: int,
                             result) -> bool:
    """Convolve every column of one channel of a planar image with *kernel*.

    Same arguments and return value as :func:`convolve_horizontal_planar`;
    taps are spaced ``width`` samples apart and the top and bottom
    ``len(kernel) // 2`` rows are left untouched.
    """
    return _convolve_planar(kernel, image, height, width, num_channels,
                            channel_index, result, axis=0)
