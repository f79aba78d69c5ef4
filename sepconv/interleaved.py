"""1D convolution of one channel of an interleaved image.

An interleaved image stores the ``num_channels`` samples of each pixel next
to each other, pixels in row-major order::

    index(c, r, w) = r * width * num_channels + w * num_channels + c

Samples of one channel are therefore ``num_channels`` apart along a row and
``width * num_channels`` apart along a column.  The windowed sum is the
same as in :mod:`sepconv.planar`; only the index arithmetic differs.
"""

import numpy as np

from ._validation import convolution_failure, flat_source, flat_result
from ._window import convolve_axis
from .kernel import as_weights

__all__ = ["convolve_horizontal_interleaved", "convolve_vertical_interleaved"]


def _convolve_interleaved(kernel, image, height, width, num_channels,
                          channel_index, result, axis):
    source = flat_source(image)
    if convolution_failure(len(kernel), source.size, np.size(result),
                           height, width, num_channels,
                           channel_index) is not None:
        return False

    n = height * width * num_channels
    # (height, width) strided views: pixel stride num_channels,
    # row stride width * num_channels
    src = source[:n].reshape(height, width, num_channels)[:, :, channel_index]
    dst = flat_result(result)[:n].reshape(height, width, num_channels)[:, :, channel_index]
    convolve_axis(as_weights(kernel, dst.dtype), src, dst, axis)
    return True


def convolve_horizontal_interleaved(kernel, image, height: int, width: int,
                                    num_channels: int, channel_index: int,
                                    result) -> bool:
    """Convolve every row of one channel of an interleaved image.

    Args:
        kernel: 1D kernel (any sequence with ``len`` and indexing).  Must
            have odd length.
        image: Flat interleaved image of at least
            ``height * width * num_channels`` samples.
        height: Image height.
        width: Image width.
        num_channels: Number of channels per pixel.
        channel_index: Channel to convolve (0-based).
        result: Caller-allocated numpy array, at least as long as *image*.
            Only the interior samples of the selected channel are written.

    Returns:
        True on success, False if a precondition failed (no writes).
    """
    return _convolve_interleaved(kernel, image, height, width, num_channels,
                                 channel_index, result, axis=1)


def convolve_vertical_interleaved(kernel, image, height: int, width: int,
                                  num_channels: int, channel_index: int,
                                  result) -> bool:
    """Convolve every column of one channel of an interleaved image.

    Same contract as :func:`convolve_horizontal_interleaved`, with taps
    spaced one row (``width * num_channels`` samples) apart.
    """
    return _convolve_interleaved(kernel, image, height, width, num_channels,
                                 channel_index, result, axis=0)
