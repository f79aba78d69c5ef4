"""Out-of-place transpose of a planar image.

Each channel's ``height x width`` block becomes a ``width x height`` block
in the same position of the result buffer::

    result[cs + col * height + row] = image[cs + row * width + col]

with ``cs = channel * height * width``.  Transposing, running a horizontal
pass and transposing back gives the vertical pass (see
:func:`sepconv.separable.convolve_vertical_planar_via_transpose`).
"""

import numpy as np

from ._validation import transpose_failure, flat_source, flat_result

__all__ = ["transpose_planar"]


def transpose_planar(image, height: int, width: int, num_channels: int,
                     result) -> bool:
    """Swap rows and columns of every channel of a planar image.

    Args:
        image: Flat planar image of at least ``height * width * num_channels``
            samples.  Never modified.
        height: Height of *image*.
        width: Width of *image*.
        num_channels: Number of channels in *image*.
        result: Caller-allocated numpy array at least as long as *image*.
            Receives the transposed image (height = *width*,
            width = *height*) in its first ``height * width * num_channels``
            samples.

    Returns:
        True on success, False if the buffer sizes do not fit the shape.
    """
    source = flat_source(image)
    if transpose_failure(source.size, np.size(result), height, width,
                         num_channels) is not None:
        return False

    n = height * width * num_channels
    src = source[:n].reshape(num_channels, height, width)
    dst = flat_result(result)[:n].reshape(num_channels, width, height)
    dst[...] = src.transpose(0, 2, 1)
    return True
