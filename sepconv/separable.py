"""Composite passes built from the single-axis routines.

* ``convolve_separable_planar`` / ``convolve_separable_interleaved`` run the
  horizontal pass followed by the vertical pass, i.e. a 2D convolution with
  the outer product ``kernel x kernel``.
* ``convolve_vertical_planar_via_transpose`` computes the vertical pass by
  transposing, reusing the horizontal routine along the former columns, and
  transposing back.

All of them follow the single-pass contract: the same preconditions, False
with no writes on failure, and only interior positions of the selected
channel are written (for the 2D pass, rows *and* columns must be interior).
"""

import numpy as np

from ._validation import convolution_failure, flat_source, flat_result
from .interleaved import convolve_horizontal_interleaved, convolve_vertical_interleaved
from .layout import planar_view, interleaved_view
from .planar import convolve_horizontal_planar, convolve_vertical_planar
from .transpose import transpose_planar

__all__ = ["convolve_separable_planar", "convolve_separable_interleaved",
           "convolve_vertical_planar_via_transpose"]


def _prepare(kernel, image, height, width, num_channels, channel_index,
             result, scratch):
    """Validate and return (source, flat result, horizontal scratch) or None."""
    source = flat_source(image)
    if convolution_failure(len(kernel), source.size, np.size(result),
                           height, width, num_channels,
                           channel_index) is not None:
        return None
    dst = flat_result(result)
    if scratch is None:
        scratch = np.zeros(source.size, dtype=dst.dtype)
    else:
        scratch = flat_result(scratch)
        if scratch.size < source.size:
            raise ValueError(
                f"Scratch buffer holds {scratch.size} samples, "
                f"fewer than the source's {source.size}"
            )
        scratch = scratch[:source.size]
        if np.shares_memory(scratch, dst) or np.shares_memory(scratch, source):
            raise ValueError("Scratch buffer must not overlap the image or result")
    return source, dst, scratch


def convolve_separable_planar(kernel, image, height: int, width: int,
                              num_channels: int, channel_index: int,
                              result, scratch=None) -> bool:
    """Horizontal then vertical pass over one channel of a planar image.

    Args:
        kernel: Odd-length 1D kernel applied along both axes.
        image: Flat planar image.
        height, width, num_channels: Image shape.
        channel_index: Channel to convolve.
        result: Caller-allocated numpy array.  Only samples whose row and
            column are both interior are written.
        scratch: Optional numpy array (at least as long as *image*) holding
            the intermediate horizontal pass.  Allocated when omitted.
            Must not overlap *image* or *result*.

    Returns:
        True on success, False if a precondition failed (no writes to
        *result*).

    Raises:
        ValueError: If *scratch* is shorter than *image*
            or overlaps *image* or *result*.
    """
    prepared = _prepare(kernel, image, height, width, num_channels,
                        channel_index, result, scratch)
    if prepared is None:
        return False
    source, dst, scratch = prepared

    staged = np.zeros_like(dst)
    convolve_horizontal_planar(kernel, source, height, width, num_channels,
                               channel_index, scratch)
    convolve_vertical_planar(kernel, scratch, height, width, num_channels,
                             channel_index, staged)

    c = len(kernel) // 2
    rows, cols = slice(c, height - c), slice(c, width - c)
    out = planar_view(dst, height, width, num_channels)
    out[channel_index, rows, cols] = planar_view(
        staged, height, width, num_channels)[channel_index, rows, cols]
    return True


def convolve_separable_interleaved(kernel, image, height: int, width: int,
                                   num_channels: int, channel_index: int,
                                   result, scratch=None) -> bool:
    """Horizontal then vertical pass over one channel of an interleaved image.

    Same contract as :func:`convolve_separable_planar`.
    """
    prepared = _prepare(kernel, image, height, width, num_channels,
                        channel_index, result, scratch)
    if prepared is None:
        return False
    source, dst, scratch = prepared

    staged = np.zeros_like(dst)
    convolve_horizontal_interleaved(kernel, source, height, width,
                                    num_channels, channel_index, scratch)
    convolve_vertical_interleaved(kernel, scratch, height, width,
                                  num_channels, channel_index, staged)

    c = len(kernel) // 2
    rows, cols = slice(c, height - c), slice(c, width - c)
    out = interleaved_view(dst, height, width, num_channels)
    out[rows, cols, channel_index] = interleaved_view(
        staged, height, width, num_channels)[rows, cols, channel_index]
    return True


def convolve_vertical_planar_via_transpose(kernel, image, height: int,
                                           width: int, num_channels: int,
                                           channel_index: int,
                                           result) -> bool:
    """Vertical pass computed as transpose -> horizontal pass -> transpose.

    Produces the same interior values as :func:`convolve_vertical_planar`
    and leaves the same positions untouched.
    """
    source = flat_source(image)
    if convolution_failure(len(kernel), source.size, np.size(result),
                           height, width, num_channels,
                           channel_index) is not None:
        return False
    dst = flat_result(result)

    # only the selected channel block is transposed; other channels are never read
    plane = height * width
    start = channel_index * plane
    transposed = np.zeros(plane, dtype=dst.dtype)
    convolved = np.zeros(plane, dtype=dst.dtype)
    restored = np.zeros(plane, dtype=dst.dtype)

    transpose_planar(source[start:start + plane], height, width, 1, transposed)
    # rows of the transposed image are the original columns
    convolve_horizontal_planar(kernel, transposed, width, height, 1, 0, convolved)
    transpose_planar(convolved, width, height, 1, restored)

    c = len(kernel) // 2
    rows = slice(c, height - c)
    out = planar_view(dst, height, width, num_channels)
    out[channel_index, rows, :] = restored.reshape(height, width)[rows, :]
    return True
