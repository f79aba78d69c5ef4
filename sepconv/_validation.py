"""Precondition checks shared by every convolution and transpose routine.

Each ``*_failure`` function returns ``None`` when the arguments are valid
and otherwise a short message naming the first failed check.  The public
routines only look at whether a message came back; the message itself is
exposed through ``explain_convolution_failure`` / ``explain_transpose_failure``
for callers that want to report why a call returned ``False``.

Checks run in a fixed order:

1. kernel length is odd
2. channel index is in ``[0, num_channels)``
3. result buffer is at least as long as the source buffer
4. ``height * width * num_channels`` fits in the source buffer
"""

from typing import Optional

import numpy as np

__all__ = ["explain_convolution_failure", "explain_transpose_failure"]


def _shape_failure(source_len, height, width, num_channels) -> Optional[str]:
    if height < 0 or width < 0 or num_channels < 0:
        return (f"Image shape ({height}, {width}, {num_channels}) "
                f"has a negative dimension")
    needed = height * width * num_channels
    if needed > source_len:
        return (f"Image shape ({height}, {width}, {num_channels}) needs "
                f"{needed} samples but the source holds {source_len}")
    return None


def convolution_failure(kernel_len, source_len, result_len, height, width,
                        num_channels, channel_index) -> Optional[str]:
    """Reason the convolution arguments are invalid, or None."""
    if kernel_len % 2 != 1:
        return f"Kernel length must be odd, got {kernel_len}"
    if channel_index < 0 or channel_index >= num_channels:
        return (f"Channel index {channel_index} out of range "
                f"for {num_channels} channel(s)")
    if result_len < source_len:
        return (f"Result buffer holds {result_len} samples, "
                f"fewer than the source's {source_len}")
    return _shape_failure(source_len, height, width, num_channels)


def transpose_failure(source_len, result_len, height, width,
                      num_channels) -> Optional[str]:
    """Reason the transpose arguments are invalid, or None."""
    if result_len < source_len:
        return (f"Result buffer holds {result_len} samples, "
                f"fewer than the source's {source_len}")
    return _shape_failure(source_len, height, width, num_channels)


def flat_source(image) -> np.ndarray:
    """Return *image* as a flat numpy array (a view when possible)."""
    return np.asarray(image).reshape(-1)


def flat_result(result) -> np.ndarray:
    """Return a flat view of *result* that writes through to caller memory.

    Raises:
        TypeError: If *result* is not a floating-point numpy array.
        ValueError: If *result* is read-only or not C-contiguous.
    """
    if not isinstance(result, np.ndarray):
        raise TypeError(
            f"Result buffer must be a numpy array, got {type(result).__name__}"
        )
    if not np.issubdtype(result.dtype, np.floating):
        raise TypeError(
            f"Result buffer must have a floating-point dtype, got {result.dtype}"
        )
    if not result.flags.writeable:
        raise ValueError("Result buffer is read-only")
    if not result.flags.c_contiguous:
        raise ValueError("Result buffer must be C-contiguous")
    return result.reshape(-1)


def explain_convolution_failure(kernel, image, height, width, num_channels,
                                channel_index, result) -> Optional[str]:
    """Explain why a convolution call with these arguments returns False.

    Returns:
        A message for the first failed precondition, or None if the
        arguments are valid.
    """
    return convolution_failure(
        len(kernel), np.size(image), np.size(result),
        height, width, num_channels, channel_index,
    )


def explain_transpose_failure(image, height, width, num_channels,
                              result) -> Optional[str]:
    """Explain why ``transpose_planar`` with these arguments returns False."""
    return transpose_failure(
        np.size(image), np.size(result), height, width, num_channels,
    )
