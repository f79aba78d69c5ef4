"""Windowed weighted sum along one axis of a 2D view.

Both layouts reduce to the same operation once the selected channel is
viewed as a (rows, cols) array: planar channels are contiguous blocks,
interleaved channels are strided views with step ``num_channels``.
"""

import numpy as np


def convolve_axis(weights: np.ndarray, src: np.ndarray, dst: np.ndarray,
                  axis: int) -> None:
    """Convolve the interior of *src* along *axis*, writing into *dst*.

    Positions closer than ``len(weights) // 2`` to either end of *axis*
    are left untouched in *dst*.  Taps are accumulated in kernel order,
    starting from zero, in the dtype of *dst*.

    Args:
        weights: 1-D kernel weights of odd length.
        src: 2-D source view.
        dst: 2-D destination view with the same shape as *src*.
        axis: 1 for a horizontal pass, 0 for a vertical pass.
    """
    taps = len(weights)
    center = taps // 2
    length = src.shape[axis]
    interior = length - 2 * center
    if interior <= 0 or src.size == 0:
        return

    if axis == 1:
        acc = np.zeros((src.shape[0], interior), dtype=dst.dtype)
        for k in range(taps):
            acc += weights[k] * src[:, k:k + interior]
        dst[:, center:length - center] = acc
    else:
        acc = np.zeros((interior, src.shape[1]), dtype=dst.dtype)
        for k in range(taps):
            acc += weights[k] * src[k:k + interior, :]
        dst[center:length - center, :] = acc
