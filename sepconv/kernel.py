"""1D convolution kernels.

A kernel is any ordered, fixed-length sequence of real weights that supports
``len()`` and integer indexing (list, tuple, numpy array).  Its length must
be odd so that there is a single center tap at ``len(kernel) // 2``.

Usage::

    k = box_kernel(3)              # [1/3, 1/3, 1/3]
    g = binomial_kernel(5)         # [1, 4, 6, 4, 1] / 16
    center_tap(g)                  # 2
"""

import math

import numpy as np

from ._constants import DEFAULT_DTYPE

__all__ = ["center_tap", "is_valid_kernel", "as_weights",
           "box_kernel", "binomial_kernel"]


def center_tap(kernel) -> int:
    """Index of the tap aligned with the output sample (``len // 2``)."""
    return len(kernel) // 2


def is_valid_kernel(kernel) -> bool:
    """True if *kernel* has an odd length (and therefore a unique center)."""
    return len(kernel) % 2 == 1


def as_weights(kernel, dtype=DEFAULT_DTYPE) -> np.ndarray:
    """Return the kernel weights as a 1-D numpy array of *dtype*.

    No copy is made when *kernel* already is a 1-D array of that dtype.
    """
    return np.asarray(kernel, dtype=dtype).reshape(-1)


def _check_size(size):
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"Kernel size must be an integer, got {size!r}")
    if size <= 0 or size % 2 == 0:
        raise ValueError(f"Kernel size must be a positive odd integer, got {size}")


def box_kernel(size: int, dtype=DEFAULT_DTYPE) -> np.ndarray:
    """Uniform averaging kernel of *size* taps, each ``1 / size``.

    Args:
        size: Number of taps.  Must be a positive odd integer.
        dtype: numpy dtype of the returned weights.

    Returns:
        1-D numpy array of length *size*.

    Raises:
        ValueError: If *size* is not a positive odd integer.
    """
    _check_size(size)
    return np.full(size, 1.0 / size, dtype=dtype)


def binomial_kernel(size: int, normalize: bool = True,
                    dtype=DEFAULT_DTYPE) -> np.ndarray:
    """Binomial (Pascal's triangle) approximation of a Gaussian.

    Row ``size - 1`` of Pascal's triangle, e.g. ``[1, 4, 6, 4, 1]`` for
    ``size=5``.  The outer product of this kernel with itself is the usual
    separable Gaussian (sum 256 for the 5-tap version).

    Args:
        size: Number of taps.  Must be a positive odd integer.
        normalize: Divide by ``2 ** (size - 1)`` so the weights sum to 1.
        dtype: numpy dtype of the returned weights.

    Returns:
        1-D numpy array of length *size*.

    Raises:
        ValueError: If *size* is not a positive odd integer.
    """
    _check_size(size)
    n = size - 1
    weights = np.array([math.comb(n, k) for k in range(size)], dtype=np.float64)
    if normalize:
        weights /= 2.0 ** n
    return weights.astype(dtype)
