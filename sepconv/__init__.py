"""sepconv — separable 1D convolution over planar and interleaved images."""

from .planar import convolve_horizontal_planar, convolve_vertical_planar
from .interleaved import convolve_horizontal_interleaved, convolve_vertical_interleaved
from .transpose import transpose_planar
from .separable import (
    convolve_separable_planar, convolve_separable_interleaved,
    convolve_vertical_planar_via_transpose,
)
from .kernel import box_kernel, binomial_kernel, center_tap, is_valid_kernel
from ._validation import explain_convolution_failure, explain_transpose_failure

__all__ = ["convolve_horizontal_planar", "convolve_vertical_planar",
           "convolve_horizontal_interleaved", "convolve_vertical_interleaved",
           "transpose_planar", "convolve_separable_planar",
           "convolve_separable_interleaved",
           "convolve_vertical_planar_via_transpose",
           "box_kernel", "binomial_kernel", "center_tap", "is_valid_kernel",
           "explain_convolution_failure", "explain_transpose_failure"]
