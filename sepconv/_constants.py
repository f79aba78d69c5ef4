"""Shared constants for the sepconv package."""

import numpy as np

# Layout names the benchmark uses to pick the source image for a pass.
# Planar: every channel is a contiguous H*W block.
# Interleaved: the C samples of one pixel are adjacent.
LAYOUT_PLANAR = "planar"
LAYOUT_INTERLEAVED = "interleaved"

# Sample type used by the benchmark and the kernel factories.
DEFAULT_DTYPE = np.float32

# Box blur width used when no kernel size is given.
DEFAULT_KERNEL_SIZE = 3
