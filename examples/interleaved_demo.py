#!/usr/bin/env python3
"""Interleaved convolution demo: blur one channel of a tiny 2-channel image.

Prints a 4x4 interleaved image, then the result of a 3-tap horizontal box
blur on channel 0, then the result of the vertical blur.  Border pixels
stay at zero because the result buffer is zeroed before each pass.

Requirements: none beyond sepconv itself
"""

import numpy as np

from sepconv import (
    box_kernel, convolve_horizontal_interleaved, convolve_vertical_interleaved,
)
from sepconv.layout import print_interleaved_image

HEIGHT, WIDTH, CHANNELS = 4, 4, 2


def main():
    src = np.array([
        1.0, 0, 2.0, 0, 3.0, 0, 1.0, 0,
        2.0, 0, 6.0, 0, 7.0, 0, 2.0, 0,
        3.5, 0, 2.5, 0, 3.5, 0, 3.5, 0,
        4.5, 0, 6.5, 0, 7.5, 0, 4.5, 0,
    ], dtype=np.float32)
    dst = np.zeros_like(src)
    blur = box_kernel(3)

    convolve_horizontal_interleaved(blur, src, HEIGHT, WIDTH, CHANNELS, 0, dst)

    print("The source matrix is:")
    print_interleaved_image(src, HEIGHT, WIDTH, CHANNELS)

    print("\n\nThe dst matrix after horiz convolve is:")
    print_interleaved_image(dst, HEIGHT, WIDTH, CHANNELS)

    dst.fill(0.0)
    convolve_vertical_interleaved(blur, src, HEIGHT, WIDTH, CHANNELS, 0, dst)

    print("\n\nThe dst matrix after vert convolve is:")
    print_interleaved_image(dst, HEIGHT, WIDTH, CHANNELS)


if __name__ == "__main__":
    main()
