#!/usr/bin/env python3
"""Blur an image file with the separable binomial kernel.

Loads an image with OpenCV (interleaved BGR), blurs every channel with the
horizontal + vertical pass in either layout, and writes the result.  Edge
pixels within ``ksize // 2`` of the border keep their original values
because the result buffer starts as a copy of the source.

Requirements: opencv-python (pip install sepconv[examples])

Usage:
    python examples/blur_image_example.py input.png output.png
    python examples/blur_image_example.py input.png output.png --ksize 7 --planar
"""

import argparse
import sys
import time

import cv2
import numpy as np

from sepconv import (
    binomial_kernel, convolve_separable_interleaved, convolve_separable_planar,
    explain_convolution_failure,
)
from sepconv.layout import interleaved_to_planar, planar_to_interleaved


def _odd_positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an odd positive integer, got {text!r}")
    if value <= 0 or value % 2 == 0:
        raise argparse.ArgumentTypeError(f"kernel size must be odd and positive, got {value}")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Separable binomial blur of an image file")
    parser.add_argument("input", help="Input image path")
    parser.add_argument("output", help="Output image path")
    parser.add_argument("--ksize", type=_odd_positive_int, default=5,
                        help="Odd kernel size (default: 5)")
    parser.add_argument("--planar", action="store_true",
                        help="Convert to planar layout before blurring")
    return parser.parse_args(argv)


def main():
    args = parse_args()
    frame = cv2.imread(args.input, cv2.IMREAD_COLOR)
    if frame is None:
        print(f"ERROR: cannot read {args.input}", file=sys.stderr)
        return 1

    height, width, channels = frame.shape
    kernel = binomial_kernel(args.ksize)
    src = frame.astype(np.float32).reshape(-1)

    if args.planar:
        planar = np.empty_like(src)
        interleaved_to_planar(src, height, width, channels, planar)
        src, convolve = planar, convolve_separable_planar
    else:
        convolve = convolve_separable_interleaved

    dst = src.copy()
    scratch = np.zeros_like(src)
    t0 = time.perf_counter()
    for ch in range(channels):
        if not convolve(kernel, src, height, width, channels, ch, dst,
                        scratch=scratch):
            reason = explain_convolution_failure(kernel, src, height, width,
                                                 channels, ch, dst)
            print(f"ERROR: channel {ch}: {reason}", file=sys.stderr)
            return 1
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    if args.planar:
        out = np.empty_like(dst)
        planar_to_interleaved(dst, height, width, channels, out)
        dst = out

    blurred = np.clip(np.round(dst), 0, 255).astype(np.uint8)
    cv2.imwrite(args.output, blurred.reshape(height, width, channels))
    layout = "planar" if args.planar else "interleaved"
    print(f"{width}x{height}x{channels} {layout}, {args.ksize}-tap kernel: "
          f"{elapsed_ms:.2f} ms -> {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
