"""Index math, shaped views and conversions for planar / interleaved buffers.

Buffers are flat; their shape and layout travel alongside them.  These
helpers are what the convolution routines, the benchmark and the demo use
to address individual samples and to move an image between layouts.

Planar:       index(c, r, w) = c * H * W + r * W + w
Interleaved:  index(c, r, w) = r * W * C + w * C + c
"""

import numpy as np

from ._validation import transpose_failure, flat_source, flat_result

__all__ = [
    "planar_index", "interleaved_index",
    "planar_view", "interleaved_view",
    "planar_to_interleaved", "interleaved_to_planar",
    "format_planar_image", "format_interleaved_image",
    "print_planar_image", "print_interleaved_image",
]


def planar_index(channel: int, row: int, col: int,
                 height: int, width: int) -> int:
    """Flat index of sample (channel, row, col) in a planar buffer."""
    return channel * height * width + row * width + col


def interleaved_index(channel: int, row: int, col: int,
                      width: int, num_channels: int) -> int:
    """Flat index of sample (channel, row, col) in an interleaved buffer."""
    return row * width * num_channels + col * num_channels + channel


def _shaped(buf, height, width, num_channels, shape):
    flat = flat_source(buf)
    n = height * width * num_channels
    if n > flat.size:
        raise ValueError(
            f"Image shape ({height}, {width}, {num_channels}) needs {n} "
            f"samples but the buffer holds {flat.size}"
        )
    return flat[:n].reshape(shape)


def planar_view(buf, height: int, width: int, num_channels: int) -> np.ndarray:
    """(num_channels, height, width) view of a planar buffer.

    Raises:
        ValueError: If the buffer is shorter than the shape requires.
    """
    return _shaped(buf, height, width, num_channels,
                   (num_channels, height, width))


def interleaved_view(buf, height: int, width: int,
                     num_channels: int) -> np.ndarray:
    """(height, width, num_channels) view of an interleaved buffer.

    Raises:
        ValueError: If the buffer is shorter than the shape requires.
    """
    return _shaped(buf, height, width, num_channels,
                   (height, width, num_channels))


def planar_to_interleaved(image, height: int, width: int, num_channels: int,
                          result) -> bool:
    """Copy a planar image into *result* in interleaved layout.

    Uses the same size checks as :func:`sepconv.transpose_planar` and
    returns False (no writes) when they fail.
    """
    source = flat_source(image)
    if transpose_failure(source.size, np.size(result), height, width,
                         num_channels) is not None:
        return False
    n = height * width * num_channels
    dst = flat_result(result)[:n].reshape(height, width, num_channels)
    dst[...] = source[:n].reshape(num_channels, height, width).transpose(1, 2, 0)
    return True


def interleaved_to_planar(image, height: int, width: int, num_channels: int,
                          result) -> bool:
    """Copy an interleaved image into *result* in planar layout."""
    source = flat_source(image)
    if transpose_failure(source.size, np.size(result), height, width,
                         num_channels) is not None:
        return False
    n = height * width * num_channels
    dst = flat_result(result)[:n].reshape(num_channels, height, width)
    dst[...] = source[:n].reshape(height, width, num_channels).transpose(2, 0, 1)
    return True


def _fmt(value) -> str:
    return f"{float(value):g}"


def format_planar_image(buf, height: int, width: int,
                        num_channels: int) -> str:
    """Render a planar image one channel at a time, one row per line."""
    planes = planar_view(buf, height, width, num_channels)
    lines = []
    for ch in range(num_channels):
        lines.append(f"Channel {ch}")
        for row in planes[ch]:
            lines.append("{ " + "".join(f"{_fmt(v)}, " for v in row) + " }")
    return "\n".join(lines)


def format_interleaved_image(buf, height: int, width: int,
                             num_channels: int) -> str:
    """Render an interleaved image one row per line, pixels in braces."""
    pixels = interleaved_view(buf, height, width, num_channels)
    lines = []
    for row in pixels:
        cells = ("{ " + "".join(f"{_fmt(v)}, " for v in px) + "}, "
                 for px in row)
        lines.append("[ " + "".join(cells) + "]")
    return "\n".join(lines)


def print_planar_image(buf, height, width, num_channels, file=None):
    """Print :func:`format_planar_image` output (stdout by default)."""
    print(format_planar_image(buf, height, width, num_channels), file=file)


def print_interleaved_image(buf, height, width, num_channels, file=None):
    """Print :func:`format_interleaved_image` output (stdout by default)."""
    print(format_interleaved_image(buf, height, width, num_channels), file=file)
