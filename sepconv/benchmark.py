"""Benchmark planar vs interleaved separable convolution.

Times each pass (every channel of one image) over a number of iterations
and writes one CSV row per pass per iteration.  Images are filled from an
explicitly seeded generator, so two runs with the same seed convolve the
same data.

Usage:
    python -m sepconv.benchmark 480 640 3 20
    python -m sepconv.benchmark 480 640 3 20 --kernel-size 5 --seed 7
    python -m sepconv.benchmark 1080 1920 4 10 --output timings.csv --verbose
"""

import argparse
import csv
import sys
import time
import warnings
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np

from ._constants import (
    DEFAULT_DTYPE, DEFAULT_KERNEL_SIZE, LAYOUT_PLANAR, LAYOUT_INTERLEAVED,
)
from ._validation import explain_convolution_failure, explain_transpose_failure
from .interleaved import convolve_horizontal_interleaved, convolve_vertical_interleaved
from .kernel import box_kernel
from .planar import convolve_horizontal_planar, convolve_vertical_planar
from .separable import convolve_vertical_planar_via_transpose
from .transpose import transpose_planar

__all__ = ["BenchmarkConfig", "BenchmarkPass", "PassTiming", "PASSES",
           "random_image", "run_benchmark", "write_csv", "main"]

CSV_HEADER = ("iteration", "pass", "height", "width", "depth", "elapsed_ms")


@dataclass
class BenchmarkConfig:
    """Shape and repetition settings for one benchmark run."""
    height: int
    width: int
    depth: int
    iterations: int
    kernel_size: int = DEFAULT_KERNEL_SIZE
    seed: int = 0
    dtype: type = field(default=DEFAULT_DTYPE)

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        for name in ("height", "width", "depth", "iterations"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value}")
        if self.kernel_size <= 0 or self.kernel_size % 2 == 0:
            raise ValueError(
                f"kernel_size must be a positive odd integer, got {self.kernel_size}"
            )

    @property
    def num_samples(self) -> int:
        return self.height * self.width * self.depth


@dataclass
class PassTiming:
    """Elapsed wall time of one pass in one iteration."""
    iteration: int
    pass_name: str
    height: int
    width: int
    depth: int
    elapsed_ms: float

    def as_row(self):
        return (self.iteration, self.pass_name, self.height, self.width,
                self.depth, f"{self.elapsed_ms:.6f}")


# ── Passes ────────────────────────────────────────────────────────────────
#
# Each pass receives the kernel, the source image in its layout, the config
# and a pre-zeroed result buffer, and returns False as soon as a call fails.

def _per_channel(fn):
    def run(kernel, image, cfg, result):
        for ch in range(cfg.depth):
            if not fn(kernel, image, cfg.height, cfg.width, cfg.depth, ch, result):
                return False
        return True
    return run


def _transpose(kernel, image, cfg, result):
    return transpose_planar(image, cfg.height, cfg.width, cfg.depth, result)


def _explain_convolution(kernel, image, cfg, result):
    return explain_convolution_failure(kernel, image, cfg.height, cfg.width,
                                       cfg.depth, 0, result)


def _explain_transpose(kernel, image, cfg, result):
    return explain_transpose_failure(image, cfg.height, cfg.width, cfg.depth,
                                     result)


@dataclass(frozen=True)
class BenchmarkPass:
    """A named, timed strategy over one layout."""
    name: str
    layout: str
    run: Callable
    explain: Callable = _explain_convolution


PASSES: Dict[str, BenchmarkPass] = {p.name: p for p in (
    BenchmarkPass("planar_horizontal", LAYOUT_PLANAR,
                  _per_channel(convolve_horizontal_planar)),
    BenchmarkPass("planar_vertical", LAYOUT_PLANAR,
                  _per_channel(convolve_vertical_planar)),
    BenchmarkPass("planar_transpose", LAYOUT_PLANAR, _transpose,
                  _explain_transpose),
    BenchmarkPass("planar_vertical_via_transpose", LAYOUT_PLANAR,
                  _per_channel(convolve_vertical_planar_via_transpose)),
    BenchmarkPass("interleaved_horizontal", LAYOUT_INTERLEAVED,
                  _per_channel(convolve_horizontal_interleaved)),
    BenchmarkPass("interleaved_vertical", LAYOUT_INTERLEAVED,
                  _per_channel(convolve_vertical_interleaved)),
)}


def random_image(rng: np.random.Generator, size: int,
                 dtype=DEFAULT_DTYPE) -> np.ndarray:
    """Flat image of *size* samples drawn uniformly from [0, 1)."""
    return rng.random(size, dtype=dtype)


def run_benchmark(config: BenchmarkConfig,
                  rng: Optional[np.random.Generator] = None,
                  passes: Optional[List[str]] = None,
                  verbose: bool = False) -> List[PassTiming]:
    """Run every selected pass ``config.iterations`` times.

    Args:
        config: Image shape, iteration count and kernel size.
        rng: Generator for the image data.  Defaults to
            ``np.random.default_rng(config.seed)``.
        passes: Names from :data:`PASSES` to run (default: all, in order).
        verbose: Print per-iteration progress to stderr.

    Returns:
        One :class:`PassTiming` per pass per iteration.

    Raises:
        ValueError: If *config* is invalid or a pass name is unknown.
        RuntimeError: If a convolution or transpose call reports failure.
    """
    config.validate()
    if rng is None:
        rng = np.random.default_rng(config.seed)
    names = list(PASSES) if passes is None else list(passes)
    unknown = [n for n in names if n not in PASSES]
    if unknown:
        raise ValueError(f"Unknown pass(es) {unknown}. Available: {list(PASSES)}")

    if min(config.height, config.width) < config.kernel_size:
        warnings.warn(
            f"Image {config.height}x{config.width} is smaller than the "
            f"{config.kernel_size}-tap kernel; some passes have no interior "
            f"to compute",
            RuntimeWarning,
            stacklevel=2,
        )

    kernel = box_kernel(config.kernel_size, dtype=config.dtype)
    n = config.num_samples
    timings = []

    for it in range(config.iterations):
        images = {
            LAYOUT_PLANAR: random_image(rng, n, config.dtype),
            LAYOUT_INTERLEAVED: random_image(rng, n, config.dtype),
        }
        for name in names:
            bench = PASSES[name]
            image = images[bench.layout]
            result = np.zeros(n, dtype=config.dtype)

            t0 = time.perf_counter()
            ok = bench.run(kernel, image, config, result)
            elapsed_ms = (time.perf_counter() - t0) * 1000.0

            if not ok:
                reason = bench.explain(kernel, image, config, result)
                raise RuntimeError(f"Pass {name} failed: {reason}")
            timings.append(PassTiming(it, name, config.height, config.width,
                                      config.depth, elapsed_ms))

        if verbose:
            last = timings[-len(names):]
            summary = ", ".join(f"{t.pass_name}={t.elapsed_ms:.3f} ms" for t in last)
            print(f"[benchmark] iteration {it + 1}/{config.iterations}: {summary}",
                  file=sys.stderr)

    return timings


def write_csv(timings: List[PassTiming], fp) -> None:
    """Write *timings* as CSV (with header) to the open text file *fp*."""
    writer = csv.writer(fp, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for t in timings:
        writer.writerow(t.as_row())


def _positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def _odd_positive_int(text):
    value = _positive_int(text)
    if value % 2 == 0:
        raise argparse.ArgumentTypeError(f"kernel size must be odd, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sepconv-benchmark",
        description="Time planar vs interleaved separable convolution passes",
    )
    parser.add_argument("height", type=_positive_int, help="Image height")
    parser.add_argument("width", type=_positive_int, help="Image width")
    parser.add_argument("depth", type=_positive_int, help="Number of channels")
    parser.add_argument("iterations", type=_positive_int,
                        help="Timed iterations per pass")
    parser.add_argument("--kernel-size", type=_odd_positive_int,
                        default=DEFAULT_KERNEL_SIZE,
                        help=f"Box kernel taps (default: {DEFAULT_KERNEL_SIZE})")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for the random image data (default: 0)")
    parser.add_argument("--passes", nargs="+", choices=sorted(PASSES),
                        default=None, help="Passes to run (default: all)")
    parser.add_argument("--output", type=str, default=None,
                        help="Write CSV to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true",
                        help="Print progress to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = BenchmarkConfig(
        height=args.height, width=args.width, depth=args.depth,
        iterations=args.iterations, kernel_size=args.kernel_size,
        seed=args.seed,
    )

    if args.verbose:
        print(f"[benchmark] {config.height}x{config.width}x{config.depth}, "
              f"{config.iterations} iteration(s), {config.kernel_size}-tap kernel, "
              f"seed {config.seed}", file=sys.stderr)

    try:
        timings = run_benchmark(config, passes=args.passes, verbose=args.verbose)
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", newline="") as f:
            write_csv(timings, f)
        if args.verbose:
            print(f"[benchmark] Results saved to {args.output}", file=sys.stderr)
    else:
        write_csv(timings, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
