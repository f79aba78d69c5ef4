"""Pytest configuration and shared fixtures for sepconv tests."""

import numpy as np
import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow", action="store_true", default=False,
        help="Run tests that benchmark full-size images",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full-size image benchmarks")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-slow"):
        skip_slow = pytest.mark.skip(reason="needs --run-slow option to run")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# 4x4 image, 2 channels, interleaved; channel 1 is all zeros.
INTERLEAVED_2CH = np.array([
    1.0, 0, 2.0, 0, 3.0, 0, 1.0, 0,
    2.0, 0, 6.0, 0, 7.0, 0, 2.0, 0,
    3.5, 0, 2.5, 0, 3.5, 0, 3.5, 0,
    4.5, 0, 6.5, 0, 7.5, 0, 4.5, 0,
], dtype=np.float32)


@pytest.fixture
def interleaved_2ch():
    """(image, height, width, num_channels) for the 4x4x2 reference image."""
    return INTERLEAVED_2CH.copy(), 4, 4, 2


@pytest.fixture
def blur3():
    """Three-tap box kernel, the same literal the reference values use."""
    return np.array([1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0], dtype=np.float32)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
