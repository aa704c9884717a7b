"""Pytest configuration and shared float64 helpers for the floatbits suite."""

import random
import struct
import sys
from pathlib import Path

import pytest

# Add the project root to the path so the suite runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

DEFAULT_ROUNDS = 200_000
DEFAULT_SEED = 1


def pytest_addoption(parser):
    """Add --rounds and --seed options for the randomized tests."""
    parser.addoption(
        "--rounds",
        action="store",
        type=int,
        default=DEFAULT_ROUNDS,
        help="Random rounds per randomized test",
    )
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=DEFAULT_SEED,
        help="SplitMix64 seed for randomized tests",
    )


@pytest.fixture
def rounds(request) -> int:
    return request.config.getoption("rounds")


@pytest.fixture
def seed(request) -> int:
    return request.config.getoption("seed")


def f2i(f: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", f))[0]


def i2f(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i))[0]


# ---------------------------------------------------------------------------
# Weighted random generation (TestFloat-style)
# ---------------------------------------------------------------------------

# Exponents likely to trigger edge cases
SPECIAL_EXPS = [
    0x000,  # subnormal / zero
    0x001,  # smallest normal, ULP still 2^-1074
    0x002,  # first binade with a larger ULP
    0x034,  # last exponent with a subnormal-pattern ULP
    0x035,
    0x3FE,  # 0.5 .. 1.0
    0x3FF,  # 1.0 .. 2.0
    0x433,  # 2^52 (ULP = 1)
    0x434,  # 2^53 (ULP = 2)
    0x7FE,  # largest finite
    0x7FF,  # inf / NaN
]

# Significands likely to trigger edge cases
SPECIAL_SIGS = [
    0x0000000000000,  # zero, powers of two
    0x0000000000001,  # smallest
    0x0000000000002,
    0x8000000000000,  # single high bit
    0xFFFFFFFFFFFFE,
    0xFFFFFFFFFFFFF,  # max
]


def weighted_f64(rng: random.Random) -> int:
    """Generate a float64 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    elif r < 50:
        exp = rng.randint(0, 0x7FF)
        sig = rng.choice(SPECIAL_SIGS)
    elif r < 60:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.choice(SPECIAL_SIGS)
    else:
        exp = rng.randint(0, 0x7FF)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    sign = rng.randint(0, 1)
    return (sign << 63) | (exp << 52) | sig


def weighted_finite(rng: random.Random) -> float:
    """A finite float from weighted_f64, redrawing inf / NaN patterns."""
    while True:
        u = weighted_f64(rng)
        if (u >> 52) & 0x7FF != 0x7FF:
            return i2f(u)
