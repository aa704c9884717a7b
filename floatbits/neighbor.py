"""Stepping to the neighboring float toward or away from zero.

The exact functions move the bit pattern by one and cover every input. The
``*_fp`` variants use plain float arithmetic and are only exact
above a magnitude threshold; below it they return x unchanged.
"""

from .bitview import (
    MAGNITUDE_MASK,
    POS_INF_BITS,
    bits,
    from_bits,
)

# 1 - 2**-53 is the float just below 1.0 (3FEFFFFFFFFFFFFF).
TOWARD_ZERO_FACTOR: float = 1 - 2.0**-53
# x * (1 + 2**-52) does not round to the next float away from zero for every
# significand; a step of 0x1.25p-53 does.
AWAY_FROM_ZERO_STEP: float = float.fromhex("0x1.25p-53")

# Smallest magnitudes for which the *_fp variants are exact.
TOWARD_ZERO_FP_MIN: float = 2.0**-1022
AWAY_FROM_ZERO_FP_MIN: float = 2.0**-1019


def next_toward_zero(x: float) -> float:
    """Next float after x toward zero; same result as math.nextafter(x, 0.0).

    next_toward_zero(+/-inf)      = +/-MAX
    next_toward_zero(nan)         = nan (unchanged)
    next_toward_zero(+/-0.0)      = +/-0.0
    next_toward_zero(2**-1074)    = 0.0
    next_toward_zero(-2**-1074)   = -0.0
    """
    u: int = bits(x)
    m: int = u & MAGNITUDE_MASK
    if m == 0 or m > POS_INF_BITS:
        return x
    return from_bits(u - 1)


def next_away_from_zero(x: float) -> float:
    """Next float after x away from zero.

    next_away_from_zero(nan)      = nan (unchanged)
    next_away_from_zero(+/-inf)   = +/-inf
    next_away_from_zero(+/-MAX)   = +/-inf
    next_away_from_zero(0.0)      = 2**-1074
    next_away_from_zero(-0.0)     = -2**-1074
    """
    u: int = bits(x)
    if (u & MAGNITUDE_MASK) >= POS_INF_BITS:
        return x
    return from_bits(u + 1)


def next_toward_zero_fp(x: float) -> float:
    """next_toward_zero for abs(x) > 2**-1022; returns x for subnormals."""
    return x * TOWARD_ZERO_FACTOR


def next_away_from_zero_fp(x: float) -> float:
    """next_away_from_zero for abs(x) >= 2**-1019.

    For tiny magnitudes the added step rounds to zero and x is returned.
    """
    return x + x * AWAY_FROM_ZERO_STEP


def ulp_fp(x: float) -> float:
    """Gap between x and its neighbor toward zero, for abs(x) > 2**-1022.

    For a power of two this is half of ulp(x). ulp_fp(+/-inf) = nan (inf - inf),
    and for abs(x) <= 2**-1022 the result is 0.0.
    """
    y: float = x - next_toward_zero_fp(x)
    if y < 0:
        return -y
    return y
