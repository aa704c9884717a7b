"""Units in the last place: exponents, ULP size, ULP distance and adjacency.

Distances are measured along the sign-magnitude order of bit patterns: every
finite value, both infinities and the two zeros sit on one line, with -0 and
+0 at the same point.
"""

from .bitview import (
    EXP_ALL_ONES,
    EXP_BIAS,
    EXP_SENTINEL,
    MASK64,
    MAGNITUDE_MASK,
    MAX_FLOAT,
    POS_INF_BITS,
    SIGN_MASK,
    SIGNIFICAND_WIDTH,
    bits,
    from_bits,
    magnitude,
)

MAX_DISTANCE: int = MASK64

# Biased exponent of 1.0 plus the significand width: log2 of a step in the
# binade with biased exponent e is e - ULP_BIAS.
ULP_BIAS: int = EXP_BIAS + SIGNIFICAND_WIDTH
MIN_LOG_ULP: int = 1 - ULP_BIAS


# ---------------------------------------------------------------------------
# Exponents
# ---------------------------------------------------------------------------


def log2(x: float) -> int:
    """floor(log2(abs(x))) for finite nonzero x.

    For normal values this is the unbiased exponent. Subnormals are resolved
    from the position of the leading significand bit. Special cases:
    log2(+/-inf) = log2(nan) = 1024, log2(+/-0) = -1075.
    """
    u: int = magnitude(x)
    exp: int = u >> SIGNIFICAND_WIDTH
    if exp == 0:
        return u.bit_length() - ULP_BIAS
    return exp - EXP_BIAS


def log_ulp(x: float) -> int:
    """log2(ulp(x)) as an int, derived from the exponent field alone.

    log_ulp(+/-inf) = log_ulp(nan) = 1024 (2**1024 overflows to inf).
    """
    exp: int = magnitude(x) >> SIGNIFICAND_WIDTH
    if exp == EXP_ALL_ONES:
        return EXP_SENTINEL
    if exp > 0:
        return exp - ULP_BIAS
    return MIN_LOG_ULP


# ---------------------------------------------------------------------------
# ULP size and distance
# ---------------------------------------------------------------------------


def ulp(x: float) -> float:
    """Distance from x to the next float away from zero, always a power of two.

    When x is a power of two the step toward zero is ulp(x) / 2. The result is
    built directly as a bit pattern, without rounding.
    Special cases: ulp(+/-inf) = inf, ulp(nan) = nan with its payload.
    """
    u: int = magnitude(x)
    exp: int = u >> SIGNIFICAND_WIDTH
    if exp == EXP_ALL_ONES:
        return from_bits(u)
    if exp > SIGNIFICAND_WIDTH:
        return from_bits((exp - SIGNIFICAND_WIDTH) << SIGNIFICAND_WIDTH)
    if exp > 1:
        return from_bits(1 << (exp - 1))
    # Every step below 2**-1021 is the smallest subnormal.
    return from_bits(1)


def ulps_between(x: float, y: float) -> int:
    """Number of representable steps between x and y.

    ulps_between(+/-inf, +/-MAX)  = 1
    ulps_between(-inf, inf)       = 2**64 - 2**53
    ulps_between(x, nan)          = 2**64 - 1
    ulps_between(-0.0, 0.0)       = 0
    ulps_between(0.0, -2**-1074)  = 1
    """
    k: int = bits(x)
    n: int = bits(y)
    sign_differs: bool = (k ^ n) >= SIGN_MASK
    k &= MAGNITUDE_MASK
    n &= MAGNITUDE_MASK
    if k > POS_INF_BITS or n > POS_INF_BITS:
        return MAX_DISTANCE
    if sign_differs:
        return n + k
    if n > k:
        return n - k
    return k - n


# ---------------------------------------------------------------------------
# Adjacency
# ---------------------------------------------------------------------------


def adjacent(x: float, y: float) -> bool:
    """True if the bit patterns of x and y differ by exactly one.

    A constant-time stand-in for ulps_between(x, y) == 1 that only disagrees
    with it across the signed zeros:
    adjacent(0.0, -2**-1074) = adjacent(-0.0, 2**-1074) = False although both
    pairs are one step apart. adjacent(-0.0, 0.0) = False,
    adjacent(inf, MAX) = True, adjacent(x, nan) = False.
    """
    k: int = bits(x)
    n: int = bits(y)
    if (k & MAGNITUDE_MASK) > POS_INF_BITS or (n & MAGNITUDE_MASK) > POS_INF_BITS:
        return False
    d: int = (k - n) & MASK64
    return d == 1 or d == MASK64


def adjacent_fp(x: float, y: float) -> bool:
    """True if x and y are finite and adjacent, using float arithmetic only.

    Unlike adjacent(), this gets the signed-zero boundary right but never
    treats infinity as adjacent to anything:
    adjacent_fp(inf, MAX) = False, adjacent_fp(0.0, -2**-1074) = True,
    adjacent_fp(-0.0, 2**-1074) = True.
    """
    if x == y:
        return False
    # Halve before adding so that x + y cannot overflow.
    mean: float = x / 2 + y / 2
    if mean != x and mean != y:
        # Not neighbors, or a NaN is involved.
        return False
    return -MAX_FLOAT <= mean <= MAX_FLOAT


# ---------------------------------------------------------------------------
# Powers of two
# ---------------------------------------------------------------------------


def is_power_of_two(x: float) -> bool:
    """True if x is an integer power of two (2**-1074 .. 2**1023).

    x is a power of two iff:
        sig & (sig - 1) == 0     significand is zero or a single bit
        (sig > 0) != (e > 0)     exactly one of significand, exponent is zero
        e < 0x7FF                not inf, nan or negative
    e includes the sign bit, so every negative x fails the last test.
    """
    u: int = bits(x)
    e: int = u >> SIGNIFICAND_WIDTH
    sig: int = (u << 12) & MASK64
    return sig & (sig - 1) == 0 and (sig > 0) != (e > 0) and e < EXP_ALL_ONES
