"""Bit-exact tools for IEEE 754 float64: ULPs, neighbors, classification, sampling."""

from .bitview import (
    MAX_FLOAT,
    MIN_NORMAL,
    MIN_SUBNORMAL,
    Float64Fields,
    bits,
    compose,
    decompose,
    from_bits,
    is_finite,
    is_inf,
    is_nan,
)
from .dim import fmax, fmin
from .neighbor import (
    next_away_from_zero,
    next_away_from_zero_fp,
    next_toward_zero,
    next_toward_zero_fp,
    ulp_fp,
)
from .prng import (
    SplitMix64,
    finite_from_bits,
    random_finite,
    random_finite_resample,
    splitmix_step,
)
from .ulp import (
    MAX_DISTANCE,
    adjacent,
    adjacent_fp,
    is_power_of_two,
    log2,
    log_ulp,
    ulp,
    ulps_between,
)
