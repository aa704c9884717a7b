"""Bit-level view of float64 values: reinterpretation, fields, classification."""

import struct
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Layer 1: Constants
# ---------------------------------------------------------------------------

MASK64: int = 0xFFFFFFFFFFFFFFFF
SIGN_MASK: int = 0x8000000000000000
MAGNITUDE_MASK: int = 0x7FFFFFFFFFFFFFFF
SIGNIFICAND_MASK: int = 0x000FFFFFFFFFFFFF
POS_INF_BITS: int = 0x7FF0000000000000
NEG_INF_BITS: int = SIGN_MASK | POS_INF_BITS
MAX_FINITE_BITS: int = 0x7FEFFFFFFFFFFFFF

EXP_ALL_ONES: int = 0x7FF
EXP_BIAS: int = 1023
SIGNIFICAND_WIDTH: int = 52

# Sentinel returned by the exponent extractors for Inf and NaN (2**1024 = Inf).
EXP_SENTINEL: int = 1024

MAX_FLOAT: float = 1.7976931348623157e308
MIN_SUBNORMAL: float = 5e-324
MIN_NORMAL: float = 2.2250738585072014e-308


# ---------------------------------------------------------------------------
# Layer 2: Reinterpretation
# ---------------------------------------------------------------------------


def bits(x: float) -> int:
    """Raw 64-bit pattern of x as an unsigned int. NaN payloads are kept."""
    try:
        return struct.unpack("<Q", struct.pack("<d", x))[0]
    except struct.error:
        raise TypeError(
            f"Expected float but got {x!r} of type {type(x).__name__}"
        ) from None


def from_bits(u: int) -> float:
    """Float whose storage is the low 64 bits of u."""
    return struct.unpack("<d", struct.pack("<Q", u & MASK64))[0]


# ---------------------------------------------------------------------------
# Layer 3: Fields
# ---------------------------------------------------------------------------


def sign_bit(u: int) -> int:
    return (u >> 63) & 1


def exponent_bits(u: int) -> int:
    return (u >> SIGNIFICAND_WIDTH) & EXP_ALL_ONES


def significand_bits(u: int) -> int:
    return u & SIGNIFICAND_MASK


def pack(sign: int, exp: int, sig: int) -> int:
    """Assemble a pattern from already in-range fields."""
    return ((sign & 1) << 63) | ((exp & EXP_ALL_ONES) << SIGNIFICAND_WIDTH) | (
        sig & SIGNIFICAND_MASK
    )


def magnitude(x: float) -> int:
    """Pattern of x with the sign bit cleared.

    Inf maps to POS_INF_BITS exactly and every NaN lands above it, so one
    comparison against POS_INF_BITS classifies a value.
    """
    return bits(x) & MAGNITUDE_MASK


@dataclass(frozen=True)
class Float64Fields:
    """The three IEEE 754 fields of a float64, as stored (exponent biased)."""

    sign: int
    exponent: int
    significand: int

    @property
    def pattern(self) -> int:
        return pack(self.sign, self.exponent, self.significand)


def decompose(x: float) -> Float64Fields:
    u: int = bits(x)
    return Float64Fields(sign_bit(u), exponent_bits(u), significand_bits(u))


def compose(fields: Float64Fields) -> float:
    return from_bits(fields.pattern)


# ---------------------------------------------------------------------------
# Layer 4: Classification
# ---------------------------------------------------------------------------


def is_inf(x: float) -> bool:
    return magnitude(x) == POS_INF_BITS


def is_finite(x: float) -> bool:
    return magnitude(x) < POS_INF_BITS


def is_nan(x: float) -> bool:
    return x != x


def is_nan_bits(u: int) -> bool:
    return (u & MAGNITUDE_MASK) > POS_INF_BITS
