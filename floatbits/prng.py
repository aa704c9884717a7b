"""SplitMix64 generator and uniform sampling over finite float64 patterns.

Reference: http://prng.di.unimi.it/splitmix64.c

The generator is not cryptographically secure. Its whole state is one 64-bit
word held by a SplitMix64 instance; every draw advances that word in place.
"""

from dataclasses import dataclass

from .bitview import (
    EXP_ALL_ONES,
    MASK64,
    MAGNITUDE_MASK,
    POS_INF_BITS,
    SIGNIFICAND_WIDTH,
    from_bits,
)

GOLDEN_GAMMA: int = 0x9E3779B97F4A7C15
MIX_MUL1: int = 0xBF58476D1CE4E5B9
MIX_MUL2: int = 0x94D049BB133111EB


def wrapping_add(a: int, b: int) -> int:
    return (a + b) & MASK64


def wrapping_mul(a: int, b: int) -> int:
    return (a * b) & MASK64


@dataclass
class SplitMix64:
    """A splitmix64 state word. Any 64-bit value is a valid seed.

    Instances are not shared between threads by the library; give each
    concurrent caller its own.
    """

    state: int = 0

    def __post_init__(self) -> None:
        self.state = self.state & MASK64

    def next_u64(self) -> int:
        return splitmix_step(self)

    def random_finite(self) -> float:
        return random_finite(self)


def splitmix_step(rng: SplitMix64) -> int:
    """Advance rng.state by the golden gamma and return the mixed output."""
    rng.state = wrapping_add(rng.state, GOLDEN_GAMMA)
    z: int = rng.state
    z = wrapping_mul(z ^ (z >> 30), MIX_MUL1)
    z = wrapping_mul(z ^ (z >> 27), MIX_MUL2)
    return z ^ (z >> 31)


def finite_from_bits(u: int) -> float:
    """from_bits(u), except that an all-ones exponent (inf/nan) is replaced.

    The replacement exponent is u % 0x7FF, in 0 .. 0x7FE. The modulo favours
    small exponents very slightly.
    """
    u = u & MASK64
    if (u & MAGNITUDE_MASK) >= POS_INF_BITS:
        u = (u & ~POS_INF_BITS) | ((u % EXP_ALL_ONES) << SIGNIFICAND_WIDTH)
    return from_bits(u)


def random_finite(rng: SplitMix64) -> float:
    """A finite float64 drawn from [-MAX, MAX] with one generator step.

    Every finite pattern has probability close to 1 / (2**64 - 2**53); the
    remapped inf/nan patterns add a small bias, see finite_from_bits.
    """
    return finite_from_bits(splitmix_step(rng))


def random_finite_resample(rng: SplitMix64) -> float:
    """A finite float64 drawn exactly uniformly over the finite patterns.

    Draws with an all-ones exponent (1 in 2048) are discarded and redrawn.
    """
    u: int = splitmix_step(rng)
    while u & POS_INF_BITS == POS_INF_BITS:
        u = splitmix_step(rng)
    return from_bits(u)
