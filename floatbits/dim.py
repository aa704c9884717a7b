"""Min and max that order signed zeros and propagate NaN payloads.

Built from comparisons only. A NaN operand is returned as is, so its payload
survives; when both operands are NaN the first one wins. An infinity of the
selecting sign beats a NaN.
"""

from .bitview import MAX_FLOAT, bits, sign_bit


def fmin(x: float, y: float) -> float:
    """Smaller of x and y.

    fmin(x, -inf) = fmin(-inf, x) = -inf, even for x = nan
    fmin(x, nan)  = fmin(nan, x)  = nan
    fmin(-0.0, +/-0.0) = fmin(+/-0.0, -0.0) = -0.0
    """
    if x < y:
        return x
    if y < x:
        return y
    if x == y:
        if x == 0 and sign_bit(bits(x)):
            return x
        return y
    # At least one NaN from here on.
    if x < -MAX_FLOAT:
        return x
    if y < -MAX_FLOAT:
        return y
    if x != x:
        return x
    return y


def fmax(x: float, y: float) -> float:
    """Larger of x and y.

    fmax(x, inf) = fmax(inf, x) = inf, even for x = nan
    fmax(x, nan) = fmax(nan, x) = nan
    fmax(0.0, +/-0.0) = fmax(+/-0.0, 0.0) = 0.0
    """
    if x > y:
        return x
    if y > x:
        return y
    if x == y:
        if x == 0 and not sign_bit(bits(x)):
            return x
        return y
    if x > MAX_FLOAT:
        return x
    if y > MAX_FLOAT:
        return y
    if x != x:
        return x
    return y
