"""Conversions from integer pairs to floats, integers and simpler ratios."""
from __future__ import annotations

import enum
import logging
import math
import sys
import warnings
from typing import Tuple, Union

logger = logging.getLogger(__name__)

# Largest bit position a component may occupy before it is shifted down so
# that ``float(component)`` cannot overflow.
FLOAT_SHIFT_THRESHOLD = sys.float_info.max_exp - 2
FLOAT_MAX_EXPONENT = sys.float_info.max_exp - 1
FLOAT_MIN_EXPONENT = sys.float_info.min_exp - 1


class OutOfRangeWarning(RuntimeWarning):
    """Emitted when a rational does not fit the float range."""


class RoundingMode(enum.Enum):
    HALF_UP = "half_up"
    HALF_EVEN = "half_even"
    HALF_DOWN = "half_down"
    FLOOR = "floor"
    CEILING = "ceiling"
    UNNECESSARY = "unnecessary"

    @classmethod
    def coerce(cls, mode: Union["RoundingMode", str, None]) -> "RoundingMode":
        """Accept enum members, their names, or the short ``half:`` spellings."""
        if mode is None:
            return cls.HALF_UP
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            key = mode.strip().lower()
            member = _MODE_ALIASES.get(key)
            if member is not None:
                return member
            raise ValueError(f"invalid rounding mode: {mode}")
        raise TypeError(f"rounding mode must be a RoundingMode or str, got {type(mode)!r}")


_MODE_ALIASES = {member.value: member for member in RoundingMode}
_MODE_ALIASES.update({
    "up": RoundingMode.HALF_UP,
    "even": RoundingMode.HALF_EVEN,
    "down": RoundingMode.HALF_DOWN,
    "ceil": RoundingMode.CEILING,
})


def _out_of_range(negative: bool, overflow: bool) -> float:
    warnings.warn("out of Float range", OutOfRangeWarning, stacklevel=3)
    logger.debug("float conversion saturated (overflow=%s)", overflow)
    value = sys.float_info.max if overflow else 0.0
    return -value if negative else value


def ratio_to_float(num: int, den: int) -> float:
    """Approximate ``num/den`` as a float without building huge intermediates.

    Components wider than :data:`FLOAT_SHIFT_THRESHOLD` bits are truncated by
    a right shift and the difference of the shifts is restored with
    :func:`math.ldexp`. Results outside the float range emit
    :class:`OutOfRangeWarning` and saturate to the largest finite float (or
    zero) with the sign of the ratio.
    """
    if num == 0:
        return 0.0
    negative = num < 0
    if negative:
        num = -num

    nl = num.bit_length() - 1
    dl = den.bit_length() - 1

    ne = 0
    if nl > FLOAT_SHIFT_THRESHOLD:
        ne = nl - FLOAT_SHIFT_THRESHOLD
        num >>= ne

    de = 0
    if dl > FLOAT_SHIFT_THRESHOLD:
        de = dl - FLOAT_SHIFT_THRESHOLD
        den >>= de

    exponent = ne - de
    if exponent > FLOAT_MAX_EXPONENT or exponent < FLOAT_MIN_EXPONENT:
        return _out_of_range(negative, exponent > 0)

    quotient = float(num) / float(den)
    if negative:
        quotient = -quotient
    try:
        result = math.ldexp(quotient, exponent)
    except OverflowError:
        return _out_of_range(negative, True)
    if math.isinf(result) or math.isnan(result):
        return _out_of_range(negative, True)
    return result


def floor_div(num: int, den: int) -> int:
    return num // den


def truncate_div(num: int, den: int) -> int:
    if num < 0:
        return -(-num // den)
    return num // den


def ceil_div(num: int, den: int) -> int:
    return -(-num // den)


def round_half_up(num: int, den: int) -> int:
    negative = num < 0
    if negative:
        num = -num
    result = (2 * num + den) // (2 * den)
    return -result if negative else result


def round_half_down(num: int, den: int) -> int:
    negative = num < 0
    if negative:
        num = -num
    result = (2 * num + den - 1) // (2 * den)
    return -result if negative else result


def round_half_even(num: int, den: int) -> int:
    negative = num < 0
    if negative:
        num = -num
    result, remainder = divmod(2 * num + den, 2 * den)
    if remainder == 0:
        # exact tie: land on the even neighbour
        result &= ~1
    return -result if negative else result


def round_unnecessary(num: int, den: int) -> int:
    if den != 1:
        raise ValueError(f"rounding necessary for {num}/{den}")
    return num


_ROUNDERS = {
    RoundingMode.HALF_UP: round_half_up,
    RoundingMode.HALF_EVEN: round_half_even,
    RoundingMode.HALF_DOWN: round_half_down,
    RoundingMode.FLOOR: floor_div,
    RoundingMode.CEILING: ceil_div,
    RoundingMode.UNNECESSARY: round_unnecessary,
}


def round_ratio(num: int, den: int, mode: Union[RoundingMode, str, None] = None) -> int:
    """Round a canonical ``num/den`` to an integer with *mode*."""
    return _ROUNDERS[RoundingMode.coerce(mode)](num, den)


def simplest_between(an: int, ad: int, bn: int, bd: int) -> Tuple[int, int]:
    """Smallest-denominator fraction in the interval ``(an/ad, bn/bd)``.

    Walks the continued fraction expansion of both bounds together: whenever
    ``ceil(a)`` is still not below ``b`` the shared integer part ``k`` is
    folded into the convergents and the search continues on the reciprocals
    ``1/(b-k)`` and ``1/(a-k)``. Requires ``a < b``.
    """
    p0, p1, q0, q1 = 0, 1, 1, 0
    while True:
        c = ceil_div(an, ad)
        if c * bd < bn:
            break
        k = c - 1
        p0, p1 = p1, k * p1 + p0
        q0, q1 = q1, k * q1 + q0
        # a, b = 1/(b - k), 1/(a - k)
        an, ad, bn, bd = bd, bn - k * bd, ad, an - k * ad
    return c * p1 + p0, c * q1 + q0


__all__ = [
    "FLOAT_SHIFT_THRESHOLD",
    "OutOfRangeWarning",
    "RoundingMode",
    "ceil_div",
    "floor_div",
    "ratio_to_float",
    "round_half_down",
    "round_half_even",
    "round_half_up",
    "round_ratio",
    "round_unnecessary",
    "simplest_between",
    "truncate_div",
]
