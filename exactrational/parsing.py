"""Parsing of rational literals.

Accepted forms, with optional surrounding whitespace and ``_`` between
digits::

    [sign] digits ["." digits] [("e"|"E") [sign] digits] ["/" denominator]

The denominator is unsigned and may itself carry a fraction and an exponent,
so ``"1/2.5"`` and ``"3e2/1e1"`` are valid.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional, Tuple, Union

from .config import RationalConfig, resolve_config
from .conversion import ratio_to_float
from .rational import canonicalize

logger = logging.getLogger(__name__)

_DIGITS = r"[0-9]+(?:_[0-9]+)*"
_LITERAL = rf"{_DIGITS}(?:\.{_DIGITS})?(?:[eE][-+]?{_DIGITS})?"

_LITERAL_FORMAT = re.compile(rf"""
    (?P<int>{_DIGITS})                # integer part
    (?:\.(?P<frac>{_DIGITS}))?        # optional fractional part
    (?:[eE](?P<exp>[-+]?{_DIGITS}))?  # optional exponent
""", re.VERBOSE)

_RATIONAL_FORMAT = re.compile(rf"""
    \A\s*                             # optional whitespace at the start,
    (?P<sign>[-+])?                   # an optional sign,
    (?P<num>{_LITERAL})               # the numerator literal,
    (?:/(?P<den>{_LITERAL}))?         # an optional denominator
    \s*                               # and trailing whitespace
""", re.VERBOSE)

Exact = Tuple[int, int]


def _literal_value(text: str, exponent_limit: int) -> Union[Exact, float]:
    """Value of an unsigned literal as a ``(num, den)`` pair.

    Exponents beyond *exponent_limit* collapse to ``0.0`` or ``inf``.
    """
    match = _LITERAL_FORMAT.fullmatch(text)
    num, den = int(match.group("int")), 1
    frac = match.group("frac")
    if frac is not None:
        digits = frac.replace("_", "")
        scale = 10 ** len(digits)
        num = num * scale + int(digits)
        den = scale
    exp = match.group("exp")
    if exp is not None and num != 0:
        exponent = int(exp)
        if abs(exponent) > exponent_limit:
            logger.debug(
                "exponent %s of %r beyond limit %d, using float", exponent, text, exponent_limit
            )
            return 0.0 if exponent < 0 else math.inf
        if exponent >= 0:
            num *= 10 ** exponent
        else:
            den *= 10 ** -exponent
    return num, den


def _is_zero(value: Union[Exact, float]) -> bool:
    if isinstance(value, tuple):
        return value[0] == 0
    return value == 0.0


def _as_float(value: Union[Exact, float]) -> float:
    if isinstance(value, tuple):
        return ratio_to_float(*value)
    return value


def parse_prefix(
    text: str, *, config: Optional[RationalConfig] = None
) -> Tuple[Any, str]:
    """Parse a rational literal at the start of *text*.

    Returns ``(value, rest)`` where *rest* is the unconsumed remainder. When
    nothing parses, or the denominator is zero, the value is ``None`` and
    *rest* is the whole input.
    """
    if not isinstance(text, str):
        raise TypeError(f"can't parse {type(text).__name__} as Rational")
    config = resolve_config(config)

    match = _RATIONAL_FORMAT.match(text)
    if match is None:
        return None, text

    value = _literal_value(match.group("num"), config.parse_exponent_limit)
    negative = match.group("sign") == "-"
    if negative:
        value = (-value[0], value[1]) if isinstance(value, tuple) else -value

    den_text = match.group("den")
    if den_text is not None:
        divisor = _literal_value(den_text, config.parse_exponent_limit)
        if _is_zero(divisor):
            logger.debug("zero denominator in %r", text)
            return None, text
        if isinstance(value, tuple) and isinstance(divisor, tuple):
            value = (value[0] * divisor[1], value[1] * divisor[0])
        else:
            value = _as_float(value) / _as_float(divisor)

    rest = text[match.end():]
    if isinstance(value, tuple):
        return canonicalize(*value, config=config), rest
    return value, rest


def parse_rational(
    text: str,
    *,
    raise_errors: bool = True,
    config: Optional[RationalConfig] = None,
) -> Any:
    """Strictly parse *text* as a rational.

    Input that does not parse completely raises :class:`ValueError`, or
    returns ``None`` when ``raise_errors`` is false.
    """
    if not isinstance(text, str):
        if raise_errors:
            raise TypeError(f"can't parse {type(text).__name__} as Rational")
        return None
    value, rest = parse_prefix(text, config=config)
    if value is None or rest:
        if raise_errors:
            raise ValueError(f"invalid value for rational: {text!r}")
        logger.debug("rejected rational literal %r", text)
        return None
    return value


__all__ = ["parse_prefix", "parse_rational"]
