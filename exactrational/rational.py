"""Exact rational numbers with NumPy interoperability.

Values are kept canonical: the denominator is positive and coprime with the
numerator. Operators dispatch exactly between rationals and integers, fall
back to float (or complex) arithmetic when the other operand is inexact, and
vectorize over ``numpy.ndarray`` operands.
"""
from __future__ import annotations

import logging
import math
import numbers
import operator
import sys
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from .arithmetic import add_sub, compare_pairs, mul_div, power_pair
from .coercion import NumericKind, coerce_pair, kind_of, unwrap
from .config import RationalConfig, resolve_config
from .conversion import (
    RoundingMode,
    ceil_div,
    floor_div,
    ratio_to_float,
    round_half_even,
    round_ratio,
    simplest_between,
    truncate_div,
)

logger = logging.getLogger(__name__)

RationalResult = Union["Rational", int]

DEFAULT_MAX_DENOMINATOR = 10**6

_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf
_REAL_KINDS = (NumericKind.INTEGER, NumericKind.RATIONAL, NumericKind.FLOAT)


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    value = unwrap(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _reduce(num: int, den: int) -> Tuple[int, int]:
    if den == 0:
        raise ZeroDivisionError("denominator must be non-zero")
    if den < 0:
        num, den = -num, -den
    gcd = math.gcd(num, den)
    return num // gcd, den // gcd


def _finish(num: int, den: int, config: Optional[RationalConfig] = None) -> RationalResult:
    """Publish an already reduced pair, demoting integral values when configured."""
    if den == 1 and resolve_config(config).auto_demote_integral:
        return num
    return Rational._from_reduced(num, den)


def canonicalize(
    numerator: Any, denominator: Any = 1, *, config: Optional[RationalConfig] = None
) -> RationalResult:
    """Reduce and sign-normalize ``numerator/denominator``.

    Raises :class:`ZeroDivisionError` for a zero denominator and
    :class:`TypeError` for non-integer components. With
    ``auto_demote_integral`` enabled an integral result is returned as ``int``.
    """
    num = _ensure_int(numerator, name="numerator")
    den = _ensure_int(denominator, name="denominator")
    return _finish(*_reduce(num, den), config)


def from_integers(
    numerator: Any, denominator: Any, *, config: Optional[RationalConfig] = None
) -> RationalResult:
    return canonicalize(numerator, denominator, config=config)


def from_integer(value: Any, *, config: Optional[RationalConfig] = None) -> RationalResult:
    return canonicalize(value, 1, config=config)


class Rational(numbers.Rational):
    """Immutable rational number in canonical form."""

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        self._numerator, self._denominator = _reduce(num, den)

    @classmethod
    def _from_reduced(cls, num: int, den: int) -> "Rational":
        # Callers guarantee den > 0 and gcd(num, den) == 1.
        self = cls.__new__(cls)
        self._numerator = num
        self._denominator = den
        return self

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_float(cls, value: Any) -> "Rational":
        """Return the exact value of the binary float *value*."""
        value = unwrap(value)
        if isinstance(value, numbers.Integral):
            return cls(int(value))
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise ValueError("cannot convert NaN or infinity to Rational")
        return cls._from_reduced(*value.as_integer_ratio())

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        raise_errors: bool = True,
        config: Optional[RationalConfig] = None,
    ) -> Any:
        """Parse a literal such as ``"3/4"``, ``"-1.5e3"`` or ``"1/2.5"``."""
        from .parsing import parse_rational

        return parse_rational(text, raise_errors=raise_errors, config=config)

    @classmethod
    def load(cls, pair: Any) -> "Rational":
        """Rebuild a value from its serialized ``(numerator, denominator)`` pair.

        The sign is normalized; the pair is trusted to be reduced already.
        """
        try:
            num, den = pair
        except (TypeError, ValueError):
            raise TypeError(f"expected a (numerator, denominator) pair, got {pair!r}") from None
        num = _ensure_int(num, name="numerator")
        den = _ensure_int(den, name="denominator")
        if den == 0:
            raise ZeroDivisionError("denominator must be non-zero")
        if den < 0:
            num, den = -num, -den
        return cls._from_reduced(num, den)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    def dump(self) -> Tuple[int, int]:
        """Serialized form: the ordered ``(numerator, denominator)`` pair."""
        return self._numerator, self._denominator

    def to_rational(self) -> "Rational":
        return self

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_positive(self) -> bool:
        return self._numerator > 0

    def is_negative(self) -> bool:
        return self._numerator < 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    def sign(self) -> int:
        return (self._numerator > 0) - (self._numerator < 0)

    def limit_denominator(self, max_denominator: int = DEFAULT_MAX_DENOMINATOR) -> "Rational":
        """Return the closest rational whose denominator is at most *max_denominator*."""
        if max_denominator < 1:
            raise ValueError("max_denominator must be >= 1")
        if self._denominator <= max_denominator:
            return self
        fraction = Fraction(self._numerator, self._denominator).limit_denominator(max_denominator)
        return Rational._from_reduced(fraction.numerator, fraction.denominator)

    def rationalize(self, epsilon: Any = None) -> RationalResult:
        """Simplest rational within ``[self - |epsilon|, self + |epsilon|]``.

        Without *epsilon* the value itself is returned.
        """
        if epsilon is None:
            return self
        if self._numerator < 0:
            magnitude = Rational._from_reduced(-self._numerator, self._denominator)
            return -magnitude.rationalize(epsilon)

        eps = as_rational(epsilon)
        if not isinstance(eps, Rational):
            eps = Rational(int(eps))
        en, ed = abs(eps._numerator), eps._denominator
        an, ad = add_sub(self._numerator, self._denominator, en, ed, False)
        bn, bd = add_sub(self._numerator, self._denominator, en, ed, True)
        if an == bn and ad == bd:
            return self
        return _finish(*simplest_between(an, ad, bn, bd))

    # ------------------------------------------------------------------
    # Numeric protocol
    def to_float(self) -> float:
        return ratio_to_float(self._numerator, self._denominator)

    def __float__(self) -> float:
        return self.to_float()

    def to_int(self) -> int:
        return truncate_div(self._numerator, self._denominator)

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __trunc__(self) -> int:
        return truncate_div(self._numerator, self._denominator)

    def __floor__(self) -> int:
        return floor_div(self._numerator, self._denominator)

    def __ceil__(self) -> int:
        return ceil_div(self._numerator, self._denominator)

    def __round__(self, ndigits: Optional[int] = None) -> RationalResult:
        return self._round_common(ndigits, round_half_even)

    def round(
        self,
        ndigits: Optional[int] = None,
        *,
        mode: Union[RoundingMode, str, None] = RoundingMode.HALF_UP,
    ) -> RationalResult:
        """Round to *ndigits* decimal places with *mode* (half-up by default).

        Without *ndigits*, or with ``ndigits <= 0``, the result is an ``int``.
        """
        mode = RoundingMode.coerce(mode)
        return self._round_common(ndigits, lambda n, d: round_ratio(n, d, mode))

    def floor(self, ndigits: Optional[int] = None) -> RationalResult:
        return self._round_common(ndigits, floor_div)

    def ceil(self, ndigits: Optional[int] = None) -> RationalResult:
        return self._round_common(ndigits, ceil_div)

    def truncate(self, ndigits: Optional[int] = None) -> RationalResult:
        return self._round_common(ndigits, truncate_div)

    def _round_common(
        self, ndigits: Optional[int], rounder: Callable[[int, int], int]
    ) -> RationalResult:
        if ndigits is None:
            return rounder(self._numerator, self._denominator)
        ndigits = unwrap(ndigits)
        if not isinstance(ndigits, numbers.Integral):
            raise TypeError(f"ndigits must be an integer, got {type(ndigits)!r}")
        ndigits = int(ndigits)
        scale = 10 ** abs(ndigits)
        if ndigits >= 0:
            scaled = mul_div(self._numerator, self._denominator, scale, 1)
        else:
            scaled = mul_div(self._numerator, self._denominator, 1, scale)
        rounded = rounder(*scaled)
        if ndigits <= 0:
            return rounded * scale
        return _finish(*_reduce(rounded, scale))

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def to_string(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def inspect(self) -> str:
        return f"({self._numerator}/{self._denominator})"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        return format(float(self), format_spec)

    # ------------------------------------------------------------------
    # Serialization
    def __reduce__(self):
        return (_load_rational, (self._numerator, self._denominator))

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo) -> "Rational":
        return self

    # ------------------------------------------------------------------
    # Coercion
    def coerce(self, other: Any) -> Tuple[Any, Any]:
        """Return ``(self_like, other_like)`` of a common numeric kind."""
        return coerce_pair(self, other)

    def _binary_operation(
        self,
        other: Any,
        exact: Callable[["Rational", "Rational"], Any],
        inexact: Callable[[Any, Any], Any],
        *,
        reflected: bool = False,
    ) -> Any:
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: self._binary_operation(x, exact, inexact, reflected=reflected),
                otypes=[object],
            )
            return vectorised(other)
        try:
            left, right = self.coerce(other)
        except TypeError:
            return NotImplemented
        if reflected:
            left, right = right, left
        if isinstance(left, Rational) and isinstance(right, Rational):
            return exact(left, right)
        return inexact(left, right)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, _add, operator.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, _add, operator.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, _sub, operator.sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, _sub, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, _mul, operator.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, _mul, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, _truediv, operator.truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, _truediv, operator.truediv, reflected=True)

    quo = __truediv__

    def fdiv(self, other: Any) -> Any:
        """Divide as floats.

        A real zero divisor gives an infinity signed like the quotient, or
        ``nan`` when ``self`` is zero too.
        """
        value = self.to_float()
        other = unwrap(other)
        if kind_of(other) in _REAL_KINDS and other == 0:
            if value == 0:
                return math.nan
            return math.copysign(math.inf, value) * math.copysign(1.0, float(other))
        return value / other

    def __floordiv__(self, other: Any) -> Any:
        return self._binary_operation(other, _floordiv, operator.floordiv)

    def __rfloordiv__(self, other: Any) -> Any:
        return self._binary_operation(other, _floordiv, operator.floordiv, reflected=True)

    def __mod__(self, other: Any) -> Any:
        return self._binary_operation(other, _mod, operator.mod)

    def __rmod__(self, other: Any) -> Any:
        return self._binary_operation(other, _mod, operator.mod, reflected=True)

    def __divmod__(self, other: Any) -> Any:
        return self._binary_operation(other, _divmod, divmod)

    def __rdivmod__(self, other: Any) -> Any:
        return self._binary_operation(other, _divmod, divmod, reflected=True)

    def remainder(self, other: Any) -> Any:
        """``self - other * truncate(self / other)``; the sign follows ``self``."""
        result = self._binary_operation(other, _remainder, _inexact_remainder)
        if result is NotImplemented:
            raise TypeError(
                f"unsupported operand type(s) for remainder: 'Rational' and '{type(other).__name__}'"
            )
        return result

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        exponent = unwrap(exponent)
        kind = kind_of(exponent)
        if kind is None:
            return NotImplemented
        if kind is NumericKind.RATIONAL and exponent.denominator == 1:
            exponent, kind = exponent.numerator, NumericKind.INTEGER
        if kind is NumericKind.INTEGER:
            return self._integer_power(int(exponent))
        if kind is NumericKind.COMPLEX:
            left, right = self.coerce(exponent)
            return left ** right
        # Non-integral exponents leave the rationals.
        return float(self) ** float(exponent)

    def __rpow__(self, base: Any) -> Any:
        if isinstance(base, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__rpow__(x), otypes=[object])
            return vectorised(base)
        base = unwrap(base)
        kind = kind_of(base)
        if kind is NumericKind.INTEGER:
            return Rational(int(base)) ** self
        if kind is NumericKind.RATIONAL:
            return Rational(base.numerator, base.denominator) ** self
        if kind is NumericKind.FLOAT or kind is NumericKind.COMPLEX:
            return base ** float(self)
        return NotImplemented

    def _integer_power(self, exponent: int) -> RationalResult:
        if exponent == 0:
            return _finish(1, 1)
        if self._denominator == 1:
            if self._numerator == 1:
                return _finish(1, 1)
            if self._numerator == -1:
                return _finish(-1 if exponent % 2 else 1, 1)
            if self._numerator == 0:
                if exponent < 0:
                    raise ZeroDivisionError("0 cannot be raised to a negative power")
                return _finish(0, 1)
        return _finish(*power_pair(self._numerator, self._denominator, exponent))

    def __neg__(self) -> RationalResult:
        return _finish(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> RationalResult:
        if self._numerator >= 0:
            return self
        return -self

    # ------------------------------------------------------------------
    # Comparisons
    def compare(self, other: Any) -> Optional[int]:
        """Three-way comparison: ``-1``, ``0`` or ``1``.

        Returns ``None`` against ``nan`` and raises :class:`TypeError` for
        operands that cannot be ordered against a rational.
        """
        other = unwrap(other)
        kind = kind_of(other)
        if kind is NumericKind.INTEGER:
            other = int(other)
            if self._denominator == 1:
                return (self._numerator > other) - (self._numerator < other)
            return compare_pairs(self._numerator, self._denominator, other, 1)
        if kind is NumericKind.RATIONAL:
            return compare_pairs(
                self._numerator, self._denominator, other.numerator, other.denominator
            )
        if kind is NumericKind.FLOAT:
            other = float(other)
            if math.isnan(other):
                return None
            value = float(self)
            return (value > other) - (value < other)
        raise TypeError(f"comparison of Rational with {type(other).__name__} failed")

    def _rich_compare(self, other: Any, op: Callable[[int, int], bool]) -> Any:
        kind = kind_of(other)
        if kind is None or kind is NumericKind.COMPLEX:
            return NotImplemented
        result = self.compare(other)
        if result is None:
            return False
        return op(result, 0)

    def __eq__(self, other: Any) -> Any:
        """Exact against integers and rationals, via ``float(self)`` against floats.

        The float comparison rounds, so equal-comparing values need not hash
        alike: ``Rational(2**53 + 1) == 2.0**53`` holds while their hashes
        differ, as for any value a float cannot represent exactly.
        """
        other = unwrap(other)
        kind = kind_of(other)
        if kind is NumericKind.INTEGER:
            return self._denominator == 1 and self._numerator == other
        if kind is NumericKind.RATIONAL:
            if isinstance(other, Rational):
                return (
                    self._numerator == other._numerator
                    and self._denominator == other._denominator
                )
            return self.compare(other) == 0
        if kind is NumericKind.FLOAT:
            return float(self) == other
        if kind is NumericKind.COMPLEX:
            return other.imag == 0 and self == other.real
        return NotImplemented

    def __lt__(self, other: Any) -> Any:
        return self._rich_compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._rich_compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._rich_compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._rich_compare(other, operator.ge)

    def __hash__(self) -> int:
        # Follows the numeric hash rule so that Rational(n) hashes like n.
        try:
            dinv = pow(self._denominator, -1, _HASH_MODULUS)
        except ValueError:
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.floor_divide: operator.floordiv,
        np.remainder: operator.mod,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                coerced.append(value.astype(object))
                has_array = True
            else:
                coerced.append(unwrap(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _load_rational(numerator: int, denominator: int) -> Rational:
    return Rational.load((numerator, denominator))


# ----------------------------------------------------------------------
# Exact kernels on two canonical rationals
def _add(a: Rational, b: Rational) -> RationalResult:
    return _finish(*add_sub(a._numerator, a._denominator, b._numerator, b._denominator, True))


def _sub(a: Rational, b: Rational) -> RationalResult:
    return _finish(*add_sub(a._numerator, a._denominator, b._numerator, b._denominator, False))


def _mul(a: Rational, b: Rational) -> RationalResult:
    return _finish(*mul_div(a._numerator, a._denominator, b._numerator, b._denominator, True))


def _truediv(a: Rational, b: Rational) -> RationalResult:
    return _finish(*mul_div(a._numerator, a._denominator, b._numerator, b._denominator, False))


def _quotient(a: Rational, b: Rational) -> Tuple[int, int]:
    return mul_div(a._numerator, a._denominator, b._numerator, b._denominator, False)


def _minus_multiple(a: Rational, b: Rational, q: int) -> RationalResult:
    # a - b*q
    bn, bd = mul_div(b._numerator, b._denominator, q, 1)
    return _finish(*add_sub(a._numerator, a._denominator, bn, bd, False))


def _floordiv(a: Rational, b: Rational) -> int:
    return floor_div(*_quotient(a, b))


def _mod(a: Rational, b: Rational) -> RationalResult:
    return _minus_multiple(a, b, floor_div(*_quotient(a, b)))


def _divmod(a: Rational, b: Rational) -> Tuple[int, RationalResult]:
    q = floor_div(*_quotient(a, b))
    return q, _minus_multiple(a, b, q)


def _remainder(a: Rational, b: Rational) -> RationalResult:
    return _minus_multiple(a, b, truncate_div(*_quotient(a, b)))


def _inexact_remainder(a: Any, b: Any) -> Any:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a - b * math.trunc(a / b)


# ----------------------------------------------------------------------
# Conversion entry point
def _to_exact(value: Any, config: Optional[RationalConfig]) -> Any:
    value = unwrap(value)
    if value is None:
        raise TypeError("can't convert None into Rational")
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        if value.imag != 0:
            raise TypeError(f"can't convert {value!r} into Rational")
        value = unwrap(value.real)
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational._from_reduced(int(value), 1)
    if isinstance(value, numbers.Rational):
        return Rational(value.numerator, value.denominator)
    if isinstance(value, float):
        return Rational.from_float(value)
    if isinstance(value, str):
        from .parsing import parse_rational

        return parse_rational(value, config=config)
    as_ratio = getattr(value, "as_integer_ratio", None)
    if callable(as_ratio):
        num, den = as_ratio()
        return Rational(num, den)
    raise TypeError(f"can't convert {type(value).__name__} into Rational")


def _finalize(value: Any, config: Optional[RationalConfig]) -> Any:
    if isinstance(value, Rational):
        return _finish(value._numerator, value._denominator, config)
    if isinstance(value, numbers.Integral):
        return _finish(int(value), 1, config)
    return value


def as_rational(
    value: Any,
    denominator: Any = None,
    *,
    raise_errors: bool = True,
    config: Optional[RationalConfig] = None,
) -> Any:
    """Convert *value* (optionally divided by *denominator*) to a rational.

    Accepts integers, floats (exactly), rationals, numeric strings, complex
    numbers with a zero imaginary part, NumPy scalars and objects providing
    ``as_integer_ratio``. With ``raise_errors=False`` a failed conversion
    returns ``None`` instead of raising.
    """
    try:
        result = _to_exact(value, config)
        if denominator is not None:
            divisor = _to_exact(denominator, config)
            if divisor == 0:
                raise ZeroDivisionError("denominator must be non-zero")
            result = result / divisor
    except (TypeError, ValueError, ZeroDivisionError) as exc:
        if raise_errors:
            raise
        logger.debug("as_rational(%r, %r) failed: %s", value, denominator, exc)
        return None
    return _finalize(result, config)


# ----------------------------------------------------------------------
# NumPy array helpers
def as_rational_array(values: Any, *, copy: bool = True) -> "np.ndarray":
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable of numeric-like entries or an existing
    NumPy array. When ``copy`` is ``False`` and ``values`` is already an
    object array holding only :class:`Rational` values it is returned as is.
    """
    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and all(isinstance(item, Rational) for item in array.flat):
            return array
        vectorised = np.vectorize(_as_rational_item, otypes=[object])
        return vectorised(array.astype(object, copy=False))

    return np.array([_as_rational_item(item) for item in values], dtype=object)


def _as_rational_item(item: Any) -> Rational:
    value = as_rational(item)
    if not isinstance(value, Rational):
        # parse fallbacks (inf, 0.0) and demoted integers
        value = Rational.from_float(value)
    return value


def zeros(shape: Union[int, Tuple[int, ...]]) -> "np.ndarray":
    """Return an object array of the given shape filled with ``Rational(0)``."""
    array = np.empty(shape, dtype=object)
    array.fill(Rational._from_reduced(0, 1))
    return array


def zeros_like(values: Any) -> "np.ndarray":
    """Return a zero-filled rational array matching the shape of ``values``."""
    return zeros(np.shape(values))


__all__ = [
    "DEFAULT_MAX_DENOMINATOR",
    "Rational",
    "as_rational",
    "as_rational_array",
    "canonicalize",
    "from_integer",
    "from_integers",
    "zeros",
    "zeros_like",
]
