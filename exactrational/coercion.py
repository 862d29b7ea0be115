"""Cross-kind coercion for rational operands.

The supported numeric kinds form a closed set. Every kind has exactly one
entry in :data:`COERCION_TABLE`; adding a kind means adding its row here.
"""
from __future__ import annotations

import enum
import numbers
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np


class NumericKind(enum.Enum):
    INTEGER = "integer"
    RATIONAL = "rational"
    FLOAT = "float"
    COMPLEX = "complex"


def unwrap(value: Any) -> Any:
    """Return the Python scalar behind a NumPy scalar."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def kind_of(value: Any) -> Optional[NumericKind]:
    """Classify *value*, or return ``None`` for unsupported objects."""
    value = unwrap(value)
    if isinstance(value, numbers.Integral):
        return NumericKind.INTEGER
    if isinstance(value, numbers.Rational):
        return NumericKind.RATIONAL
    if isinstance(value, numbers.Real):
        return NumericKind.FLOAT
    if isinstance(value, numbers.Complex):
        return NumericKind.COMPLEX
    return None


def _coerce_integer(value, other):
    return value, type(value)(int(other))


def _coerce_rational(value, other):
    if isinstance(other, type(value)):
        return value, other
    return value, type(value)(other.numerator, other.denominator)


def _coerce_float(value, other):
    return float(value), float(other)


def _coerce_complex(value, other):
    if other.imag == 0:
        return coerce_pair(value, other.real)
    return complex(float(value)), complex(other)


COERCION_TABLE: Dict[NumericKind, Callable[[Any, Any], Tuple[Any, Any]]] = {
    NumericKind.INTEGER: _coerce_integer,
    NumericKind.RATIONAL: _coerce_rational,
    NumericKind.FLOAT: _coerce_float,
    NumericKind.COMPLEX: _coerce_complex,
}

_missing = set(NumericKind) - set(COERCION_TABLE)
if _missing:  # pragma: no cover - guards edits to the table
    raise RuntimeError(f"No coercion registered for {sorted(k.name for k in _missing)}")


def coerce_pair(value: Any, other: Any) -> Tuple[Any, Any]:
    """Bring a rational *value* and *other* to a common kind.

    Returns ``(value_like, other_like)``. Integers and rationals become
    rationals, floats make both sides floats, complex numbers with a zero
    imaginary part coerce through their real part and otherwise promote
    *value* to complex.
    """
    other = unwrap(other)
    kind = kind_of(other)
    if kind is None:
        raise TypeError(
            f"{type(other).__name__} can't be coerced into {type(value).__name__}"
        )
    return COERCION_TABLE[kind](value, other)


__all__ = ["COERCION_TABLE", "NumericKind", "coerce_pair", "kind_of", "unwrap"]
