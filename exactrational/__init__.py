"""Exact rational numbers in canonical form."""
import logging

from .coercion import NumericKind, coerce_pair, kind_of
from .config import (
    DEFAULT_CONFIG,
    RationalConfig,
    get_config,
    load_config,
    set_config,
    use_config,
)
from .conversion import OutOfRangeWarning, RoundingMode
from .parsing import parse_prefix, parse_rational
from .rational import (
    DEFAULT_MAX_DENOMINATOR,
    Rational,
    as_rational,
    as_rational_array,
    canonicalize,
    from_integer,
    from_integers,
    zeros,
    zeros_like,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_DENOMINATOR",
    "NumericKind",
    "OutOfRangeWarning",
    "Rational",
    "RationalConfig",
    "RoundingMode",
    "as_rational",
    "as_rational_array",
    "canonicalize",
    "coerce_pair",
    "from_integer",
    "from_integers",
    "get_config",
    "kind_of",
    "load_config",
    "parse_prefix",
    "parse_rational",
    "set_config",
    "use_config",
    "zeros",
    "zeros_like",
]
