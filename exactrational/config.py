"""Runtime configuration for rational canonicalization and parsing."""
from __future__ import annotations

import contextlib
import contextvars
import logging
import numbers
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_PARSE_EXPONENT_LIMIT = 100_000


@dataclass(frozen=True)
class RationalConfig:
    """Options read on every canonicalization.

    ``auto_demote_integral`` returns results with denominator 1 as plain
    ``int`` values. ``parse_exponent_limit`` bounds the decimal exponent the
    parser expands exactly; larger exponents collapse to ``0.0`` or ``inf``.
    """

    auto_demote_integral: bool = False
    parse_exponent_limit: int = DEFAULT_PARSE_EXPONENT_LIMIT

    def __post_init__(self) -> None:
        if not isinstance(self.auto_demote_integral, bool):
            raise TypeError(
                f"auto_demote_integral must be a bool, got {type(self.auto_demote_integral)!r}"
            )
        if isinstance(self.parse_exponent_limit, bool) or not isinstance(
            self.parse_exponent_limit, numbers.Integral
        ):
            raise TypeError(
                f"parse_exponent_limit must be an integer, got {type(self.parse_exponent_limit)!r}"
            )
        if self.parse_exponent_limit < 0:
            raise ValueError("parse_exponent_limit must be >= 0")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RationalConfig":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(mapping))


DEFAULT_CONFIG = RationalConfig()

_process_config = DEFAULT_CONFIG

# Scoped overrides installed by use_config; None falls back to the process config.
_current: contextvars.ContextVar[Optional[RationalConfig]] = contextvars.ContextVar(
    "exactrational_config", default=None
)


def get_config() -> RationalConfig:
    config = _current.get()
    return _process_config if config is None else config


def set_config(config: RationalConfig) -> None:
    """Install *config* for the whole process (normally once, at startup).

    Every thread sees the new config unless it is inside a :func:`use_config`
    block.
    """
    global _process_config
    if not isinstance(config, RationalConfig):
        raise TypeError(f"expected RationalConfig, got {type(config)!r}")
    logger.debug("Setting rational config: %s", config)
    _process_config = config


def resolve_config(config: Optional[RationalConfig]) -> RationalConfig:
    return get_config() if config is None else config


@contextlib.contextmanager
def use_config(config: Optional[RationalConfig] = None, **overrides: Any) -> Iterator[RationalConfig]:
    """Temporarily replace the current config.

    Either pass a full :class:`RationalConfig` or keyword overrides applied on
    top of the active one::

        with use_config(auto_demote_integral=True):
            assert from_integers(4, 2) == 2
    """
    base = get_config() if config is None else config
    active = replace(base, **overrides) if overrides else base
    token = _current.set(active)
    try:
        yield active
    finally:
        _current.reset(token)


def load_config(path: Union[str, Path], *, install: bool = False) -> RationalConfig:
    """Read a config from the ``[exactrational]`` table of a TOML file."""
    path = Path(path).expanduser()
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    section = data.get("exactrational", {})
    if not isinstance(section, dict):
        raise ValueError(f"[exactrational] in {path} must be a table")
    config = RationalConfig.from_mapping(section)
    logger.debug("Loaded rational config from %s: %s", path, config)
    if install:
        set_config(config)
    return config


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PARSE_EXPONENT_LIMIT",
    "RationalConfig",
    "get_config",
    "load_config",
    "resolve_config",
    "set_config",
    "use_config",
]
