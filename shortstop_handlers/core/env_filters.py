"""Env Filter Grammar — parses `NAME|<filter>` tokens and applies typed conversions.

Invariants:
    - A filter is recognized only as the exact text between the LAST "|" and the end
    - "|!b" and "|b" are mutually exclusive: `X|!b` -> (X, NOT_BOOLEAN), `X!|b` -> (X!, BOOLEAN)
    - Unrecognized suffixes are part of the variable name (`X|q` reads variable "X|q")
    - DECIMAL never raises: no leading digits -> float("nan")
    - Only ASCII 0-9 count as digits; runs past the int conversion limit become +/-inf
    - BOOLEAN is False iff the raw value is None, "", "false" or "0"

Design Decisions:
    - Full delimiter-to-end match instead of ordered endswith() probing:
      precedence cannot depend on dict ordering
    - parseInt semantics (leading-digit prefix) so "8000px" still reads as 8000
"""

import re
from typing import Callable

from shortstop_handlers.core.domain_types import EnvFilter

FILTER_DELIMITER = "|"
_FALSY = frozenset({"", "false", "0"})
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_env_token(token: str) -> tuple[str, EnvFilter | None]:
    """Split an env: token into (variable name, filter or None)."""
    name, sep, suffix = token.rpartition(FILTER_DELIMITER)
    if not sep:
        return token, None
    try:
        return name, EnvFilter(suffix)
    except ValueError:
        return token, None


def to_decimal(value: str | None) -> int | float:
    """Base-10 integer prefix of `value`, or NaN when there is none."""
    if value is None:
        return float("nan")
    match = _LEADING_INT.match(value)
    if match is None:
        return float("nan")
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        # past the int/str conversion limit; parseInt overflows to Infinity too
        return float(digits)


def to_boolean(value: str | None) -> bool:
    return value is not None and value not in _FALSY


def to_inverse_boolean(value: str | None) -> bool:
    return not to_boolean(value)


_CONVERTERS: dict[EnvFilter, Callable[[str | None], object]] = {
    EnvFilter.DECIMAL: to_decimal,
    EnvFilter.BOOLEAN: to_boolean,
    EnvFilter.NOT_BOOLEAN: to_inverse_boolean,
}


def apply_env_filter(env_filter: EnvFilter, value: str | None):
    """Convert a raw environment string with the given filter."""
    return _CONVERTERS[env_filter](value)
