"""Locale-tolerant number parsing.

Operator input arrives as free text in either ``1234.56`` or pt-BR
``1.234,56`` form. Parsing never raises: anything that is not a plain
decimal becomes ``NaN`` and callers pick a fallback with :func:`finite_or`.
"""

import math
import re
from typing import Any

__all__ = ["NAN", "finite_or", "is_finite", "parse_number"]

NAN = math.nan

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


def is_finite(value: Any) -> bool:
    """True for real numbers that are neither NaN nor infinite."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def parse_number(value: Any) -> float:
    """Parse *value* as a decimal, returning ``NaN`` when it is not one.

    * ``None`` and blank strings -> ``NaN``
    * a trailing ``.`` or ``,`` (half-typed input) -> ``NaN``
    * if a ``,`` is present it is the decimal separator and every ``.`` is
      a thousands separator: ``"1.234,56"`` -> ``1234.56``
    * otherwise a standard decimal: ``"1234.56"`` -> ``1234.56``
    """
    if value is None or isinstance(value, bool):
        return NAN
    if isinstance(value, (int, float)):
        try:
            n = float(value)
        except OverflowError:
            return NAN
        return n if math.isfinite(n) else NAN

    s = _WHITESPACE_RE.sub("", str(value))
    if not s or s[-1] in ".,":
        return NAN

    if "," in s:
        s = s.replace(".", "").replace(",", ".", 1)

    if _DECIMAL_RE.fullmatch(s) is None:
        return NAN

    n = float(s)
    return n if math.isfinite(n) else NAN


def finite_or(value: float, fallback: float = 0.0) -> float:
    """Return *value* if it is finite, else *fallback*."""
    return value if is_finite(value) else fallback
