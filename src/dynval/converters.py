"""Built-in type converters.

Exports
-------
BUILTIN_CONVERTERS
    Dictionary mapping type names to converter functions.
    Default types: boolean, number.

convert_boolean / convert_number
    The built-in converters themselves.

to_number / parse_number
    Numeric coercion used by ``convert_number`` (and by the ``as_number``
    JMESPath function in ``dynval.context``).

Both converters accept any input and never raise.  Text that does not parse
as a number becomes ``float("nan")``.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any, Callable

import regex

# ─────────────────────────────────────────────────────────────────────────────
# Numeric text grammar
# ─────────────────────────────────────────────────────────────────────────────

_FALSY_STRINGS = frozenset({"false", "undefined", "null", "0", ""})

_TRIM_RE = regex.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

# Unsigned 0x / 0o / 0b literals.
_RADIX_RE = regex.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

_DECIMAL_RE = regex.compile(
    r"""
    [+-]?
    (?:
        Infinity
      | (?P<int>[0-9]+)
      | (?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?
    )
    """,
    regex.VERBOSE,
)


# ─────────────────────────────────────────────────────────────────────────────
# Private helpers
# ─────────────────────────────────────────────────────────────────────────────


def _is_number(val: Any) -> bool:
    """True for numeric values.  ``bool`` is an ``int`` subclass but not a number here."""
    return isinstance(val, numbers.Number) and not isinstance(val, bool)


def _is_nan(val: Any) -> bool:
    # Decimal("sNaN") raises on any comparison, so ask it directly.
    if isinstance(val, Decimal):
        return val.is_nan()
    return _is_number(val) and val != val


def _is_truthy(val: Any) -> bool:
    """Python truthiness, except that NaN counts as falsy."""
    return bool(val) and not _is_nan(val)


# ─────────────────────────────────────────────────────────────────────────────
# Numeric coercion
# ─────────────────────────────────────────────────────────────────────────────


def parse_number(text: str) -> int | float:
    """Parse *text* as a number.

    ::

        parse_number(" 42 ")      # 42
        parse_number("3.14")      # 3.14
        parse_number("1e3")       # 1000.0
        parse_number("0x1F")      # 31
        parse_number("-Infinity") # -inf
        parse_number("   ")       # 0
        parse_number("abc")       # nan
    """
    text = _TRIM_RE.sub("", text)
    if not text:
        return 0

    if _RADIX_RE.fullmatch(text):
        return int(text, 0)

    m = _DECIMAL_RE.fullmatch(text)
    if m is None:
        return math.nan
    if m.group("int") is not None:
        try:
            value = int(text)
        except ValueError:
            # Past the interpreter's int-string digit limit.
            return float(text)
        if value == 0 and text.startswith("-"):
            return -0.0
        return value
    return float(text)


def to_number(val: Any) -> Any:
    """Coerce *val* to a number without any falsy short-circuit."""
    if isinstance(val, bool):
        return int(val)
    if _is_number(val):
        return val
    if isinstance(val, str):
        return parse_number(val)
    return math.nan


# ─────────────────────────────────────────────────────────────────────────────
# Built-in converters
# ─────────────────────────────────────────────────────────────────────────────


def convert_boolean(val: Any, ctx: Any = None) -> bool:
    """``boolean`` converter.

    * ``str``     – ``False`` for ``"false"``, ``"undefined"``, ``"null"``,
      ``"0"`` and ``""`` (exact, case-sensitive), ``True`` otherwise.
    * numbers     – ``val != 0`` (NaN gives ``True``).
    * anything else – ``bool(val)``.
    """
    if isinstance(val, str):
        return val not in _FALSY_STRINGS
    if _is_nan(val):
        return True
    if _is_number(val):
        return val != 0
    return bool(val)


def convert_number(val: Any, ctx: Any = None) -> Any:
    """``number`` converter.

    Numeric zero and falsy inputs (``None``, ``""``, ``False``, NaN, empty
    containers) are returned unchanged; everything else goes through
    ``to_number``.  A falsy input is *not* turned into ``0``; callers rely on
    getting ``None`` / ``""`` back to tell "not supplied" apart from zero.
    """
    if _is_nan(val):
        return val
    if _is_number(val) and val == 0:
        return val
    if not _is_truthy(val):
        return val
    return to_number(val)


BUILTIN_CONVERTERS: dict[str, Callable[[Any, Any], Any]] = {
    "boolean": convert_boolean,
    "number": convert_number,
}
