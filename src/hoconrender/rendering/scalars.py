# topmark:header:start
#
#   project      : HoconRender
#   file         : scalars.py
#   file_relpath : src/hoconrender/rendering/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar literal rendering.

Turns a primitive value into its literal text under a quoting mode:

    * ``None`` → ``null``, booleans → ``true`` / ``false``;
    * integers and finite floats → their decimal text;
    * strings → bare when safe under ``WHEN_REQUIRED``, otherwise a
      double-quoted, escaped string literal.

A bare string must never read back as something else: strings that look like
numbers, keywords (``true``, ``false``, ``null``, ``include``) or that contain
comment markers are always quoted.
"""

from __future__ import annotations

import math
import unicodedata
from typing import Final

from hoconrender.config.options import Quoting
from hoconrender.core.errors import OptionsConstraintError, UnsupportedValueError

_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\b": "\\b",
    "\f": "\\f",
    "\r": "\\r",
    "\t": "\\t",
}

_RESERVED_PREFIXES: Final[tuple[str, ...]] = ("include", "true", "false", "null")


def _is_decimal_digit(c: str) -> bool:
    return unicodedata.category(c) == "Nd"


def _is_iso_control(c: str) -> bool:
    code: int = ord(c)
    return code <= 0x1F or 0x7F <= code <= 0x9F


def render_json_string(s: str) -> str:
    """Return ``s`` as a double-quoted string literal.

    Quotes, backslashes and the usual whitespace controls use short escapes;
    any other control character is written as ``\\uXXXX``. Everything else,
    including non-ASCII text, is kept as is.
    """
    out: list[str] = ['"']
    for c in s:
        escaped: str | None = _ESCAPES.get(c)
        if escaped is not None:
            out.append(escaped)
        elif _is_iso_control(c):
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(c)
    out.append('"')
    return "".join(out)


def render_string_unquoted_if_possible(s: str) -> str:
    """Return ``s`` bare when it cannot be mistaken for another token, else quoted."""
    if not s:
        return render_json_string(s)
    first: str = s[0]
    if _is_decimal_digit(first) or first == "-":
        return render_json_string(s)
    if s.startswith(_RESERVED_PREFIXES) or "//" in s:
        return render_json_string(s)
    for c in s:
        if not (c.isalpha() or _is_decimal_digit(c) or c == "-"):
            return render_json_string(s)
    return s


def _render_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise UnsupportedValueError(value, "non-finite numbers have no literal form")
    return float.__repr__(value)


def render_literal(value: object, quoting: Quoting) -> str:
    """Render a primitive value as literal text.

    Args:
        value (object): ``str``, ``int``, ``float``, ``bool`` or ``None``.
        quoting (Quoting): Quoting mode applied to strings.

    Returns:
        str: The literal text.

    Raises:
        UnsupportedValueError: If ``value`` is of another type or is a
            non-finite float.
        OptionsConstraintError: If ``quoting`` is not a `Quoting` member.
    """
    # bool before int: bool is a subclass of int
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case int():
            return str(int(value))
        case float():
            return _render_float(value)
        case str():
            match quoting:
                case Quoting.ALWAYS:
                    return render_json_string(value)
                case Quoting.WHEN_REQUIRED:
                    return render_string_unquoted_if_possible(value)
                case _:
                    raise OptionsConstraintError(f"Unexpected quoting value: {quoting!r}")
        case _:
            raise UnsupportedValueError(value)
