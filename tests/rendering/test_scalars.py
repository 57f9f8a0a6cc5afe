# topmark:header:start
#
#   project      : HoconRender
#   file         : test_scalars.py
#   file_relpath : tests/rendering/test_scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for scalar literal rendering."""

from __future__ import annotations

import pytest

from hoconrender.config.options import Quoting
from hoconrender.core.errors import OptionsConstraintError, UnsupportedValueError
from hoconrender.rendering.scalars import (
    render_json_string,
    render_literal,
    render_string_unquoted_if_possible,
)
from tests.conftest import parametrize


@parametrize(
    ("raw", "expected"),
    [
        ("plain", '"plain"'),
        ("", '""'),
        ('a"b', '"a\\"b"'),
        ("a\\b", '"a\\\\b"'),
        ("a\nb", '"a\\nb"'),
        ("a\tb", '"a\\tb"'),
        ("a\rb", '"a\\rb"'),
        ("a\bb", '"a\\bb"'),
        ("a\fb", '"a\\fb"'),
        ("\x00", '"\\u0000"'),
        ("\x1f", '"\\u001f"'),
        ("\x7f", '"\\u007f"'),
        ("\x9f", '"\\u009f"'),
        ("café", '"café"'),
        (" ", '" "'),
    ],
)
def test_render_json_string(raw: str, expected: str) -> None:
    """Short escapes for common controls, ``\\uXXXX`` for the rest."""
    assert render_json_string(raw) == expected


@parametrize(
    "raw",
    ["hello", "with-dash", "CamelCase", "x1", "café", "a-b-c", "x٣"],
)
def test_bare_strings(raw: str) -> None:
    """Words made of letters, digits and dashes stay bare."""
    assert render_string_unquoted_if_possible(raw) == raw


@parametrize(
    "raw",
    [
        "",
        "1abc",
        "-x",
        "true",
        "falsehood",
        "nullable",
        "includes",
        "a//b",
        "a b",
        "a.b",
        "a_b",
        "a:b",
        "a=b",
        "{x}",
        "$var",
        "x²",
        "²",
        "٣x",
    ],
)
def test_strings_that_need_quotes(raw: str) -> None:
    """Anything that could read back as another token is quoted."""
    assert render_string_unquoted_if_possible(raw) == render_json_string(raw)


@parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-12, "-12"),
        (10**20, "100000000000000000000"),
        (0.5, "0.5"),
        (-2.0, "-2.0"),
        (1e100, "1e+100"),
    ],
)
def test_render_literal_non_strings(value: object, expected: str) -> None:
    """Quoting mode does not affect non-string literals."""
    assert render_literal(value, Quoting.WHEN_REQUIRED) == expected
    assert render_literal(value, Quoting.ALWAYS) == expected


def test_render_literal_strings_follow_quoting() -> None:
    """WHEN_REQUIRED keeps safe words bare; ALWAYS quotes them."""
    assert render_literal("word", Quoting.WHEN_REQUIRED) == "word"
    assert render_literal("word", Quoting.ALWAYS) == '"word"'
    assert render_literal("two words", Quoting.WHEN_REQUIRED) == '"two words"'


@parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_floats_are_rejected(value: float) -> None:
    """NaN and infinities have no literal form."""
    with pytest.raises(UnsupportedValueError) as exc_info:
        render_literal(value, Quoting.WHEN_REQUIRED)
    assert "non-finite" in str(exc_info.value)


@parametrize("value", [object(), b"bytes", [1], {"a": 1}, 1 + 2j])
def test_unsupported_types_are_rejected(value: object) -> None:
    """Only primitives have literal forms."""
    with pytest.raises(UnsupportedValueError) as exc_info:
        render_literal(value, Quoting.WHEN_REQUIRED)
    assert exc_info.value.value is value


def test_unknown_quoting_is_a_constraint_violation() -> None:
    """A quoting value outside the closed set is a programming fault."""
    with pytest.raises(OptionsConstraintError):
        render_literal("x", "bogus")  # type: ignore[arg-type]
