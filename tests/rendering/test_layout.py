# topmark:header:start
#
#   project      : HoconRender
#   file         : test_layout.py
#   file_relpath : tests/rendering/test_layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for key quoting and inline list decisions."""

from __future__ import annotations

import pytest

from hoconrender.config.options import Quoting
from hoconrender.constants import INLINE_LIST_MAX_LENGTH
from hoconrender.core.errors import UnsupportedValueError
from hoconrender.rendering.layout import is_inline_list, is_simple_key, needs_key_quoting
from hoconrender.tree.nodes import ListNode, MapNode, ScalarNode
from tests.conftest import make_options, parametrize


@parametrize(
    ("key", "expected"),
    [
        ("a", True),
        ("snake_case", True),
        ("kebab-case", True),
        ("123", True),
        ("schlüssel", True),
        ("ключ", True),
        ("٣", True),  # Arabic-Indic digit three
        ("", False),
        ("a b", False),
        ("a.b", False),
        ("a:b", False),
        ("$x", False),
        ('"q"', False),
        ("²", False),  # superscript, not a decimal digit
    ],
)
def test_is_simple_key(key: str, expected: bool) -> None:
    """Letters, decimal digits, ``-`` and ``_`` only; never empty."""
    assert is_simple_key(key) is expected


def test_needs_key_quoting() -> None:
    """ALWAYS quotes every key; WHEN_REQUIRED only non-simple keys."""
    when_required = make_options()
    always = make_options(key_quoting=Quoting.ALWAYS)
    assert needs_key_quoting("a", when_required) is False
    assert needs_key_quoting("a b", when_required) is True
    assert needs_key_quoting("a", always) is True


def _scalars(*values: object) -> ListNode:
    return ListNode(tuple(ScalarNode(v) for v in values))  # type: ignore[arg-type]


def test_empty_list_is_inline() -> None:
    """Nothing to measure means inline."""
    assert is_inline_list(ListNode(), make_options()) is True


def test_short_scalar_list_is_inline() -> None:
    """Short lists of plain scalars stay inline."""
    assert is_inline_list(_scalars(1, "two", None, True), make_options()) is True


def test_nested_containers_force_block() -> None:
    """A map or list child forces block layout regardless of length."""
    assert is_inline_list(ListNode((MapNode(),)), make_options()) is False
    assert is_inline_list(ListNode((ScalarNode(1), ListNode())), make_options()) is False


def test_element_comment_forces_block() -> None:
    """A commented element forces block layout."""
    node = ListNode((ScalarNode(1), ScalarNode(2, comment="two")))
    assert is_inline_list(node, make_options()) is False


def test_threshold_is_exclusive() -> None:
    """A measured length of exactly the threshold is block; one less is inline."""
    # Each element contributes len(literal) + 1.
    word_len: int = INLINE_LIST_MAX_LENGTH // 2 - 1
    at_threshold = _scalars("a" * word_len, "b" * word_len)
    below_threshold = _scalars("a" * word_len, "b" * (word_len - 1))
    assert is_inline_list(at_threshold, make_options()) is False
    assert is_inline_list(below_threshold, make_options()) is True


def test_quoting_counts_towards_length() -> None:
    """Quotes added by ALWAYS are part of the measured length."""
    word_len: int = INLINE_LIST_MAX_LENGTH // 2 - 2
    node = _scalars("a" * word_len, "b" * word_len)
    assert is_inline_list(node, make_options()) is True
    assert is_inline_list(node, make_options(string_quoting=Quoting.ALWAYS)) is False


def test_measuring_error_reports_element_index() -> None:
    """An element without a literal form is reported by its index in the list."""
    node = _scalars(1, "two", float("nan"))
    with pytest.raises(UnsupportedValueError) as exc_info:
        is_inline_list(node, make_options())
    assert exc_info.value.path == (2,)
