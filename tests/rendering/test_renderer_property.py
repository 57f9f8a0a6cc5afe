# topmark:header:start
#
#   project      : HoconRender
#   file         : test_renderer_property.py
#   file_relpath : tests/rendering/test_renderer_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for structural guarantees of rendered output.

Generated trees only use simple keys and bare words, so brackets and braces in
the output come from structure alone and can be counted directly:
1) top-level keys appear in insertion order,
2) braces and brackets balance,
3) line endings only change the newline text,
4) a block list stays block when elements are appended.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from hoconrender.config.options import LineSeparator, Quoting
from hoconrender.rendering.layout import is_inline_list, is_simple_key
from hoconrender.rendering.renderer import HoconRenderer
from hoconrender.rendering.scalars import render_literal
from hoconrender.tree.nodes import ListNode
from tests.conftest import make_options
from tests.strategies_hoconrender import (
    BARE_WORDS,
    SIMPLE_KEYS,
    SMALL_INTS,
    s_root_maps,
    s_scalar_nodes,
    s_trees,
)

if TYPE_CHECKING:
    from hoconrender.tree.nodes import ConfigNode, MapNode, ScalarNode

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_TOP_LEVEL_KEY: re.Pattern[str] = re.compile(r"[a-z][a-z0-9_-]*")


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(root=s_root_maps())
def test_top_level_keys_keep_insertion_order(root: MapNode) -> None:
    """Unindented entry lines list the root keys in insertion order."""
    text: str = HoconRenderer(make_options()).render(root)
    keys: list[str] = []
    for line in text.split("\n"):
        m: re.Match[str] | None = _TOP_LEVEL_KEY.match(line)
        if m is not None:
            keys.append(m.group(0))
    assert keys == [str(k) for k in root.children]


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(tree=s_trees())
def test_braces_and_brackets_balance(tree: ConfigNode) -> None:
    """Every opened map and list is closed."""
    text: str = HoconRenderer(make_options()).render(tree)
    assert text.count("{") == text.count("}")
    assert text.count("[") == text.count("]")
    assert text.endswith("\n") or text == ""


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(tree=s_trees())
def test_line_separator_only_changes_newlines(tree: ConfigNode) -> None:
    """CRLF output is LF output with every newline replaced."""
    lf: str = HoconRenderer(make_options()).render(tree)
    crlf: str = HoconRenderer(make_options(line_separator=LineSeparator.CRLF)).render(tree)
    assert crlf == lf.replace("\n", "\r\n")


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(
    items=st.lists(s_scalar_nodes(), max_size=30),
    extra=st.lists(s_scalar_nodes(), min_size=1, max_size=5),
)
def test_block_lists_stay_block_when_extended(
    items: list[ScalarNode],
    extra: list[ScalarNode],
) -> None:
    """The inline decision is monotonic in the number of elements."""
    options = make_options()
    shorter = ListNode(tuple(items))
    longer = ListNode((*items, *extra))
    if not is_inline_list(shorter, options):
        assert not is_inline_list(longer, options)


@given(value=st.one_of(BARE_WORDS, SMALL_INTS))
def test_always_quoting_only_adds_quotes(value: str | int) -> None:
    """ALWAYS wraps bare words in quotes and leaves numbers alone."""
    bare: str = render_literal(value, Quoting.WHEN_REQUIRED)
    quoted: str = render_literal(value, Quoting.ALWAYS)
    if isinstance(value, str):
        assert quoted == f'"{bare}"'
    else:
        assert quoted == bare


@given(key=SIMPLE_KEYS)
def test_generated_keys_are_simple(key: str) -> None:
    """Keys matching the simple-key alphabet never need quotes."""
    assert is_simple_key(key)


@given(key=st.text(min_size=1))
def test_keys_with_separator_characters_are_not_simple(key: str) -> None:
    """Any key containing whitespace or a HOCON delimiter is quoted."""
    if any(c in key for c in ' \t\n.:="{}[]#'):
        assert not is_simple_key(key)
