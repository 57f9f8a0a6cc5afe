# topmark:header:start
#
#   project      : HoconRender
#   file         : strategies_hoconrender.py
#   file_relpath : tests/strategies_hoconrender.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for configuration trees.

Keys are drawn from a simple-key alphabet and scalars exclude characters that
would need escaping, so structural properties (ordering, brace balance) can be
checked on the rendered text without parsing it.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from hoconrender.rendering.scalars import render_string_unquoted_if_possible
from hoconrender.tree.nodes import ConfigNode, ListNode, MapNode, ScalarNode

SIMPLE_KEYS: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9_-]{0,8}", fullmatch=True)

# Strings that render bare under WHEN_REQUIRED.
BARE_WORDS: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9-]{0,10}", fullmatch=True).filter(
    lambda s: render_string_unquoted_if_possible(s) == s
)

SMALL_INTS: st.SearchStrategy[int] = st.integers(min_value=-999, max_value=999)


def s_scalar_nodes() -> st.SearchStrategy[ScalarNode]:
    """Scalar nodes holding small ints, bare words, booleans or null."""
    values: st.SearchStrategy[Any] = st.one_of(SMALL_INTS, BARE_WORDS, st.booleans(), st.none())
    return st.builds(ScalarNode, values)


def _extend(children: st.SearchStrategy[ConfigNode]) -> st.SearchStrategy[ConfigNode]:
    maps: st.SearchStrategy[ConfigNode] = st.dictionaries(SIMPLE_KEYS, children, max_size=4).map(
        MapNode
    )
    lists: st.SearchStrategy[ConfigNode] = st.lists(children, max_size=4).map(
        lambda items: ListNode(tuple(items))
    )
    return st.one_of(maps, lists)


def s_trees() -> st.SearchStrategy[ConfigNode]:
    """Arbitrarily nested trees of maps, lists and scalars."""
    return st.recursive(s_scalar_nodes(), _extend, max_leaves=20)


def s_root_maps() -> st.SearchStrategy[MapNode]:
    """Root maps whose values are arbitrary trees."""
    return st.dictionaries(SIMPLE_KEYS, s_trees(), max_size=5).map(MapNode)
