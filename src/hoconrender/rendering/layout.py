# topmark:header:start
#
#   project      : HoconRender
#   file         : layout.py
#   file_relpath : src/hoconrender/rendering/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout decisions: key quoting and inline vs. block lists.

All functions here are pure: the result depends only on the arguments.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from hoconrender.config.logging import get_logger
from hoconrender.config.options import Quoting
from hoconrender.constants import INLINE_LIST_MAX_LENGTH
from hoconrender.core.errors import UnsupportedValueError
from hoconrender.rendering.scalars import render_literal
from hoconrender.tree.nodes import ListNode, MapNode, ScalarNode

if TYPE_CHECKING:
    from hoconrender.config.logging import HoconRenderLogger
    from hoconrender.config.options import RenderOptions

logger: HoconRenderLogger = get_logger(__name__)


def _is_key_char(c: str) -> bool:
    # Letters of any script and decimal digits (Unicode category Nd).
    return c.isalpha() or unicodedata.category(c) == "Nd" or c in "-_"


def is_simple_key(key: str) -> bool:
    """Return True if ``key`` can be written without quotes.

    A simple key is non-empty and consists only of letters, decimal digits,
    ``-`` and ``_``.
    """
    if not key:
        return False
    return all(_is_key_char(c) for c in key)


def needs_key_quoting(key: str, options: RenderOptions) -> bool:
    """Return True if ``key`` must be written as a quoted string literal."""
    return options.key_quoting is Quoting.ALWAYS or not is_simple_key(key)


def is_inline_list(node: ListNode, options: RenderOptions) -> bool:
    """Decide whether a list fits on a single line.

    A list renders inline when none of its direct children is a map or list,
    none carries a comment, and the rendered children (plus one separator
    character each) stay below `INLINE_LIST_MAX_LENGTH`. Measuring stops as
    soon as the threshold is reached. An empty list is inline.

    Args:
        node (ListNode): The list to inspect.
        options (RenderOptions): Options providing the value quoting mode.

    Returns:
        bool: True for inline rendering, False for block rendering.

    Raises:
        UnsupportedValueError: If an element has no literal form. Its ``path``
            holds the element's index within ``node``.
    """
    for child in node.children:
        match child:
            case MapNode() | ListNode():
                logger.trace("Block list: nested %s", type(child).__name__)
                return False
            case ScalarNode(comment=comment) if comment is not None:
                logger.trace("Block list: element carries a comment")
                return False

    length: int = 0
    for index, child in enumerate(node.children):
        match child:
            case ScalarNode(value=value):
                try:
                    literal: str = render_literal(value, options.string_quoting)
                except UnsupportedValueError as exc:
                    # Path relative to the list being measured.
                    exc.path = (index,)
                    raise
                length += len(literal) + 1
            case _:
                return False
        if length >= INLINE_LIST_MAX_LENGTH:
            logger.trace("Block list: rendered length reached %d", length)
            return False
    return True
