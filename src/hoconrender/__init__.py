# topmark:header:start
#
#   project      : HoconRender
#   file         : __init__.py
#   file_relpath : src/hoconrender/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HoconRender package.

HoconRender writes in-memory configuration trees (maps, lists and scalars,
optionally commented) as human-editable HOCON-style text, with configurable
separators, quoting, indentation, comment style and line endings.
"""

from __future__ import annotations

from hoconrender.api import render, render_value
from hoconrender.config.options import (
    CommentStyle,
    IndentCharacter,
    LineSeparator,
    MutableRenderOptions,
    ObjectSeparator,
    Quoting,
    RenderOptions,
    SeparatorCharacter,
)
from hoconrender.core.errors import (
    HoconRenderError,
    OptionsConstraintError,
    UnstableTreeError,
    UnsupportedValueError,
)
from hoconrender.rendering.renderer import HoconRenderer
from hoconrender.tree.nodes import ConfigNode, ListNode, MapNode, ScalarNode, to_node

__all__ = [
    "CommentStyle",
    "ConfigNode",
    "HoconRenderError",
    "HoconRenderer",
    "IndentCharacter",
    "LineSeparator",
    "ListNode",
    "MapNode",
    "MutableRenderOptions",
    "ObjectSeparator",
    "OptionsConstraintError",
    "Quoting",
    "RenderOptions",
    "ScalarNode",
    "SeparatorCharacter",
    "UnstableTreeError",
    "UnsupportedValueError",
    "render",
    "render_value",
    "to_node",
]
