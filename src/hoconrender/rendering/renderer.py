# topmark:header:start
#
#   project      : HoconRender
#   file         : renderer.py
#   file_relpath : src/hoconrender/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive renderer for configuration trees.

`HoconRenderer` walks a tree depth-first and writes HOCON-style text:

    # comment on "server"
    server {
        host: example
        ports: [ 80, 443 ]
    }

Layout rules:
    * The root map is written bare (no braces); nested maps open with ``{``
      and a newline and close with ``}`` at their parent's indentation.
    * Every map entry is: comment lines, indentation, key, separator, value,
      newline. With `ObjectSeparator.OMITTED` a nested map follows its key
      after a single space (``key { ... }``).
    * Lists are inline (``[ 1, 2, 3 ]``) or block (one element per line, comma
      after every element but the last), see
      `hoconrender.rendering.layout.is_inline_list`.
    * Scalars never write a newline; the enclosing map or list does.

Concurrency:
    A renderer holds only immutable state and can be shared. Each `render`
    call owns a private `_RenderSession` buffer. The tree must not be mutated
    during a call; enumeration failures surface as `UnstableTreeError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from hoconrender.config.logging import get_logger
from hoconrender.config.options import ObjectSeparator, Quoting, RenderOptions
from hoconrender.core.errors import (
    HoconRenderError,
    OptionsConstraintError,
    PathElement,
    UnstableTreeError,
    UnsupportedValueError,
)
from hoconrender.rendering.layout import is_inline_list, needs_key_quoting
from hoconrender.rendering.scalars import render_json_string, render_literal
from hoconrender.tree.nodes import ListNode, MapNode, ScalarNode

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from hoconrender.config.logging import HoconRenderLogger
    from hoconrender.tree.nodes import ConfigNode

logger: HoconRenderLogger = get_logger(__name__)

LINE_BREAK_PATTERN: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

NodePath = tuple[PathElement, ...]


def split_comment_lines(comment: str) -> list[str]:
    """Split a comment into lines on ``\\r\\n``, ``\\r`` or ``\\n``.

    Trailing empty lines are dropped, so a comment made only of line breaks
    yields no lines. An empty comment yields one empty line.
    """
    if not comment:
        return [""]
    lines: list[str] = LINE_BREAK_PATTERN.split(comment)
    while lines and not lines[-1]:
        lines.pop()
    return lines


@dataclass
class _RenderSession:
    """Output buffer for one render call."""

    parts: list[str] = field(default_factory=lambda: [])

    def write(self, text: str) -> None:
        self.parts.append(text)

    def text(self) -> str:
        return "".join(self.parts)


def _key_text(raw_key: object) -> str:
    # null and booleans use their literal spelling, everything else str().
    match raw_key:
        case None | bool():
            return render_literal(raw_key, Quoting.WHEN_REQUIRED)
        case _:
            return str(raw_key)


def _entries(
    children: Mapping[object, ConfigNode],
    path: NodePath,
) -> Iterator[tuple[object, ConfigNode]]:
    try:
        yield from children.items()
    except RecursionError:
        raise
    except RuntimeError as exc:
        raise UnstableTreeError(f"Map changed during rendering: {exc}", path=path) from exc


class HoconRenderer:
    """Render configuration trees with a fixed set of options.

    Args:
        options (RenderOptions | None): Frozen options; defaults when None.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options: RenderOptions = options if options is not None else RenderOptions.defaults()
        self._indent: str = self.options.indent_unit
        self._separator: str = self.options.separator_token
        self._newline: str = self.options.newline
        self._comment_prefix: str = self.options.comment_prefix

    def render(self, node: ConfigNode) -> str:
        """Render ``node`` as a complete document.

        A map root is written bare. A list or scalar root is followed by a
        newline so that every non-empty document ends with a line break. A
        comment on the root is written as a leading comment block.

        Args:
            node (ConfigNode): Root of the tree to render.

        Returns:
            str: The rendered document.

        Raises:
            HoconRenderError: If a value cannot be rendered or the tree changes
                while it is being rendered. No partial output is returned.
        """
        session = _RenderSession()
        match node:
            case MapNode():
                self._render_comment(session, node, 0)
                self._render_map(session, node, 0, ())
            case ListNode() | ScalarNode():
                # Laid out as if nested one level under a bare root map.
                self._render_comment(session, node, 0)
                self._render_node(session, node, 1, ())
                session.write(self._newline)
            case _:
                raise OptionsConstraintError(f"Not a configuration node: {node!r}")
        text: str = session.text()
        logger.debug("Rendered %s root into %d characters", type(node).__name__, len(text))
        return text

    # Dispatch

    def _render_node(
        self,
        session: _RenderSession,
        node: ConfigNode,
        indent_level: int,
        path: NodePath,
    ) -> None:
        match node:
            case MapNode():
                self._render_map(session, node, indent_level, path)
            case ListNode():
                self._render_list(session, node, indent_level, path)
            case ScalarNode():
                self._render_scalar(session, node, path)
            case _:
                raise OptionsConstraintError(f"Not a configuration node: {node!r}", path=path)

    # Node kinds

    def _render_map(
        self,
        session: _RenderSession,
        node: MapNode,
        indent_level: int,
        path: NodePath,
    ) -> None:
        if indent_level > 0:
            session.write("{")
            session.write(self._newline)

        for raw_key, child in _entries(node.children, path):
            key: str = _key_text(raw_key)
            child_path: NodePath = (*path, key)

            self._render_comment(session, child, indent_level)
            self._render_indent(session, indent_level)
            session.write(self._render_key(key))

            match child:
                case MapNode() if self.options.object_separator is ObjectSeparator.OMITTED:
                    session.write(" ")
                case _:
                    session.write(self._separator)

            self._render_node(session, child, indent_level + 1, child_path)
            session.write(self._newline)

        if indent_level > 0:
            # Closing brace sits at the parent's indentation.
            self._render_indent(session, indent_level - 1)
            session.write("}")

    def _render_list(
        self,
        session: _RenderSession,
        node: ListNode,
        indent_level: int,
        path: NodePath,
    ) -> None:
        try:
            children: tuple[ConfigNode, ...] = tuple(node.children)
            inline: bool = is_inline_list(node, self.options)
        except RecursionError:
            raise
        except RuntimeError as exc:
            raise UnstableTreeError(f"List changed during rendering: {exc}", path=path) from exc
        except UnsupportedValueError as exc:
            exc.path = (*path, *exc.path)
            raise
        logger.trace("List at %r: %s", path, "inline" if inline else "block")

        session.write("[")
        if inline and not children:
            session.write(" ]")
            return

        last: int = len(children) - 1
        for index, child in enumerate(children):
            child_path: NodePath = (*path, index)
            if inline:
                session.write(" ")
                self._render_node(session, child, 0, child_path)
            else:
                session.write(self._newline)
                self._render_comment(session, child, indent_level)
                self._render_indent(session, indent_level)
                self._render_node(session, child, indent_level + 1, child_path)
            if index < last:
                session.write(",")

        if inline:
            session.write(" ]")
        else:
            session.write(self._newline)
            self._render_indent(session, indent_level - 1)
            session.write("]")

    def _render_scalar(self, session: _RenderSession, node: ScalarNode, path: NodePath) -> None:
        try:
            session.write(render_literal(node.value, self.options.string_quoting))
        except HoconRenderError as exc:
            if not exc.path:
                exc.path = path
            raise

    # Fragments

    def _render_key(self, key: str) -> str:
        if needs_key_quoting(key, self.options):
            return render_json_string(key)
        return key

    def _render_comment(self, session: _RenderSession, node: ConfigNode, indent_level: int) -> None:
        match node:
            case MapNode() | ListNode() | ScalarNode():
                comment: str | None = node.comment
            case _:
                raise OptionsConstraintError(f"Node cannot carry a comment: {node!r}")
        if comment is None:
            return
        for line in split_comment_lines(comment):
            self._render_indent(session, indent_level)
            session.write(self._comment_prefix)
            session.write(" ")
            session.write(line)
            session.write(self._newline)

    def _render_indent(self, session: _RenderSession, indent_level: int) -> None:
        if indent_level > 0:
            session.write(self._indent * indent_level)
