# topmark:header:start
#
#   project      : HoconRender
#   file         : options.py
#   file_relpath : src/hoconrender/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render options model.

This module defines:
    - the closed option sets (`SeparatorCharacter`, `ObjectSeparator`,
      `Quoting`, `IndentCharacter`, `CommentStyle`, `LineSeparator`);
    - `RenderOptions`: an immutable snapshot consumed by the renderer;
    - `MutableRenderOptions`: a fluent builder with tri-state fields that can
      be merged (last-wins) and frozen into `RenderOptions`.

Immutability:
    `RenderOptions` is ``frozen=True``. Use `RenderOptions.replace` for a copy
    with overrides, or `RenderOptions.thaw` → edit → `MutableRenderOptions.freeze`.
    The renderer never sees a partially built configuration: only frozen
    snapshots are accepted.

TOML mapping:

    [render]
    separator = "colon"
    object_separator = "omitted"
    string_quoting = "when_required"
    key_quoting = "when_required"
    spaces_before_separator = 0
    spaces_after_separator = 1
    indent_character = "space"
    indent = 4
    comment_style = "hash"
    line_separator = "system"
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from hoconrender.config.keys import Toml
from hoconrender.config.logging import get_logger
from hoconrender.core.enum_mixins import PayloadStrEnum

if TYPE_CHECKING:
    from hoconrender.config.io.types import TomlTable
    from hoconrender.config.logging import HoconRenderLogger

logger: HoconRenderLogger = get_logger(__name__)


# ------------------ Closed option sets ------------------


class SeparatorCharacter(PayloadStrEnum):
    """Character written between a key and its value."""

    COLON = ("colon", ":", (":",))
    EQUALS = ("equals", "=", ("=",))


class ObjectSeparator(str, Enum):
    """Whether the key/value separator is written before a nested map.

    With ``OMITTED``, nested maps render as ``key { ... }``; with ``INCLUDED``
    as ``key: { ... }``.
    """

    OMITTED = "omitted"
    INCLUDED = "included"


class Quoting(str, Enum):
    """Quoting policy for string literals and keys."""

    WHEN_REQUIRED = "when_required"
    ALWAYS = "always"


class IndentCharacter(PayloadStrEnum):
    """Character repeated to build one indent level."""

    SPACE = ("space", " ", (" ",))
    TAB = ("tab", "\t", ("\t",))


class CommentStyle(PayloadStrEnum):
    """Prefix token written before each comment line."""

    HASH = ("hash", "#", ("#",))
    DOUBLE_SLASH = ("double_slash", "//", ("//", "slash"))


class LineSeparator(PayloadStrEnum):
    """Line ending written after every output line."""

    SYSTEM = ("system", os.linesep, ("platform", "native"))
    LF = ("lf", "\n", ("\n", "unix"))
    CRLF = ("crlf", "\r\n", ("\r\n", "windows"))


# ------------------ Immutable runtime options ------------------


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable bundle of formatting choices used by the renderer.

    Attributes:
        separator_character (SeparatorCharacter): Key/value separator (``:`` or ``=``).
        object_separator (ObjectSeparator): Whether the separator precedes nested maps.
        string_quoting (Quoting): Quoting policy for string values.
        key_quoting (Quoting): Quoting policy for map keys.
        spaces_before_separator (int): Spaces written before the separator character.
        spaces_after_separator (int): Spaces written after the separator character.
        indent_character (IndentCharacter): Character used for indentation.
        indent (int): Number of indent characters per nesting level.
        comment_style (CommentStyle): Comment prefix token.
        line_separator (LineSeparator): Line ending.
    """

    separator_character: SeparatorCharacter = SeparatorCharacter.COLON
    object_separator: ObjectSeparator = ObjectSeparator.OMITTED
    string_quoting: Quoting = Quoting.WHEN_REQUIRED
    key_quoting: Quoting = Quoting.WHEN_REQUIRED

    spaces_before_separator: int = 0
    spaces_after_separator: int = 1

    indent_character: IndentCharacter = IndentCharacter.SPACE
    indent: int = 4

    comment_style: CommentStyle = CommentStyle.HASH
    line_separator: LineSeparator = LineSeparator.SYSTEM

    @classmethod
    def defaults(cls) -> RenderOptions:
        """Return the default options."""
        return cls()

    @staticmethod
    def builder() -> MutableRenderOptions:
        """Return an empty builder; unset fields resolve to defaults on freeze."""
        return MutableRenderOptions()

    def thaw(self) -> MutableRenderOptions:
        """Return a builder with every field explicitly set from this snapshot."""
        return MutableRenderOptions(
            **{f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        )

    def replace(self, **overrides: Any) -> RenderOptions:
        """Return a copy of these options with ``overrides`` applied."""
        return dataclasses.replace(self, **overrides)

    # Derived literals

    @property
    def indent_unit(self) -> str:
        """Text written once per nesting level."""
        return self.indent_character.payload * self.indent

    @property
    def separator_token(self) -> str:
        """Full key/value separator including configured spacing."""
        return (
            " " * self.spaces_before_separator
            + self.separator_character.payload
            + " " * self.spaces_after_separator
        )

    @property
    def comment_prefix(self) -> str:
        """Comment prefix token (``#`` or ``//``)."""
        return self.comment_style.payload

    @property
    def newline(self) -> str:
        """Line ending written after every output line."""
        return self.line_separator.payload

    def to_toml_dict(self) -> TomlTable:
        """Convert these options into a TOML-serializable dict.

        Returns:
            TomlTable: ``{"render": {...}}`` using stable machine keys for enums.
        """
        return {
            Toml.SECTION_RENDER: {
                Toml.KEY_SEPARATOR: self.separator_character.key,
                Toml.KEY_OBJECT_SEPARATOR: self.object_separator.value,
                Toml.KEY_STRING_QUOTING: self.string_quoting.value,
                Toml.KEY_KEY_QUOTING: self.key_quoting.value,
                Toml.KEY_SPACES_BEFORE_SEPARATOR: self.spaces_before_separator,
                Toml.KEY_SPACES_AFTER_SEPARATOR: self.spaces_after_separator,
                Toml.KEY_INDENT_CHARACTER: self.indent_character.key,
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_COMMENT_STYLE: self.comment_style.key,
                Toml.KEY_LINE_SEPARATOR: self.line_separator.key,
            }
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableRenderOptions:
    """Mutable builder for `RenderOptions`.

    Every field is tri-state: ``None`` means "inherit" and is resolved against
    a base snapshot (the defaults unless given) by `freeze`. Builders merge in
    a **last-wins** manner, which lets option files and programmatic overrides
    be layered.

    Attributes:
        separator_character (SeparatorCharacter | None): See `RenderOptions`.
        object_separator (ObjectSeparator | None): See `RenderOptions`.
        string_quoting (Quoting | None): See `RenderOptions`.
        key_quoting (Quoting | None): See `RenderOptions`.
        spaces_before_separator (int | None): See `RenderOptions`.
        spaces_after_separator (int | None): See `RenderOptions`.
        indent_character (IndentCharacter | None): See `RenderOptions`.
        indent (int | None): See `RenderOptions`.
        comment_style (CommentStyle | None): See `RenderOptions`.
        line_separator (LineSeparator | None): See `RenderOptions`.
    """

    separator_character: SeparatorCharacter | None = None
    object_separator: ObjectSeparator | None = None
    string_quoting: Quoting | None = None
    key_quoting: Quoting | None = None
    spaces_before_separator: int | None = None
    spaces_after_separator: int | None = None
    indent_character: IndentCharacter | None = None
    indent: int | None = None
    comment_style: CommentStyle | None = None
    line_separator: LineSeparator | None = None

    # Fluent setters

    def with_separator_character(self, separator: SeparatorCharacter) -> MutableRenderOptions:
        """Set the key/value separator character."""
        self.separator_character = separator
        return self

    def with_object_separator(self, object_separator: ObjectSeparator) -> MutableRenderOptions:
        """Set whether the separator is written before nested maps."""
        self.object_separator = object_separator
        return self

    def with_string_quoting(self, quoting: Quoting) -> MutableRenderOptions:
        """Set the quoting policy for string values."""
        self.string_quoting = quoting
        return self

    def with_key_quoting(self, quoting: Quoting) -> MutableRenderOptions:
        """Set the quoting policy for map keys."""
        self.key_quoting = quoting
        return self

    def with_separator_spacing(self, before: int, after: int) -> MutableRenderOptions:
        """Set the number of spaces written around the separator."""
        self.spaces_before_separator = before
        self.spaces_after_separator = after
        return self

    def with_indent(self, character: IndentCharacter, width: int) -> MutableRenderOptions:
        """Set the indent character and the number of characters per level."""
        self.indent_character = character
        self.indent = width
        return self

    def with_comment_style(self, style: CommentStyle) -> MutableRenderOptions:
        """Set the comment prefix style."""
        self.comment_style = style
        return self

    def with_line_separator(self, separator: LineSeparator) -> MutableRenderOptions:
        """Set the line ending."""
        self.line_separator = separator
        return self

    def merge_with(self, other: MutableRenderOptions) -> MutableRenderOptions:
        """Return a new builder by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override values in ``self``.

        Args:
            other (MutableRenderOptions): The builder whose set values win.

        Returns:
            MutableRenderOptions: Merged builder.
        """
        merged: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            theirs: Any = getattr(other, f.name)
            merged[f.name] = theirs if theirs is not None else getattr(self, f.name)
        return MutableRenderOptions(**merged)

    def freeze(self, base: RenderOptions | None = None) -> RenderOptions:
        """Resolve unset fields against ``base`` and return an immutable snapshot.

        Args:
            base (RenderOptions | None): Snapshot providing values for unset
                fields. Defaults to `RenderOptions.defaults`.

        Returns:
            RenderOptions: The frozen options.
        """
        resolved_base: RenderOptions = base if base is not None else RenderOptions.defaults()
        values: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            mine: Any = getattr(self, f.name)
            values[f.name] = mine if mine is not None else getattr(resolved_base, f.name)
        options = RenderOptions(**values)
        logger.trace("Frozen render options: %r", options)
        return options
