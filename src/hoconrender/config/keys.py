# topmark:header:start
#
#   project      : HoconRender
#   file         : keys.py
#   file_relpath : src/hoconrender/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for render options.

These strings are the external schema of ``hoconrender.toml`` and of
``[tool.hoconrender]`` in ``pyproject.toml``. Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by render option files.

    The ordering of the ``KEY_*`` constants mirrors the field order of
    `hoconrender.config.options.RenderOptions`.
    """

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_SEPARATOR: Final[str] = "separator"
    KEY_OBJECT_SEPARATOR: Final[str] = "object_separator"
    KEY_STRING_QUOTING: Final[str] = "string_quoting"
    KEY_KEY_QUOTING: Final[str] = "key_quoting"
    KEY_SPACES_BEFORE_SEPARATOR: Final[str] = "spaces_before_separator"
    KEY_SPACES_AFTER_SEPARATOR: Final[str] = "spaces_after_separator"
    KEY_INDENT_CHARACTER: Final[str] = "indent_character"
    KEY_INDENT: Final[str] = "indent"
    KEY_COMMENT_STYLE: Final[str] = "comment_style"
    KEY_LINE_SEPARATOR: Final[str] = "line_separator"
