# topmark:header:start
#
#   project      : HoconRender
#   file         : __init__.py
#   file_relpath : src/hoconrender/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for render options.

HoconRender uses `tomlkit` for parsing and rendering option files.

Typical flow:
    1. Load a ``hoconrender.toml`` or ``pyproject.toml`` (``load_toml_dict``).
    2. Read the ``[render]`` table with checked getters
       (``options_from_toml_dict``), collecting warnings in a `DiagnosticLog`.
    3. Freeze into `RenderOptions` (``load_options`` does 1-3 in one call).
    4. Serialize options back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import get_enum_value_checked, get_non_negative_int_or_none_checked
from .guards import get_table_value, is_toml_table
from .loaders import (
    load_defaults_dict,
    load_options,
    load_toml_dict,
    options_from_toml_dict,
    render_options_toml_text,
)
from .render import nest_toml_under_section, to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_enum_value_checked",
    "get_non_negative_int_or_none_checked",
    "get_table_value",
    "is_toml_table",
    "load_defaults_dict",
    "load_options",
    "load_toml_dict",
    "nest_toml_under_section",
    "options_from_toml_dict",
    "render_options_toml_text",
    "to_toml",
]
