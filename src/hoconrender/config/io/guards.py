# topmark:header:start
#
#   project      : HoconRender
#   file         : guards.py
#   file_relpath : src/hoconrender/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for values coming out of TOML parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def get_table_value(table: TomlTable, dotted_key: str) -> TomlTable:
    """Return the sub-table at ``dotted_key`` (e.g. ``"tool.hoconrender"``).

    Missing or non-table segments yield an empty dict.

    Args:
        table (TomlTable): Table to descend into.
        dotted_key (str): Dot-separated section path.

    Returns:
        TomlTable: The sub-table, or ``{}``.
    """
    current: Any = table
    for segment in dotted_key.split("."):
        if not is_toml_table(current):
            return {}
        current = current.get(segment)
    return current if is_toml_table(current) else {}
