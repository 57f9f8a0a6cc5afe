# topmark:header:start
#
#   project      : HoconRender
#   file         : loaders.py
#   file_relpath : src/hoconrender/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load render options from TOML.

Options are read from either:
- a ``hoconrender.toml`` file (``[render]`` at the root), or
- a ``pyproject.toml`` file (``[tool.hoconrender.render]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Invalid entries are recorded as diagnostics and ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hoconrender.config.keys import Toml
from hoconrender.config.logging import get_logger
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
from hoconrender.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from hoconrender.core.diagnostics import DiagnosticLog

from .getters import get_enum_value_checked, get_non_negative_int_or_none_checked
from .guards import get_table_value
from .render import nest_toml_under_section, to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from hoconrender.config.logging import HoconRenderLogger

    from .types import TomlTable

logger: HoconRenderLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the runtime default options as a TOML table.

    Returns:
        TomlTable: A new dict; callers may mutate it.
    """
    return RenderOptions.defaults().to_toml_dict()


def render_options_toml_text(
    options: RenderOptions | None = None,
    *,
    for_pyproject: bool = False,
) -> str:
    """Render options (defaults when None) as TOML text.

    Args:
        options (RenderOptions | None): Options to serialize.
        for_pyproject (bool): If True, nest the output under ``[tool.hoconrender]``.

    Returns:
        str: TOML document text.
    """
    table: TomlTable = (options or RenderOptions.defaults()).to_toml_dict()
    if for_pyproject:
        table = nest_toml_under_section(table, PYPROJECT_TOOL_SECTION)
    return to_toml(table)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def options_from_toml_dict(
    table: TomlTable,
    diagnostics: DiagnosticLog | None = None,
) -> MutableRenderOptions:
    """Build an options builder from a table holding a ``[render]`` section.

    Unset or invalid entries stay ``None`` (inherit) in the returned builder.

    Args:
        table (TomlTable): Table whose ``render`` key holds the options.
        diagnostics (DiagnosticLog | None): Log receiving warnings for invalid
            entries. A private log is used when None.

    Returns:
        MutableRenderOptions: Builder with the valid entries set.
    """
    diags: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()
    render_tbl: TomlTable = get_table_value(table, Toml.SECTION_RENDER)
    where: str = f"[{Toml.SECTION_RENDER}]"

    known: set[str] = {
        Toml.KEY_SEPARATOR,
        Toml.KEY_OBJECT_SEPARATOR,
        Toml.KEY_STRING_QUOTING,
        Toml.KEY_KEY_QUOTING,
        Toml.KEY_SPACES_BEFORE_SEPARATOR,
        Toml.KEY_SPACES_AFTER_SEPARATOR,
        Toml.KEY_INDENT_CHARACTER,
        Toml.KEY_INDENT,
        Toml.KEY_COMMENT_STYLE,
        Toml.KEY_LINE_SEPARATOR,
    }
    for key in render_tbl:
        if key not in known:
            logger.warning("Unknown key in %s: %s", where, key)
            diags.add_warning(f"Unknown key in {where}: {key}")

    def _enum(key: str, enum_cls: type[Any]) -> Any:
        return get_enum_value_checked(
            render_tbl, key, enum_cls, where=where, diagnostics=diags, logger=logger
        )

    def _int(key: str) -> int | None:
        return get_non_negative_int_or_none_checked(
            render_tbl, key, where=where, diagnostics=diags, logger=logger
        )

    return MutableRenderOptions(
        separator_character=_enum(Toml.KEY_SEPARATOR, SeparatorCharacter),
        object_separator=_enum(Toml.KEY_OBJECT_SEPARATOR, ObjectSeparator),
        string_quoting=_enum(Toml.KEY_STRING_QUOTING, Quoting),
        key_quoting=_enum(Toml.KEY_KEY_QUOTING, Quoting),
        spaces_before_separator=_int(Toml.KEY_SPACES_BEFORE_SEPARATOR),
        spaces_after_separator=_int(Toml.KEY_SPACES_AFTER_SEPARATOR),
        indent_character=_enum(Toml.KEY_INDENT_CHARACTER, IndentCharacter),
        indent=_int(Toml.KEY_INDENT),
        comment_style=_enum(Toml.KEY_COMMENT_STYLE, CommentStyle),
        line_separator=_enum(Toml.KEY_LINE_SEPARATOR, LineSeparator),
    )


def load_options(
    path: Path,
    diagnostics: DiagnosticLog | None = None,
    *,
    base: RenderOptions | None = None,
) -> RenderOptions:
    """Load and freeze render options from a TOML file.

    ``pyproject.toml`` files are read from ``[tool.hoconrender]``; any other
    file from its root table. A directory is searched for ``hoconrender.toml``.
    A missing or unreadable file yields ``base``.

    Args:
        path (Path): Option file, or a directory holding ``hoconrender.toml``.
        diagnostics (DiagnosticLog | None): Log receiving warnings for invalid entries.
        base (RenderOptions | None): Values for settings the file leaves unset.

    Returns:
        RenderOptions: The frozen options.
    """
    if path.is_dir():
        path = path / DEFAULT_TOML_CONFIG_NAME
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        data = get_table_value(data, PYPROJECT_TOOL_SECTION)
    builder: MutableRenderOptions = options_from_toml_dict(data, diagnostics)
    logger.debug("Loaded render options from %s: %r", path, builder)
    return builder.freeze(base)
